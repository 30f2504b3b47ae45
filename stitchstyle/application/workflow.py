"""Application service driving order workflow sessions.

Each client session owns one :class:`WorkflowSession`. Sessions live in a
process-local dict and are mutated one request at a time; designs coming from
the HTTP layer are checked against the style catalog before they reach the
session.
"""
from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass

from stitchstyle.core.validation import validate_design
from stitchstyle.domain import ItemDesign, Order, WorkflowSession
from stitchstyle.domain.workflow import order_detail_path
from stitchstyle.infrastructure import DEFAULT_LEAD_DAYS

from .catalog import CatalogService
from .errors import RecordNotFoundError, SessionNotFoundError
from .orders import OrderService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SubmissionResult:
    order: Order
    created: bool
    redirect_to: str


def order_lead_days() -> int:
    raw = os.getenv("ORDER_LEAD_DAYS")
    if not raw:
        return DEFAULT_LEAD_DAYS
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning("Ignoring invalid ORDER_LEAD_DAYS=%r", raw)
        return DEFAULT_LEAD_DAYS


class WorkflowService:
    """Coordinates the customer -> design -> summary flow."""

    def __init__(self, catalog: CatalogService, orders: OrderService) -> None:
        self._catalog = catalog
        self._orders = orders
        self._sessions: dict[str, WorkflowSession] = {}

    # ------------------------------------------------------------------
    # session lifecycle
    # ------------------------------------------------------------------
    def create_session(self) -> str:
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = WorkflowSession()
        logger.debug("Created workflow session %s", session_id)
        return session_id

    def get_session(self, session_id: str) -> WorkflowSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def discard_session(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)

    def reset(self, session_id: str) -> WorkflowSession:
        session = self.get_session(session_id)
        session.reset()
        return session

    # ------------------------------------------------------------------
    # customer step
    # ------------------------------------------------------------------
    def select_customer(self, session_id: str, customer_id: str | None) -> WorkflowSession:
        session = self.get_session(session_id)
        customer = self._catalog.get_customer(customer_id) if customer_id else None
        previous = session.customer.id if session.customer else None
        session.set_customer(customer)
        if previous != customer_id:
            logger.debug("Session %s switched customer %s -> %s", session_id, previous, customer_id)
        return session

    def set_courier(self, session_id: str, requested: bool) -> WorkflowSession:
        session = self.get_session(session_id)
        session.set_courier_preference(requested)
        return session

    def set_return_path(self, session_id: str, path: str | None) -> WorkflowSession:
        session = self.get_session(session_id)
        session.set_return_path(path)
        return session

    # ------------------------------------------------------------------
    # design step
    # ------------------------------------------------------------------
    def _checked(self, design: ItemDesign) -> ItemDesign:
        return validate_design(design, self._catalog.find_style(design.style_id))

    def compose(self, session_id: str, design: ItemDesign | None) -> WorkflowSession:
        session = self.get_session(session_id)
        session.set_active_design(self._checked(design) if design is not None else None)
        return session

    def edit_item(self, session_id: str, index: int) -> WorkflowSession:
        session = self.get_session(session_id)
        session.start_editing_item(index)
        return session

    def attach_images(self, session_id: str, images: list[str]) -> WorkflowSession:
        session = self.get_session(session_id)
        session.attach_reference_images(*images)
        return session

    def commit(self, session_id: str, design: ItemDesign | None = None) -> WorkflowSession:
        session = self.get_session(session_id)
        if design is not None:
            design = self._checked(design)
            # the editor never writes assignment fields; keep what the item had
            if session.active_design is not None:
                design = design.with_tracking_from(session.active_design)
        index = session.commit_active_design(design)
        logger.debug("Session %s committed item %d", session_id, index)
        return session

    def discard_composition(self, session_id: str) -> WorkflowSession:
        session = self.get_session(session_id)
        session.discard_active_design()
        return session

    def remove_item(self, session_id: str, index: int) -> WorkflowSession:
        session = self.get_session(session_id)
        session.remove_item(index)
        return session

    # ------------------------------------------------------------------
    # edit-existing-order path and submission
    # ------------------------------------------------------------------
    def load_order(self, session_id: str, order_id: str) -> WorkflowSession:
        session = self.get_session(session_id)
        order = self._orders.get_order(order_id)
        customer = self._catalog.get_customer(order.customer_id)
        session.load_for_editing(order, customer)
        logger.info("Session %s loaded order %s for editing", session_id, order_id)
        return session

    def submit(self, session_id: str) -> SubmissionResult:
        session = self.get_session(session_id)
        draft = session.to_draft()
        repository = self._orders.repository

        if draft.originating_order_id:
            order = repository.update_order(draft.originating_order_id, draft)
            if order is None:
                raise RecordNotFoundError("order", draft.originating_order_id)
            created = False
        else:
            order = repository.create_order(draft, lead_days=order_lead_days())
            created = True

        redirect_to = session.return_path or order_detail_path(order.id)
        session.reset()
        logger.info(
            "Order %s %s for customer %s with %d item(s)",
            order.id,
            "placed" if created else "updated",
            order.customer_id,
            len(order.detailed_items),
        )
        return SubmissionResult(order=order, created=created, redirect_to=redirect_to)

    def clear(self) -> None:
        self._sessions.clear()
