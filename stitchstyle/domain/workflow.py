"""In-memory state of one order being created or edited.

A :class:`WorkflowSession` follows the customer -> design -> summary flow. It
stages everything the summary step needs and hands a single
:class:`OrderDraft` to the order repository on submission. The active design
slot is a tagged variant (:class:`Idle` or :class:`Composing`) so the design
being edited and the index it came from can never disagree.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Union

from .catalog import Customer
from .orders import ItemDesign, Order


class WorkflowError(Exception):
    """Base class for workflow sequencing errors."""


class InvalidIndexError(WorkflowError, IndexError):
    """Raised when an item index is outside the current item list."""


class InconsistentStateError(WorkflowError):
    """Raised when an operation is called in the wrong workflow state."""


class IncompleteWorkflowError(WorkflowError):
    """Raised when a submission is attempted before the workflow is complete."""


@dataclass(frozen=True, slots=True)
class Idle:
    """No design is being composed."""


@dataclass(frozen=True, slots=True)
class Composing:
    """A design is loaded in the editor.

    ``editing_index`` is ``None`` for a new item, otherwise the position of the
    item being edited.
    """

    design: ItemDesign
    editing_index: int | None = None


Composition = Union[Idle, Composing]
IDLE = Idle()


@dataclass(slots=True)
class OrderDraft:
    """Hand-off record given to the order repository on submit."""

    customer: Customer
    courier_requested: bool
    items: list[ItemDesign]
    originating_order_id: str | None = None


def order_detail_path(order_id: str) -> str:
    return f"/orders/{order_id}"


def _customer_id(customer: Customer | None) -> str | None:
    return customer.id if customer is not None else None


@dataclass(slots=True)
class WorkflowSession:
    customer: Customer | None = None
    courier_requested: bool = False
    items: list[ItemDesign] = field(default_factory=list)
    composition: Composition = IDLE
    originating_order_id: str | None = None
    return_path: str | None = None

    # ------------------------------------------------------------------
    # derived views
    # ------------------------------------------------------------------
    @property
    def active_design(self) -> ItemDesign | None:
        if isinstance(self.composition, Composing):
            return self.composition.design
        return None

    @property
    def editing_item_index(self) -> int | None:
        if isinstance(self.composition, Composing):
            return self.composition.editing_index
        return None

    @property
    def is_composing(self) -> bool:
        return isinstance(self.composition, Composing)

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidIndexError(f"item index must be an integer, got {index!r}")
        if index < 0 or index >= len(self.items):
            raise InvalidIndexError(f"item index {index} out of range for {len(self.items)} item(s)")

    # ------------------------------------------------------------------
    # customer step
    # ------------------------------------------------------------------
    def set_customer(self, customer: Customer | None) -> None:
        """Replace the customer.

        Selecting a different identity drops the staged items, the active
        design and any edit-order context; re-selecting the same identity only
        refreshes the customer record.
        """

        same_identity = _customer_id(customer) == _customer_id(self.customer)
        self.customer = customer
        if same_identity:
            return
        self.items = []
        self.composition = IDLE
        self.originating_order_id = None
        self.return_path = None

    def set_courier_preference(self, requested: bool) -> None:
        self.courier_requested = bool(requested)

    def set_return_path(self, path: str | None) -> None:
        self.return_path = path or None

    # ------------------------------------------------------------------
    # design step
    # ------------------------------------------------------------------
    def set_active_design(self, design: ItemDesign | None) -> None:
        """Start composing a new item, or clear the slot with ``None``."""

        if design is None:
            self.composition = IDLE
            return
        self.composition = Composing(design=design.copy())

    def start_editing_item(self, index: int) -> ItemDesign:
        self._check_index(index)
        design = self.items[index].copy()
        self.composition = Composing(design=design, editing_index=index)
        return design

    def attach_reference_images(self, *images: str) -> ItemDesign:
        if not isinstance(self.composition, Composing):
            raise InconsistentStateError("no active design to attach images to")
        design = self.composition.design.add_reference_images(*images)
        self.composition = Composing(design=design, editing_index=self.composition.editing_index)
        return design

    def commit_active_design(self, design: ItemDesign | None = None) -> int:
        """Store the active design and return the index it now occupies."""

        if not isinstance(self.composition, Composing):
            raise InconsistentStateError("commit called with no active design")
        committed = (design if design is not None else self.composition.design).copy()
        index = self.composition.editing_index
        if index is None:
            self.items.append(committed)
            index = len(self.items) - 1
        else:
            self.items[index] = committed
        self.composition = IDLE
        return index

    def discard_active_design(self) -> None:
        self.composition = IDLE

    def remove_item(self, index: int) -> ItemDesign:
        """Remove an item.

        An edit of an existing item is discarded whatever position was removed,
        so an editing index never ends up pointing at a different item. A new
        item being composed is kept.
        """

        self._check_index(index)
        removed = self.items.pop(index)
        if self.editing_item_index is not None:
            self.composition = IDLE
        return removed

    # ------------------------------------------------------------------
    # edit-existing-order path
    # ------------------------------------------------------------------
    def load_for_editing(self, order: Order, customer: Customer) -> None:
        """Replace the whole session with a previously submitted order."""

        self.customer = customer
        self.courier_requested = bool(order.courier_requested)
        self.items = [item.copy() for item in order.detailed_items or []]
        self.composition = IDLE
        self.originating_order_id = order.id
        self.return_path = order_detail_path(order.id)

    def reset(self) -> None:
        self.customer = None
        self.courier_requested = False
        self.items = []
        self.composition = IDLE
        self.originating_order_id = None
        self.return_path = None

    # ------------------------------------------------------------------
    # summary step
    # ------------------------------------------------------------------
    def to_draft(self) -> OrderDraft:
        if self.customer is None:
            raise IncompleteWorkflowError("missing customer, start from the customer step")
        if not self.items:
            raise IncompleteWorkflowError("missing design, add at least one item")
        if self.is_composing:
            raise InconsistentStateError("commit or discard the active design before submitting")
        return OrderDraft(
            customer=self.customer,
            courier_requested=self.courier_requested,
            items=[item.copy() for item in self.items],
            originating_order_id=self.originating_order_id,
        )

    def snapshot(self) -> dict[str, Any]:
        return {
            "customer": asdict(self.customer) if self.customer is not None else None,
            "courier_requested": self.courier_requested,
            "items": [asdict(item) for item in self.items],
            "active_design": asdict(self.active_design) if self.active_design is not None else None,
            "editing_item_index": self.editing_item_index,
            "originating_order_id": self.originating_order_id,
            "return_path": self.return_path,
        }
