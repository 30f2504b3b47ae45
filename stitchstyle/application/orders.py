"""Application service for submitted orders: listing, status and assignment."""
from __future__ import annotations

import logging
from datetime import date

from stitchstyle.core.tracking import TrackingStep, build_timeline
from stitchstyle.domain import ORDER_STATUSES, Order
from stitchstyle.exporters.orders_csv import render_orders_csv
from stitchstyle.infrastructure import OrderRepository

from .catalog import CatalogService
from .errors import RecordNotFoundError

logger = logging.getLogger(__name__)

ACTIVE_DEFAULT = "active_default"
ALL_STATUSES = "all"


class OrderService:
    """Coordinates order use cases downstream of workflow submission."""

    def __init__(self, repository: OrderRepository, catalog: CatalogService) -> None:
        self._repository = repository
        self._catalog = catalog

    @property
    def repository(self) -> OrderRepository:
        return self._repository

    def list_orders(self, status_filter: str = ACTIVE_DEFAULT) -> list[Order]:
        orders = self._repository.list_orders()
        if status_filter == ACTIVE_DEFAULT:
            return [order for order in orders if order.is_active]
        if status_filter == ALL_STATUSES:
            return orders
        if status_filter not in ORDER_STATUSES:
            raise ValueError(f"unknown status filter {status_filter!r}")
        return [order for order in orders if order.status == status_filter]

    def get_order(self, order_id: str) -> Order:
        order = self._repository.get_order(order_id)
        if order is None:
            raise RecordNotFoundError("order", order_id)
        return order

    def orders_for_customer(self, customer_id: str) -> list[Order]:
        self._catalog.get_customer(customer_id)
        return [order for order in self._repository.list_orders() if order.customer_id == customer_id]

    def update_status(self, order_id: str, status: str) -> Order:
        if status not in ORDER_STATUSES:
            raise ValueError(f"unknown order status {status!r}")
        order = self.get_order(order_id)
        previous = order.status
        order.status = status
        self._repository.save(order)
        logger.info("Order %s status %s -> %s", order_id, previous, status)
        return order

    def assign_tailor(
        self,
        order_id: str,
        tailor_id: str,
        due_date: date,
        *,
        instructions: str | None = None,
        item_index: int | None = None,
    ) -> Order:
        """Assign a tailor to the whole order, or to one item of it."""

        order = self.get_order(order_id)
        tailor = self._catalog.get_tailor(tailor_id)
        if item_index is not None and not 0 <= item_index < len(order.detailed_items):
            raise IndexError(f"item index {item_index} out of range for order {order_id}")

        targets = order.detailed_items if item_index is None else [order.detailed_items[item_index]]
        for item in targets:
            item.status = "Assigned"
            item.assigned_tailor_id = tailor.id
            item.assigned_tailor_name = tailor.name
            item.due_date = due_date

        if item_index is None or all(item.assigned_tailor_id for item in order.detailed_items):
            order.assigned_tailor_id = tailor.id
            order.assigned_tailor_name = tailor.name
            order.due_date = due_date
            order.status = "Assigned"
        if instructions is not None:
            order.assignment_instructions = instructions

        self._repository.save(order)
        self._catalog.set_tailor_availability(tailor.id, "Busy")
        logger.info("Assigned order %s to tailor %s due %s", order_id, tailor.id, due_date.isoformat())
        return order

    def tracking_timeline(self, order_id: str) -> list[TrackingStep]:
        return build_timeline(self.get_order(order_id))

    def export_orders(self, status_filter: str = ALL_STATUSES) -> str:
        return render_orders_csv(self.list_orders(status_filter))

    def reset(self) -> None:
        self._repository.reset()
