"""Infrastructure layer for order persistence."""
from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from typing import Protocol

from stitchstyle.domain import Order, OrderDraft

DEFAULT_LEAD_DAYS = 7


class OrderRepository(Protocol):
    """Persistence contract for submitted orders."""

    def create_order(self, draft: OrderDraft, *, lead_days: int = DEFAULT_LEAD_DAYS) -> Order: ...

    def update_order(self, order_id: str, draft: OrderDraft) -> Order | None: ...

    def get_order(self, order_id: str) -> Order | None: ...

    def list_orders(self) -> list[Order]: ...

    def save(self, order: Order) -> Order: ...

    def reset(self) -> None: ...


class InMemoryOrderRepository:
    """Simple in-memory repository for fast iteration and tests."""

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._order_counter = 0

    def _next_order_id(self) -> str:
        self._order_counter += 1
        return f"ORD-{self._order_counter:05d}"

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def create_order(self, draft: OrderDraft, *, lead_days: int = DEFAULT_LEAD_DAYS) -> Order:
        now = self._now()
        today = date.today()
        order = Order(
            id=self._next_order_id(),
            order_date=today,
            customer_id=draft.customer.id,
            customer_name=draft.customer.name,
            detailed_items=[item.copy() for item in draft.items],
            courier_requested=draft.courier_requested,
            due_date=today + timedelta(days=lead_days),
            shipping_address=draft.customer.address,
            notes=f"Custom order for {draft.customer.name}.",
            created_at=now,
            updated_at=now,
        )
        self._orders[order.id] = order
        return order

    def update_order(self, order_id: str, draft: OrderDraft) -> Order | None:
        existing = self._orders.get(order_id)
        if existing is None:
            return None
        # status, tailor and due date stay with the order; only staged fields change
        updated = replace(
            existing,
            customer_id=draft.customer.id,
            customer_name=draft.customer.name,
            detailed_items=[item.copy() for item in draft.items],
            courier_requested=draft.courier_requested,
            shipping_address=draft.customer.address or existing.shipping_address,
            updated_at=self._now(),
        )
        self._orders[order_id] = updated
        return updated

    def get_order(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    def list_orders(self) -> list[Order]:
        return sorted(self._orders.values(), key=lambda item: (item.order_date, item.id), reverse=True)

    def save(self, order: Order) -> Order:
        order.updated_at = self._now()
        self._orders[order.id] = order
        return order

    def reset(self) -> None:
        self._orders.clear()
        self._order_counter = 0
