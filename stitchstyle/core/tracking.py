"""Customer-facing tracking timeline derived from an order's status."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from stitchstyle.domain import Order

HUB_LOCATION = "StitchStyle Central Hub"


@dataclass(slots=True)
class TrackingStep:
    status: str
    when: date
    is_completed: bool
    location: str | None = None


def _before_due(order: Order, days: int) -> date:
    anchor = order.due_date or order.order_date
    return max(order.order_date, anchor - timedelta(days=days))


def build_timeline(order: Order) -> list[TrackingStep]:
    status = order.status
    steps = [TrackingStep(status="Order Placed", when=order.order_date, is_completed=True)]

    if status != "Cancelled":
        steps.append(
            TrackingStep(
                status="Processing",
                when=_before_due(order, 5),
                is_completed=status not in ("Pending Assignment", "Assigned"),
            )
        )

    if status == "Assigned" and order.assigned_tailor_name:
        steps.append(
            TrackingStep(
                status=f"Assigned to {order.assigned_tailor_name}",
                when=_before_due(order, 4),
                is_completed=True,
            )
        )

    address = order.shipping_address
    if status in ("Shipped", "Delivered"):
        steps.append(
            TrackingStep(
                status="Shipped from Warehouse",
                when=_before_due(order, 2),
                is_completed=True,
                location=HUB_LOCATION,
            )
        )
        city = address.city if address and address.city else "your city"
        steps.append(
            TrackingStep(
                status="Out for Delivery",
                when=_before_due(order, 1),
                is_completed=status == "Delivered",
                location=f"Local delivery partner, {city}",
            )
        )

    if status == "Delivered":
        location = f"{address.street}, {address.city}" if address else None
        steps.append(
            TrackingStep(
                status="Delivered",
                when=order.due_date or order.order_date,
                is_completed=True,
                location=location,
            )
        )

    if status == "Cancelled":
        steps.append(TrackingStep(status="Order Cancelled", when=order.order_date, is_completed=True))

    if status not in ("Shipped", "Delivered", "Cancelled") and order.due_date:
        steps.append(TrackingStep(status="Estimated Delivery", when=order.due_date, is_completed=False))

    return steps
