"""Domain entities for orders and the garment designs they contain."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from datetime import date, datetime

from .catalog import Address

MAX_REFERENCE_IMAGES = 5

ORDER_STATUSES = (
    "Pending Assignment",
    "Assigned",
    "Processing",
    "Shipped",
    "Delivered",
    "Cancelled",
)
DEFAULT_ORDER_STATUS = "Pending Assignment"
CLOSED_ORDER_STATUSES = frozenset({"Delivered", "Cancelled"})


def is_active_status(status: str) -> bool:
    return status not in CLOSED_ORDER_STATUSES


def _cap_images(images: list[str]) -> list[str]:
    return list(images[:MAX_REFERENCE_IMAGES])


@dataclass(slots=True)
class ItemDesign:
    """One garment within an order.

    ``reference_images`` never holds more than :data:`MAX_REFERENCE_IMAGES`
    entries; longer input keeps the earliest ones. The production-tracking
    fields (``status`` through ``due_date``) are written by tailor assignment,
    not by the design editor.
    """

    style_id: str
    style_name: str = ""
    notes: str = ""
    reference_images: list[str] = field(default_factory=list)
    measurements: dict[str, str | float] = field(default_factory=dict)
    status: str | None = None
    assigned_tailor_id: str | None = None
    assigned_tailor_name: str | None = None
    due_date: date | None = None

    def __post_init__(self) -> None:
        self.reference_images = _cap_images(list(self.reference_images))

    def copy(self) -> "ItemDesign":
        """Return a deep copy sharing no mutable state with ``self``."""

        return copy.deepcopy(self)

    def add_reference_images(self, *images: str) -> "ItemDesign":
        combined = list(self.reference_images) + [image for image in images if image]
        return replace(self.copy(), reference_images=_cap_images(combined))

    def with_tracking_from(self, other: "ItemDesign") -> "ItemDesign":
        """Return a copy carrying the tailor-assignment fields of ``other``."""

        return replace(
            self.copy(),
            status=other.status,
            assigned_tailor_id=other.assigned_tailor_id,
            assigned_tailor_name=other.assigned_tailor_name,
            due_date=other.due_date,
        )

    def summary(self) -> str:
        return self.style_name or "N/A"


@dataclass(slots=True)
class Order:
    id: str
    order_date: date
    customer_id: str
    customer_name: str = ""
    status: str = DEFAULT_ORDER_STATUS
    detailed_items: list[ItemDesign] = field(default_factory=list)
    courier_requested: bool = False
    assigned_tailor_id: str | None = None
    assigned_tailor_name: str | None = None
    due_date: date | None = None
    shipping_address: Address | None = None
    notes: str = ""
    assignment_instructions: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def items(self) -> list[str]:
        return [item.summary() for item in self.detailed_items]

    @property
    def is_active(self) -> bool:
        return is_active_status(self.status)
