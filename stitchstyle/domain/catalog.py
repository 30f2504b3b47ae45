"""Domain entities for the customer, style and tailor directories."""
from __future__ import annotations

from dataclasses import dataclass, field

TAILOR_AVAILABILITY = ("Available", "Busy")


@dataclass(slots=True)
class Address:
    street: str = ""
    city: str = ""
    zip_code: str = ""
    country: str = ""


@dataclass(slots=True)
class Customer:
    """A customer record; identity is the ``id`` field."""

    id: str
    name: str
    email: str = ""
    phone: str = ""
    address: Address | None = None


@dataclass(slots=True)
class MeasurementField:
    id: str
    label: str


@dataclass(slots=True)
class GarmentStyle:
    """A garment style and the measurement fields it needs."""

    id: str
    name: str
    required_measurements: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Tailor:
    id: str
    name: str
    mobile: str = ""
    expertise: list[str] = field(default_factory=list)
    availability: str = "Available"
    avatar: str = ""


def placeholder_avatar(name: str) -> str:
    initials = (name or "N/A")[:2].upper()
    return f"https://placehold.co/100x100.png?text={initials}"
