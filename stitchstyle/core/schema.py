from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, constr, field_validator

from stitchstyle.domain import Address, Customer, ItemDesign, MAX_REFERENCE_IMAGES

OrderStatusLiteral = Literal[
    "Pending Assignment",
    "Assigned",
    "Processing",
    "Shipped",
    "Delivered",
    "Cancelled",
]
StatusFilter = Literal[
    "active_default",
    "all",
    "Pending Assignment",
    "Assigned",
    "Processing",
    "Shipped",
    "Delivered",
    "Cancelled",
]


class AddressModel(BaseModel):
    street: str = ""
    city: str = ""
    zip_code: str = ""
    country: str = ""

    def to_domain(self) -> Address:
        return Address(**self.model_dump())


class CustomerInput(BaseModel):
    name: constr(strip_whitespace=True, min_length=1)
    email: str = ""
    phone: str = ""
    address: AddressModel | None = None

    def to_domain(self, customer_id: str) -> Customer:
        return Customer(
            id=customer_id,
            name=self.name,
            email=self.email,
            phone=self.phone,
            address=self.address.to_domain() if self.address else None,
        )


class StyleInput(BaseModel):
    name: constr(strip_whitespace=True, min_length=1)
    required_measurements: list[str] = Field(default_factory=list)


class TailorInput(BaseModel):
    name: constr(strip_whitespace=True, min_length=1)
    mobile: str = ""
    # comma separated, as typed into the tailor form
    expertise: str = ""

    def expertise_list(self) -> list[str]:
        return [item.strip() for item in self.expertise.split(",") if item.strip()]


class ItemDesignModel(BaseModel):
    style_id: constr(strip_whitespace=True, min_length=1)
    style_name: str = ""
    notes: str = ""
    reference_images: list[str] = Field(default_factory=list)
    measurements: dict[str, str | float] = Field(default_factory=dict)

    @field_validator("reference_images")
    @classmethod
    def _truncate_images(cls, value: list[str]) -> list[str]:
        return value[:MAX_REFERENCE_IMAGES]

    def to_domain(self) -> ItemDesign:
        return ItemDesign(
            style_id=self.style_id,
            style_name=self.style_name,
            notes=self.notes,
            reference_images=list(self.reference_images),
            measurements=dict(self.measurements),
        )


class CustomerSelection(BaseModel):
    customer_id: str | None = None


class CourierPreference(BaseModel):
    requested: bool


class ReturnPath(BaseModel):
    path: str | None = None


class ActiveDesignPayload(BaseModel):
    design: ItemDesignModel | None = None


class ReferenceImages(BaseModel):
    images: list[str] = Field(min_length=1)


class LoadOrderRequest(BaseModel):
    order_id: constr(strip_whitespace=True, min_length=1)


class StatusUpdate(BaseModel):
    status: OrderStatusLiteral


class AssignmentRequest(BaseModel):
    tailor_id: constr(strip_whitespace=True, min_length=1)
    due_date: date
    instructions: str | None = None
    item_index: int | None = Field(default=None, ge=0)


class RecommendationRequest(BaseModel):
    preferred_colors: constr(strip_whitespace=True, min_length=1)
    preferred_styles: constr(strip_whitespace=True, min_length=1)
    measurements: dict[str, str | float] = Field(default_factory=dict)


class StyleRecommendations(BaseModel):
    recommendations: list[str]
    reasoning: str
