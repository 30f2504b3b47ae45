"""Application service for customers, garment styles and tailors."""
from __future__ import annotations

import logging
from dataclasses import replace

from stitchstyle.core.schema import CustomerInput, StyleInput, TailorInput
from stitchstyle.core.validation import validate_style_measurements
from stitchstyle.domain import Customer, GarmentStyle, MeasurementField, Tailor
from stitchstyle.domain.catalog import TAILOR_AVAILABILITY, placeholder_avatar
from stitchstyle.infrastructure import CatalogRepository

from .errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class CatalogService:
    """Coordinates catalog use cases."""

    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    # ------------------------------------------------------------------
    # customers
    # ------------------------------------------------------------------
    def list_customers(self) -> list[Customer]:
        return self._repository.list_customers()

    def get_customer(self, customer_id: str) -> Customer:
        customer = self._repository.get_customer(customer_id)
        if customer is None:
            raise RecordNotFoundError("customer", customer_id)
        return customer

    def save_customer(self, data: CustomerInput, customer_id: str | None = None) -> Customer:
        if customer_id is not None:
            self.get_customer(customer_id)
        record_id = customer_id or self._repository.next_id("customer")
        customer = self._repository.save_customer(data.to_domain(record_id))
        logger.info("Saved customer %s (%s)", customer.id, "update" if customer_id else "new")
        return customer

    def delete_customer(self, customer_id: str) -> None:
        if not self._repository.delete_customer(customer_id):
            raise RecordNotFoundError("customer", customer_id)
        logger.info("Deleted customer %s", customer_id)

    # ------------------------------------------------------------------
    # garment styles
    # ------------------------------------------------------------------
    def list_measurement_fields(self) -> list[MeasurementField]:
        return self._repository.list_measurement_fields()

    def list_styles(self) -> list[GarmentStyle]:
        return self._repository.list_styles()

    def find_style(self, style_id: str) -> GarmentStyle | None:
        return self._repository.get_style(style_id)

    def get_style(self, style_id: str) -> GarmentStyle:
        style = self._repository.get_style(style_id)
        if style is None:
            raise RecordNotFoundError("style", style_id)
        return style

    def save_style(self, data: StyleInput, style_id: str | None = None) -> GarmentStyle:
        if style_id is not None:
            self.get_style(style_id)
        required = validate_style_measurements(data.required_measurements, self.list_measurement_fields())
        style = GarmentStyle(
            id=style_id or self._repository.next_id("style"),
            name=data.name,
            required_measurements=required,
        )
        return self._repository.save_style(style)

    def delete_style(self, style_id: str) -> None:
        if not self._repository.delete_style(style_id):
            raise RecordNotFoundError("style", style_id)

    # ------------------------------------------------------------------
    # tailors
    # ------------------------------------------------------------------
    def list_tailors(self) -> list[Tailor]:
        return self._repository.list_tailors()

    def get_tailor(self, tailor_id: str) -> Tailor:
        tailor = self._repository.get_tailor(tailor_id)
        if tailor is None:
            raise RecordNotFoundError("tailor", tailor_id)
        return tailor

    def save_tailor(self, data: TailorInput, tailor_id: str | None = None) -> Tailor:
        if tailor_id is not None:
            existing = self.get_tailor(tailor_id)
            tailor = replace(
                existing,
                name=data.name,
                mobile=data.mobile,
                expertise=data.expertise_list(),
            )
        else:
            tailor = Tailor(
                id=self._repository.next_id("tailor"),
                name=data.name,
                mobile=data.mobile,
                expertise=data.expertise_list(),
                avatar=placeholder_avatar(data.name),
            )
        return self._repository.save_tailor(tailor)

    def set_tailor_availability(self, tailor_id: str, availability: str) -> Tailor:
        if availability not in TAILOR_AVAILABILITY:
            raise ValueError(f"unknown availability {availability!r}")
        tailor = self.get_tailor(tailor_id)
        tailor.availability = availability
        return self._repository.save_tailor(tailor)

    def delete_tailor(self, tailor_id: str) -> None:
        if not self._repository.delete_tailor(tailor_id):
            raise RecordNotFoundError("tailor", tailor_id)

    def reset(self) -> None:
        self._repository.reset()
