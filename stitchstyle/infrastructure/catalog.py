"""Infrastructure layer for the customer, style and tailor directories."""
from __future__ import annotations

from typing import Protocol

from stitchstyle.core import seed as catalog_seed
from stitchstyle.domain import Customer, GarmentStyle, MeasurementField, Tailor


class CatalogRepository(Protocol):
    """Persistence contract for catalog records."""

    def list_measurement_fields(self) -> list[MeasurementField]: ...

    def list_customers(self) -> list[Customer]: ...

    def get_customer(self, customer_id: str) -> Customer | None: ...

    def save_customer(self, customer: Customer) -> Customer: ...

    def delete_customer(self, customer_id: str) -> bool: ...

    def list_styles(self) -> list[GarmentStyle]: ...

    def get_style(self, style_id: str) -> GarmentStyle | None: ...

    def save_style(self, style: GarmentStyle) -> GarmentStyle: ...

    def delete_style(self, style_id: str) -> bool: ...

    def list_tailors(self) -> list[Tailor]: ...

    def get_tailor(self, tailor_id: str) -> Tailor | None: ...

    def save_tailor(self, tailor: Tailor) -> Tailor: ...

    def delete_tailor(self, tailor_id: str) -> bool: ...

    def next_id(self, kind: str) -> str: ...

    def reset(self) -> None: ...


class InMemoryCatalogRepository:
    """In-memory catalog seeded from the catalog YAML file."""

    def __init__(self, seed: dict | None = None) -> None:
        self._seed = seed
        self._measurements: list[MeasurementField] = []
        self._customers: dict[str, Customer] = {}
        self._styles: dict[str, GarmentStyle] = {}
        self._tailors: dict[str, Tailor] = {}
        self._counters: dict[str, int] = {}
        self.reset()

    # ------------------------------------------------------------------
    # measurement fields
    # ------------------------------------------------------------------
    def list_measurement_fields(self) -> list[MeasurementField]:
        return list(self._measurements)

    # ------------------------------------------------------------------
    # customers
    # ------------------------------------------------------------------
    def list_customers(self) -> list[Customer]:
        return sorted(self._customers.values(), key=lambda item: item.name.lower())

    def get_customer(self, customer_id: str) -> Customer | None:
        return self._customers.get(customer_id)

    def save_customer(self, customer: Customer) -> Customer:
        self._customers[customer.id] = customer
        return customer

    def delete_customer(self, customer_id: str) -> bool:
        return self._customers.pop(customer_id, None) is not None

    # ------------------------------------------------------------------
    # styles
    # ------------------------------------------------------------------
    def list_styles(self) -> list[GarmentStyle]:
        return sorted(self._styles.values(), key=lambda item: item.name.lower())

    def get_style(self, style_id: str) -> GarmentStyle | None:
        return self._styles.get(style_id)

    def save_style(self, style: GarmentStyle) -> GarmentStyle:
        self._styles[style.id] = style
        return style

    def delete_style(self, style_id: str) -> bool:
        return self._styles.pop(style_id, None) is not None

    # ------------------------------------------------------------------
    # tailors
    # ------------------------------------------------------------------
    def list_tailors(self) -> list[Tailor]:
        return sorted(self._tailors.values(), key=lambda item: item.name.lower())

    def get_tailor(self, tailor_id: str) -> Tailor | None:
        return self._tailors.get(tailor_id)

    def save_tailor(self, tailor: Tailor) -> Tailor:
        self._tailors[tailor.id] = tailor
        return tailor

    def delete_tailor(self, tailor_id: str) -> bool:
        return self._tailors.pop(tailor_id, None) is not None

    # ------------------------------------------------------------------
    # housekeeping
    # ------------------------------------------------------------------
    def next_id(self, kind: str) -> str:
        existing = {"customer": self._customers, "style": self._styles, "tailor": self._tailors}.get(kind, {})
        while True:
            self._counters[kind] = self._counters.get(kind, 0) + 1
            candidate = f"{kind}-{self._counters[kind]:03d}"
            if candidate not in existing:
                return candidate

    def reset(self) -> None:
        seed = self._seed if self._seed is not None else catalog_seed.load_catalog_seed()
        self._measurements = catalog_seed.measurement_fields(seed)
        self._customers = {item.id: item for item in catalog_seed.customers(seed)}
        self._styles = {item.id: item for item in catalog_seed.styles(seed)}
        self._tailors = {item.id: item for item in catalog_seed.tailors(seed)}
        self._counters = {}
