from __future__ import annotations

import os
from pathlib import Path

import yaml

from stitchstyle.domain import Address, Customer, GarmentStyle, MeasurementField, Tailor
from stitchstyle.domain.catalog import placeholder_avatar

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


def catalog_path() -> Path:
    env_path = os.getenv("STITCHSTYLE_CATALOG")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return CONFIG_DIR / "catalog.yaml"


def load_catalog_seed(path: Path | None = None) -> dict:
    """Read the catalog seed file; a missing file yields an empty catalog."""

    path = path or catalog_path()
    if not path.exists():
        return {"measurements": [], "styles": [], "customers": [], "tailors": []}
    with path.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    return data


def _address(raw: dict | None) -> Address | None:
    if not isinstance(raw, dict):
        return None
    return Address(
        street=str(raw.get("street") or ""),
        city=str(raw.get("city") or ""),
        zip_code=str(raw.get("zip_code") or ""),
        country=str(raw.get("country") or ""),
    )


def measurement_fields(seed: dict) -> list[MeasurementField]:
    return [MeasurementField(id=str(item["id"]), label=str(item.get("label") or item["id"])) for item in seed.get("measurements") or []]


def styles(seed: dict) -> list[GarmentStyle]:
    return [
        GarmentStyle(
            id=str(item["id"]),
            name=str(item["name"]),
            required_measurements=[str(value) for value in item.get("required_measurements") or []],
        )
        for item in seed.get("styles") or []
    ]


def customers(seed: dict) -> list[Customer]:
    return [
        Customer(
            id=str(item["id"]),
            name=str(item["name"]),
            email=str(item.get("email") or ""),
            phone=str(item.get("phone") or ""),
            address=_address(item.get("address")),
        )
        for item in seed.get("customers") or []
    ]


def tailors(seed: dict) -> list[Tailor]:
    return [
        Tailor(
            id=str(item["id"]),
            name=str(item["name"]),
            mobile=str(item.get("mobile") or ""),
            expertise=[str(value) for value in item.get("expertise") or []],
            availability=str(item.get("availability") or "Available"),
            avatar=str(item.get("avatar") or placeholder_avatar(str(item["name"]))),
        )
        for item in seed.get("tailors") or []
    ]
