from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from stitchstyle.application import get_catalog_service
from stitchstyle.core.schema import StyleInput
from stitchstyle.routes.errors import http_errors

router = APIRouter(prefix="/styles", tags=["styles"])


@router.get("")
async def list_styles() -> dict:
    service = get_catalog_service()
    return {"items": [asdict(style) for style in service.list_styles()]}


@router.get("/measurements")
async def list_measurement_fields() -> dict:
    service = get_catalog_service()
    return {"items": [asdict(item) for item in service.list_measurement_fields()]}


@router.post("")
async def create_style(payload: StyleInput) -> dict:
    with http_errors():
        style = get_catalog_service().save_style(payload)
    return asdict(style)


@router.get("/{style_id}")
async def get_style(style_id: str) -> dict:
    with http_errors():
        style = get_catalog_service().get_style(style_id)
    return asdict(style)


@router.put("/{style_id}")
async def update_style(style_id: str, payload: StyleInput) -> dict:
    with http_errors():
        style = get_catalog_service().save_style(payload, style_id)
    return asdict(style)


@router.delete("/{style_id}")
async def delete_style(style_id: str) -> dict:
    with http_errors():
        get_catalog_service().delete_style(style_id)
    return {"id": style_id, "deleted": True}
