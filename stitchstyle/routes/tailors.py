from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from stitchstyle.application import get_catalog_service
from stitchstyle.core.schema import TailorInput
from stitchstyle.routes.errors import http_errors

router = APIRouter(prefix="/tailors", tags=["tailors"])


@router.get("")
async def list_tailors() -> dict:
    service = get_catalog_service()
    return {"items": [asdict(tailor) for tailor in service.list_tailors()]}


@router.post("")
async def create_tailor(payload: TailorInput) -> dict:
    tailor = get_catalog_service().save_tailor(payload)
    return asdict(tailor)


@router.put("/{tailor_id}")
async def update_tailor(tailor_id: str, payload: TailorInput) -> dict:
    with http_errors():
        tailor = get_catalog_service().save_tailor(payload, tailor_id)
    return asdict(tailor)


@router.delete("/{tailor_id}")
async def delete_tailor(tailor_id: str) -> dict:
    with http_errors():
        get_catalog_service().delete_tailor(tailor_id)
    return {"id": tailor_id, "deleted": True}
