from __future__ import annotations

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Query
from fastapi.responses import Response

from stitchstyle.application import get_order_service
from stitchstyle.core.schema import AssignmentRequest, StatusFilter, StatusUpdate
from stitchstyle.domain import Order
from stitchstyle.routes.errors import http_errors

router = APIRouter(prefix="/orders", tags=["orders"])


def serialise_order(order: Order) -> dict[str, Any]:
    data = asdict(order)
    data["items"] = order.items
    data["is_active"] = order.is_active
    return data


@router.get("")
async def list_orders(status: StatusFilter = Query(default="active_default")) -> dict:
    service = get_order_service()
    orders = service.list_orders(status)
    return {"status": status, "items": [serialise_order(order) for order in orders]}


@router.get("/export")
async def export_orders(status: StatusFilter = Query(default="all")) -> Response:
    content = get_order_service().export_orders(status)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="orders.csv"'},
    )


@router.get("/{order_id}")
async def get_order(order_id: str) -> dict:
    with http_errors():
        order = get_order_service().get_order(order_id)
    return serialise_order(order)


@router.put("/{order_id}/status")
async def update_order_status(order_id: str, payload: StatusUpdate) -> dict:
    with http_errors():
        order = get_order_service().update_status(order_id, payload.status)
    return serialise_order(order)


@router.post("/{order_id}/assignment")
async def assign_tailor(order_id: str, payload: AssignmentRequest) -> dict:
    with http_errors():
        order = get_order_service().assign_tailor(
            order_id,
            payload.tailor_id,
            payload.due_date,
            instructions=payload.instructions,
            item_index=payload.item_index,
        )
    return serialise_order(order)


@router.get("/{order_id}/tracking")
async def get_tracking(order_id: str) -> dict:
    with http_errors():
        steps = get_order_service().tracking_timeline(order_id)
    return {"order_id": order_id, "steps": [asdict(step) for step in steps]}
