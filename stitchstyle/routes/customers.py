from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter

from stitchstyle.application import get_catalog_service, get_order_service
from stitchstyle.core.schema import CustomerInput
from stitchstyle.routes.errors import http_errors
from stitchstyle.routes.orders import serialise_order

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("")
async def list_customers() -> dict:
    service = get_catalog_service()
    return {"items": [asdict(customer) for customer in service.list_customers()]}


@router.post("")
async def create_customer(payload: CustomerInput) -> dict:
    customer = get_catalog_service().save_customer(payload)
    return asdict(customer)


@router.get("/{customer_id}")
async def get_customer(customer_id: str) -> dict:
    with http_errors():
        customer = get_catalog_service().get_customer(customer_id)
    return asdict(customer)


@router.put("/{customer_id}")
async def update_customer(customer_id: str, payload: CustomerInput) -> dict:
    with http_errors():
        customer = get_catalog_service().save_customer(payload, customer_id)
    return asdict(customer)


@router.delete("/{customer_id}")
async def delete_customer(customer_id: str) -> dict:
    with http_errors():
        get_catalog_service().delete_customer(customer_id)
    return {"id": customer_id, "deleted": True}


@router.get("/{customer_id}/orders")
async def list_customer_orders(customer_id: str) -> dict:
    """Past orders for a customer, shown on the customer step."""
    with http_errors():
        orders = get_order_service().orders_for_customer(customer_id)
    return {"customer_id": customer_id, "items": [serialise_order(order) for order in orders]}
