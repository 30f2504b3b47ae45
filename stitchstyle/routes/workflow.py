from __future__ import annotations

from fastapi import APIRouter

from stitchstyle.application import get_workflow_service
from stitchstyle.core.schema import (
    ActiveDesignPayload,
    CourierPreference,
    CustomerSelection,
    LoadOrderRequest,
    ReferenceImages,
    ReturnPath,
)
from stitchstyle.domain import WorkflowSession
from stitchstyle.routes.errors import http_errors
from stitchstyle.routes.orders import serialise_order

router = APIRouter(prefix="/workflow/sessions", tags=["workflow"])


def _view(session_id: str, session: WorkflowSession) -> dict:
    return {"session_id": session_id, **session.snapshot()}


@router.post("")
async def create_session() -> dict:
    service = get_workflow_service()
    session_id = service.create_session()
    return _view(session_id, service.get_session(session_id))


@router.get("/{session_id}")
async def get_session(session_id: str) -> dict:
    with http_errors():
        session = get_workflow_service().get_session(session_id)
    return _view(session_id, session)


@router.delete("/{session_id}")
async def discard_session(session_id: str) -> dict:
    with http_errors():
        get_workflow_service().discard_session(session_id)
    return {"session_id": session_id, "discarded": True}


@router.put("/{session_id}/customer")
async def select_customer(session_id: str, payload: CustomerSelection) -> dict:
    with http_errors():
        session = get_workflow_service().select_customer(session_id, payload.customer_id)
    return _view(session_id, session)


@router.put("/{session_id}/courier")
async def set_courier(session_id: str, payload: CourierPreference) -> dict:
    with http_errors():
        session = get_workflow_service().set_courier(session_id, payload.requested)
    return _view(session_id, session)


@router.put("/{session_id}/return-path")
async def set_return_path(session_id: str, payload: ReturnPath) -> dict:
    with http_errors():
        session = get_workflow_service().set_return_path(session_id, payload.path)
    return _view(session_id, session)


@router.put("/{session_id}/active-design")
async def set_active_design(session_id: str, payload: ActiveDesignPayload) -> dict:
    design = payload.design.to_domain() if payload.design else None
    with http_errors():
        session = get_workflow_service().compose(session_id, design)
    return _view(session_id, session)


@router.delete("/{session_id}/active-design")
async def discard_active_design(session_id: str) -> dict:
    with http_errors():
        session = get_workflow_service().discard_composition(session_id)
    return _view(session_id, session)


@router.post("/{session_id}/active-design/commit")
async def commit_active_design(session_id: str, payload: ActiveDesignPayload | None = None) -> dict:
    design = payload.design.to_domain() if payload and payload.design else None
    with http_errors():
        session = get_workflow_service().commit(session_id, design)
    return _view(session_id, session)


@router.post("/{session_id}/active-design/images")
async def attach_images(session_id: str, payload: ReferenceImages) -> dict:
    with http_errors():
        session = get_workflow_service().attach_images(session_id, payload.images)
    return _view(session_id, session)


@router.post("/{session_id}/items/{index}/edit")
async def edit_item(session_id: str, index: int) -> dict:
    with http_errors():
        session = get_workflow_service().edit_item(session_id, index)
    return _view(session_id, session)


@router.delete("/{session_id}/items/{index}")
async def remove_item(session_id: str, index: int) -> dict:
    with http_errors():
        session = get_workflow_service().remove_item(session_id, index)
    return _view(session_id, session)


@router.post("/{session_id}/load-order")
async def load_order(session_id: str, payload: LoadOrderRequest) -> dict:
    with http_errors():
        session = get_workflow_service().load_order(session_id, payload.order_id)
    return _view(session_id, session)


@router.post("/{session_id}/reset")
async def reset_session(session_id: str) -> dict:
    with http_errors():
        session = get_workflow_service().reset(session_id)
    return _view(session_id, session)


@router.post("/{session_id}/submit")
async def submit_session(session_id: str) -> dict:
    with http_errors():
        result = get_workflow_service().submit(session_id)
    return {
        "created": result.created,
        "redirect_to": result.redirect_to,
        "order": serialise_order(result.order),
    }
