"""Process-wide service instances."""
from __future__ import annotations

from stitchstyle.infrastructure import InMemoryCatalogRepository, InMemoryOrderRepository

from .catalog import CatalogService
from .orders import OrderService
from .workflow import WorkflowService

_catalog_service = CatalogService(InMemoryCatalogRepository())
_order_service = OrderService(InMemoryOrderRepository(), _catalog_service)
_workflow_service = WorkflowService(_catalog_service, _order_service)


def get_catalog_service() -> CatalogService:
    """Return the singleton catalog service for the process."""

    return _catalog_service


def get_order_service() -> OrderService:
    return _order_service


def get_workflow_service() -> WorkflowService:
    return _workflow_service


def reset_application_state() -> None:
    """Reset the in-memory stores (used in tests)."""

    _workflow_service.clear()
    _order_service.reset()
    _catalog_service.reset()
