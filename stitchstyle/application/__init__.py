"""Application services."""

from .catalog import CatalogService
from .errors import RecordNotFoundError, SessionNotFoundError
from .orders import OrderService
from .services import (
    get_catalog_service,
    get_order_service,
    get_workflow_service,
    reset_application_state,
)
from .workflow import SubmissionResult, WorkflowService

__all__ = [
    "CatalogService",
    "OrderService",
    "RecordNotFoundError",
    "SessionNotFoundError",
    "SubmissionResult",
    "WorkflowService",
    "get_catalog_service",
    "get_order_service",
    "get_workflow_service",
    "reset_application_state",
]
