"""Domain layer definitions."""

from .catalog import Address, Customer, GarmentStyle, MeasurementField, Tailor
from .orders import MAX_REFERENCE_IMAGES, ORDER_STATUSES, ItemDesign, Order
from .workflow import (
    Composing,
    Idle,
    IncompleteWorkflowError,
    InconsistentStateError,
    InvalidIndexError,
    OrderDraft,
    WorkflowError,
    WorkflowSession,
)

__all__ = [
    "Address",
    "Composing",
    "Customer",
    "GarmentStyle",
    "Idle",
    "IncompleteWorkflowError",
    "InconsistentStateError",
    "InvalidIndexError",
    "ItemDesign",
    "MAX_REFERENCE_IMAGES",
    "MeasurementField",
    "ORDER_STATUSES",
    "Order",
    "OrderDraft",
    "Tailor",
    "WorkflowError",
    "WorkflowSession",
]
