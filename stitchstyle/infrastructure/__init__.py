"""Infrastructure layer exports."""

from .catalog import CatalogRepository, InMemoryCatalogRepository
from .orders import DEFAULT_LEAD_DAYS, InMemoryOrderRepository, OrderRepository
from .stylist import (
    NoOpStylistClient,
    StylistClient,
    StylistError,
    configure_stylist_client,
    get_stylist_client,
)

__all__ = [
    "CatalogRepository",
    "DEFAULT_LEAD_DAYS",
    "InMemoryCatalogRepository",
    "InMemoryOrderRepository",
    "NoOpStylistClient",
    "OrderRepository",
    "StylistClient",
    "StylistError",
    "configure_stylist_client",
    "get_stylist_client",
]
