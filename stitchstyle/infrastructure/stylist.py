"""Style recommendation integration hooks.

Recommendations come from an external prompt-completion service. This module
defines the contract the application talks to and a no-op default so the API
answers predictably when no provider is configured. A real provider is
installed with ``configure_stylist_client`` during application start-up.
"""
from __future__ import annotations

from typing import Protocol

from stitchstyle.core.schema import RecommendationRequest, StyleRecommendations


class StylistError(RuntimeError):
    """Raised when the recommendation service fails or answers off-schema."""


class StylistClient(Protocol):
    """Contract for style recommendation integrations."""

    def recommend(self, request: RecommendationRequest) -> StyleRecommendations:
        """Return recommendations for the given preferences."""


class NoOpStylistClient:
    """Fallback client used when no provider is configured."""

    def recommend(self, request: RecommendationRequest) -> StyleRecommendations:
        return StyleRecommendations(
            recommendations=[],
            reasoning="Style recommendation service not configured",
        )


_client: StylistClient = NoOpStylistClient()


def configure_stylist_client(client: StylistClient) -> None:
    """Install the client used by the recommendations endpoint."""

    global _client
    _client = client


def get_stylist_client() -> StylistClient:
    """Return the currently configured client."""

    return _client
