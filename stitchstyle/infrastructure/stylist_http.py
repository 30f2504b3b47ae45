"""Integration with a chat-completion endpoint for style recommendations."""
from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from stitchstyle.core.schema import RecommendationRequest, StyleRecommendations

from .stylist import StylistError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a personal stylist who provides style recommendations based on "
    "body measurements and design preferences. Answer with a JSON object with "
    'the keys "recommendations" (a list of strings) and "reasoning" (a string).'
)


class HTTPStylistClient:
    """Client for an OpenAI-compatible ``/chat/completions`` endpoint."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        *,
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        if not api_url.startswith(("http://", "https://")):
            raise ValueError("api_url must include scheme and host")
        self._api_url = api_url
        self._api_key = api_key
        self._model = model
        self._client = http_client or httpx.Client(timeout=timeout)
        self._owns_client = http_client is None

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    @staticmethod
    def render_prompt(request: RecommendationRequest) -> str:
        lines = ["Provide style recommendations tailored to the following measurements and preferences:", ""]
        for key, value in sorted(request.measurements.items()):
            lines.append(f"{key.replace('_', ' ').title()}: {value} inches")
        lines.append(f"Preferred Colors: {request.preferred_colors}")
        lines.append(f"Preferred Styles: {request.preferred_styles}")
        lines.append("")
        lines.append(
            "Consider body shape, proportions, and preferred styles to generate a list of clothing "
            "recommendations. Briefly explain your reasoning behind each recommendation."
        )
        return "\n".join(lines)

    def _build_payload(self, request: RecommendationRequest) -> dict[str, Any]:
        return {
            "model": self._model,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": self.render_prompt(request)},
            ],
        }

    @staticmethod
    def _extract_content(body: dict[str, Any]) -> str:
        choices = body.get("choices") or []
        if not choices:
            raise StylistError("completion response has no choices")
        message = choices[0].get("message") or {}
        content = message.get("content")
        if not isinstance(content, str) or not content.strip():
            raise StylistError("completion response has empty content")
        return content

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def recommend(self, request: RecommendationRequest) -> StyleRecommendations:
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            response = self._client.post(self._api_url, headers=headers, json=self._build_payload(request))
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Stylist request failed: %s", exc)
            raise StylistError(f"recommendation service unavailable: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise StylistError("recommendation service returned non-JSON body") from exc

        content = self._extract_content(body)
        try:
            return StyleRecommendations.model_validate(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Stylist returned an off-schema completion")
            raise StylistError("recommendation service returned an invalid payload") from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = ["HTTPStylistClient"]
