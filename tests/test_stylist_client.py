from __future__ import annotations

import json
import sys
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from stitchstyle.core.schema import RecommendationRequest
from stitchstyle.infrastructure import NoOpStylistClient, StylistError, configure_stylist_client
from stitchstyle.infrastructure.stylist_http import HTTPStylistClient

API_URL = "https://llm.example.com/v1/chat/completions"


def _request() -> RecommendationRequest:
    return RecommendationRequest(
        preferred_colors="teal, ivory",
        preferred_styles="formal",
        measurements={"waist": 30, "upper_chest": 34},
    )


def _completion(content: str) -> dict:
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


@pytest.fixture(autouse=True)
def restore_stylist():
    yield
    configure_stylist_client(NoOpStylistClient())


def test_recommend_parses_completion():
    captured: dict[str, object] = {}
    answer = {"recommendations": ["1. Teal A-line kurti", "2. Ivory silk blouse"], "reasoning": "Balances proportions."}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["auth"] = request.headers["authorization"]
        captured["body"] = json.loads(request.content.decode("utf-8"))
        return httpx.Response(200, json=_completion(json.dumps(answer)))

    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    client = HTTPStylistClient(API_URL, "secret", model="stylist-1", http_client=http_client)

    result = client.recommend(_request())

    assert result.recommendations == answer["recommendations"]
    assert result.reasoning == "Balances proportions."
    assert captured["url"] == API_URL
    assert captured["auth"] == "Bearer secret"
    body = captured["body"]
    assert isinstance(body, dict)
    assert body["model"] == "stylist-1"
    prompt = body["messages"][1]["content"]
    assert "Preferred Colors: teal, ivory" in prompt
    assert "Upper Chest: 34" in prompt


def test_recommend_rejects_off_schema_completion():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_completion(json.dumps({"ideas": []})))

    client = HTTPStylistClient(API_URL, "secret", http_client=httpx.Client(transport=httpx.MockTransport(handler)))

    with pytest.raises(StylistError):
        client.recommend(_request())


def test_recommend_wraps_http_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "overloaded"})

    client = HTTPStylistClient(API_URL, "secret", http_client=httpx.Client(transport=httpx.MockTransport(handler)))

    with pytest.raises(StylistError):
        client.recommend(_request())


def test_api_url_must_have_scheme():
    with pytest.raises(ValueError):
        HTTPStylistClient("llm.example.com/v1", "secret")


def test_recommendations_endpoint_uses_configured_client():
    from stitchstyle.app import create_app

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_completion("not json"))

    app = create_app()
    with TestClient(app) as test_client:
        response = test_client.post(
            "/api/recommendations",
            json={"preferred_colors": "red", "preferred_styles": "casual"},
        )
        assert response.status_code == 200
        assert response.json()["recommendations"] == []

        configure_stylist_client(
            HTTPStylistClient(API_URL, "secret", http_client=httpx.Client(transport=httpx.MockTransport(handler)))
        )
        response = test_client.post(
            "/api/recommendations",
            json={"preferred_colors": "red", "preferred_styles": "casual"},
        )
        assert response.status_code == 502

        response = test_client.post("/api/recommendations", json={"preferred_colors": "", "preferred_styles": "x"})
        assert response.status_code == 422


def test_configured_client_is_closed_on_shutdown(monkeypatch):
    from stitchstyle.app import create_app
    from stitchstyle.infrastructure import get_stylist_client

    monkeypatch.setenv("STYLIST_API_URL", API_URL)
    monkeypatch.setenv("STYLIST_API_KEY", "secret")

    app = create_app()
    stylist = get_stylist_client()
    assert isinstance(stylist, HTTPStylistClient)

    with TestClient(app):
        assert not stylist._client.is_closed
    assert stylist._client.is_closed
