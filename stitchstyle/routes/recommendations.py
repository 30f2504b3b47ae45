from __future__ import annotations

from fastapi import APIRouter

from stitchstyle.core.schema import RecommendationRequest
from stitchstyle.infrastructure import get_stylist_client
from stitchstyle.routes.errors import http_errors

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.post("")
def recommend_styles(payload: RecommendationRequest) -> dict:
    with http_errors():
        result = get_stylist_client().recommend(payload)
    return result.model_dump()
