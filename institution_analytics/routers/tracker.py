"""
Recommendation tracker router - /recommendation-tracker endpoint.
"""
import logging
import traceback

from fastapi import APIRouter, Request

from ..dependencies import get_supabase, parse_request_body
from ..errors import RECOMMENDATION_TRACKER_ERROR, ServiceError
from ..models.schemas import ErrorResponse, TrackerRequest, TrackerResponse
from ..services.tracker import TRACKER_ACTIONS, track_recommendation

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/recommendation-tracker",
    response_model=TrackerResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def recommendation_tracker(request: Request):
    """Record a view, interaction or feedback on a recommendation."""
    logger.debug("=== RECOMMENDATION TRACKER CALLED ===")

    payload = await parse_request_body(request, TrackerRequest, RECOMMENDATION_TRACKER_ERROR)

    if not payload.action or not payload.recommendation_id or not payload.type:
        raise ServiceError(
            RECOMMENDATION_TRACKER_ERROR,
            "Missing parameters: action, recommendationId and type are required",
            status_code=400,
        )
    if payload.action not in TRACKER_ACTIONS:
        raise ServiceError(
            RECOMMENDATION_TRACKER_ERROR,
            f"Unsupported action: {payload.action}",
            status_code=400,
        )

    try:
        supabase = get_supabase()
        message = track_recommendation(
            supabase,
            payload.action,
            payload.recommendation_id,
            payload.type,
            user_id=payload.user_id,
            metadata=payload.metadata,
        )
    except Exception as e:
        logger.error(f"Tracking failed: {type(e).__name__}: {e}")
        logger.error(traceback.format_exc())
        raise ServiceError(RECOMMENDATION_TRACKER_ERROR, f"Tracking failed: {e}")

    return TrackerResponse(success=True, message=message)
