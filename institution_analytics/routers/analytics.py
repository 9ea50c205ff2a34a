"""
Institution analytics router - /institution-analytics and /institution-analytics/summary endpoints.
"""
import logging
import time
import traceback
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import ValidationError

from ..dependencies import get_supabase, parse_request_body
from ..errors import INSTITUTION_ANALYTICS_ERROR, ServiceError
from ..models.schemas import (
    AggregationResult,
    AnalyticsMetadata,
    AnalyticsSummaryResponse,
    DataPoints,
    ErrorResponse,
    InstitutionAnalyticsRequest,
    InstitutionAnalyticsResponse,
)
from ..services.aggregation import calculate_institution_analytics
from ..services.record_store import InstitutionRecords, fetch_institution_records
from ..services.summary import summarize_analytics
from ..services.timeframe import resolve_start_date, validate_timeframe

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def validate_analytics_request(payload: InstitutionAnalyticsRequest) -> tuple[str, str]:
    """Return (institution_id, timeframe) or raise a 400 before any data access."""
    if not payload.institution_id:
        raise ServiceError(INSTITUTION_ANALYTICS_ERROR, "institutionId is required", status_code=400)
    try:
        timeframe = validate_timeframe(payload.timeframe)
    except ValueError as e:
        raise ServiceError(INSTITUTION_ANALYTICS_ERROR, str(e), status_code=400)
    return payload.institution_id, timeframe


def load_records(institution_id: str, timeframe: str, now: datetime) -> InstitutionRecords:
    start = resolve_start_date(timeframe, now)
    try:
        supabase = get_supabase()
        return fetch_institution_records(supabase, institution_id, start)
    except ValidationError as e:
        logger.error(f"Malformed record from store: {e}")
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ServiceError(INSTITUTION_ANALYTICS_ERROR, f"Malformed {e.title} record: invalid {fields}")
    except Exception as e:
        logger.error(f"Record store error: {type(e).__name__}: {e}")
        logger.error(traceback.format_exc())
        raise ServiceError(INSTITUTION_ANALYTICS_ERROR, f"Database error: {e}")


def run_analytics(institution_id: str, timeframe: str) -> tuple[InstitutionRecords, AggregationResult, datetime]:
    now = datetime.now(timezone.utc)
    records = load_records(institution_id, timeframe, now)
    result = calculate_institution_analytics(
        records.scholarships,
        records.applications,
        records.events,
        timeframe,
        now=now,
    )
    return records, result, now


@router.post(
    "/institution-analytics",
    response_model=InstitutionAnalyticsResponse,
    responses=ERROR_RESPONSES,
)
async def institution_analytics(request: Request):
    """Dashboard analytics for one institution over a timeframe."""
    start_time = time.time()
    logger.info("=== INSTITUTION ANALYTICS START ===")

    payload = await parse_request_body(request, InstitutionAnalyticsRequest, INSTITUTION_ANALYTICS_ERROR)
    institution_id, timeframe = validate_analytics_request(payload)
    logger.info(f"Institution: {institution_id}, timeframe: {timeframe}")

    records, result, now = run_analytics(institution_id, timeframe)

    logger.info("=== INSTITUTION ANALYTICS COMPLETE ===")
    logger.info(
        f"Data points: {len(records.scholarships)} scholarships, "
        f"{len(records.applications)} applications, {len(records.events)} events; "
        f"{len(result.insights)} insights"
    )
    logger.info(f"Processing time: {time.time() - start_time:.2f}s")

    return InstitutionAnalyticsResponse(
        success=True,
        data=result,
        metadata=AnalyticsMetadata(
            institution_id=institution_id,
            timeframe=timeframe,
            generated_at=now.isoformat(),
            data_points=DataPoints(
                scholarships=len(records.scholarships),
                applications=len(records.applications),
                events=len(records.events),
            ),
        ),
    )


@router.post(
    "/institution-analytics/summary",
    response_model=AnalyticsSummaryResponse,
    responses=ERROR_RESPONSES,
)
async def institution_analytics_summary(request: Request):
    """Short narrative summary of an institution's analytics."""
    logger.info("=== INSTITUTION ANALYTICS SUMMARY START ===")

    payload = await parse_request_body(request, InstitutionAnalyticsRequest, INSTITUTION_ANALYTICS_ERROR)
    institution_id, timeframe = validate_analytics_request(payload)

    _, result, _ = run_analytics(institution_id, timeframe)
    summary, generated_by = summarize_analytics(result, timeframe)

    logger.info(f"Summary generated by {generated_by} for institution {institution_id}")
    return AnalyticsSummaryResponse(
        success=True,
        summary=summary,
        insights_count=len(result.insights),
        generated_by=generated_by,
    )
