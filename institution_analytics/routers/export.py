"""
Data export router - /data-export endpoint.
"""
import logging
import traceback
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import Response

from ..dependencies import get_supabase, parse_request_body
from ..errors import DATA_EXPORT_ERROR, ServiceError
from ..models.schemas import ErrorResponse, ExportRequest
from ..services.export import EXPORT_TYPES, export_filename, export_institution_data

logger = logging.getLogger(__name__)
router = APIRouter()

MEDIA_TYPES = {
    "csv": "text/csv",
    "json": "application/json",
}


@router.post(
    "/data-export",
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def data_export(request: Request):
    """Download an institution's scholarships, applications or analytics events."""
    logger.debug("=== DATA EXPORT CALLED ===")

    payload = await parse_request_body(request, ExportRequest, DATA_EXPORT_ERROR)

    if not payload.institution_id or not payload.data_type:
        raise ServiceError(DATA_EXPORT_ERROR, "institutionId and dataType are required", status_code=400)
    if payload.data_type not in EXPORT_TYPES:
        raise ServiceError(DATA_EXPORT_ERROR, f"Unsupported data type: {payload.data_type}", status_code=400)

    try:
        supabase = get_supabase()
        content = export_institution_data(supabase, payload.institution_id, payload.data_type, payload.format)
    except Exception as e:
        logger.error(f"Export failed: {type(e).__name__}: {e}")
        logger.error(traceback.format_exc())
        raise ServiceError(DATA_EXPORT_ERROR, f"Export failed: {e}")

    filename = export_filename(payload.data_type, payload.format, datetime.now(timezone.utc).date())
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    return Response(content=content, media_type=MEDIA_TYPES[payload.format], headers=headers)
