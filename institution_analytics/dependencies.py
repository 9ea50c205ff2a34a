"""
Shared dependencies: Supabase client and Gemini client.
"""
import json
import logging
from fastapi import Request
from pydantic import BaseModel, ValidationError
from supabase import create_client, Client
from google import genai

from .config import (
    SUPABASE_URL,
    SUPABASE_SERVICE_KEY,
    GEMINI_API_KEY,
)
from .errors import ServiceError

logger = logging.getLogger(__name__)

# Initialize Gemini client (optional, only the narrative summary uses it)
logger.debug("Initializing Gemini client...")
try:
    gemini_client = genai.Client(api_key=GEMINI_API_KEY)
    logger.debug("Gemini client initialized successfully")
except Exception as e:
    logger.error(f"Failed to initialize Gemini client: {e}")
    gemini_client = None


def get_supabase() -> Client:
    """Create and return a Supabase client instance."""
    logger.debug("Creating Supabase client...")
    client = create_client(SUPABASE_URL, SUPABASE_SERVICE_KEY)
    logger.debug("Supabase client created")
    return client


async def parse_request_body(request: Request, model: type[BaseModel], error_code: str):
    """Parse and validate a JSON body, reporting problems with the handler's error code."""
    try:
        body = await request.body()
        logger.debug(f"Request body: {body.decode('utf-8', errors='replace')}")
        payload = json.loads(body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"JSON decode error: {e}")
        raise ServiceError(error_code, f"Invalid JSON: {e}", status_code=400)

    if not isinstance(payload, dict):
        raise ServiceError(error_code, "Request body must be a JSON object", status_code=400)

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Pydantic validation error: {e}")
        raise ServiceError(error_code, f"Validation error: {e.errors()}", status_code=400)
