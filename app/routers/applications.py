# =============================================================================
# app/routers/applications.py - Application Submission Endpoint
# =============================================================================
# POST /api/apply accepts the website form either as JSON or as a plain
# URL-encoded form post, then hands the fields to ApplicationService.
# =============================================================================

import json
import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.dependencies import ApplicationServiceDep
from app.exceptions import MalformedBodyError, UnsupportedContentTypeError

logger = logging.getLogger(__name__)

router = APIRouter()

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
SUPPORTED_CONTENT_TYPES = [JSON_CONTENT_TYPE, FORM_CONTENT_TYPE]


async def parse_submission_body(request: Request) -> dict[str, Any]:
    """
    Read the request body as a flat field dict.

    Raises:
        UnsupportedContentTypeError: Neither JSON nor URL-encoded form
        MalformedBodyError: Body doesn't parse, or JSON isn't an object
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()

    if media_type == JSON_CONTENT_TYPE or media_type.endswith("+json"):
        raw = await request.body()
        try:
            data = json.loads(raw)
        except (ValueError, UnicodeDecodeError) as e:
            raise MalformedBodyError(f"Invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise MalformedBodyError("JSON body must be an object")
        return data

    if media_type == FORM_CONTENT_TYPE:
        try:
            form = await request.form()
        except Exception as e:
            raise MalformedBodyError(f"Invalid form body: {e}") from e
        return {key: form.getlist(key)[-1] for key in form.keys()}

    raise UnsupportedContentTypeError(media_type, SUPPORTED_CONTENT_TYPES)


@router.post("/apply")
async def submit_application(request: Request, service: ApplicationServiceDep):
    """
    Submit a job application.

    Sends an admin notification, then a confirmation to the applicant.

    - 200: `{success, message, applicationId, timestamp, nextSteps[, warning]}`
    - 400: malformed body or missing required fields (no email sent)
    - 415: unsupported content type (no email sent)
    - 500: the admin notification failed (no confirmation sent)
    """
    payload = await parse_submission_body(request)
    result = await service.submit(payload)
    return JSONResponse(status_code=200, content=result.to_response())
