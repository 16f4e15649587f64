from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.context import RequestContext
from app.api.deps import get_structured_logger, request_context
from app.api.exception_handlers import error_response
from app.api.pipeline import Pipeline
from app.core.logging import StructuredLogger
from app.schemas.error import ErrorResponse
from app.services.sessions import (
    forbid_session_read,
    log_rate_limit_event,
    reject_credentials,
    validate_credentials,
    validate_session_cookie,
)

router = APIRouter(prefix="/sessions", tags=["sessions"])

get_pipeline = Pipeline(
    steps=(log_rate_limit_event, validate_session_cookie),
    handler=forbid_session_read,
)
post_pipeline = Pipeline(
    steps=(log_rate_limit_event, validate_credentials),
    handler=reject_credentials,
)


@router.get(
    "",
    response_class=JSONResponse,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def read_session(
    context: RequestContext = Depends(request_context("sessions")),
    sink: StructuredLogger = Depends(get_structured_logger),
):
    """Always 403; a session_id cookie, if sent, must not be blank."""
    result = await get_pipeline.run(context, sink)
    return error_response(result.error)


@router.post(
    "",
    response_class=JSONResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def create_session(
    context: RequestContext = Depends(request_context("sessions")),
    sink: StructuredLogger = Depends(get_structured_logger),
):
    """Always 401 after a random delay; the JSON body needs email and password."""
    result = await post_pipeline.run(context, sink)
    return error_response(result.error)
