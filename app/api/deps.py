from fastapi import Request

from app.api.context import RequestContext, build_request_context
from app.core.logging import StructuredLogger


def get_structured_logger(request: Request) -> StructuredLogger:
    """Return the structured logging sink installed on the application."""
    return request.app.state.structured_logger


def request_context(tag: str):
    """
    Create a dependency that injects request metadata tagged with ``tag``.

    Example:
        Depends(request_context("sessions"))
    """
    async def inject_request_metadata(request: Request) -> RequestContext:
        return await build_request_context(request, tag=tag)

    return inject_request_metadata
