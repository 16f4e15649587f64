"""Sessions endpoint under simulated rate limiting.

Every request logs a TooManyRequestsError. GET always ends in 403 and POST
always ends in 401 after an artificial delay; credentials and cookies are
only shape-checked, never verified.
"""

import logging

from app.api.context import RequestContext
from app.core.config import settings
from app.core.logging import StructuredLogger
from app.errors import ForbiddenError, TooManyRequestsError, UnauthorizedError
from app.services.latency import simulate_latency
from app.validator import OPTIONAL, REQUIRED, validate

SESSION_COOKIE_RULES = {"session_id": OPTIONAL}
CREDENTIALS_RULES = {"email": REQUIRED, "password": REQUIRED}

REDACTED_FIELDS = frozenset({"password"})


def _redact(body):
    if not isinstance(body, dict):
        return body
    return {key: "[REDACTED]" if key in REDACTED_FIELDS else value for key, value in body.items()}


def log_rate_limit_event(context: RequestContext, sink: StructuredLogger) -> None:
    error = TooManyRequestsError(
        context={
            "method": context.method,
            "url": context.url,
            "body": _redact(context.body),
            "client_ip": context.client_ip,
            "type": context.tag,
        },
    )
    sink.log(logging.ERROR, error.serialize())


def validate_session_cookie(context: RequestContext, sink: StructuredLogger) -> None:
    validate(context.cookies, SESSION_COOKIE_RULES)


def validate_credentials(context: RequestContext, sink: StructuredLogger) -> None:
    validate(context.body, CREDENTIALS_RULES)


async def forbid_session_read(context: RequestContext, sink: StructuredLogger) -> ForbiddenError:
    error = ForbiddenError(
        "Usuário não pode executar esta operação.",
        action='Verifique se este usuário possui a feature "read:session".',
    )
    sink.info(error.serialize())
    return error


async def reject_credentials(context: RequestContext, sink: StructuredLogger) -> UnauthorizedError:
    error = UnauthorizedError(
        "Dados não conferem.",
        action="Verifique se os dados enviados estão corretos.",
    )
    await simulate_latency(settings.latency_min_ms, settings.latency_max_ms)
    sink.info(error.serialize())
    return error
