"""Structured error model shared by responses and logs."""

import uuid
from collections.abc import Mapping
from enum import Enum
from typing import Any

# Base wire layout: (attribute name, wire key). Order is the wire order.
BASE_WIRE_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "name"),
    ("message", "message"),
    ("action", "action"),
    ("status_code", "status_code"),
    ("request_id", "request_id"),
    ("error_id", "error_id"),
    ("location_code", "error_location_code"),
)


class ErrorKind(str, Enum):
    FORBIDDEN = "Forbidden"
    UNAUTHORIZED = "Unauthorized"
    TOO_MANY_REQUESTS = "TooManyRequests"
    VALIDATION = "Validation"
    NOT_FOUND = "NotFound"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    INTERNAL_SERVER = "InternalServer"


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class StructuredError(DomainError):
    """An error occurrence carrying a status code, texts and correlation ids.

    Instances are read-only once built. Each occurrence gets fresh request and
    error ids unless they are passed in. serialize() renames attributes to
    their wire keys through the class's wire_fields table.
    """

    kind: ErrorKind
    status_code: int
    default_message: str
    default_action: str
    default_location_code: str
    wire_fields: tuple[tuple[str, str], ...] = BASE_WIRE_FIELDS

    _sealed = False

    def __init__(
        self,
        message: str | None = None,
        *,
        action: str | None = None,
        request_id: uuid.UUID | None = None,
        error_id: uuid.UUID | None = None,
        location_code: str | None = None,
    ):
        self.message = message or self.default_message
        self.action = action or self.default_action
        self.request_id = request_id or uuid.uuid4()
        self.error_id = error_id or uuid.uuid4()
        self.location_code = location_code or self.default_location_code
        super().__init__(self.message)
        self._sealed = True

    def __setattr__(self, name: str, value: Any) -> None:
        if self._sealed and any(name == attr for attr, _ in self.wire_fields):
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    @property
    def name(self) -> str:
        return type(self).__name__

    def serialize(self) -> dict[str, Any]:
        """Return the wire form: snake_case keys, JSON-ready values."""
        return {wire: _to_wire(getattr(self, attr)) for attr, wire in self.wire_fields}


def _to_wire(value: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, Mapping):
        # One level only: context values such as request bodies nest arbitrarily deep.
        return {key: str(item) if isinstance(item, uuid.UUID) else item for key, item in value.items()}
    return value


class ForbiddenError(StructuredError):
    kind = ErrorKind.FORBIDDEN
    status_code = 403
    default_message = "Você não possui permissão para executar esta ação."
    default_action = "Verifique se você possui permissão para executar esta ação."
    default_location_code = "MODEL:AUTHORIZATION:CAN_REQUEST:FEATURE_NOT_FOUND"


class UnauthorizedError(StructuredError):
    kind = ErrorKind.UNAUTHORIZED
    status_code = 401
    default_message = "Usuário não autenticado."
    default_action = (
        "Verifique se você está autenticado com uma sessão ativa e tente novamente."
    )
    default_location_code = "CONTROLLER:SESSIONS:POST_HANDLER:DATA_MISMATCH"


class TooManyRequestsError(StructuredError):
    """Logged as a rate-limit alarm; never sent to the client."""

    kind = ErrorKind.TOO_MANY_REQUESTS
    status_code = 429
    default_message = "Você realizou muitas requisições recentemente."
    default_action = (
        "Tente novamente mais tarde ou contate o suporte caso acredite que isso seja um erro."
    )
    default_location_code = "CONTROLLER:SESSIONS:LOG_REQUEST:RATE_LIMIT_REACHED"
    wire_fields = BASE_WIRE_FIELDS + (("context", "context"),)

    def __init__(self, message: str | None = None, *, context: Mapping[str, Any] | None = None, **kwargs):
        self.context = dict(context or {})
        super().__init__(message, **kwargs)


class ValidationError(StructuredError):
    """Raised when input is missing a required field or has the wrong shape."""

    kind = ErrorKind.VALIDATION
    status_code = 400
    default_message = "Um erro de validação ocorreu."
    default_action = "Ajuste os dados enviados e tente novamente."
    default_location_code = "MODEL:VALIDATOR:VALIDATE:FINAL_SCHEMA"
    wire_fields = BASE_WIRE_FIELDS + (("key", "key"),)

    def __init__(self, message: str | None = None, *, key: str | None = None, **kwargs):
        self.key = key
        super().__init__(message, **kwargs)


class NotFoundError(StructuredError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    default_message = "Não foi possível encontrar este recurso no sistema."
    default_action = (
        "Verifique se o caminho (PATH) e o método (GET, POST, PUT, DELETE) estão corretos."
    )
    default_location_code = "CONTROLLER:ROUTER:NO_MATCH:NOT_FOUND"


class MethodNotAllowedError(StructuredError):
    kind = ErrorKind.METHOD_NOT_ALLOWED
    status_code = 405
    default_message = "Método não permitido para este recurso."
    default_action = "Verifique se o método HTTP enviado é válido para este recurso."
    default_location_code = "CONTROLLER:ROUTER:NO_MATCH:METHOD_NOT_ALLOWED"


class InternalServerError(StructuredError):
    kind = ErrorKind.INTERNAL_SERVER
    status_code = 500
    default_message = "Um erro interno não esperado aconteceu."
    default_action = 'Informe ao suporte o valor encontrado no campo "error_id".'
    default_location_code = "CONTROLLER:ROUTER:ON_ERROR:UNEXPECTED"
