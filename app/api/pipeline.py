"""Per-method request pipeline.

A pipeline is an ordered list of steps followed by one terminal handler:

    Pending -> Validated -> Handled
           +-> Rejected

Steps run synchronously in order and may raise ValidationError, which rejects
the request: later steps and the handler never run and the error propagates
to the registered exception handler. The handler builds the terminal error
response object; it is returned, not raised.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from app.api.context import RequestContext
from app.core.logging import StructuredLogger
from app.errors import StructuredError, ValidationError

logger = logging.getLogger(__name__)

Step = Callable[[RequestContext, StructuredLogger], None]
Handler = Callable[[RequestContext, StructuredLogger], Awaitable[StructuredError]]


class PipelineState(str, Enum):
    PENDING = "pending"
    VALIDATED = "validated"
    HANDLED = "handled"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class PipelineResult:
    state: PipelineState
    error: StructuredError


@dataclass(frozen=True, slots=True)
class Pipeline:
    steps: Sequence[Step]
    handler: Handler

    async def run(self, context: RequestContext, sink: StructuredLogger) -> PipelineResult:
        """
        Run every step, then the handler.

        Raises:
            ValidationError: If a step rejects the request.
        """
        try:
            for step in self.steps:
                step(context, sink)
        except ValidationError as exc:
            self._trace(context, PipelineState.REJECTED, exc.key)
            raise

        self._trace(context, PipelineState.VALIDATED)
        error = await self.handler(context, sink)
        self._trace(context, PipelineState.HANDLED)
        return PipelineResult(state=PipelineState.HANDLED, error=error)

    @staticmethod
    def _trace(context: RequestContext, state: PipelineState, key: str | None = None) -> None:
        logger.debug("%s %s -> %s (key=%s)", context.method, context.url, state.value, key)
