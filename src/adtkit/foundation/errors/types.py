"""Structured description of a fault captured by a recoverable computation.

Uses Pydantic for validation/serialization so a captured fault can be logged or shipped
as plain data without holding on to the exception object.
"""

from __future__ import annotations

import traceback
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, computed_field

from .errors import ErrorCode, classify_exception

JsonDict = dict[str, Any]


class FaultTrace(BaseModel):
    """Immutable, serializable snapshot of a captured exception."""

    model_config = ConfigDict(
        frozen=True, str_strip_whitespace=True, extra="forbid",
        revalidate_instances="never",
        json_schema_extra={"title": "Fault Trace", "description": "Exception captured as data by Try"},
    )

    exc_type: Annotated[str, Field(min_length=1)]
    message: str = ""
    code: ErrorCode = ErrorCode.CAPTURED_FAULT
    details: str | None = Field(default=None, repr=False)  # Often verbose, hide from repr

    @computed_field
    @property
    def recoverable(self) -> bool:
        """Whether the fault is an ordinary Exception rather than an interpreter-level signal."""
        return self.exc_type not in _FATAL_TYPES

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_details: bool = True) -> FaultTrace:
        """Build a trace from exc, formatting its traceback when include_details is set."""
        details = "".join(traceback.format_exception(exc)) if include_details else None
        return cls.model_construct(
            exc_type=type(exc).__qualname__,
            message=str(exc),
            code=classify_exception(exc),
            details=details,
        )

    def format(self, *, include_details: bool = False) -> str:
        """Format trace as human-readable string."""
        head = f"{self.exc_type}: {self.message} [{self.code}]" if self.message else f"{self.exc_type} [{self.code}]"
        if include_details and self.details:
            return f"{head}\nDetails:\n{self.details}"
        return head

    __str__ = format


_FATAL_TYPES = frozenset({"KeyboardInterrupt", "SystemExit", "GeneratorExit"})

_FaultTraceAdapter: TypeAdapter[FaultTrace] = TypeAdapter(FaultTrace)


def validate_trace(data: JsonDict) -> FaultTrace:
    """Validate dict as FaultTrace (use when validation is needed)."""
    return _FaultTraceAdapter.validate_python(data)
