"""Failure types raised by the Shalom gateway and the lookup core.

Tools catch ShalomError at their boundary and turn it into an error
ToolResult, so none of these ever reach the caller as a crash.
"""

from typing import Any


class ShalomError(Exception):
    """Base class for every recoverable tool failure."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # Lookup stage that failed, set by chained lookups
        self.stage: str | None = None


class InputError(ShalomError):
    """Caller supplied unusable parameters (detected before any remote call)."""


class TransportError(ShalomError):
    """The remote call could not complete (network failure or non-2xx)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ApiError(ShalomError):
    """The call completed but the payload reported success=false."""


class PayloadValidationError(ShalomError):
    """The payload did not match the expected shape.

    ``payload`` keeps the raw decoded body for diagnostics; it is never
    part of the message.
    """

    def __init__(self, message: str, payload: Any = None):
        super().__init__(message)
        self.payload = payload


class ChainBrokenError(ShalomError):
    """A chained lookup could not obtain an intermediate identifier."""

    def __init__(self, stage: str, identifier: str):
        super().__init__(
            f"Could not obtain the {identifier} required to continue "
            f"(stage: {stage} lookup)."
        )
        self.stage = stage
        self.identifier = identifier
