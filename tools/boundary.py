"""Error boundary shared by every tool."""

import functools
from typing import Awaitable, Callable

import structlog

from presenters.result import ToolResult
from shalom.errors import ChainBrokenError, ShalomError

logger = structlog.get_logger()


def failure_message(error: ShalomError) -> str:
    """Caller-facing text for ``error``, naming the lookup stage when one failed."""
    # ChainBrokenError already names its stage.
    if error.stage is None or isinstance(error, ChainBrokenError):
        return error.message
    return f"{error.stage.capitalize()} lookup failed: {error.message}"


def tool_boundary(fn: Callable[..., Awaitable[ToolResult]]) -> Callable[..., Awaitable[ToolResult]]:
    """Turn any failure raised by ``fn`` into an error ToolResult.

    ShalomError carries a caller-facing message; anything else is logged
    with its traceback and reported generically.
    """

    @functools.wraps(fn)
    async def wrapper(*args, **kwargs) -> ToolResult:
        try:
            return await fn(*args, **kwargs)
        except ShalomError as e:
            logger.warning(
                "tool_failed",
                tool=fn.__name__,
                error_type=type(e).__name__,
                stage=e.stage,
                error=e.message,
            )
            return ToolResult.failure(failure_message(e))
        except Exception as e:
            logger.exception("tool_crashed", tool=fn.__name__)
            return ToolResult.failure(f"Unexpected error in {fn.__name__}: {e}")

    return wrapper
