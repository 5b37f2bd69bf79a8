"""Shalom lookup tools.

TOOL_REGISTRY maps tool names to async callables. invoke_tool() runs one
named request and always returns a ToolResult, including for unknown
tools and bad parameters.
"""

import inspect
from typing import Any, Awaitable, Callable

import structlog

from log_setup import configure_logging
from presenters.result import ToolResult
from tools.agencies import search_agencies
from tools.orders import find_payment_order
from tools.tariffs import calculate_pro_tariff, get_tariffs
from tools.tracking import find_waybill, get_waybill_document, track_shipment

configure_logging()

logger = structlog.get_logger()

TOOL_REGISTRY: dict[str, Callable[..., Awaitable[ToolResult]]] = {
    "search_agencies": search_agencies,
    "get_tariffs": get_tariffs,
    "calculate_pro_tariff": calculate_pro_tariff,
    "track_shipment": track_shipment,
    "find_waybill": find_waybill,
    "get_waybill_document": get_waybill_document,
    "find_payment_order": find_payment_order,
}


def resolve_tools(tool_names: list[str]) -> list[Callable[..., Awaitable[ToolResult]]]:
    """Resolve a list of tool name strings to callables, skipping unknown names."""
    tools = []
    for name in tool_names:
        fn = TOOL_REGISTRY.get(name)
        if fn is None:
            logger.warning("unknown_tool_name", tool_name=name)
            continue
        tools.append(fn)
    return tools


async def invoke_tool(name: str, **params: Any) -> ToolResult:
    """Run the tool called ``name`` with named ``params``.

    Returns:
        The tool's ToolResult, or an error ToolResult when the tool is
        unknown or the parameters do not fit its signature.
    """
    fn = TOOL_REGISTRY.get(name)
    if fn is None:
        logger.warning("unknown_tool_name", tool_name=name)
        return ToolResult.failure(
            f"Unknown tool '{name}'. Available tools: {', '.join(TOOL_REGISTRY)}."
        )
    try:
        inspect.signature(fn).bind(**params)
    except TypeError as e:
        logger.warning("invalid_tool_params", tool_name=name, error=str(e))
        return ToolResult.failure(f"Invalid parameters for tool '{name}': {e}")
    return await fn(**params)
