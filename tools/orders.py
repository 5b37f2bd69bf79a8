"""Payment order lookup tool."""

import structlog

from presenters.result import ToolResult
from presenters.tariffs import render_raw_json
from shalom.factory import APIFactory
from tools.boundary import tool_boundary

logger = structlog.get_logger()


@tool_boundary
async def find_payment_order(number: str, code: str, ose_id: str = "") -> ToolResult:
    """Find an order on the Shalom payments site by number and code.

    Args:
        number: Order number.
        code: Order code.
        ose_id: Service order ID (optional; sent empty when unknown).

    Returns:
        ToolResult with the payments service JSON response.
    """
    logger.info("tool_called", tool="find_payment_order", number=number)

    api = APIFactory.get_shalom_api()
    payload = await api.find_payment_order(number, code, ose_id)
    return ToolResult.ok(render_raw_json(payload))
