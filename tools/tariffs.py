"""Tariff quoting tools."""

import structlog

from presenters.result import ToolResult
from presenters.tariffs import render_raw_json, render_tariffs_json
from shalom.factory import APIFactory
from tools.boundary import tool_boundary

logger = structlog.get_logger()


@tool_boundary
async def get_tariffs(origin: int, destination: int) -> ToolResult:
    """Get shipping tariffs between an origin and a destination agency.

    Args:
        origin: TER ID of the origin agency, e.g. 356.
        destination: TER ID of the destination agency, e.g. 48.

    Returns:
        ToolResult with JSON: lead time and price per package size.
    """
    logger.info("tool_called", tool="get_tariffs", origin=origin, destination=destination)

    api = APIFactory.get_shalom_api()
    quote = await api.fetch_tariffs(origin, destination)
    return ToolResult.ok(render_tariffs_json(quote))


@tool_boundary
async def calculate_pro_tariff(
    origin: int,
    destination: int,
    width: str = "",
    height: str = "",
    length: str = "",
    weight: str = "",
) -> ToolResult:
    """Quote a shipment with the Shalom Pro calculator, optionally with dimensions.

    Args:
        origin: Origin agency ID, e.g. 20.
        destination: Destination agency ID, e.g. 17.
        width: Width (optional).
        height: Height (optional).
        length: Length (optional).
        weight: Weight (optional).

    Returns:
        ToolResult with the calculator's JSON response.
    """
    logger.info("tool_called", tool="calculate_pro_tariff", origin=origin, destination=destination)

    api = APIFactory.get_shalom_api()
    payload = await api.calculate_pro_tariff(
        origin, destination, width=width, height=height, length=length, weight=weight
    )
    return ToolResult.ok(render_raw_json(payload))
