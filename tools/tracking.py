"""Shipment tracking tools: status, waybill lookup and waybill document.

All read-only. Each returns a ToolResult; gateway failures become error
results through tool_boundary.
"""

import structlog

from presenters.result import ToolResult
from presenters.shipments import (
    WAYBILL_SECTIONS,
    render_document_json,
    render_status_json,
    render_waybill_json,
    render_waybill_text,
)
from shalom.errors import InputError
from shalom.factory import APIFactory
from shipments.orchestrator import resolve_waybill_document
from tools.boundary import tool_boundary

logger = structlog.get_logger()


@tool_boundary
async def track_shipment(ose_id: str) -> ToolResult:
    """Track a shipment by its service order number (OSE ID).

    Args:
        ose_id: Service order number, e.g. '49229631'.

    Returns:
        ToolResult with JSON: current state, timeline, delay info.
    """
    logger.info("tool_called", tool="track_shipment", ose_id=ose_id)

    api = APIFactory.get_shalom_api()
    status = await api.fetch_status(ose_id)
    return ToolResult.ok(render_status_json(ose_id, status))


@tool_boundary
async def find_waybill(
    number: str,
    code: str,
    sections: list[str] | None = None,
    output: str = "text",
) -> ToolResult:
    """Find detailed shipment information from a waybill number and code.

    Args:
        number: Waybill or order number, e.g. '45751322'.
        code: Alphanumeric waybill code, e.g. 'M7P7'.
        sections: Parts to include: details, shipping_status, payment,
            origin, destination, parties. Empty or omitted means all.
        output: 'text' for a readable answer, 'json' for the raw record.

    Returns:
        ToolResult with the waybill information.
    """
    logger.info("tool_called", tool="find_waybill", number=number, sections=sections)

    invalid = [s for s in sections or [] if s not in WAYBILL_SECTIONS]
    if invalid:
        raise InputError(
            f"Invalid section(s): {', '.join(invalid)}. "
            f"Valid sections are: {', '.join(WAYBILL_SECTIONS)}."
        )

    if output not in ("text", "json"):
        raise InputError(f"Unknown output format '{output}'. Use 'text' or 'json'.")

    api = APIFactory.get_shalom_api()
    waybill = await api.fetch_waybill(number, code)
    if output == "json":
        return ToolResult.ok(render_waybill_json(waybill))
    return ToolResult.ok(render_waybill_text(waybill, sections))


@tool_boundary
async def get_waybill_document(number: str, code: str) -> ToolResult:
    """Get the link to the carrier waybill document from a waybill number and code.

    Looks up the waybill, then its tracking status to find the carrier,
    then the document itself.

    Args:
        number: Waybill or order number, e.g. '45751322'.
        code: Alphanumeric waybill code, e.g. 'M7P7'.

    Returns:
        ToolResult with JSON containing the document link.
    """
    logger.info("tool_called", tool="get_waybill_document", number=number)

    api = APIFactory.get_shalom_api()
    link = await resolve_waybill_document(api, number, code)
    return ToolResult.ok(render_document_json(link))
