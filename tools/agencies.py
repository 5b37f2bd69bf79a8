"""Agency search tool."""

import structlog

from agencies.ranking import SearchCriteria, search
from config import settings
from presenters.agencies import render_agencies_json, render_agencies_text
from presenters.result import ToolResult
from shalom.errors import InputError
from shalom.factory import APIFactory
from tools.boundary import tool_boundary

logger = structlog.get_logger()

OUTPUT_FORMATS = ("text", "json")


@tool_boundary
async def search_agencies(
    requested_fields: list[str],
    department: str | None = None,
    province: str | None = None,
    district: str | None = None,
    keywords: str | None = None,
    max_results: int | None = None,
    output: str = "text",
) -> ToolResult:
    """Find Shalom agencies by location and/or free-text keywords.

    At least one of department, province, district or keywords is required.
    Also returns each agency's terminal ID (TER ID), used for tariff quotes.

    Args:
        requested_fields: Extra data to include: 'coordinates', 'hours', 'status'.
        department: Department name, e.g. 'AMAZONAS'.
        province: Province name, e.g. 'CHACHAPOYAS', 'LIMA'.
        district: District (agency zone), e.g. 'TAMBO'.
        keywords: Free text matched against name, zone, address, province,
            department and status; results are sorted by relevance.
        max_results: How many agencies to describe in full (default 3).
        output: 'text' for a readable answer, 'json' for raw records.

    Returns:
        ToolResult with the matching agencies.
    """
    logger.info(
        "tool_called",
        tool="search_agencies",
        department=department,
        province=province,
        district=district,
        keywords=keywords,
    )

    # Validate before touching the network.
    criteria = SearchCriteria(
        requested_fields=() if requested_fields is None else requested_fields,
        department=department,
        province=province,
        zone=district,
        keywords=keywords,
        max_results=settings.agency_result_cap if max_results is None else max_results,
    )
    if output not in OUTPUT_FORMATS:
        raise InputError(f"Unknown output format '{output}'. Use 'text' or 'json'.")

    api = APIFactory.get_shalom_api()
    agencies = await api.fetch_agencies()
    result = search(criteria, agencies)

    if output == "json":
        return ToolResult.ok(render_agencies_json(result))
    return ToolResult.ok(
        render_agencies_text(
            result,
            criteria.requested_fields,
            max_results=criteria.max_results,
            overflow_preview=settings.agency_overflow_preview,
        )
    )
