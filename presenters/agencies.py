"""Agency search rendering.

Two variants over the same ranked list: readable prose for conversational
callers, and raw JSON records for callers that post-process the data.
"""

from agencies.ranking import RankedResult, ScoredAgency
from presenters.result import to_json

NO_RESULTS = "No agencies match the search criteria."


def _agency_block(index: int, scored: ScoredAgency, requested_fields: tuple[str, ...]) -> str:
    agency = scored.agency
    lines = [
        f"--- Agency {index} ---",
        f"Name: {agency.name}",
        f"ID: {agency.terminal_id}",
        f"Location: {agency.department or 'N/A'} - {agency.province or 'N/A'} - {agency.zone or 'N/A'}",
        f"Address: {agency.address or 'N/A'}",
    ]
    if "coordinates" in requested_fields:
        lines.append(f"Coordinates: Lat {agency.latitude}, Lon {agency.longitude}")
    if "hours" in requested_fields:
        lines.append(f"Opening hours: {agency.opening_hours or 'Not specified'}")
        if agency.sunday_hours:
            lines.append(f"Sunday hours: {agency.sunday_hours}")
    if "status" in requested_fields:
        lines.append(f"Agency status: {agency.status or 'Not available'}")
    return "\n".join(lines)


def render_agencies_text(
    result: RankedResult,
    requested_fields: tuple[str, ...],
    max_results: int = 3,
    overflow_preview: int = 5,
) -> str:
    """Describe the first ``max_results`` agencies in full and list the rest.

    Args:
        result: Ranked search outcome.
        requested_fields: Which optional fields to show (coordinates, hours, status).
        max_results: How many agencies get a full block.
        overflow_preview: How many of the remaining agencies are named.

    Returns:
        Prose answer; a fixed sentence when nothing matched.
    """
    total = result.total
    if total == 0:
        return NO_RESULTS

    noun = "agency" if total == 1 else "agencies"
    ranked = " (sorted by relevance)" if result.keyword_ranked else ""
    text = f"Found {total} {noun}{ranked}.\n"
    if total <= max_results:
        text += f"Showing {total}:\n\n"
    else:
        text += f"Showing the {max_results} most relevant:\n\n"

    blocks = [
        _agency_block(i, scored, requested_fields)
        for i, scored in enumerate(result.detailed(max_results), start=1)
    ]
    text += "\n\n".join(blocks) + "\n\n"

    if total > max_results:
        preview, hidden = result.overflow(max_results, overflow_preview)
        remaining = total - max_results
        if remaining == 1:
            text += "There is 1 more agency nearby:\n"
        else:
            text += f"There are {remaining} more agencies nearby:\n"
        text += " | ".join(f"{s.agency.name} (ID: {s.agency.terminal_id})" for s in preview)
        if hidden:
            text += f" | ...and {hidden} more."
        text += "\n\nTo see more details, refine your search or contact customer service."

    return text.strip()


def render_agencies_json(result: RankedResult) -> str:
    """Raw ranked records, scores included."""
    return to_json({
        "total": result.total,
        "ranked_by_relevance": result.keyword_ranked,
        "agencies": [
            {**s.agency.model_dump(mode="json"), "score": s.score}
            for s in result.agencies
        ],
    })
