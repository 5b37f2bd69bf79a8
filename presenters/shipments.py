"""Waybill, tracking status and waybill document rendering."""

from presenters.result import to_json
from shalom.models import DocumentLink, ShipmentStatus, Terminal, Waybill
from shipments.status import build_timeline, current_state

WAYBILL_SECTIONS = (
    "details",
    "shipping_status",
    "payment",
    "origin",
    "destination",
    "parties",
)


def format_api_boolean(
    value: bool | str | None,
    true_text: str,
    false_text: str,
    default_text: str = "Not specified",
) -> str:
    """Render a flag the API sends either as a bool or as "1"/"0"."""
    if value is True or value == "1":
        return true_text
    if value is False or value == "0":
        return false_text
    if value is None or not str(value).strip():
        return default_text
    return str(value)


def _or_na(value: object) -> str:
    return str(value) if value not in (None, "") else "N/A"


def _terminal(title: str, terminal: Terminal | None, missing: str) -> str:
    lines = [f"--- {title} ---"]
    if terminal is None:
        lines.append(missing)
    else:
        lines.append(f"Agency: {_or_na(terminal.name)} ({_or_na(terminal.abbreviation)})")
        lines.append(
            f"Location: {_or_na(terminal.department)}, "
            f"{_or_na(terminal.province)}, {_or_na(terminal.district)}"
        )
    return "\n".join(lines)


def _section(name: str, waybill: Waybill) -> str:
    if name == "details":
        return "\n".join([
            "--- Waybill Details ---",
            f"Order number: {_or_na(waybill.order_number)}",
            f"Order code: {_or_na(waybill.order_code)}",
            f"OSE ID: {_or_na(waybill.ose_id)}",
        ])
    if name == "shipping_status":
        return "\n".join([
            "--- Shipping Status ---",
            f"Issue date: {_or_na(waybill.issue_date)}",
            f"Estimated transfer date: {_or_na(waybill.transfer_date)}",
            f"Status: {format_api_boolean(waybill.delivered, 'Delivered', 'In transit / Pending')}",
            f"Estimated arrival: {_or_na(waybill.arrival_time)}",
            f"Delivery address: {_or_na(waybill.delivery_address)}",
            f"Declared content: {_or_na(waybill.content)}",
            f"Home delivery: {format_api_boolean(waybill.home_delivery, 'Yes', 'No')}",
            f"Air transport: {format_api_boolean(waybill.air, 'Yes (air)', 'No (ground)')}",
        ])
    if name == "payment":
        amount = f"S/ {waybill.amount}" if waybill.amount else "N/A"
        return "\n".join([
            "--- Payment ---",
            f"Payment type: {_or_na(waybill.payment_type)}",
            f"Payment state: {_or_na(waybill.payment_state)}",
            f"Amount: {amount}",
        ])
    if name == "origin":
        return _terminal("Origin", waybill.origin, "Origin information not available.")
    if name == "destination":
        return _terminal("Destination", waybill.destination, "Destination information not available.")
    if name == "parties":
        sender = waybill.sender.name if waybill.sender else None
        recipient = waybill.recipient.name if waybill.recipient else None
        return "\n".join([
            "--- Parties ---",
            f"Sender: {_or_na(sender)}",
            f"Recipient: {_or_na(recipient)}",
        ])
    raise ValueError(f"unknown waybill section: {name}")


def render_waybill_text(waybill: Waybill, sections: list[str] | None = None) -> str:
    """Render the requested waybill sections; all of them when none are given.

    Section names must come from WAYBILL_SECTIONS.
    """
    wanted = sections or list(WAYBILL_SECTIONS)
    blocks = [_section(name, waybill) for name in WAYBILL_SECTIONS if name in wanted]
    return "Shalom Shipment Information\n\n" + "\n\n".join(blocks)


def render_waybill_json(waybill: Waybill) -> str:
    """Waybill record as JSON, English field names."""
    return to_json(waybill.model_dump(mode="json"))


def render_status_json(ose_id: str, status: ShipmentStatus) -> str:
    """Current state, chronological timeline, delay info and the raw stages."""
    return to_json({
        "success": True,
        "ose_id": ose_id,
        "current_state": current_state(status),
        "timeline": [entry.model_dump(exclude_none=True) for entry in build_timeline(status)],
        "delay": status.delay,
        "stages": status.model_dump(mode="json", exclude={"delay"}),
    })


def render_document_json(link: DocumentLink) -> str:
    return to_json({
        "success": True,
        "message": link.message,
        "link": link.link,
    })
