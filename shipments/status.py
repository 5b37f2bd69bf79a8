"""Derived shipment state and timeline from the tracking stages."""

from pydantic import BaseModel, Field

from shalom.models import ShipmentStatus

DELIVERED = "Delivered"
OUT_FOR_DELIVERY = "Out for delivery"
AT_DESTINATION = "At destination"
IN_TRANSIT = "In transit"
AT_ORIGIN = "At origin"
IN_PREPARATION = "In preparation"

REGISTERED = "Registered"


class TimelineEntry(BaseModel):
    """One reached stage of the shipment."""

    stage: str = Field(description="Human-readable stage label.")
    date: str | None = Field(default=None, description="When the stage was reached.")
    completed: bool = Field(description="Whether the stage is finished.")
    carrier: str | None = Field(default=None, description="Carrier ID (transit only).")
    carriers: list[str] | None = Field(default=None, description="All carrier IDs (transit only).")


def current_state(status: ShipmentStatus) -> str:
    """Single label for where the shipment is now; first matching rule wins."""
    if status.delivery is not None:
        return DELIVERED
    if status.dispatch is not None:
        return OUT_FOR_DELIVERY
    if status.destination is not None and status.destination.completed:
        return AT_DESTINATION
    if status.transit is not None and status.transit.completed:
        return IN_TRANSIT
    if status.origin is not None:
        return AT_ORIGIN
    return IN_PREPARATION


def build_timeline(status: ShipmentStatus) -> list[TimelineEntry]:
    """Stages present in ``status``, in chronological order."""
    timeline: list[TimelineEntry] = []

    if status.registered is not None:
        timeline.append(
            TimelineEntry(stage=REGISTERED, date=status.registered.date, completed=True)
        )
    if status.origin is not None:
        timeline.append(TimelineEntry(stage=AT_ORIGIN, date=status.origin.date, completed=True))
    if status.transit is not None:
        timeline.append(
            TimelineEntry(
                stage=IN_TRANSIT,
                date=status.transit.date,
                completed=bool(status.transit.completed),
                carrier=status.transit.carrier,
                carriers=list(status.transit.carriers),
            )
        )
    if status.destination is not None:
        timeline.append(
            TimelineEntry(
                stage=AT_DESTINATION,
                date=status.destination.date,
                completed=bool(status.destination.completed),
            )
        )
    if status.dispatch is not None:
        timeline.append(
            TimelineEntry(
                stage=OUT_FOR_DELIVERY,
                date=status.dispatch.date,
                completed=bool(status.dispatch.completed),
            )
        )
    if status.delivery is not None:
        timeline.append(TimelineEntry(stage=DELIVERED, date=status.delivery.date, completed=True))

    return timeline
