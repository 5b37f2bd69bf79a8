"""Carrier waybill document lookup.

The document endpoint needs two identifiers the caller does not have:

    (number, code) --waybill--> ose_id --status--> carrier_id --document--> link

Each lookup depends on the previous one, so the calls are strictly
sequential. Any failure ends the chain; nothing is retried and no partial
result is returned.
"""

from contextlib import contextmanager

import structlog

from shalom.errors import ChainBrokenError, ShalomError
from shalom.factory import ShalomSource
from shalom.models import DocumentLink

logger = structlog.get_logger()


def has_identifier(value: object) -> bool:
    """None and blank strings are missing; 0 is a real identifier."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


@contextmanager
def _stage(name: str):
    """Tag any ShalomError raised inside with the lookup stage."""
    try:
        yield
    except ShalomError as e:
        if e.stage is None:
            e.stage = name
        logger.warning("waybill_document_stage_failed", stage=name, error=e.message)
        raise


async def resolve_waybill_document(
    source: ShalomSource,
    number: str,
    code: str,
) -> DocumentLink:
    """Resolve the carrier waybill document link for a waybill.

    Args:
        source: Shalom gateway.
        number: Waybill (order) number.
        code: Alphanumeric waybill code.

    Returns:
        DocumentLink from the document lookup.

    Raises:
        ChainBrokenError: a lookup succeeded without the identifier the next
            one needs.
        ShalomError: any gateway failure, unchanged apart from ``stage``.
    """
    with _stage("waybill"):
        waybill = await source.fetch_waybill(number, code)
    if not has_identifier(waybill.ose_id):
        logger.warning("chain_broken", stage="waybill", identifier="ose_id", number=number)
        raise ChainBrokenError("waybill", "ose_id")
    ose_id = str(waybill.ose_id)

    with _stage("status"):
        status = await source.fetch_status(ose_id)
    carrier_id = status.transit.carrier if status.transit is not None else None
    if not has_identifier(carrier_id):
        logger.warning("chain_broken", stage="status", identifier="carrier_id", ose_id=ose_id)
        raise ChainBrokenError("status", "carrier_id")

    with _stage("document"):
        link = await source.fetch_document_link(ose_id, carrier_id)

    logger.info("waybill_document_resolved", ose_id=ose_id, carrier_id=carrier_id)
    return link
