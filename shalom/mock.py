"""Mock Shalom API for demo/development.

Serves the payloads in sample_data.py through the same envelope checks and
pydantic validation as the real client, with a short simulated latency.
Used when USE_MOCK_APIS=true in config.
"""

import asyncio
import random

import structlog

from shalom.client import (
    AGENCY_LIST,
    DOCUMENT_LINK,
    SHIPMENT_STATUS,
    TARIFF_QUOTE,
    WAYBILL,
    parse_payload,
)
from shalom.models import Agency, DocumentLink, ShipmentStatus, TariffQuote, Waybill
from shalom.sample_data import (
    SAMPLE_AGENCIES,
    SAMPLE_DOCUMENT,
    SAMPLE_STATUS,
    SAMPLE_TARIFF,
    SAMPLE_WAYBILL,
    error_response,
    success_response,
)

logger = structlog.get_logger()


async def _latency() -> None:
    await asyncio.sleep(random.uniform(0.01, 0.05))


class MockShalomAPI:
    """Mock Shalom gateway backed by sample_data."""

    async def fetch_agencies(self) -> list[Agency]:
        await _latency()
        logger.info("mock_shalom_agencies", count=len(SAMPLE_AGENCIES), api="mock")
        agencies, _ = parse_payload(
            "agencies", success_response(SAMPLE_AGENCIES, "Lista de agencias."), AGENCY_LIST
        )
        return agencies

    async def fetch_waybill(self, number: str, code: str) -> Waybill:
        await _latency()
        logger.info("mock_shalom_waybill", number=number, code=code, api="mock")
        if (number, code.upper()) == (
            SAMPLE_WAYBILL["numero_orden"],
            SAMPLE_WAYBILL["codigo_orden"],
        ):
            payload = success_response(SAMPLE_WAYBILL, "Guía encontrada")
        else:
            payload = error_response("No se encontró la guía")
        waybill, _ = parse_payload("waybill", payload, WAYBILL)
        return waybill

    async def fetch_status(self, ose_id: str) -> ShipmentStatus:
        await _latency()
        logger.info("mock_shalom_status", ose_id=ose_id, api="mock")
        if str(ose_id) == str(SAMPLE_WAYBILL["ose_id"]):
            payload = success_response(SAMPLE_STATUS, "Estados de la orden")
        else:
            payload = error_response("Orden de servicio no encontrada")
        status, _ = parse_payload("status", payload, SHIPMENT_STATUS)
        return status

    async def fetch_document_link(self, ose_id: str, carrier_id: str) -> DocumentLink:
        await _latency()
        logger.info("mock_shalom_document", ose_id=ose_id, carrier_id=carrier_id, api="mock")
        if str(carrier_id) in SAMPLE_STATUS["transito"]["cargueros"]:
            payload = success_response(SAMPLE_DOCUMENT, "Guía de remisión transportista")
        else:
            payload = error_response("No existe guía de remisión para el carguero")
        link, envelope = parse_payload("document", payload, DOCUMENT_LINK)
        return link.model_copy(update={"message": envelope.message or ""})

    async def fetch_tariffs(self, origin: int, destination: int) -> TariffQuote:
        await _latency()
        logger.info("mock_shalom_tariffs", origin=origin, destination=destination, api="mock")
        known = {a["ter_id"] for a in SAMPLE_AGENCIES}
        if origin in known and destination in known:
            payload = success_response(SAMPLE_TARIFF, "Tarifa")
        else:
            payload = error_response("No existe tarifa entre las agencias")
        quote, _ = parse_payload("tariffs", payload, TARIFF_QUOTE)
        return quote

    async def calculate_pro_tariff(
        self,
        origin: int,
        destination: int,
        width: str = "",
        height: str = "",
        length: str = "",
        weight: str = "",
    ) -> dict:
        await _latency()
        logger.info("mock_shalom_pro_tariff", origin=origin, destination=destination, api="mock")
        return {
            "success": True,
            "origin": origin,
            "destiny": destination,
            "dimensions": {"width": width, "height": height, "length": length, "weight": weight},
            "price": SAMPLE_TARIFF["tariff"]["cajapaquetem"],
            "lead_time": SAMPLE_TARIFF["lead_time"],
        }

    async def find_payment_order(self, number: str, code: str, ose_id: str = "") -> dict:
        await _latency()
        logger.info("mock_shalom_payment_order", number=number, code=code, api="mock")
        if number != SAMPLE_WAYBILL["numero_orden"]:
            return error_response("Orden no encontrada")
        return success_response(
            {
                "ose_id": SAMPLE_WAYBILL["ose_id"],
                "numero": number,
                "codigo": code,
                "monto": SAMPLE_WAYBILL["monto"],
                "estado_pago": SAMPLE_WAYBILL["estado_pago"],
            },
            "Orden encontrada",
        )
