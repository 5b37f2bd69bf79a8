"""Shalom web API client.

Wraps the public endpoints behind rastrea.shalom.pe, pagalo.shalom.pe and
pro.shalom.pe. Each fetch method performs one HTTP call, checks the
``{success, message, data}`` envelope and validates ``data`` against the
expected record type. Failures are raised as ShalomError subclasses.
"""

from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from config import HeaderProfile, Settings, settings as default_settings
from shalom.errors import ApiError, PayloadValidationError, TransportError
from shalom.models import (
    Agency,
    ApiEnvelope,
    DocumentLink,
    ShipmentStatus,
    TariffQuote,
    Waybill,
)

logger = structlog.get_logger()

AGENCY_LIST = TypeAdapter(list[Agency])
WAYBILL = TypeAdapter(Waybill)
SHIPMENT_STATUS = TypeAdapter(ShipmentStatus)
DOCUMENT_LINK = TypeAdapter(DocumentLink)
TARIFF_QUOTE = TypeAdapter(TariffQuote)

REFERRER_POLICY = {"Referrer-Policy": "strict-origin-when-cross-origin"}


def describe_validation_error(exc: ValidationError, prefix: str = "") -> str:
    """Summarise a pydantic error as ``field 'a.b' reason`` clauses."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in (prefix, *err["loc"]) if p != "")
        parts.append(f"field '{loc or '<root>'}' {err['msg'].lower()}")
    return "; ".join(parts)


def form_fields(**fields: Any) -> dict[str, tuple[None, str]]:
    """Encode plain values as multipart/form-data parts."""
    return {name: (None, str(value)) for name, value in fields.items()}


def unwrap_envelope(endpoint: str, payload: Any) -> ApiEnvelope:
    """Validate the outer envelope and reject success=false payloads."""
    try:
        envelope = ApiEnvelope.model_validate(payload)
    except ValidationError as e:
        raise PayloadValidationError(
            f"Unexpected response from the Shalom API ({endpoint}): "
            f"{describe_validation_error(e)}",
            payload=payload,
        ) from e
    if not envelope.success:
        logger.info("shalom_api_unsuccessful", endpoint=endpoint, message=envelope.message)
        raise ApiError(
            f"Shalom API error ({endpoint}): "
            f"{envelope.message or 'unsuccessful response'}"
        )
    return envelope


def parse_payload(endpoint: str, payload: Any, adapter: TypeAdapter) -> tuple[Any, ApiEnvelope]:
    """Unwrap the envelope and validate its ``data`` with ``adapter``.

    Returns:
        Tuple of (validated record, envelope).
    """
    envelope = unwrap_envelope(endpoint, payload)
    try:
        return adapter.validate_python(envelope.data), envelope
    except ValidationError as e:
        logger.warning("shalom_payload_invalid", endpoint=endpoint, errors=e.error_count())
        raise PayloadValidationError(
            f"Could not process the Shalom response ({endpoint}): "
            f"{describe_validation_error(e, prefix='data')}",
            payload=payload,
        ) from e


class ShalomAPI:
    """Real Shalom gateway over a lazily created httpx.AsyncClient."""

    def __init__(
        self,
        config: Settings | None = None,
        headers: HeaderProfile | None = None,
    ):
        self._settings = config or default_settings
        self._headers = headers or HeaderProfile.from_settings(self._settings)
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx async client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.request_timeout)
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP client, if one was created."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # --- Transport ---

    async def _request(self, endpoint: str, method: str, url: str, **kwargs: Any) -> Any:
        """Perform one call and return the decoded JSON body.

        Raises:
            TransportError: network failure or non-2xx status.
            PayloadValidationError: body is not JSON.
        """
        client = self._get_client()
        logger.debug("shalom_request", endpoint=endpoint, method=method)
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("shalom_request_failed", endpoint=endpoint, error=str(e))
            raise TransportError(
                f"Could not reach the Shalom service ({endpoint}): {e}"
            ) from e

        if not response.is_success:
            logger.warning(
                "shalom_http_error",
                endpoint=endpoint,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
            raise TransportError(
                f"Error contacting the Shalom API ({endpoint}): "
                f"{response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise PayloadValidationError(
                f"The Shalom API ({endpoint}) returned a body that is not JSON.",
                payload=response.text,
            ) from e

    # --- Endpoints ---

    async def fetch_agencies(self) -> list[Agency]:
        """Fetch the complete agency catalog."""
        payload = await self._request(
            "agencies",
            "GET",
            f"{self._settings.shalom_api_url}/agencias/listar",
            headers=self._headers.build(self._settings.tracking_referer),
        )
        agencies, _ = parse_payload("agencies", payload, AGENCY_LIST)
        logger.info("shalom_agencies_fetched", count=len(agencies))
        return agencies

    async def fetch_waybill(self, number: str, code: str) -> Waybill:
        """Find a waybill by its number and alphanumeric code."""
        payload = await self._request(
            "waybill",
            "POST",
            f"{self._settings.shalom_api_url}/rastrea/buscar",
            headers=self._headers.build(self._settings.tracking_referer, **REFERRER_POLICY),
            files=form_fields(numero=number, codigo=code, ose_id=""),
        )
        waybill, _ = parse_payload("waybill", payload, WAYBILL)
        return waybill

    async def fetch_status(self, ose_id: str) -> ShipmentStatus:
        """Fetch the tracking stages of a service order."""
        payload = await self._request(
            "status",
            "POST",
            f"{self._settings.shalom_api_url}/rastrea/estados",
            headers=self._headers.build(),
            files=form_fields(ose_id=ose_id),
        )
        status, _ = parse_payload("status", payload, SHIPMENT_STATUS)
        return status

    async def fetch_document_link(self, ose_id: str, carrier_id: str) -> DocumentLink:
        """Fetch the carrier waybill document link for an order and carrier."""
        payload = await self._request(
            "document",
            "POST",
            f"{self._settings.shalom_api_url}/rastrea/grt",
            headers=self._headers.build(self._settings.tracking_referer, **REFERRER_POLICY),
            files=form_fields(ose_id=ose_id, cap_id=carrier_id),
        )
        link, envelope = parse_payload("document", payload, DOCUMENT_LINK)
        return link.model_copy(update={"message": envelope.message or ""})

    async def fetch_tariffs(self, origin: int, destination: int) -> TariffQuote:
        """Fetch the tariff between two agencies (by terminal ID)."""
        payload = await self._request(
            "tariffs",
            "POST",
            f"{self._settings.shalom_api_url}/tarifa/mostrar",
            headers=self._headers.build(),
            files=form_fields(origin=origin, destiny=destination),
        )
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
        """Ask the Shalom Pro calculator for a quote; the body is passed through."""
        return await self._request(
            "pro_tariff",
            "POST",
            f"{self._settings.shalom_pro_url}/envia_ya/tariff/calculate",
            headers=self._headers.build(
                self._settings.pro_referer,
                Accept="application/json",
            ),
            json={
                "origin": origin,
                "destiny": destination,
                "width": width,
                "height": height,
                "length": length,
                "weight": weight,
            },
        )

    async def find_payment_order(self, number: str, code: str, ose_id: str = "") -> dict:
        """Look up an order on the payments site; the body is passed through."""
        return await self._request(
            "payment_order",
            "POST",
            f"{self._settings.shalom_payments_url}/pagalo/buscar",
            headers=self._headers.build(self._settings.payments_referer),
            files=form_fields(numero=number, codigo=code, ose_id=ose_id),
        )
