"""Factory for switching between the mock and the real Shalom API.

Uses a Protocol for type-safe, flexible gateway abstraction.
Controlled by the USE_MOCK_APIS environment variable.
"""

from typing import Protocol

import structlog

from shalom.models import Agency, DocumentLink, ShipmentStatus, TariffQuote, Waybill

logger = structlog.get_logger()


# --- Protocol (gateway interface) ---


class ShalomSource(Protocol):
    """Remote data source returning validated Shalom records.

    Every method raises a ShalomError subclass on failure.
    """

    async def fetch_agencies(self) -> list[Agency]:
        """Fetch the complete agency catalog."""
        ...

    async def fetch_waybill(self, number: str, code: str) -> Waybill:
        """Find a waybill by number and code."""
        ...

    async def fetch_status(self, ose_id: str) -> ShipmentStatus:
        """Fetch the tracking stages of a service order."""
        ...

    async def fetch_document_link(self, ose_id: str, carrier_id: str) -> DocumentLink:
        """Fetch the carrier waybill document link."""
        ...

    async def fetch_tariffs(self, origin: int, destination: int) -> TariffQuote:
        """Fetch the tariff between two agencies."""
        ...

    async def calculate_pro_tariff(
        self,
        origin: int,
        destination: int,
        width: str = "",
        height: str = "",
        length: str = "",
        weight: str = "",
    ) -> dict:
        """Quote with the Pro calculator (raw body)."""
        ...

    async def find_payment_order(self, number: str, code: str, ose_id: str = "") -> dict:
        """Look up an order on the payments site (raw body)."""
        ...


# --- Factory ---

_real_api = None


class APIFactory:
    """Factory for creating the Shalom gateway based on configuration."""

    @staticmethod
    def get_shalom_api() -> ShalomSource:
        """Get the Shalom gateway (mock or real).

        The real client is shared so its HTTP connection pool is reused
        across tool calls.
        """
        global _real_api
        from config import settings

        if settings.use_mock_apis:
            from shalom.mock import MockShalomAPI

            logger.debug("using_mock_shalom_api")
            return MockShalomAPI()

        if _real_api is None:
            from shalom.client import ShalomAPI

            logger.debug("using_real_shalom_api")
            _real_api = ShalomAPI()
        return _real_api
