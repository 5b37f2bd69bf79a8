"""Tests for the Shalom HTTP gateway."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from pydantic import ValidationError

from config import Settings
from shalom.client import ShalomAPI, describe_validation_error, form_fields
from shalom.errors import ApiError, PayloadValidationError, TransportError
from shalom.models import Agency, Waybill
from shalom.sample_data import (
    SAMPLE_AGENCIES,
    SAMPLE_DOCUMENT,
    SAMPLE_STATUS,
    SAMPLE_TARIFF,
    SAMPLE_WAYBILL,
    error_response,
    success_response,
)


def make_response(body=None, status_code=200, reason="OK", json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.reason_phrase = reason
    response.is_success = 200 <= status_code < 300
    response.text = "<html>" if json_error else ""
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.request = AsyncMock(return_value=make_response(success_response([])))
    return client


@pytest.fixture
def api(mock_client):
    shalom = ShalomAPI(config=Settings(shalom_api_url="https://api.test/web"))
    with patch.object(shalom, "_get_client", return_value=mock_client):
        yield shalom


@pytest.mark.asyncio
class TestFetchAgencies:
    async def test_parses_catalog(self, api, mock_client):
        mock_client.request.return_value = make_response(success_response(SAMPLE_AGENCIES))

        agencies = await api.fetch_agencies()

        assert len(agencies) == len(SAMPLE_AGENCIES)
        assert isinstance(agencies[0], Agency)
        assert agencies[0].terminal_id == 48
        assert agencies[0].opening_hours == "LUNES A SABADO - 8AM A 8PM"

    async def test_request_shape(self, api, mock_client):
        await api.fetch_agencies()

        args, kwargs = mock_client.request.call_args
        assert args == ("GET", "https://api.test/web/agencias/listar")
        assert kwargs["headers"]["Referer"] == "https://rastrea.shalom.pe/"
        assert kwargs["headers"]["Origin"] == "https://shalom.pe"

    async def test_non_2xx_is_transport_error(self, api, mock_client):
        mock_client.request.return_value = make_response(
            status_code=503, reason="Service Unavailable"
        )

        with pytest.raises(TransportError) as exc_info:
            await api.fetch_agencies()

        assert exc_info.value.status_code == 503
        assert "503 Service Unavailable" in exc_info.value.message
        assert "(agencies)" in exc_info.value.message

    async def test_network_failure_is_transport_error(self, api, mock_client):
        mock_client.request.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(TransportError) as exc_info:
            await api.fetch_agencies()

        assert exc_info.value.status_code is None
        assert "connection refused" in exc_info.value.message

    async def test_success_false_is_api_error(self, api, mock_client):
        mock_client.request.return_value = make_response(error_response("Servicio en mantenimiento"))

        with pytest.raises(ApiError, match="Servicio en mantenimiento"):
            await api.fetch_agencies()

    async def test_success_false_without_message(self, api, mock_client):
        mock_client.request.return_value = make_response({"success": False, "message": None})

        with pytest.raises(ApiError, match="unsuccessful response"):
            await api.fetch_agencies()

    async def test_missing_envelope_field(self, api, mock_client):
        mock_client.request.return_value = make_response({"data": []})

        with pytest.raises(PayloadValidationError, match="field 'success'"):
            await api.fetch_agencies()

    async def test_wrong_data_shape_names_field(self, api, mock_client):
        body = success_response([{"nombre": "SIN ID"}])
        mock_client.request.return_value = make_response(body)

        with pytest.raises(PayloadValidationError) as exc_info:
            await api.fetch_agencies()

        assert "data.0.ter_id" in exc_info.value.message
        assert exc_info.value.payload == body

    async def test_body_not_json(self, api, mock_client):
        mock_client.request.return_value = make_response(json_error=ValueError("Expecting value"))

        with pytest.raises(PayloadValidationError, match="not JSON"):
            await api.fetch_agencies()


@pytest.mark.asyncio
class TestTrackingEndpoints:
    async def test_fetch_waybill_sends_form_fields(self, api, mock_client):
        mock_client.request.return_value = make_response(success_response(SAMPLE_WAYBILL))

        waybill = await api.fetch_waybill("45751322", "M7P7")

        assert isinstance(waybill, Waybill)
        assert waybill.ose_id == 49229631
        assert waybill.origin.abbreviation == "LOL"
        assert waybill.sender.name == "COMERCIAL ANDINA SAC"
        args, kwargs = mock_client.request.call_args
        assert args == ("POST", "https://api.test/web/rastrea/buscar")
        assert kwargs["files"] == {
            "numero": (None, "45751322"),
            "codigo": (None, "M7P7"),
            "ose_id": (None, ""),
        }
        assert kwargs["headers"]["Referrer-Policy"] == "strict-origin-when-cross-origin"

    async def test_fetch_waybill_bad_ose_id(self, api, mock_client):
        body = success_response({**SAMPLE_WAYBILL, "ose_id": {"nested": True}})
        mock_client.request.return_value = make_response(body)

        with pytest.raises(PayloadValidationError, match="data.ose_id"):
            await api.fetch_waybill("45751322", "M7P7")

    async def test_fetch_status(self, api, mock_client):
        mock_client.request.return_value = make_response(success_response(SAMPLE_STATUS))

        status = await api.fetch_status("49229631")

        assert status.transit.carrier == "8812"
        assert status.delivery is None
        _, kwargs = mock_client.request.call_args
        assert kwargs["files"] == {"ose_id": (None, "49229631")}

    async def test_fetch_document_link_keeps_message(self, api, mock_client):
        mock_client.request.return_value = make_response(
            success_response(SAMPLE_DOCUMENT, "Guía generada")
        )

        link = await api.fetch_document_link("49229631", "8812")

        assert link.link == SAMPLE_DOCUMENT["enlace"]
        assert link.message == "Guía generada"
        _, kwargs = mock_client.request.call_args
        assert kwargs["files"]["cap_id"] == (None, "8812")


@pytest.mark.asyncio
class TestTariffAndPaymentEndpoints:
    async def test_fetch_tariffs(self, api, mock_client):
        mock_client.request.return_value = make_response(success_response(SAMPLE_TARIFF))

        quote = await api.fetch_tariffs(356, 48)

        assert quote.tariff.package_m == 18.0
        assert quote.lead_time == "2 días"
        _, kwargs = mock_client.request.call_args
        assert kwargs["files"] == {"origin": (None, "356"), "destiny": (None, "48")}

    async def test_fetch_tariffs_missing_size(self, api, mock_client):
        tariff = dict(SAMPLE_TARIFF["tariff"])
        del tariff["cajapaquetel"]
        mock_client.request.return_value = make_response(
            success_response({**SAMPLE_TARIFF, "tariff": tariff})
        )

        with pytest.raises(PayloadValidationError, match="data.tariff.cajapaquetel"):
            await api.fetch_tariffs(356, 48)

    async def test_calculate_pro_tariff_passes_body_through(self, api, mock_client):
        body = {"success": True, "price": 22.5}
        mock_client.request.return_value = make_response(body)

        result = await api.calculate_pro_tariff(20, 17, weight="2")

        assert result == body
        args, kwargs = mock_client.request.call_args
        assert args == ("POST", "https://pro.shalom.pe/envia_ya/tariff/calculate")
        assert kwargs["json"]["destiny"] == 17
        assert kwargs["json"]["weight"] == "2"
        assert kwargs["headers"]["Accept"] == "application/json"

    async def test_find_payment_order_passes_body_through(self, api, mock_client):
        body = error_response("Orden no encontrada")
        mock_client.request.return_value = make_response(body)

        result = await api.find_payment_order("1", "X")

        assert result == body
        args, kwargs = mock_client.request.call_args
        assert args[1].endswith("/pagalo/buscar")
        assert kwargs["headers"]["Referer"] == "https://pagalo.shalom.pe/"

    async def test_passthrough_non_2xx_still_raises(self, api, mock_client):
        mock_client.request.return_value = make_response(status_code=500, reason="Server Error")

        with pytest.raises(TransportError):
            await api.find_payment_order("1", "X")


@pytest.mark.asyncio
class TestClientLifecycle:
    async def test_client_created_lazily_and_closed(self):
        shalom = ShalomAPI()
        assert shalom._client is None

        client = shalom._get_client()
        assert isinstance(client, httpx.AsyncClient)
        assert shalom._get_client() is client

        await shalom.aclose()
        assert shalom._client is None

    async def test_aclose_without_client(self):
        await ShalomAPI().aclose()


class TestHelpers:
    def test_form_fields_stringifies(self):
        assert form_fields(origin=356, code="M7P7") == {
            "origin": (None, "356"),
            "code": (None, "M7P7"),
        }

    def test_describe_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Waybill.model_validate({"origen": "LIMA"})

        text = describe_validation_error(exc_info.value, prefix="data")
        assert text.startswith("field 'data.origen'")
