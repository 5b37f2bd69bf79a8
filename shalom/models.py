"""Typed records for Shalom API payloads.

Field aliases carry the Spanish wire names; attributes use English names.
Every optional wire field is modelled as ``X | None`` so that a missing value
is explicit at the validation boundary.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ShalomModel(BaseModel):
    """Base for all payload records: immutable, alias-aware, extras ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


def _to_str(value: Any) -> Any:
    """Accept numbers where the API usually sends decimal strings."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# --- Envelope ---


class ApiEnvelope(BaseModel):
    """Outer ``{success, message, data}`` wrapper shared by every endpoint."""

    success: bool
    message: str | None = ""
    data: Any = None


# --- Agencies ---


class Agency(ShalomModel):
    """One physical service point (terminal)."""

    terminal_id: int = Field(alias="ter_id")
    name: str = Field(default="", alias="nombre")
    department: str | None = Field(default=None, alias="departamento")
    province: str | None = Field(default=None, alias="provincia")
    zone: str | None = Field(default=None, alias="zona")
    address: str = Field(default="", alias="direccion")
    place: str | None = Field(default=None, alias="lugar")
    latitude: str | None = Field(default=None, alias="latitud")
    longitude: str | None = Field(default=None, alias="longitud")
    opening_hours: str | None = Field(default=None, alias="horaAtencion")
    sunday_hours: str | None = Field(default=None, alias="horaDomingo")
    status: str | None = Field(default=None, alias="estadoAgencia")
    phone: str | None = Field(default=None, alias="telefono")
    abbreviation: str | None = Field(default=None, alias="abreviaturaTerminal")

    @field_validator("latitude", "longitude", "phone", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        return _to_str(value)

    @model_validator(mode="before")
    @classmethod
    def derive_name(cls, data: Any) -> Any:
        # The listing sometimes omits nombre; rebuild it the way the API formats it.
        if not isinstance(data, dict) or data.get("nombre") or data.get("name"):
            return data
        parts = [
            data.get("departamento", data.get("department")),
            data.get("provincia", data.get("province")),
            data.get("zona", data.get("zone")),
            data.get("lugar", data.get("place")),
        ]
        return {**data, "nombre": " / ".join(p for p in parts if p)}


# --- Waybill ---


class Terminal(ShalomModel):
    """Origin or destination agency as embedded in a waybill."""

    id: int | None = None
    name: str | None = Field(default=None, alias="nombre")
    abbreviation: str | None = Field(default=None, alias="abrebiatura")
    ubigeo: int | None = None
    department: str | None = Field(default=None, alias="departamento")
    province: str | None = Field(default=None, alias="provincia")
    district: str | None = Field(default=None, alias="distrito")


class Party(ShalomModel):
    """Sender or recipient."""

    document: str | None = Field(default=None, alias="documento")
    name: str | None = Field(default=None, alias="nombre")


class Waybill(ShalomModel):
    """Shipment record found by number + code."""

    ose_id: int | str | None = None
    order_number: str | None = Field(default=None, alias="numero_orden")
    order_code: str | None = Field(default=None, alias="codigo_orden")
    transfer_date: str | None = Field(default=None, alias="fecha_traslado")
    issue_date: str | None = Field(default=None, alias="fecha_emision")
    payment_type: str | None = Field(default=None, alias="tipo_pago")
    payment_state: str | None = Field(default=None, alias="estado_pago")
    content: str | None = Field(default=None, alias="contenido")
    amount: str | None = Field(default=None, alias="monto")
    extra_amount: float | None = Field(default=None, alias="montoAdicional")
    delivered: bool | str | None = Field(default=None, alias="entregado")
    delivery_address: str | None = Field(default=None, alias="direccion_entrega")
    arrival_time: str | None = Field(default=None, alias="tiempo_llegada")
    home_delivery: bool | str | None = Field(default=None, alias="reparto")
    air: bool | str | None = Field(default=None, alias="aereo")
    origin: Terminal | None = Field(default=None, alias="origen")
    destination: Terminal | None = Field(default=None, alias="destino")
    sender: Party | None = Field(default=None, alias="remitente")
    recipient: Party | None = Field(default=None, alias="destinatario")

    @field_validator("amount", "arrival_time", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        return _to_str(value)


# --- Status tracking ---


class Stage(ShalomModel):
    """A tracking stage: when it happened and whether it is finished."""

    date: str | None = Field(default=None, alias="fecha")
    completed: bool | None = Field(default=None, alias="completo")


class TransitStage(Stage):
    """Transit stage, which also names the carrier vehicle(s)."""

    carrier: str | None = Field(default=None, alias="carguero")
    carriers: list[str] = Field(default_factory=list, alias="cargueros")

    @field_validator("carrier", mode="before")
    @classmethod
    def carrier_as_text(cls, value: Any) -> Any:
        return _to_str(value)

    @field_validator("carriers", mode="before")
    @classmethod
    def carriers_as_text(cls, value: Any) -> Any:
        if value is None:
            return []
        return [_to_str(v) for v in value]


class ShipmentStatus(ShalomModel):
    """Independent, nullable tracking stages of one service order."""

    registered: Stage | None = Field(default=None, alias="registrado")
    origin: Stage | None = Field(default=None, alias="origen")
    transit: TransitStage | None = Field(default=None, alias="transito")
    destination: Stage | None = Field(default=None, alias="destino")
    dispatch: Stage | None = Field(default=None, alias="reparto")
    delivery: Stage | None = Field(default=None, alias="entregado")
    delay: Any = Field(default=None, alias="demora")

    @field_validator(
        "registered", "origin", "transit", "destination", "dispatch", "delivery",
        mode="before",
    )
    @classmethod
    def loose_stage(cls, value: Any) -> Any:
        # entregado/reparto arrive as null, an object, or occasionally a bare
        # date string / true flag. An empty object still counts as present.
        if value is None or value is False or value == "":
            return None
        if isinstance(value, str):
            return {"fecha": value}
        if value is True:
            return {}
        return value


# --- Tariffs ---


class TariffTable(ShalomModel):
    """Prices per package size, in soles."""

    weight: float | None = Field(default=None, alias="peso")
    volume: float | None = Field(default=None, alias="volumen")
    envelope: float | None = Field(default=None, alias="sobre")
    package_xxs: float = Field(alias="cajapaquetexxs")
    package_xs: float = Field(alias="cajapaquetexs")
    package_s: float = Field(alias="cajapaquetes")
    package_m: float = Field(alias="cajapaquetem")
    package_l: float = Field(alias="cajapaquetel")


class TariffQuote(ShalomModel):
    """Tariff between two agencies."""

    price: float | None = None
    tariff: TariffTable
    lead_time: str | None = None
    message: str | None = None
    type: str | None = None


# --- Waybill document ---


class DocumentLink(ShalomModel):
    """Link to the carrier waybill document (guía de remisión transportista)."""

    link: str = Field(alias="enlace")
    message: str = ""
