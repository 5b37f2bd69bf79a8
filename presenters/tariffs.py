"""Tariff rendering."""

from presenters.result import to_json
from shalom.models import TariffQuote


def render_tariffs_json(quote: TariffQuote) -> str:
    """Lead time and price per package size (XXS to L)."""
    table = quote.tariff
    return to_json({
        "lead_time": quote.lead_time,
        "tariffs": {
            "package_xxs": table.package_xxs,
            "package_xs": table.package_xs,
            "package_s": table.package_s,
            "package_m": table.package_m,
            "package_l": table.package_l,
        },
    })


def render_raw_json(payload: object) -> str:
    """Pass-through rendering for endpoints whose body is not modelled."""
    return to_json(payload)
