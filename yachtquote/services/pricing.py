"""Charter quote calculation.

A quote is derived from a yacht's weekly rate: the base charter fee, an
Advance Provisioning Allowance (APA) on the base, VAT on base plus APA, an
optional crew gratuity on the base, an optional delivery fee and any
caller-supplied extras. Derived amounts are rounded to whole currency units
before they are summed, so the total is exact.
"""
import logging
import math
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Mapping, Optional, Sequence, Union
from uuid import uuid4

from babel.numbers import (
    UnknownCurrencyError,
    format_currency,
    get_currency_precision,
    list_currencies,
    validate_currency,
)

from yachtquote.core.config import settings
from yachtquote.core.enums import ChargeLabel, VatSource
from yachtquote.core.errors import InvalidQuoteInput
from yachtquote.core.metrics import quote_formatting_failures, quote_input_rejected, quotes_calculated
from yachtquote.schemas.quote import CalculateQuoteRequest, LineItem, Quote, QuoteBreakdown, YachtQuote
from yachtquote.schemas.yacht import Yacht

logger = logging.getLogger(__name__)

# Exact, case-sensitive area names. Areas not listed fall back to DEFAULT_VAT_PCT.
VAT_BY_AREA = {
    "Mediterranean": 22.0,
    "Caribbean": 0.0,
    "Bahamas": 0.0,
}
DEFAULT_VAT_PCT = 0.0

CURRENCY_PATTERN = "¤#,##0"
UNKNOWN_CURRENCY = "unknown"
RULE = "━" * 24
DISCLAIMERS = (
    "* APA covers fuel, food, beverages, port fees, and other operational expenses",
    "* VAT rates vary by jurisdiction and yacht flag",
    "* All prices are indicative and subject to final confirmation",
)

Extra = Union[LineItem, Mapping]


def round_half_up(value: float) -> int:
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def resolve_vat_pct(area: str, vat_pct: Optional[float] = None) -> float:
    if vat_pct is not None:
        return vat_pct
    return VAT_BY_AREA.get(area, DEFAULT_VAT_PCT)


def _require_finite(field: str, value, metric_field: Optional[str] = None) -> None:
    if not math.isfinite(value):
        quote_input_rejected.labels(field=metric_field or field).inc()
        logger.warning(f"Rejected quote input {field}={value!r}")
        raise InvalidQuoteInput(field, value)


def _currency_label(currency: str) -> str:
    code = currency.upper()
    return code if code in list_currencies() else UNKNOWN_CURRENCY


def _coerce_extras(extras: Optional[Iterable[Extra]]) -> List[LineItem]:
    if not extras:
        return []
    return [e if isinstance(e, LineItem) else LineItem.model_validate(e) for e in extras]


def calculate_quote(
    yacht: Yacht,
    weeks: Optional[float] = None,
    apa_pct: Optional[float] = None,
    vat_pct: Optional[float] = None,
    gratuity_pct: float = 0,
    delivery_fee: float = 0,
    extras: Optional[Iterable[Extra]] = None,
) -> QuoteBreakdown:
    """Price a charter of ``weeks`` weeks on ``yacht``.

    ``weeks`` and ``apa_pct`` default to the configured DEFAULT_WEEKS and
    DEFAULT_APA_PCT. Leaving ``vat_pct`` as None derives it from the yacht's
    operating area; pass 0 to force a VAT-free quote.

    Raises InvalidQuoteInput if any numeric input is NaN or infinite. Zero and
    negative values are not rejected.
    """
    if weeks is None:
        weeks = settings.DEFAULT_WEEKS
    if apa_pct is None:
        apa_pct = settings.DEFAULT_APA_PCT
    items = _coerce_extras(extras)

    _require_finite("weekly_rate", yacht.weekly_rate)
    _require_finite("weeks", weeks)
    _require_finite("apa_pct", apa_pct)
    if vat_pct is not None:
        _require_finite("vat_pct", vat_pct)
    _require_finite("gratuity_pct", gratuity_pct)
    _require_finite("delivery_fee", delivery_fee)
    for item in items:
        _require_finite(f"extras[{item.label}]", item.amount, metric_field="extras")

    base = yacht.weekly_rate * weeks
    apa_amount = round_half_up(base * (apa_pct / 100))

    final_vat_pct = resolve_vat_pct(yacht.area, vat_pct)
    vat_amount = round_half_up((base + apa_amount) * (final_vat_pct / 100))

    gratuity_amount = round_half_up(base * (gratuity_pct / 100))
    extras_total = sum(item.amount for item in items)

    total = base + apa_amount + vat_amount + gratuity_amount + delivery_fee + extras_total

    lines = [
        LineItem(label=str(ChargeLabel.BASE), amount=base),
        LineItem(label=str(ChargeLabel.APA), amount=apa_amount),
        LineItem(label=str(ChargeLabel.VAT), amount=vat_amount),
    ]
    if gratuity_pct > 0:
        lines.append(LineItem(label=str(ChargeLabel.GRATUITY), amount=gratuity_amount))
    if delivery_fee > 0:
        lines.append(LineItem(label=str(ChargeLabel.DELIVERY_FEE), amount=delivery_fee))
    lines.extend(items)
    lines.append(LineItem(label=str(ChargeLabel.TOTAL), amount=total))

    vat_source = VatSource.EXPLICIT if vat_pct is not None else VatSource.AREA
    quotes_calculated.labels(currency=_currency_label(yacht.currency), vat_source=str(vat_source)).inc()
    logger.debug(
        f"Quoted yacht {yacht.id} for {weeks} week(s): total {total} {yacht.currency} "
        f"(VAT {final_vat_pct}% from {vat_source})"
    )

    return QuoteBreakdown(
        currency=yacht.currency,
        weeks=weeks,
        base=base,
        apa_pct=apa_pct,
        apa_amount=apa_amount,
        vat_pct=final_vat_pct,
        vat_amount=vat_amount,
        gratuity_pct=gratuity_pct,
        gratuity_amount=gratuity_amount,
        delivery_fee=delivery_fee,
        extras_total=extras_total,
        total=total,
        breakdown=tuple(lines),
    )


def format_quote_breakdown(breakdown: QuoteBreakdown, locale: Optional[str] = None) -> str:
    """Render a breakdown as text.

    The currency code is matched case-insensitively. Amounts show up to the
    currency's own number of minor digits, rounded half up, with trailing
    zeros dropped.
    """
    locale = locale or settings.QUOTE_LOCALE
    currency = breakdown.currency.upper()
    try:
        validate_currency(currency, locale)
    except UnknownCurrencyError as e:
        quote_formatting_failures.inc()
        raise InvalidQuoteInput("currency", breakdown.currency, "must be a known ISO 4217 code") from e

    digits = get_currency_precision(currency)
    pattern = CURRENCY_PATTERN + ("." + "#" * digits if digits else "")
    step = Decimal(10) ** -digits

    def fmt(amount: float) -> str:
        value = Decimal(amount).quantize(step, rounding=ROUND_HALF_UP)
        return format_currency(value, currency, format=pattern, locale=locale, currency_digits=False)

    lines = [settings.QUOTE_TITLE, RULE]
    for item in breakdown.breakdown:
        if item.label == str(ChargeLabel.TOTAL):
            lines.append(RULE)
            lines.append(f"{item.label.upper()}: {fmt(item.amount)}")
        else:
            lines.append(f"{item.label}: {fmt(item.amount)}")

    return "\n".join(lines) + "\n\n" + "\n".join(DISCLAIMERS)


def calculate_multiple_quotes(
    yachts: Sequence[Yacht],
    weeks: Optional[float] = None,
    apa_pct: Optional[float] = None,
    vat_pct: Optional[float] = None,
    gratuity_pct: float = 0,
    delivery_fee: float = 0,
    extras: Optional[Iterable[Extra]] = None,
) -> List[YachtQuote]:
    items = _coerce_extras(extras)
    return [
        YachtQuote(
            yacht=yacht,
            quote=calculate_quote(yacht, weeks, apa_pct, vat_pct, gratuity_pct, delivery_fee, items),
        )
        for yacht in yachts
    ]


def quote_from_request(yacht: Yacht, req: CalculateQuoteRequest) -> QuoteBreakdown:
    if req.yacht_id != yacht.id:
        raise InvalidQuoteInput("yacht_id", req.yacht_id, f"does not match yacht {yacht.id}")
    return calculate_quote(
        yacht,
        weeks=req.weeks,
        apa_pct=req.apa_pct,
        vat_pct=req.vat_pct,
        gratuity_pct=req.gratuity_pct,
        delivery_fee=req.delivery_fee,
        extras=req.extras,
    )


def build_quote_record(
    breakdown: QuoteBreakdown,
    *,
    tenant_id: str,
    yacht_id: str,
    lead_id: Optional[str] = None,
    quote_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Quote:
    """Flatten a breakdown into the persisted Quote shape.

    Gratuity, delivery fee and individual extras have no column of their own;
    they survive only inside ``total`` (and ``extras`` as a sum).
    """
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    return Quote(
        id=quote_id or str(uuid4()),
        tenant_id=tenant_id,
        lead_id=lead_id,
        yacht_id=yacht_id,
        base_price=breakdown.base,
        apa=breakdown.apa_amount,
        vat=breakdown.vat_amount,
        extras=breakdown.extras_total,
        total=breakdown.total,
        currency=breakdown.currency,
        created_at=stamp,
        updated_at=stamp,
    )
