"""🧪 test_pricing_service.py - unit-тести для PricingService

Перевіряє:
- Канонічний сценарій KR (USD-кошик, доставка в KRW з конвертацією)
- Внутрішній ринок у KRW і міжнародну доставку з USD
- Порожній кошик, некоректні суми та кількості
- Монотонність і детермінованість розрахунку
"""

from decimal import Decimal

import pytest

from realizeit.domain.currency import CurrencyCode
from realizeit.domain.delivery import FlatRateDeliveryService
from realizeit.domain.pricing import PriceBreakdown, PricingConfig, PricingService, resolve_currency


# -------------------
# 🇰🇷 Внутрішній ринок
# -------------------

def test_kr_destination_with_usd_items(pricing_service, make_item):
    breakdown = pricing_service.compute_breakdown([make_item(cost="10", qty=2)], "KR")

    assert breakdown.currency is CurrencyCode.USD
    assert breakdown.items_cost == Decimal("20")
    assert breakdown.margin == Decimal("4")
    assert breakdown.subtotal == Decimal("24")
    assert breakdown.tax_estimate == Decimal("2.40")
    # 4500 + 1500 KRW = 6000 KRW → 6000 / 1300 ≈ 4.615 → 4.62 USD
    assert breakdown.shipping_estimate == Decimal("4.62")
    assert breakdown.total == Decimal("31.02")
    assert breakdown.item_count == 2


def test_kr_destination_with_krw_items(pricing_service, make_item):
    breakdown = pricing_service.compute_breakdown(
        [make_item(cost="20000", qty=1, currency=CurrencyCode.KRW)], "KR"
    )

    assert breakdown.currency is CurrencyCode.KRW
    assert breakdown.margin == Decimal("4000")
    assert breakdown.shipping_estimate == Decimal("4500")
    assert breakdown.tax_estimate == Decimal("2400")
    assert breakdown.total == Decimal("30900")


# -------------------
# 🌍 Міжнародна доставка
# -------------------

def test_international_destination_has_no_tax(pricing_service, make_item):
    breakdown = pricing_service.compute_breakdown([make_item(cost="10", qty=2)], "US")

    assert breakdown.shipping_estimate == Decimal("9.98")
    assert breakdown.tax_estimate == Decimal("0")
    assert breakdown.total == Decimal("33.98")


def test_krw_items_shipped_abroad_convert_usd_policy(pricing_service, make_item):
    breakdown = pricing_service.compute_breakdown(
        [make_item(cost="20000", qty=1, currency=CurrencyCode.KRW)], "DE"
    )

    assert breakdown.currency is CurrencyCode.KRW
    assert breakdown.shipping_estimate == Decimal("9087")               # 6.99 × 1300
    assert breakdown.total == Decimal("24000") + Decimal("9087")


def test_explicit_currency_overrides_resolution(pricing_service, make_item):
    breakdown = pricing_service.compute_breakdown([make_item()], "US", CurrencyCode.KRW)
    assert breakdown.currency is CurrencyCode.KRW


# -------------------
# 🧹 Крайні випадки
# -------------------

@pytest.mark.parametrize("country,currency", [("KR", CurrencyCode.KRW), ("US", CurrencyCode.USD), ("", CurrencyCode.USD)])
def test_empty_cart_is_all_zero(pricing_service, country, currency):
    breakdown = pricing_service.compute_breakdown([], country)

    assert breakdown == PriceBreakdown.zero(currency)
    assert breakdown.shipping_estimate == 0
    assert breakdown.total == 0


def test_negative_cost_and_zero_quantity_contribute_nothing(pricing_service, make_item):
    items = [
        make_item("a", cost="-5", qty=1),
        make_item("b", cost="10", qty=0),
        make_item("c", cost="10", qty=1),
    ]
    breakdown = pricing_service.compute_breakdown(items, "US")

    assert breakdown.items_cost == Decimal("10")
    assert breakdown.item_count == 2
    assert breakdown.shipping_estimate == Decimal("9.98")


def test_all_zero_quantities_means_no_shipping(pricing_service, make_item):
    breakdown = pricing_service.compute_breakdown([make_item(qty=0)], "KR")
    assert breakdown.total == 0
    assert breakdown.shipping_estimate == 0


def test_country_code_is_case_insensitive(pricing_service, make_item):
    upper = pricing_service.compute_breakdown([make_item()], "KR")
    lower = pricing_service.compute_breakdown([make_item()], " kr ")
    assert upper == lower


def test_total_never_decreases_with_quantity(pricing_service, make_item):
    totals = [pricing_service.compute_breakdown([make_item(qty=q)], "KR").total for q in range(1, 8)]
    assert totals == sorted(totals)


def test_same_input_same_breakdown(pricing_service, make_item):
    items = [make_item("a", cost="12.5", qty=3), make_item("b", cost="7.25", qty=1)]
    assert pricing_service.compute_breakdown(items, "KR") == pricing_service.compute_breakdown(items, "KR")


def test_total_equals_sum_of_parts(pricing_service, make_item):
    b = pricing_service.compute_breakdown([make_item(cost="13.37", qty=3)], "KR")
    assert b.subtotal == b.items_cost + b.margin
    assert b.total == b.subtotal + b.shipping_estimate + b.tax_estimate


# -------------------
# ⚙️ Конфігурація формули
# -------------------

def test_custom_markup_and_tax_rates(converter, make_item):
    cfg = PricingConfig.from_config(markup_rate="0.5", tax_rates={"us": "0.05"})
    service = PricingService(FlatRateDeliveryService(converter), cfg)

    b = service.compute_breakdown([make_item(cost="10", qty=1)], "US")

    assert b.margin == Decimal("5")
    assert b.tax_estimate == Decimal("0.75")
    assert b.total == Decimal("15") + Decimal("6.99") + Decimal("0.75")


def test_from_config_defaults():
    cfg = PricingConfig.from_config()
    assert cfg.markup_rate == Decimal("0.20")
    assert cfg.tax_rates["KR"] == Decimal("0.10")


def test_resolve_currency_prefers_first_item(make_item):
    assert resolve_currency([make_item(currency=CurrencyCode.KRW)], "US") is CurrencyCode.KRW
    assert resolve_currency([make_item(currency=None)], "KR") is CurrencyCode.KRW
    assert resolve_currency([], "US") is CurrencyCode.USD
