"""🧪 test_checkout_payload.py - unit-тести для тіла запиту чекауту

Перевіряє:
- Структуру {items, totals, shipping, locale, successUrl, cancelUrl}
- Валюту позицій без власної валюти
- URL-и повернення
"""

from decimal import Decimal

from realizeit.domain.checkout import ShippingForm, build_checkout_payload, checkout_return_urls
from realizeit.domain.currency import CurrencyCode


def test_payload_shape(pricing_service, make_item):
    items = [make_item("a", cost="10", qty=2, name="Tee", size="M"), make_item("b", cost="5", currency=None)]
    breakdown = pricing_service.compute_breakdown(items, "KR")
    form = ShippingForm(full_name="Kim", country="KR")

    payload = build_checkout_payload(
        items,
        breakdown,
        form,
        locale="kr",
        user_email="kim@example.com",
        **checkout_return_urls("https://realizeit.app/", "kr"),
    )

    assert set(payload) == {"items", "totals", "shipping", "locale", "successUrl", "cancelUrl"}
    assert payload["items"][0]["baseCost"] == 10.0
    assert payload["items"][0]["size"] == "M"
    assert payload["items"][1]["currency"] == CurrencyCode.USD.value
    assert payload["totals"]["total"] == float(breakdown.total)
    assert payload["totals"]["currency"] == "USD"
    assert payload["shipping"]["email"] == "kim@example.com"
    assert payload["successUrl"] == "https://realizeit.app/kr/checkout/success"
    assert payload["cancelUrl"] == "https://realizeit.app/kr/checkout/cancel"


def test_totals_payload_is_float(pricing_service, make_item):
    totals = pricing_service.compute_breakdown([make_item(cost="10", qty=2)], "KR").to_payload()
    assert totals["shippingEstimate"] == float(Decimal("4.62"))
    assert totals["taxEstimate"] == 2.4
