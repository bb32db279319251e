# 📨 realizeit/domain/checkout/payload.py
"""📨 Тіло запиту до endpoint-а чекауту."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from realizeit.domain.pricing.interfaces import LineItem, PriceBreakdown
from .shipping_form import ShippingForm


def build_checkout_payload(
    items: Sequence[LineItem],
    breakdown: PriceBreakdown,
    form: ShippingForm,
    *,
    locale: str,
    user_email: str = "",
    success_url: str = "",
    cancel_url: str = "",
) -> Dict[str, Any]:
    """
    `{items[], totals, shipping, locale, successUrl, cancelUrl}`.

    Позиція без власної валюти отримує валюту розрахунку.
    """
    return {
        "items": [item.to_payload(breakdown.currency) for item in items],
        "totals": breakdown.to_payload(),
        "shipping": form.to_payload(user_email),
        "locale": locale,
        "successUrl": success_url,
        "cancelUrl": cancel_url,
    }


def checkout_return_urls(origin: str, lang: str) -> Dict[str, str]:
    """URL-и повернення з хостованої сторінки оплати."""
    base = (origin or "").rstrip("/")
    return {
        "success_url": f"{base}/{lang}/checkout/success",
        "cancel_url": f"{base}/{lang}/checkout/cancel",
    }
