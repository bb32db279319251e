# 🛒 realizeit/domain/checkout/__init__.py
"""
🛒 Пакет `domain.checkout` - форма доставки, правила готовності та тіло запиту.
"""

from .payload import build_checkout_payload, checkout_return_urls
from .shipping_form import ShippingForm
from .validation import (
    MSG_ADDRESS,
    MSG_CITY,
    MSG_CONSENT,
    MSG_COUNTRY,
    MSG_EMAIL,
    MSG_EMPTY_CART,
    MSG_FULL_NAME,
    MSG_POSTAL_CODE,
    MSG_ZERO_TOTAL,
    is_checkout_ready,
    is_valid_email,
    validate_checkout_readiness,
)

__all__ = [
    "ShippingForm",
    "build_checkout_payload",
    "checkout_return_urls",
    "validate_checkout_readiness",
    "is_checkout_ready",
    "is_valid_email",
    "MSG_FULL_NAME",
    "MSG_EMAIL",
    "MSG_ADDRESS",
    "MSG_CITY",
    "MSG_POSTAL_CODE",
    "MSG_COUNTRY",
    "MSG_CONSENT",
    "MSG_EMPTY_CART",
    "MSG_ZERO_TOTAL",
]
