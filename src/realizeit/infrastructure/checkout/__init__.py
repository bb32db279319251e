# 💳 realizeit/infrastructure/checkout/__init__.py
"""💳 Клієнт endpoint-а чекауту."""

from .checkout_client import (
    REDIRECT_PRICE,
    REDIRECT_SESSION,
    REDIRECT_URL,
    CheckoutClient,
    CheckoutRedirect,
    CheckoutSettings,
    price_quantity,
)

__all__ = [
    "CheckoutClient",
    "CheckoutRedirect",
    "CheckoutSettings",
    "REDIRECT_PRICE",
    "REDIRECT_SESSION",
    "REDIRECT_URL",
    "price_quantity",
]
