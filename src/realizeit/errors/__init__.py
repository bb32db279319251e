# 🚨 realizeit/errors/__init__.py
"""
🚨 Пакет `errors` - винятки та їх перетворення на сповіщення.
"""

from .custom_errors import (
    AppError,
    CheckoutEndpointError,
    CheckoutError,
    CheckoutInProgressError,
    CheckoutResponseError,
    CurrencyRateNotFoundError,
    PaymentNotConfiguredError,
    UserVisibleError,
)
from .exception_handler_service import ExceptionHandlerService, Notification

__all__ = [
    "AppError",
    "UserVisibleError",
    "CheckoutError",
    "CheckoutEndpointError",
    "CheckoutResponseError",
    "CheckoutInProgressError",
    "PaymentNotConfiguredError",
    "CurrencyRateNotFoundError",
    "ExceptionHandlerService",
    "Notification",
]
