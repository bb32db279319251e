# 🚨 realizeit/errors/custom_errors.py
"""
🚨 Ієрархія доменних винятків RealizeIt.

🔹 `AppError` - база; несе технічні `details` для логів.
🔹 `UserVisibleError` - повідомлення, яке можна показати покупцю дослівно.
🔹 Checkout-помилки мають `to_log_extra()` для структурованого логування.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from typing import Dict, Optional


class AppError(Exception):
    """🧠 Базовий виняток застосунку."""

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class UserVisibleError(AppError):
    """👀 Помилка, текст якої безпечно показати користувачу."""


# ================================
# 🛒 ЧЕКАУТ
# ================================
class CheckoutError(UserVisibleError):
    """🛒 Загальна помилка відправки чекауту."""

    error_code = "checkout_error"

    def to_log_extra(self) -> Dict[str, object]:
        extra: Dict[str, object] = {"error_code": self.error_code}
        if self.details:
            extra["details"] = self.details
        return extra


class CheckoutEndpointError(CheckoutError):
    """🌐 Endpoint недоступний або відповів не-2xx."""

    error_code = "checkout_endpoint_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code
        self.url = url

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.status_code is not None:
            extra["status_code"] = self.status_code
        if self.url:
            extra["url"] = self.url
        return extra


class CheckoutResponseError(CheckoutError):
    """🧾 Відповідь endpoint-а не містить ні `url`, ні `sessionId`."""

    error_code = "checkout_response_error"


class PaymentNotConfiguredError(CheckoutError):
    """🔌 Для середовища не налаштовано жодного способу оплати."""

    error_code = "payment_not_configured"


class CheckoutInProgressError(CheckoutError):
    """⏳ Попередня відправка ще не завершилась."""

    error_code = "checkout_in_progress"


# ================================
# 💱 ВАЛЮТИ
# ================================
class CurrencyRateNotFoundError(AppError):
    """🚫 Немає курсу для пари валют."""

    def __init__(self, from_currency: str, to_currency: str) -> None:
        super().__init__(f"No rate for {from_currency} → {to_currency}")
        self.from_currency = from_currency
        self.to_currency = to_currency


__all__ = [
    "AppError",
    "UserVisibleError",
    "CheckoutError",
    "CheckoutEndpointError",
    "CheckoutResponseError",
    "PaymentNotConfiguredError",
    "CheckoutInProgressError",
    "CurrencyRateNotFoundError",
]
