# 💳 realizeit/infrastructure/checkout/checkout_client.py
"""
💳 CheckoutClient - відправляє тіло чекауту і повертає ціль редиректу.

🎯 Порядок вибору способу оплати:
    • налаштовано endpoint → POST JSON; відповідь `url` або `id`/`sessionId`;
    • немає endpoint, але є default price id + publishable key →
      редирект «кількістю» (ціна 0.01 × round(total × 100));
    • інакше - `PaymentNotConfiguredError`.

⚙️ Нотатки:
    • без повторів: помилка піднімається одразу, повтор ініціює сам покупець;
    • будь-яка не-2xx відповідь стає `CheckoutEndpointError` з кодом статусу.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 HTTP-клієнт endpoint-а

# 🔠 Системні імпорти
import logging
import time
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from realizeit.errors.custom_errors import (
    CheckoutEndpointError,
    CheckoutResponseError,
    PaymentNotConfiguredError,
)
from realizeit.shared.metrics import CHECKOUT_SUBMIT_SECONDS
from realizeit.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.checkout")

REDIRECT_URL = "url"
REDIRECT_SESSION = "session"
REDIRECT_PRICE = "price"

MSG_NOT_CONFIGURED = (
    "Stripe is not configured for this environment. "
    "Please contact support via Help, or try again later."
)
MSG_STRIPE_INIT = "Stripe failed to initialize"
MSG_INVALID_RESPONSE = "Invalid response from checkout endpoint"


@dataclass(frozen=True)
class CheckoutSettings:
    endpoint: str = ""
    publishable_key: str = ""
    default_price_id: str = ""
    timeout_sec: float = 15.0

    @classmethod
    def from_config(cls, config: Any) -> "CheckoutSettings":
        """Читає `checkout.*` і `payments.*` з ConfigService (або будь-чого з `.get`)."""
        return cls(
            endpoint=str(config.get("checkout.endpoint", "") or "").strip(),
            publishable_key=str(config.get("payments.publishable_key", "") or "").strip(),
            default_price_id=str(config.get("payments.default_price_id", "") or "").strip(),
            timeout_sec=float(config.get("checkout.timeout_sec", 15) or 15),
        )


@dataclass(frozen=True)
class CheckoutRedirect:
    """Куди вести покупця далі."""
    kind: str                                                       # 🔀 url | session | price
    url: Optional[str] = None
    session_id: Optional[str] = None
    price_id: Optional[str] = None
    quantity: int = 0
    publishable_key: Optional[str] = None
    customer_email: Optional[str] = None


def price_quantity(total: Any) -> int:
    """Кількість «одиниць по 0.01» для редиректу за default price: max(1, round(total × 100))."""
    cents = (Decimal(str(total or 0)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return max(1, int(cents))


class CheckoutClient:
    """💳 Асинхронний клієнт endpoint-а чекауту."""

    def __init__(self, settings: CheckoutSettings, client: Optional[httpx.AsyncClient] = None) -> None:
        self._settings = settings
        self._client = client
        self._owns_client = client is None

    @property
    def settings(self) -> CheckoutSettings:
        return self._settings

    async def __aenter__(self) -> "CheckoutClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.timeout_sec)
        return self._client

    # ================================
    # 🔓 ПУБЛІЧНИЙ ІНТЕРФЕЙС
    # ================================
    async def submit(self, payload: Mapping[str, Any]) -> CheckoutRedirect:
        if self._settings.endpoint:
            return await self._submit_to_endpoint(payload)

        if self._settings.default_price_id and self._settings.publishable_key:
            total = (payload.get("totals") or {}).get("total", 0)
            redirect = CheckoutRedirect(
                kind=REDIRECT_PRICE,
                price_id=self._settings.default_price_id,
                quantity=price_quantity(total),
                publishable_key=self._settings.publishable_key,
                customer_email=(payload.get("shipping") or {}).get("email") or None,
            )
            logger.info("💳 Default price redirect | quantity=%d", redirect.quantity)
            return redirect

        logger.warning("🔌 Payment is not configured (no endpoint, no default price)")
        raise PaymentNotConfiguredError(MSG_NOT_CONFIGURED)

    # ================================
    # 🛠️ ДОПОМІЖНІ МЕТОДИ
    # ================================
    async def _submit_to_endpoint(self, payload: Mapping[str, Any]) -> CheckoutRedirect:
        endpoint = self._settings.endpoint
        started = time.perf_counter()
        try:
            response = await self._http().post(endpoint, json=dict(payload))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:      # 🔗 InvalidURL не є HTTPError
            logger.error("🌐 Checkout endpoint unreachable: %s", exc)
            raise CheckoutEndpointError(
                f"Checkout endpoint error: {exc.__class__.__name__}",
                url=endpoint,
                details=str(exc),
            ) from exc
        finally:
            CHECKOUT_SUBMIT_SECONDS.observe(time.perf_counter() - started)

        if not response.is_success:
            logger.warning("🚫 Checkout endpoint answered %s", response.status_code)
            raise CheckoutEndpointError(
                f"Checkout endpoint error: {response.status_code}",
                status_code=response.status_code,
                url=endpoint,
                details=response.text[:500],
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise CheckoutResponseError(MSG_INVALID_RESPONSE, details=response.text[:500]) from exc

        return self._parse_response(data)

    def _parse_response(self, data: Any) -> CheckoutRedirect:
        if not isinstance(data, dict):
            raise CheckoutResponseError(MSG_INVALID_RESPONSE)

        url = data.get("url")
        if isinstance(url, str) and url:
            logger.info("➡️ Checkout redirect via url")
            return CheckoutRedirect(kind=REDIRECT_URL, url=url)

        session_id = data.get("id") or data.get("sessionId")
        if isinstance(session_id, str) and session_id:
            if not self._settings.publishable_key:
                raise PaymentNotConfiguredError(MSG_STRIPE_INIT)
            logger.info("➡️ Checkout redirect via session %s", session_id)
            return CheckoutRedirect(
                kind=REDIRECT_SESSION,
                session_id=session_id,
                publishable_key=self._settings.publishable_key,
            )

        raise CheckoutResponseError(MSG_INVALID_RESPONSE, details="keys: " + ", ".join(sorted(map(str, data))))
