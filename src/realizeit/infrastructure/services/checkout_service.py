# 🧾 realizeit/infrastructure/services/checkout_service.py
"""
🧾 CheckoutService - сценарій «Оплатити» від кошика до редиректу.

🔹 Рахує розклад ціни та перевіряє форму локально (без мережі).
🔹 Поки запит у польоті, повторна відправка відхиляється.
🔹 Будь-яка помилка відправки стає сповіщенням; вхідні дані не змінюються,
    тож покупець може просто натиснути кнопку ще раз.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

# 🧩 Внутрішні модулі проєкту
from realizeit.domain.checkout import ShippingForm, build_checkout_payload, checkout_return_urls
from realizeit.domain.checkout.validation import validate_checkout_readiness
from realizeit.domain.pricing.interfaces import IPricingService, LineItem, PriceBreakdown
from realizeit.errors.custom_errors import CheckoutInProgressError, PaymentNotConfiguredError
from realizeit.errors.exception_handler_service import ExceptionHandlerService, Notification
from realizeit.infrastructure.checkout.checkout_client import CheckoutClient, CheckoutRedirect
from realizeit.shared.metrics import CHECKOUT_SUBMISSIONS
from realizeit.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.services.checkout")

OUTCOME_REDIRECT = "redirect"
OUTCOME_INVALID = "invalid"
OUTCOME_FAILED = "failed"
OUTCOME_BUSY = "busy"

TITLE_FAILED = "Checkout failed"
TITLE_NOT_CONFIGURED = "Payment not configured"


@dataclass(frozen=True)
class CheckoutOutcome:
    status: str
    breakdown: PriceBreakdown
    redirect: Optional[CheckoutRedirect] = None
    notification: Optional[Notification] = None
    errors: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.status == OUTCOME_REDIRECT


class CheckoutService:
    """🧾 Оркестратор чекауту поверх чистих доменних сервісів."""

    def __init__(
        self,
        pricing: IPricingService,
        client: CheckoutClient,
        *,
        site_origin: str = "",
        error_handler: Optional[ExceptionHandlerService] = None,
    ) -> None:
        self._pricing = pricing
        self._client = client
        self._origin = site_origin
        self._errors = error_handler or ExceptionHandlerService()
        self._submitting = False

    @property
    def is_submitting(self) -> bool:
        """Стан кнопки «Оплатити»: True → кнопка вимкнена."""
        return self._submitting

    def quote(self, items: Sequence[LineItem], form: ShippingForm) -> PriceBreakdown:
        """Перерахунок на кожну зміну форми/кошика (без мережі)."""
        return self._pricing.compute_breakdown(items, form.country)

    async def start_checkout(
        self,
        items: Sequence[LineItem],
        form: ShippingForm,
        *,
        lang: str,
        user_email: str = "",
    ) -> CheckoutOutcome:
        breakdown = self.quote(items, form)

        if self._submitting:
            CHECKOUT_SUBMISSIONS.labels(outcome=OUTCOME_BUSY).inc()
            notification = self._errors.to_notification(
                CheckoutInProgressError("Checkout is already in progress."),
                title="Please wait",
            )
            return CheckoutOutcome(OUTCOME_BUSY, breakdown, notification=notification)

        errors = tuple(validate_checkout_readiness(items, form, breakdown.total, user_email))
        if errors:
            logger.info("📋 Checkout incomplete | violations=%d", len(errors))
            CHECKOUT_SUBMISSIONS.labels(outcome=OUTCOME_INVALID).inc()
            return CheckoutOutcome(
                OUTCOME_INVALID,
                breakdown,
                notification=self._errors.validation_notification(errors),
                errors=errors,
            )

        payload = build_checkout_payload(
            items,
            breakdown,
            form,
            locale=lang,
            user_email=user_email,
            **checkout_return_urls(self._origin, lang),
        )

        self._submitting = True
        try:
            redirect = await self._client.submit(payload)
        except Exception as exc:
            CHECKOUT_SUBMISSIONS.labels(outcome=OUTCOME_FAILED).inc()
            title = TITLE_NOT_CONFIGURED if isinstance(exc, PaymentNotConfiguredError) else TITLE_FAILED
            return CheckoutOutcome(
                OUTCOME_FAILED,
                breakdown,
                notification=self._errors.to_notification(exc, title=title),
            )
        finally:
            self._submitting = False

        CHECKOUT_SUBMISSIONS.labels(outcome=OUTCOME_REDIRECT).inc()
        logger.info(
            "✅ Checkout submitted | kind=%s total=%s %s",
            redirect.kind, breakdown.total, breakdown.currency.value,
        )
        return CheckoutOutcome(OUTCOME_REDIRECT, breakdown, redirect=redirect)
