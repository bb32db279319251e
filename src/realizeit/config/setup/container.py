# 📦 realizeit/config/setup/container.py
"""
📦 Контейнер залежностей RealizeIt.

🔹 Створює сервіси в правильному порядку DI: конвертер → доставка → ціни → чекаут
🔹 Читає усі числові політики (націнка, податки, тарифи, курси) з ConfigService
🔹 Дає єдину точку доступу до сервісів для UI та тестів
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                             # 🌐 Тип HTTP-клієнта для підміни в тестах

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from typing import TYPE_CHECKING, Any, Optional                          # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from realizeit.domain.delivery.services import FlatRateDeliveryService, policies_from_config  # 🚚 Тарифи доставки
from realizeit.domain.pricing.services import PricingConfig, PricingService  # 💵 Доменне ціноутворення
from realizeit.errors.exception_handler_service import ExceptionHandlerService  # 🛡️ Винятки → сповіщення
from realizeit.infrastructure.checkout.checkout_client import CheckoutClient, CheckoutSettings  # 💳 Клієнт чекауту
from realizeit.infrastructure.currency.currency_converter import DEFAULT_APPROX_RATES, FixedRateConverter  # 💱 Курси
from realizeit.infrastructure.services.checkout_service import CheckoutService  # 🧾 Сценарій «Оплатити»
from realizeit.shared.metrics.exporters import maybe_start_prometheus    # 📈 Bootstrap метрик
from realizeit.shared.utils.logger import LOG_NAME, init_logging_from_config  # 🧾 Конфіг логування

if TYPE_CHECKING:
    from realizeit.config.config_service import ConfigService            # 🗂️ Тип під час перевірки

logger = logging.getLogger(LOG_NAME)                                     # 🧾 Модульний логер контейнера


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _int_or_default(value: Any, default: int) -> int:
    """Повертає ціле число або запасне значення, якщо каст неможливий."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def bootstrap_logging() -> logging.Logger:
    """Зчитує конфіг логування і запускає кореневий логер."""
    from realizeit.config.config_service import ConfigService           # 🧭 Локальний імпорт для уникнення циклів

    node = ConfigService().get("logging", {}) or {}
    return init_logging_from_config(node)


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """Координує ініціалізацію інфраструктурних і доменних сервісів."""

    def __init__(self, config: ConfigService, http_client: Optional[httpx.AsyncClient] = None):
        self.config = config
        logger.info("🚀 Стартуємо побудову контейнера залежностей")
        self._bootstrap_metrics_if_enabled()
        self._setup_error_handlers()
        self._setup_domain_services()
        self._setup_checkout(http_client)
        logger.info("✅ Контейнер ініціалізовано успішно")

    async def aclose(self) -> None:
        """Закриває мережеві ресурси (HTTP-клієнт чекауту)."""
        await self.checkout_client.aclose()

    # ================================
    # 📈 МЕТРИКИ
    # ================================
    def _bootstrap_metrics_if_enabled(self) -> None:
        if not bool(self.config.get("metrics.enabled", False)):
            logger.debug("📉 Prometheus вимкнено конфігом")
            return
        exporter_name = str(self.config.get("metrics.exporter", "prometheus") or "prometheus").lower()
        if exporter_name != "prometheus":
            logger.debug("📉 Експортер %s не підтримується", exporter_name)
            return
        port = _int_or_default(self.config.get("metrics.prometheus.port", 9108), 9108)
        try:
            if maybe_start_prometheus(port):
                logger.info("📈 Prometheus запущено на порті %s", port)
        except OSError:
            logger.exception("⚠️ Не вдалося стартувати експортер метрик")

    # ================================
    # 🛡️ ОБРОБКА ПОМИЛОК
    # ================================
    def _setup_error_handlers(self) -> None:
        self.exception_handler_service = ExceptionHandlerService()

    # ================================
    # 🏭 ДОМЕННІ СЕРВІСИ
    # ================================
    def _setup_domain_services(self) -> None:
        """Конвертер курсів, тарифи доставки та формула ціни."""
        rates = self.config.get("currency.approx_rates") or DEFAULT_APPROX_RATES
        base = str(self.config.get("currency.base", "USD") or "USD")
        self.currency_converter = FixedRateConverter(rates, base=base)

        policies = policies_from_config(self.config.get("delivery.policies"))
        self.delivery_service = FlatRateDeliveryService(self.currency_converter, policies)

        self.pricing_config = PricingConfig.from_config(
            markup_rate=self.config.get("pricing.markup_rate"),
            tax_rates=self.config.get("tax.rates"),
        )
        self.pricing_service = PricingService(self.delivery_service, self.pricing_config)
        logger.debug(
            "🏭 Доменні сервіси готові (markup=%s, policies=%d)",
            self.pricing_config.markup_rate,
            len(policies),
        )

    # ================================
    # 💳 ЧЕКАУТ
    # ================================
    def _setup_checkout(self, http_client: Optional[httpx.AsyncClient]) -> None:
        self.checkout_settings = CheckoutSettings.from_config(self.config)
        self.checkout_client = CheckoutClient(self.checkout_settings, client=http_client)
        self.checkout_service = CheckoutService(
            self.pricing_service,
            self.checkout_client,
            site_origin=str(self.config.get("site.origin", "") or ""),
            error_handler=self.exception_handler_service,
        )
        logger.debug(
            "💳 Чекаут готовий (endpoint=%s, default_price=%s)",
            bool(self.checkout_settings.endpoint),
            bool(self.checkout_settings.default_price_id),
        )
