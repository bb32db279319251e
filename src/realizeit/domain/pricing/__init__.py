# 💸 realizeit/domain/pricing/__init__.py
"""
💸 Пакет `domain.pricing` публікує DTO, утиліти та сервіс ціноутворення.

🔹 `interfaces.py` - LineItem, PriceBreakdown, IPricingService.
🔹 `rounding.py` - округлення та безпечна нормалізація сум.
🔹 `services.py` - `PricingService`, `PricingConfig`, константа `MARKUP_RATE`.
"""

from .interfaces import IPricingService, LineItem, PriceBreakdown
from .rounding import non_negative, positive_quantity, round_to_currency
from .services import DEFAULT_TAX_RATES, MARKUP_RATE, PricingConfig, PricingService, resolve_currency

__all__ = [
    # DTO / контракти
    "LineItem",
    "PriceBreakdown",
    "IPricingService",
    # Сервіс і правила
    "PricingService",
    "PricingConfig",
    "MARKUP_RATE",
    "DEFAULT_TAX_RATES",
    "resolve_currency",
    # Утиліти
    "round_to_currency",
    "non_negative",
    "positive_quantity",
]
