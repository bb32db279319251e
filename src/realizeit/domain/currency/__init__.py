# 💱 realizeit/domain/currency/__init__.py
"""
💱 Пакет `domain.currency` публікує контракти та DTO для валютних операцій.

🔹 `interfaces.py` містить `CurrencyCode`, `Money`, `IMoneyConverter`
    та хелпер `currency_for_country`.
"""

from .interfaces import (
    DOMESTIC_COUNTRY,
    MINOR_DIGITS,
    CurrencyCode,
    CurrencyRateNotFoundError,
    IMoneyConverter,
    Money,
    currency_for_country,
)

__all__ = [
    "CurrencyCode",
    "CurrencyRateNotFoundError",
    "DOMESTIC_COUNTRY",
    "IMoneyConverter",
    "MINOR_DIGITS",
    "Money",
    "currency_for_country",
]
