"""
🧩 interfaces.py - Контракти та DTO валютного домену.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from realizeit.errors.custom_errors import CurrencyRateNotFoundError


# ================================
# 💱 КОДИ ВАЛЮТ
# ================================
class CurrencyCode(str, Enum):
    """Валюти, в яких магазин показує та приймає ціни."""

    USD = "USD"
    KRW = "KRW"

    @property
    def minor_digits(self) -> int:
        """Кількість знаків після коми (KRW без копійок)."""
        return MINOR_DIGITS.get(self.value, 2)

    @classmethod
    def parse(cls, value: Union[str, "CurrencyCode", None]) -> Optional["CurrencyCode"]:
        """'usd' / CurrencyCode.USD → CurrencyCode.USD; невідоме або порожнє → None."""
        if isinstance(value, CurrencyCode):
            return value
        code = (value or "").strip().upper()
        try:
            return cls(code)
        except ValueError:
            return None


MINOR_DIGITS = {
    "USD": 2,
    "KRW": 0,
}

DOMESTIC_COUNTRY = "KR"                                         # 🇰🇷 Внутрішній ринок


def currency_for_country(country: Optional[str]) -> CurrencyCode:
    """KR → KRW, решта → USD."""
    return CurrencyCode.KRW if (country or "").strip().upper() == DOMESTIC_COUNTRY else CurrencyCode.USD


# ================================
# 💵 MONEY
# ================================
@dataclass(frozen=True)
class Money:
    """Сума в конкретній валюті (завжди Decimal)."""
    amount: Decimal
    currency: CurrencyCode


# ================================
# 🔁 КОНВЕРТЕР
# ================================
class IMoneyConverter(ABC):
    """Контракт синхронного Decimal-конвертера."""

    @abstractmethod
    def convert_money(self, money: Money, to_currency: CurrencyCode) -> Money:
        """Конвертує суму; невідома пара → `CurrencyRateNotFoundError`."""


__all__ = [
    "CurrencyCode",
    "CurrencyRateNotFoundError",
    "DOMESTIC_COUNTRY",
    "IMoneyConverter",
    "MINOR_DIGITS",
    "Money",
    "currency_for_country",
]
