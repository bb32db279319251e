"""
🧩 interfaces.py - Контракти доменного сервісу доставки.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from realizeit.domain.currency.interfaces import CurrencyCode


@dataclass(frozen=True)
class ShippingPolicy:
    """Плоский тариф: `base` за перший виріб + `per_additional` за кожен наступний."""
    base: Decimal
    per_additional: Decimal
    currency: CurrencyCode

    def price_for(self, item_count: int) -> Decimal:
        if item_count <= 0:
            return Decimal("0")
        return self.base + self.per_additional * (item_count - 1)


@dataclass(frozen=True)
class DeliveryQuote:
    """Оцінка доставки у валюті запиту."""
    price: Decimal
    currency: CurrencyCode
    policy_currency: CurrencyCode                               # 🧭 Рідна валюта тарифу (до конвертації)
    converted: bool = False


class IDeliveryService(ABC):
    """🚚 Оцінювач вартості доставки."""

    @abstractmethod
    def quote(self, *, item_count: int, country: str, currency: CurrencyCode) -> DeliveryQuote:
        """Оцінка для `item_count` виробів у країну `country`, виражена в `currency`."""
