"""
🧩 interfaces.py - DTO та контракти ціноутворення.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Sequence

from realizeit.domain.currency.interfaces import CurrencyCode
from .rounding import ZERO, non_negative, positive_quantity


def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


# ================================
# 🛒 ПОЗИЦІЯ КОШИКА
# ================================
@dataclass(frozen=True)
class LineItem:
    """
    Позиція кошика: виріб у конкретній конфігурації.

    `base_cost` - собівартість одиниці до націнки у валюті `currency`.
    """
    id: str
    base_cost: Decimal
    quantity: int
    currency: Optional[CurrencyCode] = None
    name: str = ""
    product_slug: Optional[str] = None
    variant_id: Optional[str] = None
    variant_name: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "LineItem":
        """
        Збережений JSON-запис кошика → LineItem.

        Ключі у camelCase; `unitCost` приймається як синонім `baseCost`,
        `previewUrl` - як синонім `imageUrl`. Суми й кількості нормалізуються
        (сміття → 0), відсутній `id` → ValueError.
        """
        item_id = _opt_str(raw.get("id"))
        if item_id is None:
            raise ValueError("Cart item without id")
        cost = raw.get("baseCost", raw.get("unitCost"))
        return cls(
            id=item_id,
            base_cost=non_negative(cost),
            quantity=positive_quantity(raw.get("quantity")),
            currency=CurrencyCode.parse(raw.get("currency")),
            name=_opt_str(raw.get("name")) or "",
            product_slug=_opt_str(raw.get("productSlug")),
            variant_id=_opt_str(raw.get("variantId")),
            variant_name=_opt_str(raw.get("variantName")),
            color=_opt_str(raw.get("color")),
            size=_opt_str(raw.get("size")),
            image_url=_opt_str(raw.get("imageUrl", raw.get("previewUrl"))),
        )

    def to_payload(self, fallback_currency: CurrencyCode) -> Dict[str, Any]:
        """Запис для тіла запиту чекауту (camelCase, числа як float)."""
        return {
            "id": self.id,
            "name": self.name,
            "productSlug": self.product_slug,
            "variantId": self.variant_id,
            "variantName": self.variant_name,
            "color": self.color,
            "size": self.size,
            "quantity": self.quantity,
            "baseCost": float(self.base_cost),
            "currency": (self.currency or fallback_currency).value,
        }


# ================================
# 📊 РОЗКЛАД ЦІНИ
# ================================
@dataclass(frozen=True)
class PriceBreakdown:
    """Похідний розклад ціни; ніколи не кешується і не зберігається."""
    items_cost: Decimal
    margin: Decimal
    subtotal: Decimal
    shipping_estimate: Decimal
    tax_estimate: Decimal
    total: Decimal
    currency: CurrencyCode
    item_count: int = 0

    @classmethod
    def zero(cls, currency: CurrencyCode) -> "PriceBreakdown":
        return cls(ZERO, ZERO, ZERO, ZERO, ZERO, ZERO, currency, 0)

    def to_payload(self) -> Dict[str, Any]:
        """`totals` для тіла запиту чекауту."""
        return {
            "itemsCost": float(self.items_cost),
            "margin": float(self.margin),
            "subtotal": float(self.subtotal),
            "shippingEstimate": float(self.shipping_estimate),
            "taxEstimate": float(self.tax_estimate),
            "total": float(self.total),
            "currency": self.currency.value,
        }


# ================================
# 💰 КОНТРАКТ СЕРВІСУ
# ================================
class IPricingService(ABC):
    """💰 Контракт для сервісу розрахунку цін."""

    @abstractmethod
    def compute_breakdown(
        self,
        items: Sequence[LineItem],
        destination_country: str,
        currency: Optional[CurrencyCode] = None,
    ) -> PriceBreakdown:
        """Розклад ціни кошика для країни доставки."""
