# 📦 realizeit/domain/orders/entities.py
"""
📦 Строга модель замовлення, з якою працює адмінка та кабінет покупця.

🔹 Створюється лише адаптером рядків бекенду - всередині домену жодних «?? / or» фолбеків.
🔹 Суми - Decimal у основних одиницях валюти (не центах).
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from realizeit.domain.currency.interfaces import CurrencyCode


class OrderStatus(str, Enum):
    """Статуси замовлення, які пише бекенд/фулфілмент."""

    PENDING = "pending"
    PROCESSING = "processing"
    SUBMITTED = "submitted"
    PRODUCTION = "production"
    IN_PRODUCTION = "in_production"
    FULFILLED = "fulfilled"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELED = "canceled"
    FAILED = "failed"
    RETRY_QUEUED = "retry_queued"
    REFUNDED = "refunded"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "OrderStatus":
        value = (raw or "").strip().lower().replace(" ", "_").replace("-", "_")
        if value == "cancelled":                                # 🇬🇧 британський варіант
            value = cls.CANCELED.value
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


# Статуси, які показуються фільтрами адмінки (UNKNOWN - ні)
ADMIN_STATUSES = tuple(s for s in OrderStatus if s is not OrderStatus.UNKNOWN)


@dataclass(frozen=True)
class OrderRecord:
    id: str
    status: OrderStatus = OrderStatus.UNKNOWN
    raw_status: str = ""                                        # 🧾 Як прийшло з бекенду (для пайплайна)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    customer_email: str = ""
    currency: CurrencyCode = CurrencyCode.USD
    total_amount: Optional[Decimal] = None
    subtotal_amount: Optional[Decimal] = None
    shipping_amount: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    failure_reason: Optional[str] = None
    fulfillment_order_id: Optional[str] = None
    tracking_code: Optional[str] = None
    tracking_url: Optional[str] = None
    items_count: int = 0

    @property
    def is_failed(self) -> bool:
        return self.status is OrderStatus.FAILED or bool(self.failure_reason)
