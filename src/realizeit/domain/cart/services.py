# 🛒 realizeit/domain/cart/services.py
"""
🛒 Операції над кошиком як над незмінним знімком.

🔹 Кожна операція повертає новий tuple, вхідний знімок не змінюється.
🔹 Кількість завжди в межах 1..99.
🔹 Розбір збереженого кошика толерантний: сміття → порожній кошик.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import json
import logging
import math
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

# 🧩 Внутрішні модулі проєкту
from realizeit.domain.currency.interfaces import CurrencyCode
from realizeit.domain.pricing.interfaces import LineItem
from realizeit.domain.pricing.rounding import ZERO, non_negative, positive_quantity, round_to_currency
from realizeit.domain.pricing.services import MARKUP_RATE
from realizeit.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.domain.cart")

MIN_QUANTITY = 1
MAX_QUANTITY = 99

Cart = Tuple[LineItem, ...]


@dataclass(frozen=True)
class CartSummary:
    """Підсумок кошика без доставки та податку."""
    base_cost_total: Decimal
    markup_total: Decimal
    subtotal: Decimal
    items_count: int


def clamp_quantity(value: Any) -> int:
    """floor + обмеження 1..99; порожнє/невалідне значення → 1."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return MIN_QUANTITY
    if math.isnan(number) or number == 0:
        return MIN_QUANTITY
    if math.isinf(number):
        return MAX_QUANTITY if number > 0 else MIN_QUANTITY
    return max(MIN_QUANTITY, min(MAX_QUANTITY, math.floor(number)))


def update_quantity(items: Iterable[LineItem], item_id: str, quantity: Any) -> Cart:
    qty = clamp_quantity(quantity)
    return tuple(replace(i, quantity=qty) if i.id == item_id else i for i in items)


def update_variant(
    items: Iterable[LineItem],
    item_id: str,
    *,
    size: Optional[str] = None,
    color: Optional[str] = None,
) -> Cart:
    changes = {k: v for k, v in (("size", size), ("color", color)) if v is not None}
    if not changes:
        return tuple(items)
    return tuple(replace(i, **changes) if i.id == item_id else i for i in items)


def remove_item(items: Iterable[LineItem], item_id: str) -> Cart:
    return tuple(i for i in items if i.id != item_id)


def clear_cart() -> Cart:
    return ()


def unit_price(item: LineItem, currency: CurrencyCode, markup_rate: Decimal = MARKUP_RATE) -> Decimal:
    """Роздрібна ціна одиниці: собівартість × (1 + націнка), округлена до валюти."""
    return round_to_currency(non_negative(item.base_cost) * (Decimal("1") + markup_rate), currency)


def summarize_cart(
    items: Sequence[LineItem],
    currency: CurrencyCode,
    markup_rate: Decimal = MARKUP_RATE,
) -> CartSummary:
    base_total = ZERO
    count = 0
    for item in items:
        qty = positive_quantity(item.quantity)
        base_total += non_negative(item.base_cost) * qty
        count += qty
    markup_total = base_total * markup_rate
    return CartSummary(
        base_cost_total=round_to_currency(base_total, currency),
        markup_total=round_to_currency(markup_total, currency),
        subtotal=round_to_currency(base_total + markup_total, currency),
        items_count=count,
    )


def parse_cart_snapshot(raw: Union[str, bytes, Sequence[Any], None]) -> Cart:
    """
    Збережений кошик (JSON-рядок або вже розібраний список) → Cart.

    Не список → порожній кошик; позиції без id чи не-словники пропускаються.
    """
    data: Any = raw
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("⚠️ Збережений кошик не є валідним JSON - починаємо з порожнього")
            return ()
    if not isinstance(data, list):
        return ()

    items = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        try:
            items.append(LineItem.from_mapping(entry))
        except ValueError:
            logger.debug("🧹 Пропускаємо позицію кошика без id: %r", entry)
    return tuple(items)
