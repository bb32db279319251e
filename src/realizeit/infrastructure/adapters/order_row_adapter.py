# 🔌 realizeit/infrastructure/adapters/order_row_adapter.py
"""
🔌 Адаптер: «сирий» рядок замовлення з бекенду → строгий `OrderRecord`.

🔹 Єдине місце, де поля шукаються під кількома іменами
    (`total_amount` / `total` / `amount`, `customer_email` / `email`, ...).
🔹 Бекенд зберігає суми в мінорних одиницях (центи, воні); тут вони
    переводяться в основні одиниці за експонентою валюти.
🔹 Зламані поля не валять адаптер: дата → None, сума → None, статус → UNKNOWN.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import re
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from realizeit.domain.currency.interfaces import CurrencyCode
from realizeit.domain.orders.entities import OrderRecord, OrderStatus
from realizeit.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.adapters")

TOTAL_KEYS = ("total_amount", "total", "amount")
EMAIL_KEYS = ("customer_email", "email")
STATUS_KEYS = ("status", "printify_status")
FULFILLMENT_ID_KEYS = ("printify_order_id", "fulfillment_order_id")

_FRACTION_RE = re.compile(r"(?<=\d\d:\d\d:\d\d)\.(\d+)")


def _first(row: Mapping[str, Any], keys: Iterable[str]) -> Any:
    """Перше значення, яке не None (аналог `a ?? b ?? c`)."""
    for key in keys:
        value = row.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """ISO-8601 (з `Z` теж) → datetime; решта → None."""
    if isinstance(value, datetime):
        return value
    text = _text(value)
    if text is None:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    # 🕒 fromisoformat на 3.10 приймає лише 3 або 6 цифр дробу секунд
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug("🕒 Некоректна дата в рядку замовлення: %r", value)
        return None


def minor_to_major(value: Any, currency: CurrencyCode) -> Optional[Decimal]:
    """1999 (центи) → Decimal('19.99'); 15000 KRW → Decimal('15000')."""
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not amount.is_finite():
        return None
    return amount.scaleb(-currency.minor_digits)


def _items_count(row: Mapping[str, Any]) -> int:
    explicit = row.get("items_count")
    if explicit is not None:
        try:
            return max(0, int(explicit))
        except (TypeError, ValueError):
            pass
    items = row.get("items")
    return len(items) if isinstance(items, list) else 0


def normalize_order_row(row: Mapping[str, Any]) -> OrderRecord:
    """Один рядок бекенду → OrderRecord; рядок без `id` → ValueError."""
    order_id = _text(row.get("id"))
    if order_id is None:
        raise ValueError("Order row without id")

    currency = CurrencyCode.parse(row.get("currency")) or CurrencyCode.USD
    raw_status = (_text(_first(row, STATUS_KEYS)) or "").lower()

    return OrderRecord(
        id=order_id,
        status=OrderStatus.parse(raw_status),
        raw_status=raw_status,
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
        customer_email=_text(_first(row, EMAIL_KEYS)) or "",
        currency=currency,
        total_amount=minor_to_major(_first(row, TOTAL_KEYS), currency),
        subtotal_amount=minor_to_major(row.get("subtotal_amount"), currency),
        shipping_amount=minor_to_major(row.get("shipping_amount"), currency),
        tax_amount=minor_to_major(row.get("tax_amount"), currency),
        failure_reason=_text(row.get("failure_reason")),
        fulfillment_order_id=_text(_first(row, FULFILLMENT_ID_KEYS)),
        tracking_code=_text(row.get("tracking_code")),
        tracking_url=_text(row.get("tracking_url")),
        items_count=_items_count(row),
    )


def normalize_order_rows(rows: Any) -> List[OrderRecord]:
    """Список рядків → список записів; не-список → []; зіпсовані рядки пропускаються з логом."""
    if not isinstance(rows, list):
        return []
    records: List[OrderRecord] = []
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        try:
            records.append(normalize_order_row(row))
        except ValueError:
            logger.warning("⚠️ Пропускаємо рядок замовлення без id")
    return records
