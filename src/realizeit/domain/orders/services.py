# 🔎 realizeit/domain/orders/services.py
"""
🔎 Операції над уже завантаженими рядками замовлень (у памʼяті).

🔹 Фільтр адмінки: текстовий пошук, діапазон дат, набір статусів, «лише збої».
🔹 Лічильники за статусами, прогрес для покупця, чисті переходи статусів.
🔹 Експорт відфільтрованого списку у CSV.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import csv
import io
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .entities import ADMIN_STATUSES, OrderRecord, OrderStatus

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _aware(value: datetime) -> datetime:
    """Наївні дати вважаємо UTC, щоб їх можна було порівнювати з aware."""
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


# ================================
# 🔎 ФІЛЬТР
# ================================
@dataclass(frozen=True)
class OrderFilter:
    query: str = ""
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    statuses: FrozenSet[OrderStatus] = field(default_factory=frozenset)
    failures_only: bool = False
    newest_first: bool = True

    def matches(self, order: OrderRecord) -> bool:
        q = self.query.strip().lower()
        if q:
            haystack = (
                order.id.lower(),
                order.customer_email.lower(),
                (order.fulfillment_order_id or "").lower(),
                order.status.value if order.status is not OrderStatus.UNKNOWN else order.raw_status.lower(),
            )
            if not any(q in field_value for field_value in haystack):
                return False
        # Рядки без дати не відсікаються діапазоном
        if self.date_from is not None and order.created_at is not None:
            if _aware(order.created_at) < _aware(self.date_from):
                return False
        if self.date_to is not None and order.created_at is not None:
            if _aware(order.created_at) > _aware(self.date_to):
                return False
        if self.statuses and order.status not in self.statuses:
            return False
        if self.failures_only and not order.is_failed:
            return False
        return True


def _created_key(order: OrderRecord) -> datetime:
    return _aware(order.created_at) if order.created_at is not None else _EPOCH


def filter_orders(orders: Iterable[OrderRecord], flt: Optional[OrderFilter] = None) -> List[OrderRecord]:
    """Відфільтрований і відсортований за `created_at` список (стабільне сортування)."""
    flt = flt or OrderFilter()
    selected = [o for o in orders if flt.matches(o)]
    selected.sort(key=_created_key, reverse=flt.newest_first)
    return selected


def count_by_status(orders: Iterable[OrderRecord]) -> Dict[OrderStatus, int]:
    """Кількість замовлень за статусом; усі відомі статуси присутні (нулі теж)."""
    counts: Dict[OrderStatus, int] = {status: 0 for status in ADMIN_STATUSES}
    for order in orders:
        counts[order.status] = counts.get(order.status, 0) + 1
    return counts


# ================================
# 🧭 ПРОГРЕС ДЛЯ ПОКУПЦЯ
# ================================
PIPELINE_STEPS: Tuple[Tuple[str, str], ...] = (
    ("created", "Created"),
    ("paid", "Paid"),
    ("submitted", "Submitted to Production"),
    ("in_production", "In Production"),
    ("shipped", "Shipped"),
    ("delivered", "Delivered"),
)

_PIPELINE_INDEX: Dict[str, int] = {
    "created": 0,
    "pending": 0,
    "unpaid": 0,
    "paid": 1,
    "authorized": 1,
    "submitted": 2,
    "submitted_to_printify": 2,
    "in_production": 3,
    "production": 3,
    "shipped": 4,
    "fulfilled": 4,
    "delivered": 5,
}

_TERMINATED = frozenset({"canceled", "cancelled", "refunded"})


@dataclass(frozen=True)
class StatusProgress:
    current: int                                                # 🔢 Індекс кроку; -1 для скасованих
    is_canceled: bool
    raw: str
    steps: Tuple[Tuple[str, str], ...] = PIPELINE_STEPS


def status_progress(order: OrderRecord) -> StatusProgress:
    raw = (order.raw_status or order.status.value).strip().lower()
    if raw in _TERMINATED or order.status in (OrderStatus.CANCELED, OrderStatus.REFUNDED):
        return StatusProgress(current=-1, is_canceled=True, raw=raw)
    return StatusProgress(current=_PIPELINE_INDEX.get(raw, 0), is_canceled=False, raw=raw)


# ================================
# 🔁 ПЕРЕХОДИ СТАТУСІВ
# ================================
def mark_retry_queued(order: OrderRecord) -> OrderRecord:
    """Повторна відправка у фулфілмент: статус retry_queued, причина збою очищується."""
    return replace(
        order,
        status=OrderStatus.RETRY_QUEUED,
        raw_status=OrderStatus.RETRY_QUEUED.value,
        failure_reason=None,
    )


def mark_canceled(order: OrderRecord) -> OrderRecord:
    return replace(order, status=OrderStatus.CANCELED, raw_status=OrderStatus.CANCELED.value)


# ================================
# 📤 CSV
# ================================
CSV_HEADER: Tuple[str, ...] = (
    "id",
    "status",
    "created_at",
    "updated_at",
    "customer_email",
    "currency",
    "total_amount",
    "failure_reason",
    "fulfillment_order_id",
)


def _iso(value: Optional[datetime]) -> str:
    return value.isoformat() if value is not None else ""


def export_orders_csv(orders: Sequence[OrderRecord]) -> str:
    """Усі клітинки в лапках; переноси рядків у причині збою замінюються пробілами."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for o in orders:
        writer.writerow(
            (
                o.id,
                o.raw_status or o.status.value,
                _iso(o.created_at),
                _iso(o.updated_at),
                o.customer_email,
                o.currency.value,
                "" if o.total_amount is None else str(o.total_amount),
                (o.failure_reason or "").replace("\r", " ").replace("\n", " "),
                o.fulfillment_order_id or "",
            )
        )
    return buffer.getvalue()
