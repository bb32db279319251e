# 📦 realizeit/domain/orders/__init__.py
"""
📦 Пакет `domain.orders` - строга модель замовлення та операції над списками.
"""

from .entities import ADMIN_STATUSES, OrderRecord, OrderStatus
from .services import (
    CSV_HEADER,
    PIPELINE_STEPS,
    OrderFilter,
    StatusProgress,
    count_by_status,
    export_orders_csv,
    filter_orders,
    mark_canceled,
    mark_retry_queued,
    status_progress,
)

__all__ = [
    "ADMIN_STATUSES",
    "CSV_HEADER",
    "OrderFilter",
    "OrderRecord",
    "OrderStatus",
    "PIPELINE_STEPS",
    "StatusProgress",
    "count_by_status",
    "export_orders_csv",
    "filter_orders",
    "mark_canceled",
    "mark_retry_queued",
    "status_progress",
]
