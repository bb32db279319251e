# 🔌 realizeit/infrastructure/adapters/__init__.py
"""🔌 Адаптери на межі системи: сирі дані бекенду → строгі доменні моделі."""

from .order_row_adapter import minor_to_major, normalize_order_row, normalize_order_rows, parse_timestamp

__all__ = [
    "minor_to_major",
    "normalize_order_row",
    "normalize_order_rows",
    "parse_timestamp",
]
