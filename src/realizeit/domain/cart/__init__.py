# 🛒 realizeit/domain/cart/__init__.py
"""🛒 Пакет `domain.cart` - операції над знімком кошика."""

from .services import (
    MAX_QUANTITY,
    MIN_QUANTITY,
    Cart,
    CartSummary,
    clamp_quantity,
    clear_cart,
    parse_cart_snapshot,
    remove_item,
    summarize_cart,
    unit_price,
    update_quantity,
    update_variant,
)

__all__ = [
    "Cart",
    "CartSummary",
    "MAX_QUANTITY",
    "MIN_QUANTITY",
    "clamp_quantity",
    "clear_cart",
    "parse_cart_snapshot",
    "remove_item",
    "summarize_cart",
    "unit_price",
    "update_quantity",
    "update_variant",
]
