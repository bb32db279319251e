# 🧩 realizeit/infrastructure/services/__init__.py
"""🧩 Прикладні сервіси, що поєднують домен та зовнішні клієнти."""

from .checkout_service import (
    OUTCOME_BUSY,
    OUTCOME_FAILED,
    OUTCOME_INVALID,
    OUTCOME_REDIRECT,
    CheckoutOutcome,
    CheckoutService,
)

__all__ = [
    "CheckoutOutcome",
    "CheckoutService",
    "OUTCOME_BUSY",
    "OUTCOME_FAILED",
    "OUTCOME_INVALID",
    "OUTCOME_REDIRECT",
]
