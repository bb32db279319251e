# ➗ realizeit/domain/pricing/rounding.py
"""➗ Утиліти округлення грошових сум (Decimal)."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Any

from realizeit.domain.currency.interfaces import CurrencyCode

ZERO = Decimal("0")


def round_to_currency(amount: Decimal, currency: CurrencyCode, rounding: str = ROUND_HALF_EVEN) -> Decimal:
    """Квантує до мінорної одиниці валюти: USD → 0.01, KRW → 1."""
    return amount.quantize(Decimal(1).scaleb(-currency.minor_digits), rounding=rounding)


def non_negative(value: Any) -> Decimal:
    """
    Безпечне приведення до Decimal ≥ 0.

    None, сміття, NaN/Infinity та відʼємні значення → 0.
    Float іде через `str()`, щоб 10.1 не ставало 10.0999999...
    """
    if value is None or isinstance(value, bool):
        return ZERO
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    if not amount.is_finite() or amount < 0:
        return ZERO
    return amount


def positive_quantity(value: Any) -> int:
    """Кількість як ціле ≥ 0; все невалідне → 0 (внесок у суму нульовий)."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        qty = int(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError, OverflowError):
        return 0
    return qty if qty > 0 else 0
