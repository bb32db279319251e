# ✅ realizeit/domain/checkout/validation.py
"""
✅ Перевірка готовності кошика та форми до оплати.

🔹 Усі правила перевіряються незалежно, порушення накопичуються у списку,
    щоб покупець виправив усе за один прохід.
🔹 Поточний кошик і email користувача передаються явно - жодного глобального стану.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import re
from decimal import Decimal
from typing import Any, Callable, List, Sequence, Tuple

from realizeit.domain.pricing.interfaces import LineItem
from realizeit.domain.pricing.rounding import non_negative
from .shipping_form import ShippingForm

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MSG_FULL_NAME = "Full name is required."
MSG_EMAIL = "A valid email is required."
MSG_ADDRESS = "Address is required."
MSG_CITY = "City is required."
MSG_POSTAL_CODE = "Postal code is required."
MSG_COUNTRY = "Country is required."
MSG_CONSENT = "You must accept the IP/rights and sales terms."
MSG_EMPTY_CART = "Your cart is empty."
MSG_ZERO_TOTAL = "Unable to proceed with a zero-value order."


def is_valid_email(value: str) -> bool:
    return bool(value) and EMAIL_RE.match(value) is not None


def _present(value: str, min_len: int = 1) -> bool:
    return len((value or "").strip()) >= min_len


# (правило, повідомлення) у порядку показу
_Rule = Callable[[ShippingForm, Sequence[LineItem], Decimal, str], bool]
_RULES: Tuple[Tuple[_Rule, str], ...] = (
    (lambda f, _i, _t, _e: _present(f.full_name, 2), MSG_FULL_NAME),
    (lambda f, _i, _t, e: is_valid_email(f.effective_email(e)), MSG_EMAIL),
    (lambda f, _i, _t, _e: _present(f.address1, 4), MSG_ADDRESS),
    (lambda f, _i, _t, _e: _present(f.city), MSG_CITY),
    (lambda f, _i, _t, _e: _present(f.postal_code), MSG_POSTAL_CODE),
    (lambda f, _i, _t, _e: _present(f.country), MSG_COUNTRY),
    (lambda f, _i, _t, _e: f.consent is True, MSG_CONSENT),
    (lambda _f, i, _t, _e: len(i) > 0, MSG_EMPTY_CART),
    (lambda _f, _i, t, _e: t > 0, MSG_ZERO_TOTAL),
)


def validate_checkout_readiness(
    items: Sequence[LineItem],
    shipping_form: ShippingForm,
    computed_total: Any,
    user_email: str = "",
) -> List[str]:
    """Повертає всі порушення по порядку; порожній список означає «можна платити»."""
    total = non_negative(computed_total)
    return [
        message
        for rule, message in _RULES
        if not rule(shipping_form, items, total, user_email)
    ]


def is_checkout_ready(
    items: Sequence[LineItem],
    shipping_form: ShippingForm,
    computed_total: Any,
    user_email: str = "",
) -> bool:
    return not validate_checkout_readiness(items, shipping_form, computed_total, user_email)
