# 📮 realizeit/domain/checkout/shipping_form.py
"""📮 Форма доставки покупця."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping

KOREAN_LANGS = ("kr", "ko")

# camelCase-ключ збереженої форми → поле dataclass
_FIELD_ALIASES: Dict[str, str] = {
    "email": "email",
    "fullName": "full_name",
    "phone": "phone",
    "address1": "address1",
    "address2": "address2",
    "city": "city",
    "state": "state",
    "postalCode": "postal_code",
    "country": "country",
    "consent": "consent",
    "saveAddress": "save_address",
    "marketingOptIn": "marketing_opt_in",
}
_BOOL_FIELDS = ("consent", "save_address", "marketing_opt_in")


@dataclass(frozen=True)
class ShippingForm:
    email: str = ""
    full_name: str = ""
    phone: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = "US"                                         # 🌍 ISO-2
    consent: bool = False
    save_address: bool = True
    marketing_opt_in: bool = False

    @classmethod
    def for_locale(cls, lang: str) -> "ShippingForm":
        """Порожня форма; країна KR для корейської мови, інакше US."""
        return cls(country="KR" if (lang or "").strip().lower() in KOREAN_LANGS else "US")

    def merged_with(self, saved: Mapping[str, Any]) -> "ShippingForm":
        """
        Накладає збережену (camelCase) форму поверх поточної.

        Невідомі ключі ігноруються, None не перезаписує значення.
        """
        changes: Dict[str, Any] = {}
        for key, value in (saved or {}).items():
            attr = _FIELD_ALIASES.get(key)
            if attr is None or value is None:
                continue
            changes[attr] = bool(value) if attr in _BOOL_FIELDS else str(value)
        return replace(self, **changes)

    def effective_email(self, user_email: str = "") -> str:
        """Email з форми без пробілів по краях, а якщо порожній - email залогіненого користувача."""
        return (self.email or "").strip() or (user_email or "").strip()

    def to_payload(self, user_email: str = "") -> Dict[str, Any]:
        data = asdict(self)
        payload = {alias: data[attr] for alias, attr in _FIELD_ALIASES.items()}
        payload["email"] = self.effective_email(user_email)
        return payload
