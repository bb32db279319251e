# 🚚 realizeit/domain/delivery/services.py
"""
🚚 Оцінка доставки за плоскими тарифами.

🔹 Внутрішній ринок (KR) та «решта світу» мають окремі пари base/per_additional.
🔹 Якщо валюта запиту не збігається з валютою тарифу - конвертуємо
    через наближений конвертер, а не падаємо.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

# 🧩 Внутрішні модулі проєкту
from realizeit.domain.currency.interfaces import DOMESTIC_COUNTRY, CurrencyCode, IMoneyConverter, Money
from realizeit.shared.utils.logger import LOG_NAME
from .interfaces import DeliveryQuote, IDeliveryService, ShippingPolicy

logger = logging.getLogger(f"{LOG_NAME}.domain.delivery")

DEFAULT_POLICY_KEY = "default"

DEFAULT_POLICIES: Mapping[str, ShippingPolicy] = MappingProxyType({
    DOMESTIC_COUNTRY: ShippingPolicy(Decimal("4500"), Decimal("1500"), CurrencyCode.KRW),
    DEFAULT_POLICY_KEY: ShippingPolicy(Decimal("6.99"), Decimal("2.99"), CurrencyCode.USD),
})


def policies_from_config(node: Optional[Mapping[str, Any]]) -> Dict[str, ShippingPolicy]:
    """
    `delivery.policies` з YAML → словник тарифів.

    Порожній або неповний розділ доповнюється дефолтами.
    """
    policies: Dict[str, ShippingPolicy] = dict(DEFAULT_POLICIES)
    for key, raw in (node or {}).items():
        if not isinstance(raw, Mapping):
            logger.warning("⚠️ Пропускаємо тариф %r: очікувався словник", key)
            continue
        currency = CurrencyCode.parse(raw.get("currency"))
        if currency is None:
            raise ValueError(f"Невідома валюта тарифу {key!r}: {raw.get('currency')!r}")
        name = str(key).strip()
        policies[name if name == DEFAULT_POLICY_KEY else name.upper()] = ShippingPolicy(
            base=Decimal(str(raw.get("base", "0"))),
            per_additional=Decimal(str(raw.get("per_additional", "0"))),
            currency=currency,
        )
    return policies


class FlatRateDeliveryService(IDeliveryService):
    """🚚 Оцінювач за таблицею тарифів «країна → ShippingPolicy»."""

    def __init__(self, converter: IMoneyConverter, policies: Optional[Mapping[str, ShippingPolicy]] = None) -> None:
        table = dict(policies or DEFAULT_POLICIES)
        if DEFAULT_POLICY_KEY not in table:
            raise ValueError("Таблиця тарифів повинна містити ключ 'default'.")
        self._policies: Mapping[str, ShippingPolicy] = MappingProxyType(table)
        self._converter = converter

    def policy_for(self, country: str) -> ShippingPolicy:
        return self._policies.get((country or "").strip().upper(), self._policies[DEFAULT_POLICY_KEY])

    def quote(self, *, item_count: int, country: str, currency: CurrencyCode) -> DeliveryQuote:
        policy = self.policy_for(country)
        if item_count <= 0:
            return DeliveryQuote(Decimal("0"), currency, policy.currency)

        native = policy.price_for(item_count)
        if policy.currency == currency:
            return DeliveryQuote(native, currency, policy.currency)

        converted = self._converter.convert_money(Money(native, policy.currency), currency)
        logger.debug(
            "🔁 Shipping currency mismatch | %s %s → %s %s",
            native, policy.currency.value, converted.amount, currency.value,
        )
        return DeliveryQuote(converted.amount, currency, policy.currency, converted=True)
