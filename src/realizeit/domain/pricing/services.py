# 📦 realizeit/domain/pricing/services.py
"""
📦 Чистий сервіс розрахунку вартості кошика.

🔹 Конвеєр: собівартість → націнка → підсумок → доставка → податок → разом.
🔹 Жодних побічних ефектів: ті самі входи дають ті самі Decimal-виходи.
🔹 Некоректні позиції (відʼємна ціна, нульова кількість) дають нульовий внесок, а не виняток.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from realizeit.domain.currency.interfaces import CurrencyCode, currency_for_country
from realizeit.domain.delivery.interfaces import IDeliveryService
from realizeit.shared.utils.logger import LOG_NAME
from .interfaces import IPricingService, LineItem, PriceBreakdown
from .rounding import ZERO, non_negative, positive_quantity

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")

# Політика магазину; значення тимчасові, доки їх не підтвердить власник бізнесу
MARKUP_RATE = Decimal("0.20")
DEFAULT_TAX_RATES: Mapping[str, Decimal] = MappingProxyType({"KR": Decimal("0.10")})


# ================================
# ⚙️ НАЛАШТУВАННЯ ФОРМУЛИ
# ================================
@dataclass(frozen=True)
class PricingConfig:
    """Параметри формули: єдина ставка націнки та податкові ставки за країною."""
    markup_rate: Decimal = MARKUP_RATE
    tax_rates: Mapping[str, Decimal] = field(default_factory=lambda: DEFAULT_TAX_RATES)

    @classmethod
    def from_config(cls, markup_rate: Any = None, tax_rates: Optional[Mapping[str, Any]] = None) -> "PricingConfig":
        """Будує конфіг із сирих значень YAML (рядки/числа)."""
        rates = {str(k).strip().upper(): Decimal(str(v)) for k, v in (tax_rates or {}).items()}
        return cls(
            markup_rate=Decimal(str(markup_rate)) if markup_rate is not None else MARKUP_RATE,
            tax_rates=MappingProxyType(rates) if tax_rates is not None else DEFAULT_TAX_RATES,
        )


def resolve_currency(items: Sequence[LineItem], destination_country: str) -> CurrencyCode:
    """
    Валюта розрахунку: валюта першої позиції, інакше валюта країни доставки.
    """
    if items and items[0].currency is not None:
        return items[0].currency
    return currency_for_country(destination_country)


# ================================
# 🏛️ ДОМЕННИЙ СЕРВІС
# ================================
class PricingService(IPricingService):
    """💸 Розрахунок `PriceBreakdown` для кошика та країни доставки."""

    def __init__(self, delivery_service: IDeliveryService, cfg: Optional[PricingConfig] = None) -> None:
        self._delivery = delivery_service
        self._cfg = cfg or PricingConfig()

    @property
    def config(self) -> PricingConfig:
        return self._cfg

    def compute_breakdown(
        self,
        items: Sequence[LineItem],
        destination_country: str,
        currency: Optional[CurrencyCode] = None,
    ) -> PriceBreakdown:
        country = (destination_country or "").strip().upper()
        ccy = currency or resolve_currency(items, country)

        # --- 🧾 Крок 1: собівартість і кількість ---
        items_cost = ZERO
        item_count = 0
        for item in items:
            qty = positive_quantity(item.quantity)
            items_cost += non_negative(item.base_cost) * qty
            item_count += qty

        if item_count == 0:
            return PriceBreakdown.zero(ccy)

        # --- 📈 Крок 2–3: націнка та підсумок ---
        margin = items_cost * self._cfg.markup_rate
        subtotal = items_cost + margin

        # --- ✈️ Крок 4: доставка ---
        shipping = self.estimate_shipping(item_count, country, ccy)

        # --- 🧾 Крок 5: податок ---
        tax = self.estimate_tax(subtotal, country)

        total = subtotal + shipping + tax
        logger.debug(
            "💵 Breakdown | country=%s ccy=%s count=%d items=%s margin=%s shipping=%s tax=%s total=%s",
            country, ccy.value, item_count, items_cost, margin, shipping, tax, total,
        )
        return PriceBreakdown(
            items_cost=items_cost,
            margin=margin,
            subtotal=subtotal,
            shipping_estimate=shipping,
            tax_estimate=tax,
            total=total,
            currency=ccy,
            item_count=item_count,
        )

    def estimate_shipping(self, item_count: int, destination_country: str, currency: CurrencyCode) -> Decimal:
        """Доставка для `item_count` виробів; ≤ 0 виробів → 0."""
        if item_count <= 0:
            return ZERO
        quote = self._delivery.quote(item_count=item_count, country=destination_country, currency=currency)
        return non_negative(quote.price)

    def estimate_tax(self, subtotal: Decimal, destination_country: str) -> Decimal:
        """Податок за ставкою країни; країни без ставки → 0."""
        rate = self._cfg.tax_rates.get((destination_country or "").strip().upper())
        if rate is None:
            return ZERO
        return non_negative(subtotal) * rate
