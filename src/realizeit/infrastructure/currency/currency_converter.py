# 💱 realizeit/infrastructure/currency/currency_converter.py
"""
💱 Stateless-конвертер на фіксованих наближених курсах (не live).

🔹 Курси задаються як «одиниць валюти за 1 одиницю базової» (база - USD).
🔹 Результат квантується до мінорної одиниці цільової валюти (USD 0.01, KRW 1).
🔹 Реалізує доменний `IMoneyConverter`; невідома валюта → `CurrencyRateNotFoundError`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from types import MappingProxyType
from typing import Dict, Mapping, Union

# 🧩 Внутрішні модулі проєкту
from realizeit.domain.currency.interfaces import (
    CurrencyCode,
    CurrencyRateNotFoundError,
    IMoneyConverter,
    Money,
)
from realizeit.domain.pricing.rounding import round_to_currency
from realizeit.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.infrastructure.currency")

# Курс за замовчуванням: 1 USD ≈ 1300 KRW
DEFAULT_APPROX_RATES: Mapping[str, Decimal] = MappingProxyType({
    "USD": Decimal("1"),
    "KRW": Decimal("1300"),
})

RateValue = Union[Decimal, int, float, str]


# ================================
# 🧰 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _to_decimal(value: object) -> Decimal:
    """🧮 Приводить значення до Decimal через рядок (без артефактів float)."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValueError(f"Невалідний курс: {value!r}") from exc


# ================================
# 💱 КОНВЕРТЕР
# ================================
class FixedRateConverter(IMoneyConverter):
    """
    💱 Конвертер поверх знімка курсів.

    Після створення курси не змінюються - безпечно ділити між потоками.
    """

    def __init__(
        self,
        rates: Mapping[str, RateValue] = DEFAULT_APPROX_RATES,
        *,
        base: str = "USD",
        rounding: str = ROUND_HALF_EVEN,
    ) -> None:
        if not isinstance(rates, Mapping):
            raise TypeError("rates повинен бути Mapping[str, Decimal|int|float|str].")

        normalized: Dict[str, Decimal] = {}
        for key, value in rates.items():
            code = (key or "").strip().upper()
            if not code:
                continue
            rate = _to_decimal(value)
            if rate <= 0:
                raise ValueError(f"Курс {code} має бути додатним, отримано {rate}")
            normalized[code] = rate

        base_code = base.strip().upper()
        normalized.setdefault(base_code, Decimal("1"))         # 🏦 База завжди 1

        self._rates: Mapping[str, Decimal] = MappingProxyType(normalized)
        self._rounding = rounding
        logger.debug("💱 FixedRateConverter ready | base=%s rates=%s", base_code, dict(normalized))

    @property
    def rates(self) -> Mapping[str, Decimal]:
        return self._rates

    def convert_money(self, money: Money, to_currency: CurrencyCode) -> Money:
        """🔄 Конвертує через базову валюту: amount / rate_from × rate_to."""
        if money.currency == to_currency:
            return Money(round_to_currency(money.amount, to_currency, self._rounding), to_currency)

        try:
            rate_from = self._rates[money.currency.value]
            rate_to = self._rates[to_currency.value]
        except KeyError as missing:
            logger.error("❌ Відсутній курс для %s → %s", money.currency.value, to_currency.value)
            raise CurrencyRateNotFoundError(money.currency.value, to_currency.value) from missing

        converted = round_to_currency(money.amount / rate_from * rate_to, to_currency, self._rounding)
        logger.debug(
            "🔄 convert %s %s → %s %s",
            money.amount, money.currency.value, converted, to_currency.value,
        )
        return Money(converted, to_currency)
