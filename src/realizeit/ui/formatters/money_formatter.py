# 💬 realizeit/ui/formatters/money_formatter.py
"""
💬 Форматування грошей і статусів для екрана кошика, чекауту та адмінки.

🔹 Відʼємні суми показуються як нуль
🔹 Сума округлюється до мінорної одиниці валюти (USD - центи, KRW - цілі)
🔹 Підписи розкладу ціни локалізовані для en-US та ko-KR
"""

from __future__ import annotations

# 🔠 Системні імпорти
from decimal import Decimal, ROUND_HALF_UP                        # 🔢 Операції з десятковими сумами
from typing import Any, Final, List, Mapping, Optional, Tuple, Union  # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from realizeit.domain.currency.interfaces import CurrencyCode, currency_for_country
from realizeit.domain.pricing.interfaces import PriceBreakdown
from realizeit.domain.pricing.rounding import non_negative
from realizeit.domain.pricing.services import MARKUP_RATE

# ================================
# 🔧 КОНСТАНТИ МОДУЛЯ
# ================================
LOCALE_EN: Final[str] = "en-US"
LOCALE_KO: Final[str] = "ko-KR"

_SYMBOLS: Final[Mapping[str, str]] = {
    CurrencyCode.USD.value: "$",
    CurrencyCode.KRW.value: "₩",
}

_BREAKDOWN_LABELS: Final[Mapping[str, Tuple[str, str, str, str, str]]] = {
    LOCALE_EN: ("Items cost", "Margin ({pct}%)", "Estimated tax", "Estimated shipping", "Total"),
    LOCALE_KO: ("상품 금액", "마진 ({pct}%)", "예상 세금", "예상 배송비", "합계"),
}

__all__ = [
    "LOCALE_EN",
    "LOCALE_KO",
    "currency_for_country",
    "format_breakdown",
    "format_money",
    "locale_for_lang",
    "status_label",
]


def locale_for_lang(lang: Optional[str]) -> str:
    """`ko`/`kr` → ko-KR, усе інше → en-US."""
    return LOCALE_KO if (lang or "").strip().lower() in ("ko", "kr") else LOCALE_EN


def format_money(
    amount: Any,
    currency: Union[CurrencyCode, str],
    locale: str = LOCALE_EN,
) -> str:
    """
    Сума → рядок для показу.

    Приклади:
        format_money(Decimal("1234.5"), "USD") → "$1,234.50"
        format_money(5500, CurrencyCode.KRW, "ko-KR") → "₩5,500"
        format_money(-3, "USD") → "$0.00"
    """
    value = non_negative(amount)
    code = (currency.value if isinstance(currency, CurrencyCode) else str(currency or "")).strip().upper()
    parsed = CurrencyCode.parse(code)
    digits = parsed.minor_digits if parsed is not None else 2
    rounded = value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    text = f"{rounded:,.{digits}f}"

    symbol = _SYMBOLS.get(code)
    if symbol is None:
        return f"{text} {code}" if code else text
    return f"{symbol}{text}"


def format_breakdown(
    breakdown: PriceBreakdown,
    locale: str = LOCALE_EN,
    *,
    markup_rate: Decimal = MARKUP_RATE,
) -> List[Tuple[str, str]]:
    """Рядки «підпис → сума» у порядку показу на сторінці чекауту."""
    labels = _BREAKDOWN_LABELS.get(locale, _BREAKDOWN_LABELS[LOCALE_EN])
    pct = (Decimal(str(markup_rate)) * 100).normalize()
    amounts = (
        breakdown.items_cost,
        breakdown.margin,
        breakdown.tax_estimate,
        breakdown.shipping_estimate,
        breakdown.total,
    )
    return [
        (label.format(pct=f"{pct:f}"), format_money(amount, breakdown.currency, locale))
        for label, amount in zip(labels, amounts)
    ]


def status_label(status: Any) -> str:
    """'retry_queued' → 'Retry Queued'; порожній статус → '-'."""
    raw = getattr(status, "value", status)
    text = str(raw or "").strip().replace("_", " ").replace("-", " ")
    if not text:
        return "-"
    return " ".join(word.capitalize() for word in text.split())
