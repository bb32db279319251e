# 🎨 realizeit/ui/formatters/__init__.py
"""🎨 Форматери для відображення сум і статусів."""

from .money_formatter import (
    LOCALE_EN,
    LOCALE_KO,
    currency_for_country,
    format_breakdown,
    format_money,
    locale_for_lang,
    status_label,
)

__all__ = [
    "LOCALE_EN",
    "LOCALE_KO",
    "currency_for_country",
    "format_breakdown",
    "format_money",
    "locale_for_lang",
    "status_label",
]
