# 💱 realizeit/infrastructure/currency/__init__.py
"""💱 Конвертер валют на наближених фіксованих курсах."""

from .currency_converter import DEFAULT_APPROX_RATES, FixedRateConverter

__all__ = ["DEFAULT_APPROX_RATES", "FixedRateConverter"]
