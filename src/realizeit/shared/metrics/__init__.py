# 📊 realizeit/shared/metrics/__init__.py
"""
📊 Пакет Prometheus-метрик застосунку.

🔹 Лічильники та гістограма відправок чекауту.
🔹 Легкий bootstrap експортера `/metrics`.
"""

from __future__ import annotations

from .checkout import CHECKOUT_SUBMISSIONS, CHECKOUT_SUBMIT_SECONDS
from .exporters import maybe_start_prometheus

__all__ = [
    "CHECKOUT_SUBMISSIONS",
    "CHECKOUT_SUBMIT_SECONDS",
    "maybe_start_prometheus",
]
