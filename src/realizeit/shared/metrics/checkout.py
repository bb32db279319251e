# 📈 realizeit/shared/metrics/checkout.py
"""
📈 Prometheus-метрики відправки чекауту.

🔹 `CHECKOUT_SUBMISSIONS` - лічильник спроб за результатом
    (`redirect`, `invalid`, `failed`, `busy`).
🔹 `CHECKOUT_SUBMIT_SECONDS` - гістограма часу запиту до endpoint-а.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter, Histogram

CHECKOUT_SUBMISSIONS = Counter(
    "realizeit_checkout_submissions_total",
    "Checkout attempts by outcome",
    ["outcome"],
)

CHECKOUT_SUBMIT_SECONDS = Histogram(
    "realizeit_checkout_submit_seconds",
    "Time spent waiting for the checkout endpoint",
)


__all__ = [
    "CHECKOUT_SUBMISSIONS",
    "CHECKOUT_SUBMIT_SECONDS",
]
