# ⚙️ realizeit/config/setup/__init__.py
"""
⚙️ Пакет для «збирання» всіх сервісів магазину перед використанням.
"""

from .container import Container, bootstrap_logging

__all__ = [
    "Container",
    "bootstrap_logging",
]
