# 🧰 realizeit/shared/__init__.py
"""🧰 Спільні утиліти: логування та метрики."""
