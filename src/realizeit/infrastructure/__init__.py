# 🏗️ realizeit/infrastructure/__init__.py
"""🏗️ Інфраструктура: реалізації доменних контрактів та зовнішні клієнти."""
