# 🛍️ realizeit/__init__.py
"""
🛍️ RealizeIt - ядро магазину друку на замовлення.

🔹 `domain` - чисті правила: ціни, кошик, валідація чекауту, замовлення.
🔹 `infrastructure` - конвертер валют, HTTP-клієнт чекауту, адаптери рядків бекенду.
🔹 `config` - ConfigService та DI-контейнер.
"""

__version__ = "0.4.0"
