# 🏛️ realizeit/domain/__init__.py
"""🏛️ Доменний шар: чисті правила без I/O."""
