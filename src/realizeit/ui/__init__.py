# 🖥️ realizeit/ui/__init__.py
"""🖥️ Презентаційний шар: форматування сум і статусів для відображення."""
