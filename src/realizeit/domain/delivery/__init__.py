# 🚚 realizeit/domain/delivery/__init__.py
"""
🚚 Пакет `domain.delivery` - тарифи та оцінка доставки.
"""

from .interfaces import DeliveryQuote, IDeliveryService, ShippingPolicy
from .services import DEFAULT_POLICIES, DEFAULT_POLICY_KEY, FlatRateDeliveryService, policies_from_config

__all__ = [
    "DEFAULT_POLICIES",
    "DEFAULT_POLICY_KEY",
    "DeliveryQuote",
    "FlatRateDeliveryService",
    "IDeliveryService",
    "ShippingPolicy",
    "policies_from_config",
]
