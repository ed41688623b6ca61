"""
核心服务
"""

from behaviorkit.system.services.config_center import (
    BehaviorKitConfig,
    ConfigCenter,
    DiscountConfig,
    NotificationConfig,
    RateCard,
    RegistryConfig,
    ShippingConfig,
    SystemConfig,
)
from behaviorkit.system.services.logger import (
    Layer,
    LoggerMixin,
    get_logger,
    setup_logging,
    trace_context,
)

__all__ = [
    "BehaviorKitConfig",
    "ConfigCenter",
    "DiscountConfig",
    "NotificationConfig",
    "RateCard",
    "RegistryConfig",
    "ShippingConfig",
    "SystemConfig",
    "Layer",
    "LoggerMixin",
    "get_logger",
    "setup_logging",
    "trace_context",
]
