"""
behaviorkit - 可插拔行为注册表

行为 (Behavior) 实现固定的操作契约；注册表 (BehaviorRegistry) 把判别键映射到
工厂函数；上下文 (BehaviorContext) 持有当前行为并委托调用，运行时可替换。

快速开始：
    from behaviorkit import create_behavior_kit

    kit = create_behavior_kit()
    service = kit.shipping_service("DHL")
    service.calculate_shipping_cost(weight=10, distance=200)  # 35.0

    service.set_strategy(kit.shipping.create("UPS"))
    service.calculate_shipping_cost(weight=10, distance=200)  # 40.5
"""

__version__ = "0.1.0"

from behaviorkit.behavior import Behavior, BehaviorConfig, BehaviorContext, BehaviorRegistry
from behaviorkit.core import BehaviorKit, create_behavior_kit
from behaviorkit.errors import (
    BehaviorKitError,
    DomainValidationError,
    DuplicateKeyError,
    MissingBehaviorError,
    UnknownKeyError,
    UnsupportedOperationError,
)

__all__ = [
    "Behavior",
    "BehaviorConfig",
    "BehaviorContext",
    "BehaviorRegistry",
    "BehaviorKit",
    "create_behavior_kit",
    "BehaviorKitError",
    "DomainValidationError",
    "DuplicateKeyError",
    "MissingBehaviorError",
    "UnknownKeyError",
    "UnsupportedOperationError",
    "__version__",
]
