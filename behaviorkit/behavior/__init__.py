"""
行为层 (Behavior Layer)

可插拔行为的三个协作组件：
- 行为 (Behavior): 实现固定操作契约的可互换逻辑单元
- 行为注册表 (BehaviorRegistry): 判别键 -> 工厂函数，新增行为无需修改分派代码
- 行为上下文 (BehaviorContext): 持有当前行为并委托调用，运行时可替换

依赖顺序：Behavior 契约 -> 具体行为 -> Registry -> Context
"""

from behaviorkit.behavior.base import (
    Behavior,
    BehaviorConfig,
    require_non_negative,
    require_positive,
)
from behaviorkit.behavior.registry import (
    BehaviorFactory,
    BehaviorRegistry,
)
from behaviorkit.behavior.context import BehaviorContext
from behaviorkit.behavior.decorators import (
    AddOn,
    BaseItem,
    CompositionBuilder,
    CostComponent,
    CostDecorator,
    Topping,
    register_toppings,
)

__all__ = [
    # 基础
    "Behavior",
    "BehaviorConfig",
    "require_non_negative",
    "require_positive",

    # 注册表
    "BehaviorFactory",
    "BehaviorRegistry",

    # 上下文
    "BehaviorContext",

    # 装饰器组合
    "CostComponent",
    "BaseItem",
    "CostDecorator",
    "AddOn",
    "Topping",
    "CompositionBuilder",
    "register_toppings",
]
