"""
错误类型

所有库内错误都继承 BehaviorKitError，同时继承对应的内置异常，
调用方可以按 KeyError / ValueError / TypeError 捕获。
"""

from __future__ import annotations

from typing import Any, Hashable, List, Optional


class BehaviorKitError(Exception):
    """behaviorkit 错误基类"""


class UnknownKeyError(BehaviorKitError, KeyError):
    """注册表中不存在该键"""

    def __init__(self, key: Hashable, available: Optional[List[str]] = None, registry: str = ""):
        self.key = key
        self.available = list(available or [])
        self.registry = registry
        where = f" in registry {registry!r}" if registry else ""
        super().__init__(
            f"Unknown key {key!r}{where}. Available: {', '.join(self.available) or '-'}"
        )

    def __str__(self) -> str:
        # KeyError.__str__ 会给消息加引号
        return str(self.args[0])


class DuplicateKeyError(BehaviorKitError, KeyError):
    """重复注册（仅在 duplicate_policy="error" 时抛出）"""

    def __init__(self, key: Hashable, registry: str = ""):
        self.key = key
        self.registry = registry
        where = f" in registry {registry!r}" if registry else ""
        super().__init__(f"Key {key!r} is already registered{where}")

    def __str__(self) -> str:
        return str(self.args[0])


class DomainValidationError(BehaviorKitError, ValueError):
    """行为的前置条件不满足"""

    def __init__(self, field: str, value: Any, message: str = ""):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field}: {value!r}")


class UnsupportedOperationError(BehaviorKitError, TypeError):
    """对象不具备所需的能力"""

    def __init__(self, obj: Any, capability: str):
        self.obj = obj
        self.capability = capability
        super().__init__(
            f"{type(obj).__name__} does not support {capability}"
        )


class MissingBehaviorError(BehaviorKitError, ValueError):
    """上下文缺少行为"""

    def __init__(self, context: str = ""):
        self.context = context
        super().__init__(f"{context or 'Context'} requires a behavior, got None")
