"""
行为注册表

将判别键（字符串或枚举成员）映射到零参数工厂函数，
新增行为只需注册，无需修改调用方的分派代码。
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable, Dict, Hashable, List, Literal, Optional

from behaviorkit.errors import BehaviorKitError, DuplicateKeyError, UnknownKeyError
from behaviorkit.system.services.logger import RegistryLoggerMixin


BehaviorFactory = Callable[[], Any]
DuplicatePolicy = Literal["overwrite", "error"]


def key_label(key: Hashable) -> str:
    """键的可读形式，用于日志和错误信息"""
    if isinstance(key, Enum):
        return f"{type(key).__name__}.{key.name}"
    return str(key)


class BehaviorRegistry(RegistryLoggerMixin):
    """
    行为注册表

    - 键精确匹配、区分大小写，不做模式匹配
    - 重复注册默认覆盖（保留原注册位置），duplicate_policy="error" 时报错
    - list_keys() 按注册顺序返回快照

    线程安全：条目字典由锁保护；工厂函数在锁外调用。
    """

    def __init__(
        self,
        name: str = "",
        duplicate_policy: DuplicatePolicy = "overwrite",
    ):
        """
        初始化注册表

        Args:
            name: 注册表名称（用于日志和错误信息）
            duplicate_policy: 重复注册策略
        """
        if duplicate_policy not in ("overwrite", "error"):
            raise ValueError(f"Unknown duplicate policy: {duplicate_policy!r}")
        self.name = name
        self.duplicate_policy = duplicate_policy
        self._factories: Dict[Hashable, BehaviorFactory] = {}
        self._lock = threading.Lock()

    def register(self, key: Hashable, factory: BehaviorFactory) -> None:
        """
        注册行为工厂

        Args:
            key: 判别键
            factory: 零参数工厂函数（类本身也可以）

        Raises:
            TypeError: factory 不可调用
            DuplicateKeyError: 键已存在且策略为 "error"
        """
        if not callable(factory):
            raise TypeError(f"Factory for {key_label(key)!r} is not callable: {factory!r}")

        with self._lock:
            exists = key in self._factories
            if exists and self.duplicate_policy == "error":
                raise DuplicateKeyError(key, registry=self.name)
            self._factories[key] = factory

        if exists:
            self.log_warning(f"[{self.name}] 键 '{key_label(key)}' 已存在，将被覆盖")
        else:
            self.logger.debug(f"[{self.name}] 注册行为工厂: {key_label(key)}")

    def register_decorator(self, key: Hashable) -> Callable[[BehaviorFactory], BehaviorFactory]:
        """
        装饰器形式注册

        用法:
            @registry.register_decorator("DHL")
            class DHLStrategy(ShippingStrategy): ...
        """
        def decorator(factory: BehaviorFactory) -> BehaviorFactory:
            self.register(key, factory)
            return factory
        return decorator

    def unregister(self, key: Hashable) -> bool:
        """
        注销行为

        Returns:
            是否存在并已删除
        """
        with self._lock:
            removed = self._factories.pop(key, None) is not None
        if removed:
            self.logger.debug(f"[{self.name}] 注销行为: {key_label(key)}")
        return removed

    def create(self, key: Hashable) -> Any:
        """
        按键创建行为实例

        Args:
            key: 判别键

        Returns:
            新的行为实例

        Raises:
            UnknownKeyError: 键未注册（注册表不受影响）
            BehaviorKitError: 工厂返回 None
        """
        with self._lock:
            factory = self._factories.get(key)
            if factory is None:
                available = sorted(key_label(k) for k in self._factories)
        if factory is None:
            raise UnknownKeyError(key, available, registry=self.name)

        behavior = factory()
        if behavior is None:
            raise BehaviorKitError(
                f"Factory for {key_label(key)!r} in registry {self.name!r} returned None"
            )
        return behavior

    def get_factory(self, key: Hashable) -> Optional[BehaviorFactory]:
        """获取工厂函数，不存在返回 None"""
        with self._lock:
            return self._factories.get(key)

    def list_keys(self) -> List[Hashable]:
        """已注册键的快照（按注册顺序）"""
        with self._lock:
            return list(self._factories)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._factories

    def __len__(self) -> int:
        with self._lock:
            return len(self._factories)

    @property
    def count(self) -> int:
        """已注册行为数量"""
        return len(self)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "name": self.name,
            "duplicate_policy": self.duplicate_policy,
            "keys": [key_label(k) for k in self.list_keys()],
        }

    def __repr__(self) -> str:
        return f"<BehaviorRegistry name={self.name!r} count={len(self)}>"
