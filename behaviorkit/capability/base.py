"""
能力接口

按能力拆分的窄接口。类型只实现自己真正支持的能力，
不存在“实现了但调用即抛错”的方法。
"""

from __future__ import annotations

from typing import Any, FrozenSet, Protocol, Tuple, Type, TypeVar, runtime_checkable

from behaviorkit.errors import UnsupportedOperationError

T = TypeVar("T")


@runtime_checkable
class Flyable(Protocol):
    def fly(self) -> str:
        ...


@runtime_checkable
class Swimmable(Protocol):
    def swim(self) -> str:
        ...


@runtime_checkable
class Runnable(Protocol):
    def run(self) -> str:
        ...


CAPABILITIES: Tuple[Type[Any], ...] = (Flyable, Swimmable, Runnable)


def capabilities_of(obj: Any) -> FrozenSet[str]:
    """返回对象具备的能力名集合"""
    return frozenset(cap.__name__ for cap in CAPABILITIES if isinstance(obj, cap))


def require_capability(obj: T, capability: Type[Any]) -> T:
    """
    校验对象具备指定能力

    Returns:
        原对象

    Raises:
        UnsupportedOperationError: 不具备该能力
    """
    if not isinstance(obj, capability):
        raise UnsupportedOperationError(obj, capability.__name__)
    return obj
