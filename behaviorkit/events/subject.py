"""
主题 / 观察者

Subject 持有有序的观察者句柄列表，可强引用或弱引用。
notify() 遍历在锁内拍下的快照，通知过程中的 attach/detach 只影响下一次通知。
"""

from __future__ import annotations

import inspect
import threading
import weakref
from typing import Any, Callable, Generic, List, Optional, Protocol, TypeVar, Union, runtime_checkable

from behaviorkit.system.services.logger import EventsLoggerMixin

T = TypeVar("T")


@runtime_checkable
class Observer(Protocol):
    def update(self, data: Any) -> None:
        ...


ObserverLike = Union[Observer, Callable[[Any], Any]]


class _Handle:
    """观察者句柄"""

    __slots__ = ("_strong", "_ref", "weak")

    def __init__(self, observer: ObserverLike, weak: bool = False):
        self.weak = weak
        self._strong: Optional[ObserverLike] = None
        self._ref: Optional[weakref.ref] = None
        if weak:
            if inspect.ismethod(observer):
                self._ref = weakref.WeakMethod(observer)
            else:
                self._ref = weakref.ref(observer)
        else:
            self._strong = observer

    def resolve(self) -> Optional[ObserverLike]:
        if self._ref is not None:
            return self._ref()
        return self._strong

    @property
    def alive(self) -> bool:
        return self.resolve() is not None

    def matches(self, observer: ObserverLike) -> bool:
        target = self.resolve()
        return target is not None and (target is observer or target == observer)


def _dispatch(observer: ObserverLike, data: Any) -> None:
    update = getattr(observer, "update", None)
    if callable(update):
        update(data)
    else:
        observer(data)


class Subject(EventsLoggerMixin, Generic[T]):
    """
    主题

    观察者可以是带 update(data) 方法的对象，也可以是普通可调用对象。
    观察者抛出的异常原样传播给 notify() 的调用方，后续观察者不再被调用。
    """

    def __init__(self):
        self._handles: List[_Handle] = []
        self._lock = threading.Lock()

    def attach(self, observer: ObserverLike, weak: bool = False) -> bool:
        """
        添加观察者

        Args:
            observer: 观察者
            weak: 是否弱引用（观察者被回收后自动移除）

        Returns:
            是否新增（重复添加返回 False）
        """
        if not (isinstance(observer, Observer) or callable(observer)):
            raise TypeError(f"Observer must have update() or be callable: {observer!r}")

        with self._lock:
            if any(h.matches(observer) for h in self._handles):
                return False
            self._handles.append(_Handle(observer, weak=weak))
        self.logger.debug(f"{self.__class__.__name__}: 添加观察者 {observer!r} (weak={weak})")
        return True

    def detach(self, observer: ObserverLike) -> bool:
        """移除观察者，返回是否存在"""
        with self._lock:
            for i, handle in enumerate(self._handles):
                if handle.matches(observer):
                    del self._handles[i]
                    break
            else:
                return False
        self.logger.debug(f"{self.__class__.__name__}: 移除观察者 {observer!r}")
        return True

    def _snapshot(self) -> List[ObserverLike]:
        with self._lock:
            # 顺带清理已回收的弱引用
            self._handles = [h for h in self._handles if h.alive]
            observers = [h.resolve() for h in self._handles]
        return [o for o in observers if o is not None]

    def notify(self, data: T) -> int:
        """
        通知所有观察者

        Returns:
            被通知的观察者数量
        """
        observers = self._snapshot()
        for observer in observers:
            _dispatch(observer, data)
        return len(observers)

    @property
    def observer_count(self) -> int:
        """存活的观察者数量"""
        with self._lock:
            return sum(1 for h in self._handles if h.alive)
