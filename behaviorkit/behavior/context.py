"""
行为上下文

持有当前选中的行为并把调用委托给它，运行时可替换行为而无需修改上下文本身。
"""

from __future__ import annotations

import threading
from typing import Any, Optional

from behaviorkit.errors import MissingBehaviorError, UnsupportedOperationError
from behaviorkit.system.services.logger import ContextLoggerMixin


class BehaviorContext(ContextLoggerMixin):
    """
    行为上下文

    构造时必须提供行为；之后任何时刻都恰好持有一个行为。
    contract 给定时（类或 runtime_checkable Protocol），不满足契约的行为
    在赋值时即被拒绝，而不是在调用中途失败。

    set_behavior 之后的下一次调用看到新行为；已经在进行中的调用不受影响。
    上下文不捕获、不重试行为抛出的错误。
    """

    def __init__(
        self,
        behavior: Any,
        contract: Optional[type] = None,
        operation: str = "execute",
    ):
        """
        初始化上下文

        Args:
            behavior: 初始行为（必需）
            contract: 行为必须满足的类型或协议
            operation: invoke() 调用的主操作名
        """
        self._contract = contract
        self._operation = operation
        self._lock = threading.Lock()
        self._validate(behavior)
        self._behavior = behavior

    def _validate(self, behavior: Any) -> None:
        if behavior is None:
            raise MissingBehaviorError(self.__class__.__name__)
        if self._contract is not None and not isinstance(behavior, self._contract):
            raise UnsupportedOperationError(behavior, self._contract.__name__)
        if not callable(getattr(behavior, self._operation, None)):
            raise UnsupportedOperationError(behavior, self._operation)

    @property
    def behavior(self) -> Any:
        """当前行为"""
        with self._lock:
            return self._behavior

    @property
    def operation(self) -> str:
        """主操作名"""
        return self._operation

    def set_behavior(self, behavior: Any) -> None:
        """
        替换当前行为

        校验失败时保留原行为。

        Raises:
            MissingBehaviorError: behavior 为 None
            UnsupportedOperationError: 行为不满足契约
        """
        self._validate(behavior)
        with self._lock:
            previous = self._behavior
            self._behavior = behavior
        self.logger.debug(
            f"{self.__class__.__name__}: {type(previous).__name__} -> {type(behavior).__name__}"
        )

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        """调用当前行为的主操作"""
        return self.call(self._operation, *args, **kwargs)

    def call(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        """
        调用当前行为的指定操作

        Args:
            operation: 操作名

        Raises:
            UnsupportedOperationError: 当前行为没有该操作
        """
        behavior = self.behavior
        method = getattr(behavior, operation, None)
        if not callable(method):
            raise UnsupportedOperationError(behavior, operation)
        return method(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} behavior={self.behavior!r}>"
