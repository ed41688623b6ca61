"""
命令

命令封装一次可撤销的操作；CommandManager 维护撤销/重做栈。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from behaviorkit.behavior.base import require_non_negative
from behaviorkit.errors import DomainValidationError
from behaviorkit.system.services.logger import CommandLoggerMixin


class Command(ABC):
    """可撤销命令"""

    @abstractmethod
    def execute(self) -> None:
        ...

    @abstractmethod
    def undo(self) -> None:
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class TextBuffer:
    """文本缓冲区（命令的接收者）"""

    def __init__(self, content: str = ""):
        self._content = content

    @property
    def content(self) -> str:
        return self._content

    def insert(self, text: str) -> None:
        self._content += text

    def delete(self, length: int) -> str:
        """从末尾删除 length 个字符，返回被删除的文本"""
        require_non_negative("length", length)
        if length > len(self._content):
            raise DomainValidationError(
                "length", length,
                f"cannot delete {length} chars from buffer of {len(self._content)}",
            )
        if length == 0:
            return ""
        removed = self._content[-length:]
        self._content = self._content[:-length]
        return removed


class InsertTextCommand(Command):
    def __init__(self, buffer: TextBuffer, text: str):
        self.buffer = buffer
        self.text = text

    def execute(self) -> None:
        self.buffer.insert(self.text)

    def undo(self) -> None:
        self.buffer.delete(len(self.text))


class DeleteTextCommand(Command):
    def __init__(self, buffer: TextBuffer, length: int):
        self.buffer = buffer
        self.length = length
        self._deleted = ""

    def execute(self) -> None:
        self._deleted = self.buffer.delete(self.length)

    def undo(self) -> None:
        self.buffer.insert(self._deleted)


class CommandManager(CommandLoggerMixin):
    """
    命令管理器

    - execute(): 执行并入撤销栈，清空重做栈
    - 命令执行失败时异常原样传播，且不入栈
    - undo()/redo() 失败时命令留在原栈中
    """

    def __init__(self):
        self._undo_stack: List[Command] = []
        self._redo_stack: List[Command] = []

    def execute(self, command: Command) -> None:
        command.execute()
        self._undo_stack.append(command)
        self._redo_stack.clear()
        self.logger.debug(f"执行命令: {command!r}")

    def undo(self) -> bool:
        if not self._undo_stack:
            return False
        # 撤销成功后才出栈
        command = self._undo_stack[-1]
        command.undo()
        self._undo_stack.pop()
        self._redo_stack.append(command)
        return True

    def redo(self) -> bool:
        if not self._redo_stack:
            return False
        command = self._redo_stack[-1]
        command.execute()
        self._redo_stack.pop()
        self._undo_stack.append(command)
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def history(self) -> List[Command]:
        """已执行（可撤销）的命令，按执行顺序"""
        return list(self._undo_stack)
