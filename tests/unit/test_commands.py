"""
命令单元测试
"""

import pytest

from behaviorkit.commands import (
    CommandManager,
    DeleteTextCommand,
    InsertTextCommand,
    TextBuffer,
)
from behaviorkit.errors import DomainValidationError


class TestTextBuffer:
    """文本缓冲区测试"""

    def test_insert_and_delete(self):
        buffer = TextBuffer("Hello")
        buffer.insert(" World")

        assert buffer.delete(6) == " World"
        assert buffer.content == "Hello"

    def test_delete_zero(self):
        buffer = TextBuffer("abc")
        assert buffer.delete(0) == ""
        assert buffer.content == "abc"

    def test_delete_too_long(self):
        with pytest.raises(DomainValidationError):
            TextBuffer("ab").delete(3)

    def test_delete_negative(self):
        with pytest.raises(DomainValidationError):
            TextBuffer("ab").delete(-1)


class TestCommandManager:
    """撤销 / 重做测试"""

    def test_undo_redo(self):
        """测试执行、撤销、重做"""
        buffer = TextBuffer()
        manager = CommandManager()

        manager.execute(InsertTextCommand(buffer, "Hello"))
        manager.execute(InsertTextCommand(buffer, " World"))
        assert buffer.content == "Hello World"

        assert manager.undo() is True
        assert buffer.content == "Hello"

        assert manager.redo() is True
        assert buffer.content == "Hello World"

    def test_delete_command_restores_text(self):
        buffer = TextBuffer("Hello World")
        manager = CommandManager()

        manager.execute(DeleteTextCommand(buffer, 6))
        assert buffer.content == "Hello"

        manager.undo()
        assert buffer.content == "Hello World"

    def test_empty_stacks(self):
        manager = CommandManager()
        assert manager.undo() is False
        assert manager.redo() is False
        assert not manager.can_undo
        assert not manager.can_redo

    def test_execute_clears_redo(self):
        """测试新命令清空重做栈"""
        buffer = TextBuffer()
        manager = CommandManager()

        manager.execute(InsertTextCommand(buffer, "a"))
        manager.undo()
        assert manager.can_redo

        manager.execute(InsertTextCommand(buffer, "b"))
        assert not manager.can_redo
        assert buffer.content == "b"

    def test_failed_command_not_recorded(self):
        """测试执行失败的命令不入栈"""
        buffer = TextBuffer("ab")
        manager = CommandManager()

        with pytest.raises(DomainValidationError):
            manager.execute(DeleteTextCommand(buffer, 5))

        assert manager.history == []
        assert buffer.content == "ab"

    def test_failed_undo_keeps_command(self):
        """测试撤销失败时命令仍留在撤销栈"""
        buffer = TextBuffer()
        manager = CommandManager()
        manager.execute(InsertTextCommand(buffer, "abc"))
        buffer.delete(3)

        with pytest.raises(DomainValidationError):
            manager.undo()

        assert manager.can_undo
        assert not manager.can_redo

        buffer.insert("abc")
        assert manager.undo() is True
        assert buffer.content == ""

    def test_failed_redo_keeps_command(self):
        """测试重做失败时命令仍留在重做栈"""
        buffer = TextBuffer("Hello")
        manager = CommandManager()
        manager.execute(DeleteTextCommand(buffer, 5))
        manager.undo()
        buffer.delete(5)

        with pytest.raises(DomainValidationError):
            manager.redo()

        assert manager.can_redo
        assert manager.history == []

    def test_history_order(self):
        buffer = TextBuffer()
        manager = CommandManager()
        first = InsertTextCommand(buffer, "x")
        second = InsertTextCommand(buffer, "y")

        manager.execute(first)
        manager.execute(second)

        assert manager.history == [first, second]
