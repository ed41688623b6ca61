"""
命令层 (Commands)
"""

from behaviorkit.commands.base import (
    Command,
    CommandManager,
    DeleteTextCommand,
    InsertTextCommand,
    TextBuffer,
)

__all__ = [
    "Command",
    "CommandManager",
    "DeleteTextCommand",
    "InsertTextCommand",
    "TextBuffer",
]
