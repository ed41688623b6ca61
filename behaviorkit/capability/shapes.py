"""
图形

Rectangle 和 Square 是互不继承的不可变值对象，
修改尺寸通过返回新对象完成，不会破坏另一方的不变量。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from behaviorkit.behavior.base import require_positive


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        ...


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def __post_init__(self):
        require_positive("width", self.width)
        require_positive("height", self.height)

    def area(self) -> float:
        return self.width * self.height

    def with_width(self, width: float) -> "Rectangle":
        return replace(self, width=width)

    def with_height(self, height: float) -> "Rectangle":
        return replace(self, height=height)


@dataclass(frozen=True)
class Square(Shape):
    side: float

    def __post_init__(self):
        require_positive("side", self.side)

    def area(self) -> float:
        return self.side * self.side

    def with_side(self, side: float) -> "Square":
        return replace(self, side=side)
