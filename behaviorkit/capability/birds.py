"""
鸟类

基类只包含所有鸟共有的行为（进食、移动），飞行和游泳作为独立能力组合。
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Bird(ABC):
    """所有鸟共有的行为"""

    def __init__(self, name: str = ""):
        self.name = name or self.__class__.__name__

    def eat(self) -> str:
        return f"{self.name} eating"

    @abstractmethod
    def move(self) -> str:
        """按自身擅长的方式移动"""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"


class Sparrow(Bird):
    """Flyable"""

    def fly(self) -> str:
        return f"{self.name} flying"

    def move(self) -> str:
        return self.fly()


class Penguin(Bird):
    """Swimmable"""

    def swim(self) -> str:
        return f"{self.name} swimming"

    def move(self) -> str:
        return self.swim()


class Duck(Bird):
    """Flyable + Swimmable"""

    def fly(self) -> str:
        return f"{self.name} flying"

    def swim(self) -> str:
        return f"{self.name} swimming"

    def move(self) -> str:
        return self.fly()


class Ostrich(Bird):
    """Runnable"""

    def run(self) -> str:
        return f"{self.name} running"

    def move(self) -> str:
        return self.run()
