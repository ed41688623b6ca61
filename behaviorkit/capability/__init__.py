"""
能力层 (Capability Layer)

按能力拆分的窄接口及其组合示例。
"""

from behaviorkit.capability.base import (
    CAPABILITIES,
    Flyable,
    Runnable,
    Swimmable,
    capabilities_of,
    require_capability,
)
from behaviorkit.capability.birds import Bird, Duck, Ostrich, Penguin, Sparrow
from behaviorkit.capability.shapes import Rectangle, Shape, Square

__all__ = [
    "CAPABILITIES",
    "Flyable",
    "Swimmable",
    "Runnable",
    "capabilities_of",
    "require_capability",
    "Bird",
    "Sparrow",
    "Penguin",
    "Duck",
    "Ostrich",
    "Shape",
    "Rectangle",
    "Square",
]
