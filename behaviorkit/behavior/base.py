"""
行为基类

行为 (Behavior) 是一组可互换的逻辑单元。同一族的行为暴露相同的操作签名，
上下文 (BehaviorContext) 可以统一地调用它们。
"""

from __future__ import annotations

import math
from abc import ABC
from dataclasses import dataclass, field
from typing import Any, Dict, List

from behaviorkit.errors import DomainValidationError
from behaviorkit.system.services.logger import BehaviorLoggerMixin


@dataclass
class BehaviorConfig:
    """行为配置"""
    name: str = ""
    description: str = ""
    version: str = "1.0.0"
    tags: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


class Behavior(ABC, BehaviorLoggerMixin):
    """
    行为基类

    行为族（运费、折扣、支付……）在各自的抽象子类里声明操作签名，
    具体行为实现这些操作。默认无状态，需要副作用时注入外部 sink。
    """

    def __init__(self, config: BehaviorConfig):
        """
        初始化行为

        Args:
            config: 行为配置
        """
        self._config = config

    @property
    def name(self) -> str:
        """行为名称"""
        return self._config.name

    @property
    def description(self) -> str:
        """行为描述"""
        return self._config.description

    @property
    def config(self) -> BehaviorConfig:
        """配置"""
        return self._config

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "name": self.name,
            "description": self.description,
            "version": self._config.version,
            "tags": list(self._config.tags),
            "type": self.__class__.__name__,
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


def require_non_negative(field_name: str, value: float) -> float:
    """校验非负数值"""
    if math.isnan(value) or value < 0:
        raise DomainValidationError(field_name, value, f"{field_name} must be >= 0, got {value!r}")
    return value


def require_positive(field_name: str, value: float) -> float:
    """校验正数值"""
    if math.isnan(value) or value <= 0:
        raise DomainValidationError(field_name, value, f"{field_name} must be > 0, got {value!r}")
    return value
