"""
运费策略

每个承运商按费率卡计算运费和预计送达天数。
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from behaviorkit.behavior.base import Behavior, BehaviorConfig, require_non_negative
from behaviorkit.behavior.context import BehaviorContext
from behaviorkit.system.services.config_center import RateCard, ShippingConfig

if TYPE_CHECKING:
    from behaviorkit.behavior.registry import BehaviorRegistry


class ShippingStrategy(Behavior):
    """运费策略契约"""

    @abstractmethod
    def calculate_cost(self, weight: float, distance: float) -> float:
        """按重量(kg)和距离(km)计算运费"""

    @abstractmethod
    def estimated_delivery_days(self, distance: float) -> int:
        """预计送达天数"""


class RateCardShipping(ShippingStrategy):
    """
    费率卡运费策略

    cost = base_cost + weight * weight_rate + distance * distance_rate
    """

    def __init__(self, name: str, rate_card: RateCard):
        super().__init__(BehaviorConfig(
            name=name,
            description=f"{name} 费率卡运费",
            tags=["shipping"],
        ))
        self.rate_card = rate_card

    def calculate_cost(self, weight: float, distance: float) -> float:
        require_non_negative("weight", weight)
        require_non_negative("distance", distance)
        card = self.rate_card
        return card.base_cost + weight * card.weight_rate + distance * card.distance_rate

    def estimated_delivery_days(self, distance: float) -> int:
        require_non_negative("distance", distance)
        card = self.rate_card
        return card.long_days if distance > card.long_distance_km else card.short_days


_DEFAULTS = ShippingConfig().carriers


class DHLStrategy(RateCardShipping):
    def __init__(self, rate_card: Optional[RateCard] = None):
        super().__init__("DHL", rate_card or _DEFAULTS["DHL"])


class UPSStrategy(RateCardShipping):
    def __init__(self, rate_card: Optional[RateCard] = None):
        super().__init__("UPS", rate_card or _DEFAULTS["UPS"])


class FedExStrategy(RateCardShipping):
    def __init__(self, rate_card: Optional[RateCard] = None):
        super().__init__("FedEx", rate_card or _DEFAULTS["FedEx"])


class InPostStrategy(RateCardShipping):
    """InPost 按重量计价，不计距离，固定5天"""

    def __init__(self, rate_card: Optional[RateCard] = None):
        super().__init__("InPost", rate_card or _DEFAULTS["InPost"])


class ShippingService(BehaviorContext):
    """运费服务，运行时可切换承运商"""

    def __init__(self, strategy: ShippingStrategy):
        super().__init__(strategy, contract=ShippingStrategy, operation="calculate_cost")

    def set_strategy(self, strategy: ShippingStrategy) -> None:
        self.set_behavior(strategy)

    def calculate_shipping_cost(self, weight: float, distance: float) -> float:
        return self.invoke(weight, distance)

    def estimated_delivery_days(self, distance: float) -> int:
        return self.call("estimated_delivery_days", distance)


def register_shipping(registry: "BehaviorRegistry", config: Optional[ShippingConfig] = None) -> None:
    """
    按配置为每个承运商注册工厂

    Args:
        registry: 目标注册表
        config: 运费配置，默认使用内置费率卡
    """
    config = config or ShippingConfig()
    for carrier, card in config.carriers.items():
        # 绑定循环变量
        registry.register(carrier, lambda carrier=carrier, card=card: RateCardShipping(carrier, card))
