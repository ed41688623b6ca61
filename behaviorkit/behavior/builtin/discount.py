"""
客户折扣策略

新增客户等级只需新增策略并注册，计算器本身无需修改。
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from behaviorkit.behavior.base import Behavior, BehaviorConfig, require_non_negative
from behaviorkit.behavior.context import BehaviorContext
from behaviorkit.system.services.config_center import DiscountConfig

if TYPE_CHECKING:
    from behaviorkit.behavior.registry import BehaviorRegistry


class DiscountStrategy(Behavior):
    """折扣策略契约"""

    @abstractmethod
    def calculate_discount(self, price: float, years_as_member: int = 0) -> float:
        """返回折扣金额（不是折后价）"""

    @staticmethod
    def _check(price: float, years_as_member: int) -> None:
        require_non_negative("price", price)
        require_non_negative("years_as_member", years_as_member)


class FlatRateDiscount(DiscountStrategy):
    """固定比例折扣"""

    def __init__(self, name: str, rate: float):
        super().__init__(BehaviorConfig(name=name, description=f"{rate:.0%} 折扣", tags=["discount"]))
        self.rate = rate

    def calculate_discount(self, price: float, years_as_member: int = 0) -> float:
        self._check(price, years_as_member)
        return price * self.rate


class CorporateDiscount(DiscountStrategy):
    """企业客户：超过阈值的大额订单使用更高比例"""

    def __init__(self, threshold: float = 10000.0, high_rate: float = 0.30, low_rate: float = 0.18):
        super().__init__(BehaviorConfig(name="corporate", description="企业客户折扣", tags=["discount"]))
        self.threshold = threshold
        self.high_rate = high_rate
        self.low_rate = low_rate

    def calculate_discount(self, price: float, years_as_member: int = 0) -> float:
        self._check(price, years_as_member)
        rate = self.high_rate if price > self.threshold else self.low_rate
        return price * rate


class VipDiscount(DiscountStrategy):
    """VIP：基础比例 + 每年会员额外比例"""

    def __init__(self, base_rate: float = 0.25, loyalty_rate: float = 0.01):
        super().__init__(BehaviorConfig(name="vip", description="VIP 折扣", tags=["discount"]))
        self.base_rate = base_rate
        self.loyalty_rate = loyalty_rate

    def calculate_discount(self, price: float, years_as_member: int = 0) -> float:
        self._check(price, years_as_member)
        return price * self.base_rate + price * (years_as_member * self.loyalty_rate)


class DiscountCalculator(BehaviorContext):
    """折扣计算器"""

    def __init__(self, strategy: DiscountStrategy):
        super().__init__(strategy, contract=DiscountStrategy, operation="calculate_discount")

    def calculate_discount(self, price: float, years_as_member: int = 0) -> float:
        return self.invoke(price, years_as_member)

    def final_price(self, price: float, years_as_member: int = 0) -> float:
        return price - self.calculate_discount(price, years_as_member)


def register_discounts(registry: "BehaviorRegistry", config: Optional[DiscountConfig] = None) -> None:
    """注册所有折扣策略"""
    config = config or DiscountConfig()
    for tier, rate in config.tiers.items():
        registry.register(tier, lambda tier=tier, rate=rate: FlatRateDiscount(tier, rate))
    registry.register("corporate", lambda: CorporateDiscount(
        config.corporate_threshold,
        config.corporate_high_rate,
        config.corporate_low_rate,
    ))
    registry.register("vip", lambda: VipDiscount(config.vip_base_rate, config.vip_loyalty_rate))
