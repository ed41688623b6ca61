"""
行为上下文单元测试
"""

import pytest

from behaviorkit.behavior.builtin.shipping import (
    DHLStrategy,
    ShippingService,
    ShippingStrategy,
    UPSStrategy,
)
from behaviorkit.behavior.context import BehaviorContext
from behaviorkit.errors import (
    DomainValidationError,
    MissingBehaviorError,
    UnsupportedOperationError,
)


class Doubler:
    def execute(self, x):
        return x * 2


class Tripler:
    def execute(self, x):
        return x * 3


class Failing:
    def execute(self, x):
        raise DomainValidationError("x", x)


class NoExecute:
    def run(self, x):
        return x


class TestContextConstruction:
    """构造测试"""

    def test_requires_behavior(self):
        """测试构造时必须提供行为"""
        with pytest.raises(MissingBehaviorError):
            BehaviorContext(None)

    def test_missing_behavior_is_value_error(self):
        """测试 MissingBehaviorError 可按 ValueError 捕获"""
        with pytest.raises(ValueError):
            BehaviorContext(None)

    def test_operation_must_exist(self):
        """测试行为缺少主操作时拒绝"""
        with pytest.raises(UnsupportedOperationError):
            BehaviorContext(NoExecute())

    def test_contract_enforced(self):
        """测试不满足契约的行为被拒绝"""
        with pytest.raises(UnsupportedOperationError):
            ShippingService(Doubler())


class TestContextInvoke:
    """委托调用测试"""

    def test_invoke_delegates(self):
        """测试 invoke 委托给当前行为"""
        ctx = BehaviorContext(Doubler())
        assert ctx.invoke(5) == 10

    def test_set_behavior_takes_effect(self):
        """测试替换行为后下一次调用使用新行为"""
        ctx = BehaviorContext(Doubler())
        assert ctx.invoke(5) == 10

        ctx.set_behavior(Tripler())
        assert ctx.invoke(5) == 15
        assert isinstance(ctx.behavior, Tripler)

    def test_set_none_keeps_previous(self):
        """测试替换为 None 失败且保留原行为"""
        ctx = BehaviorContext(Doubler())

        with pytest.raises(MissingBehaviorError):
            ctx.set_behavior(None)

        assert ctx.invoke(2) == 4

    def test_incompatible_swap_keeps_previous(self):
        """测试替换为不兼容行为失败且保留原行为"""
        service = ShippingService(DHLStrategy())

        with pytest.raises(UnsupportedOperationError):
            service.set_strategy(Doubler())

        assert isinstance(service.behavior, DHLStrategy)

    def test_errors_propagate_unchanged(self):
        """测试行为错误原样传播"""
        ctx = BehaviorContext(Failing())

        with pytest.raises(DomainValidationError) as exc_info:
            ctx.invoke(-1)

        assert exc_info.value.field == "x"

    def test_call_named_operation(self):
        """测试调用指定操作"""
        service = ShippingService(DHLStrategy())
        assert service.call("estimated_delivery_days", 600) == 3

    def test_call_unknown_operation(self):
        """测试调用不存在的操作"""
        ctx = BehaviorContext(Doubler())
        with pytest.raises(UnsupportedOperationError):
            ctx.call("fly")


class TestShippingScenario:
    """运费切换场景"""

    def test_dhl_then_ups(self):
        """测试 DHL 切换到 UPS"""
        service = ShippingService(DHLStrategy())
        assert service.calculate_shipping_cost(weight=10, distance=200) == pytest.approx(35.0)

        service.set_strategy(UPSStrategy())
        assert service.calculate_shipping_cost(weight=10, distance=200) == pytest.approx(40.5)

    def test_strategy_contract(self):
        """测试具体策略满足契约"""
        assert isinstance(DHLStrategy(), ShippingStrategy)
