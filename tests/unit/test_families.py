"""
服务族工厂单元测试
"""

import pytest

from behaviorkit.behavior.builtin.families import (
    DevelopmentServiceFactory,
    OrderService,
    ProductionServiceFactory,
    RegistryServiceFactory,
    ServiceFactory,
    register_service_families,
)
from behaviorkit.behavior.builtin.notification import (
    EmailChannel,
    NotificationChannel,
    Outbox,
    SmsChannel,
    register_channels,
)
from behaviorkit.behavior.builtin.payment import (
    CreditCardPayment,
    PaymentLedger,
    PaymentMethod,
    PayPalPayment,
    register_payments,
)
from behaviorkit.behavior.registry import BehaviorRegistry
from behaviorkit.errors import DomainValidationError, UnknownKeyError, UnsupportedOperationError


@pytest.fixture
def ledger() -> PaymentLedger:
    return PaymentLedger()


@pytest.fixture
def outbox() -> Outbox:
    return Outbox()


@pytest.fixture
def notifications(outbox) -> BehaviorRegistry:
    registry = BehaviorRegistry(name="notifications")
    register_channels(registry, outbox=outbox)
    return registry


@pytest.fixture
def payments(ledger) -> BehaviorRegistry:
    registry = BehaviorRegistry(name="payments")
    register_payments(registry, ledger)
    return registry


class TestServiceFamilies:
    """服务族产品配套测试"""

    def test_development_family(self, notifications, payments):
        """测试开发环境产出短信 + PayPal"""
        factory = DevelopmentServiceFactory(notifications, payments)

        assert isinstance(factory.create_notifier(), SmsChannel)
        assert isinstance(factory.create_payment(), PayPalPayment)

    def test_production_family(self, notifications, payments):
        """测试生产环境产出邮件 + 信用卡"""
        factory = ProductionServiceFactory(notifications, payments)

        assert isinstance(factory.create_notifier(), EmailChannel)
        assert isinstance(factory.create_payment(), CreditCardPayment)

    def test_families_do_not_mix(self, notifications, payments):
        """测试两个族的产品互不相同"""
        dev = DevelopmentServiceFactory(notifications, payments)
        prod = ProductionServiceFactory(notifications, payments)

        assert type(dev.create_notifier()) is not type(prod.create_notifier())
        assert type(dev.create_payment()) is not type(prod.create_payment())

    def test_products_satisfy_contracts(self, notifications, payments):
        for factory in (
            DevelopmentServiceFactory(notifications, payments),
            ProductionServiceFactory(notifications, payments),
        ):
            assert isinstance(factory, ServiceFactory)
            assert isinstance(factory.create_notifier(), NotificationChannel)
            assert isinstance(factory.create_payment(), PaymentMethod)

    def test_wrong_product_type(self, notifications, payments):
        """测试注册表返回不符合契约的产品时报错"""
        factory = RegistryServiceFactory(notifications, payments, "email", "email")
        payments.register("email", lambda: notifications.create("email"))

        with pytest.raises(UnsupportedOperationError):
            factory.create_payment()

    def test_missing_product_key(self, payments):
        factory = DevelopmentServiceFactory(BehaviorRegistry(name="empty"), payments)
        with pytest.raises(UnknownKeyError):
            factory.create_notifier()

    def test_to_dict(self, notifications, payments):
        data = ProductionServiceFactory(notifications, payments).to_dict()
        assert data == {
            "environment": "production",
            "type": "ProductionServiceFactory",
            "notifier": "email",
            "payment": "credit_card",
        }

    def test_register_by_environment(self, registry, notifications, payments):
        register_service_families(registry, notifications, payments)

        assert registry.list_keys() == ["development", "production"]
        assert registry.create("development").environment == "development"


class TestOrderService:
    """下单服务测试"""

    def test_place_order_uses_one_family(self, notifications, payments, ledger, outbox):
        """测试同一订单的支付和通知来自同一族"""
        service = OrderService(DevelopmentServiceFactory(notifications, payments))

        result = service.place_order("+48123", 25.0)

        assert result.receipt.method == "paypal"
        assert result.delivery.channel == "sms"
        assert result.receipt.reference in result.delivery.body
        assert ledger.receipts == [result.receipt]
        assert outbox.deliveries == [result.delivery]

    def test_invalid_amount_no_side_effects(self, notifications, payments, ledger, outbox):
        service = OrderService(ProductionServiceFactory(notifications, payments))

        with pytest.raises(DomainValidationError):
            service.place_order("a@example.com", 0)

        assert len(ledger) == 0
        assert len(outbox) == 0
