"""
服务族工厂

一个 ServiceFactory 产出一组配套的行为（通知渠道 + 支付方式），
调用方只依赖工厂抽象，切换环境时整组替换，不会混用不同环境的产品。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Hashable

from behaviorkit.behavior.base import require_positive
from behaviorkit.behavior.builtin.notification import Delivery, NotificationChannel
from behaviorkit.behavior.builtin.payment import PaymentMethod, PaymentReceipt, PaymentType
from behaviorkit.capability.base import require_capability
from behaviorkit.system.services.logger import SystemLoggerMixin

if TYPE_CHECKING:
    from behaviorkit.behavior.registry import BehaviorRegistry


class ServiceFactory(ABC):
    """服务族工厂契约"""

    environment = ""

    @abstractmethod
    def create_notifier(self) -> NotificationChannel:
        """创建本族的通知渠道"""

    @abstractmethod
    def create_payment(self) -> PaymentMethod:
        """创建本族的支付方式"""

    def to_dict(self) -> Dict[str, Any]:
        return {"environment": self.environment, "type": self.__class__.__name__}

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} environment={self.environment!r}>"


class RegistryServiceFactory(ServiceFactory):
    """
    从注册表按固定键创建产品的服务族

    Args:
        notifications: 通知渠道注册表
        payments: 支付方式注册表
        notifier_key: 本族使用的通知渠道键
        payment_key: 本族使用的支付方式键
    """

    def __init__(
        self,
        notifications: "BehaviorRegistry",
        payments: "BehaviorRegistry",
        notifier_key: Hashable,
        payment_key: Hashable,
    ):
        self.notifications = notifications
        self.payments = payments
        self.notifier_key = notifier_key
        self.payment_key = payment_key

    def create_notifier(self) -> NotificationChannel:
        return require_capability(self.notifications.create(self.notifier_key), NotificationChannel)

    def create_payment(self) -> PaymentMethod:
        return require_capability(self.payments.create(self.payment_key), PaymentMethod)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["notifier"] = str(self.notifier_key)
        data["payment"] = getattr(self.payment_key, "value", str(self.payment_key))
        return data


class DevelopmentServiceFactory(RegistryServiceFactory):
    """开发环境：短信通知 + PayPal"""

    environment = "development"

    def __init__(self, notifications: "BehaviorRegistry", payments: "BehaviorRegistry"):
        super().__init__(notifications, payments, "sms", PaymentType.PAYPAL)


class ProductionServiceFactory(RegistryServiceFactory):
    """生产环境：邮件通知 + 信用卡"""

    environment = "production"

    def __init__(self, notifications: "BehaviorRegistry", payments: "BehaviorRegistry"):
        super().__init__(notifications, payments, "email", PaymentType.CREDIT_CARD)


@dataclass
class OrderResult:
    """下单结果"""
    receipt: PaymentReceipt
    delivery: Delivery


class OrderService(SystemLoggerMixin):
    """只依赖 ServiceFactory 的下单服务"""

    def __init__(self, factory: ServiceFactory):
        self.factory = factory

    def place_order(self, recipient: str, amount: float) -> OrderResult:
        require_positive("amount", amount)
        receipt = self.factory.create_payment().process(amount)
        delivery = self.factory.create_notifier().send(
            recipient,
            "Order confirmed",
            f"Paid {receipt.amount:.2f} ({receipt.reference})",
        )
        self.log_info(f"[{self.factory.environment}] 订单完成: {receipt.reference}")
        return OrderResult(receipt=receipt, delivery=delivery)


def register_service_families(
    registry: "BehaviorRegistry",
    notifications: "BehaviorRegistry",
    payments: "BehaviorRegistry",
) -> None:
    """按环境名注册服务族工厂"""
    registry.register("development", lambda: DevelopmentServiceFactory(notifications, payments))
    registry.register("production", lambda: ProductionServiceFactory(notifications, payments))
