"""
behaviorkit 组合根

进程内唯一的依赖容器由调用方持有并显式传递，不使用模块级全局实例。
initialize() 只构建一次各注册表（双重检查加锁）。
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from behaviorkit.behavior.builtin.discount import DiscountCalculator, register_discounts
from behaviorkit.behavior.builtin.families import (
    OrderService,
    ServiceFactory,
    register_service_families,
)
from behaviorkit.behavior.builtin.formatters import ReportGenerator, register_formatters
from behaviorkit.behavior.builtin.notification import (
    NotificationService,
    Outbox,
    register_channels,
)
from behaviorkit.behavior.builtin.payment import (
    PaymentLedger,
    PaymentProcessor,
    PaymentType,
    register_payments,
)
from behaviorkit.behavior.builtin.shipping import ShippingService, register_shipping
from behaviorkit.behavior.decorators import BaseItem, CompositionBuilder, register_toppings
from behaviorkit.behavior.registry import BehaviorRegistry
from behaviorkit.system.services.config_center import (
    DEFAULT_CONFIG_PATH,
    BehaviorKitConfig,
    ConfigCenter,
)
from behaviorkit.system.services.logger import SystemLoggerMixin

REGISTRY_NAMES = (
    "shipping",
    "discounts",
    "payments",
    "formatters",
    "notifications",
    "toppings",
    "service_families",
)


class BehaviorKit(SystemLoggerMixin):
    """
    behaviorkit 组合根

    负责加载配置、构建注册表和共享 sink（支付流水、发件箱），
    并提供按键创建各类上下文的便捷方法。
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Args:
            config_path: 配置文件路径，默认 configs/behaviorkit.yaml
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self.config_center: Optional[ConfigCenter] = None
        self._registries: Dict[str, BehaviorRegistry] = {}
        self._ledger: Optional[PaymentLedger] = None
        self._outbox: Optional[Outbox] = None
        self._initialized = False
        self._init_lock = threading.Lock()
        self.build_count = 0

    def initialize(self) -> "BehaviorKit":
        """初始化（幂等）"""
        if self._initialized:
            return self
        with self._init_lock:
            if self._initialized:
                return self
            self._build()
            self._initialized = True
        return self

    def _build(self) -> None:
        self.log_info("正在初始化 behaviorkit...")

        # 1. 加载配置
        self.config_center = ConfigCenter(self.config_path)
        config = self.config_center.load()
        logging.getLogger("behaviorkit").setLevel(config.system.log_level.upper())
        policy = config.registry.duplicate_policy

        # 2. 构建注册表
        registries = {name: BehaviorRegistry(name=name, duplicate_policy=policy) for name in REGISTRY_NAMES}
        self._ledger = PaymentLedger()
        self._outbox = Outbox()

        register_shipping(registries["shipping"], config.shipping)
        register_discounts(registries["discounts"], config.discount)
        register_payments(registries["payments"], self._ledger)
        register_formatters(registries["formatters"])
        register_channels(registries["notifications"], config.notification, self._outbox)
        register_toppings(registries["toppings"])
        register_service_families(
            registries["service_families"],
            registries["notifications"],
            registries["payments"],
        )

        self._registries = registries
        self.build_count += 1
        self.log_info(
            "behaviorkit 初始化完成: "
            + ", ".join(f"{name}={len(reg)}" for name, reg in registries.items())
        )

    def _require(self) -> None:
        if not self._initialized:
            raise RuntimeError("BehaviorKit 尚未初始化，请先调用 initialize()")

    # ============== 访问器 ==============

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def config(self) -> BehaviorKitConfig:
        self._require()
        return self.config_center.config

    def registry(self, name: str) -> BehaviorRegistry:
        """按名称获取注册表"""
        self._require()
        if name not in self._registries:
            raise KeyError(f"Unknown registry: {name!r}. Available: {', '.join(self._registries)}")
        return self._registries[name]

    @property
    def shipping(self) -> BehaviorRegistry:
        return self.registry("shipping")

    @property
    def discounts(self) -> BehaviorRegistry:
        return self.registry("discounts")

    @property
    def payments(self) -> BehaviorRegistry:
        return self.registry("payments")

    @property
    def formatters(self) -> BehaviorRegistry:
        return self.registry("formatters")

    @property
    def notifications(self) -> BehaviorRegistry:
        return self.registry("notifications")

    @property
    def toppings(self) -> BehaviorRegistry:
        return self.registry("toppings")

    @property
    def service_families(self) -> BehaviorRegistry:
        return self.registry("service_families")

    @property
    def ledger(self) -> PaymentLedger:
        self._require()
        return self._ledger

    @property
    def outbox(self) -> Outbox:
        self._require()
        return self._outbox

    # ============== 上下文工厂 ==============

    def shipping_service(self, carrier: str) -> ShippingService:
        return ShippingService(self.shipping.create(carrier))

    def discount_calculator(self, tier: str) -> DiscountCalculator:
        return DiscountCalculator(self.discounts.create(tier))

    def payment_processor(self, payment_type: PaymentType) -> PaymentProcessor:
        return PaymentProcessor(self.payments.create(payment_type))

    def report_generator(self, fmt: str) -> ReportGenerator:
        return ReportGenerator(self.formatters.create(fmt))

    def notification_service(self, channel: str) -> NotificationService:
        return NotificationService(self.notifications.create(channel))

    def service_factory(self, environment: str) -> ServiceFactory:
        return self.service_families.create(environment)

    def order_service(self, environment: str) -> OrderService:
        return OrderService(self.service_factory(environment))

    def coffee_builder(self, base: Optional[BaseItem] = None) -> CompositionBuilder:
        return CompositionBuilder(base, self.toppings)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "initialized": self._initialized,
            "config_path": self.config_path,
            "registries": {name: reg.to_dict() for name, reg in self._registries.items()},
        }


def create_behavior_kit(config_path: Optional[str] = None) -> BehaviorKit:
    """创建并初始化 BehaviorKit"""
    return BehaviorKit(config_path).initialize()
