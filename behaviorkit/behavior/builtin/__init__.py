"""
内置行为

运费、折扣、支付、报表格式、通知渠道，以及按环境成组创建的服务族。
"""

from behaviorkit.behavior.builtin.discount import (
    CorporateDiscount,
    DiscountCalculator,
    DiscountStrategy,
    FlatRateDiscount,
    VipDiscount,
    register_discounts,
)
from behaviorkit.behavior.builtin.families import (
    DevelopmentServiceFactory,
    OrderResult,
    OrderService,
    ProductionServiceFactory,
    RegistryServiceFactory,
    ServiceFactory,
    register_service_families,
)
from behaviorkit.behavior.builtin.formatters import (
    CsvReportFormatter,
    HtmlReportFormatter,
    JsonReportFormatter,
    ReportFormatter,
    ReportGenerator,
    SalesRecord,
    XmlReportFormatter,
    YamlReportFormatter,
    register_formatters,
)
from behaviorkit.behavior.builtin.notification import (
    Delivery,
    EmailChannel,
    NotificationChannel,
    NotificationService,
    Outbox,
    PushChannel,
    SlackChannel,
    SmsChannel,
    register_channels,
)
from behaviorkit.behavior.builtin.payment import (
    BankTransferPayment,
    CreditCardPayment,
    LegacyGateway,
    LegacyGatewayAdapter,
    PaymentLedger,
    PaymentMethod,
    PaymentProcessor,
    PaymentReceipt,
    PaymentType,
    PayPalPayment,
    register_payments,
)
from behaviorkit.behavior.builtin.shipping import (
    DHLStrategy,
    FedExStrategy,
    InPostStrategy,
    RateCardShipping,
    ShippingService,
    ShippingStrategy,
    UPSStrategy,
    register_shipping,
)

__all__ = [
    # 运费
    "ShippingStrategy",
    "RateCardShipping",
    "DHLStrategy",
    "UPSStrategy",
    "FedExStrategy",
    "InPostStrategy",
    "ShippingService",
    "register_shipping",

    # 折扣
    "DiscountStrategy",
    "FlatRateDiscount",
    "CorporateDiscount",
    "VipDiscount",
    "DiscountCalculator",
    "register_discounts",

    # 支付
    "PaymentType",
    "PaymentReceipt",
    "PaymentLedger",
    "PaymentMethod",
    "CreditCardPayment",
    "PayPalPayment",
    "BankTransferPayment",
    "LegacyGateway",
    "LegacyGatewayAdapter",
    "PaymentProcessor",
    "register_payments",

    # 报表
    "SalesRecord",
    "ReportFormatter",
    "CsvReportFormatter",
    "JsonReportFormatter",
    "YamlReportFormatter",
    "HtmlReportFormatter",
    "XmlReportFormatter",
    "ReportGenerator",
    "register_formatters",

    # 通知
    "Delivery",
    "Outbox",
    "NotificationChannel",
    "EmailChannel",
    "SmsChannel",
    "PushChannel",
    "SlackChannel",
    "NotificationService",
    "register_channels",

    # 服务族
    "ServiceFactory",
    "RegistryServiceFactory",
    "DevelopmentServiceFactory",
    "ProductionServiceFactory",
    "OrderService",
    "OrderResult",
    "register_service_families",
]
