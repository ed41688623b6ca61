"""
支付方式

按 PaymentType 从注册表创建支付方式；旧网关通过适配器接入统一的 process 契约。
"""

from __future__ import annotations

import threading
from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional
from uuid import uuid4

from behaviorkit.behavior.base import Behavior, BehaviorConfig, require_positive
from behaviorkit.behavior.context import BehaviorContext
from behaviorkit.errors import BehaviorKitError

if TYPE_CHECKING:
    from behaviorkit.behavior.registry import BehaviorRegistry


class PaymentType(Enum):
    """支付类型"""
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    BANK_TRANSFER = "bank_transfer"


@dataclass
class PaymentReceipt:
    """支付回执"""
    method: str
    amount: float
    reference: str = field(default_factory=lambda: uuid4().hex[:12])
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "amount": self.amount,
            "reference": self.reference,
            "timestamp": self.timestamp,
        }


class PaymentLedger:
    """支付流水（线程安全，可被多个支付方式共享）"""

    def __init__(self):
        self._receipts: List[PaymentReceipt] = []
        self._lock = threading.Lock()

    def record(self, receipt: PaymentReceipt) -> None:
        with self._lock:
            self._receipts.append(receipt)

    @property
    def receipts(self) -> List[PaymentReceipt]:
        with self._lock:
            return list(self._receipts)

    @property
    def total(self) -> float:
        return sum(r.amount for r in self.receipts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)


class PaymentMethod(Behavior):
    """支付方式契约"""

    @abstractmethod
    def process(self, amount: float) -> PaymentReceipt:
        """处理一笔支付"""


class LedgerPayment(PaymentMethod):
    """把回执写入流水的支付方式"""

    method = ""

    def __init__(self, ledger: Optional[PaymentLedger] = None):
        super().__init__(BehaviorConfig(
            name=self.method,
            description=f"{self.method} payment",
            tags=["payment"],
        ))
        self.ledger = ledger if ledger is not None else PaymentLedger()

    def process(self, amount: float) -> PaymentReceipt:
        require_positive("amount", amount)
        receipt = PaymentReceipt(method=self.method, amount=amount)
        self.ledger.record(receipt)
        self.logger.info(f"{self.method}: 处理支付 {amount:.2f} ({receipt.reference})")
        return receipt


class CreditCardPayment(LedgerPayment):
    method = PaymentType.CREDIT_CARD.value


class PayPalPayment(LedgerPayment):
    method = PaymentType.PAYPAL.value


class BankTransferPayment(LedgerPayment):
    method = PaymentType.BANK_TRANSFER.value


class LegacyGateway:
    """
    旧支付网关

    以整数分计价，返回字典，接口与 PaymentMethod 不兼容。
    金额不足一分的请求返回 DECLINED，不计入 charges。
    """

    def __init__(self):
        self.charges: List[Dict[str, Any]] = []

    def make_payment(self, amount_cents: int, currency: str = "USD") -> Dict[str, Any]:
        if amount_cents <= 0:
            return {"status": "DECLINED", "reason": "amount below minimum", "cents": amount_cents}
        result = {
            "status": "OK",
            "txn": f"LG-{len(self.charges) + 1:06d}",
            "cents": amount_cents,
            "ccy": currency,
        }
        self.charges.append(result)
        return result


class LegacyGatewayAdapter(PaymentMethod):
    """把 LegacyGateway 适配为 PaymentMethod"""

    def __init__(self, gateway: LegacyGateway, ledger: Optional[PaymentLedger] = None):
        super().__init__(BehaviorConfig(
            name="legacy_gateway",
            description="旧网关适配器",
            tags=["payment", "adapter"],
        ))
        self.gateway = gateway
        self.ledger = ledger if ledger is not None else PaymentLedger()

    def process(self, amount: float) -> PaymentReceipt:
        require_positive("amount", amount)
        response = self.gateway.make_payment(round(amount * 100))
        if response.get("status") != "OK":
            raise BehaviorKitError(f"Legacy gateway rejected payment: {response!r}")
        receipt = PaymentReceipt(
            method=self.name,
            amount=response["cents"] / 100,
            reference=response["txn"],
        )
        self.ledger.record(receipt)
        return receipt


class PaymentProcessor(BehaviorContext):
    """支付处理器"""

    def __init__(self, method: PaymentMethod):
        super().__init__(method, contract=PaymentMethod, operation="process")

    def process_payment(self, amount: float) -> PaymentReceipt:
        return self.invoke(amount)


def register_payments(registry: "BehaviorRegistry", ledger: PaymentLedger) -> None:
    """按 PaymentType 注册支付方式，全部写入同一份流水"""
    registry.register(PaymentType.CREDIT_CARD, lambda: CreditCardPayment(ledger))
    registry.register(PaymentType.PAYPAL, lambda: PayPalPayment(ledger))
    registry.register(PaymentType.BANK_TRANSFER, lambda: BankTransferPayment(ledger))
