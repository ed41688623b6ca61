"""
通知渠道

NotificationService 只依赖 NotificationChannel 抽象。
渠道所需配置（SMTP 地址等）在注册时由调用方绑定进工厂，注册表本身不感知配置。
"""

from __future__ import annotations

import threading
from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from behaviorkit.behavior.base import Behavior, BehaviorConfig
from behaviorkit.behavior.context import BehaviorContext
from behaviorkit.errors import DomainValidationError
from behaviorkit.system.services.config_center import NotificationConfig

if TYPE_CHECKING:
    from behaviorkit.behavior.registry import BehaviorRegistry


@dataclass
class Delivery:
    """一次投递记录"""
    channel: str
    recipient: str
    subject: str
    body: str
    route: str = ""
    sent_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "channel": self.channel,
            "recipient": self.recipient,
            "subject": self.subject,
            "body": self.body,
            "route": self.route,
            "sent_at": self.sent_at,
        }


class Outbox:
    """发件箱（线程安全）"""

    def __init__(self):
        self._deliveries: List[Delivery] = []
        self._lock = threading.Lock()

    def put(self, delivery: Delivery) -> None:
        with self._lock:
            self._deliveries.append(delivery)

    @property
    def deliveries(self) -> List[Delivery]:
        with self._lock:
            return list(self._deliveries)

    def for_channel(self, channel: str) -> List[Delivery]:
        return [d for d in self.deliveries if d.channel == channel]

    def __len__(self) -> int:
        with self._lock:
            return len(self._deliveries)


class NotificationChannel(Behavior):
    """通知渠道契约"""

    channel = ""

    def __init__(self, outbox: Optional[Outbox] = None):
        super().__init__(BehaviorConfig(
            name=self.channel,
            description=f"{self.channel} notification",
            tags=["notification"],
        ))
        self.outbox = outbox if outbox is not None else Outbox()

    @abstractmethod
    def route(self) -> str:
        """投递路由描述（服务器地址、网关等）"""

    def send(self, recipient: str, subject: str, body: str) -> Delivery:
        if not recipient or not recipient.strip():
            raise DomainValidationError("recipient", recipient, "recipient must not be empty")
        delivery = Delivery(
            channel=self.channel,
            recipient=recipient,
            subject=subject,
            body=body,
            route=self.route(),
        )
        self.outbox.put(delivery)
        self.logger.info(f"[{self.channel}] -> {recipient}: {subject}")
        return delivery


class EmailChannel(NotificationChannel):
    channel = "email"

    def __init__(
        self,
        smtp_host: str = "localhost",
        smtp_port: int = 25,
        sender: str = "noreply@example.com",
        outbox: Optional[Outbox] = None,
    ):
        super().__init__(outbox)
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.sender = sender

    def route(self) -> str:
        return f"smtp://{self.smtp_host}:{self.smtp_port} from {self.sender}"


class SmsChannel(NotificationChannel):
    channel = "sms"

    def __init__(self, gateway: str = "sms.example.com", outbox: Optional[Outbox] = None):
        super().__init__(outbox)
        self.gateway = gateway

    def route(self) -> str:
        return f"sms://{self.gateway}"

    def send(self, recipient: str, subject: str, body: str) -> Delivery:
        # 短信没有主题，合并进正文
        text = f"{subject}: {body}" if subject else body
        return super().send(recipient, "", text)


class PushChannel(NotificationChannel):
    channel = "push"

    def __init__(self, app_id: str = "behaviorkit", outbox: Optional[Outbox] = None):
        super().__init__(outbox)
        self.app_id = app_id

    def route(self) -> str:
        return f"push://{self.app_id}"


class SlackChannel(NotificationChannel):
    channel = "slack"

    def route(self) -> str:
        return "slack://webhook"


class NotificationService(BehaviorContext):
    """通知服务"""

    def __init__(self, channel: NotificationChannel):
        super().__init__(channel, contract=NotificationChannel, operation="send")

    def notify(self, recipient: str, subject: str, body: str) -> Delivery:
        return self.invoke(recipient, subject, body)


def register_channels(
    registry: "BehaviorRegistry",
    config: Optional[NotificationConfig] = None,
    outbox: Optional[Outbox] = None,
) -> Outbox:
    """
    注册所有通知渠道

    Returns:
        所有渠道共享的发件箱
    """
    config = config or NotificationConfig()
    outbox = outbox if outbox is not None else Outbox()
    registry.register("email", lambda: EmailChannel(
        config.smtp_host, config.smtp_port, config.sender, outbox=outbox,
    ))
    registry.register("sms", lambda: SmsChannel(config.sms_gateway, outbox=outbox))
    registry.register("push", lambda: PushChannel(config.push_app_id, outbox=outbox))
    registry.register("slack", lambda: SlackChannel(outbox=outbox))
    return outbox
