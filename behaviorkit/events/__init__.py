"""
事件层 (Events)

发布/订阅：Subject 按快照通知观察者，支持弱引用观察者。
"""

from behaviorkit.events.market import PriceAlert, PriceStatistics, StockMarket
from behaviorkit.events.subject import Observer, ObserverLike, Subject

__all__ = [
    "Observer",
    "ObserverLike",
    "Subject",
    "StockMarket",
    "PriceAlert",
    "PriceStatistics",
]
