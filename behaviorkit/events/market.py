"""
行情示例

StockMarket 在价格变化时通知观察者。
"""

from __future__ import annotations

from typing import List, Optional

from behaviorkit.behavior.base import require_non_negative
from behaviorkit.events.subject import Subject


class StockMarket(Subject[float]):
    """设置 price 即通知"""

    def __init__(self, symbol: str = "", price: float = 0.0):
        super().__init__()
        self.symbol = symbol
        self._price = price

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        require_non_negative("price", value)
        self._price = value
        self.notify(value)


class PriceAlert:
    """价格超过阈值时记录告警"""

    def __init__(self, threshold: float):
        self.threshold = threshold
        self.alerts: List[float] = []

    def update(self, price: float) -> None:
        if price > self.threshold:
            self.alerts.append(price)


class PriceStatistics:
    """价格统计"""

    def __init__(self):
        self.prices: List[float] = []

    def update(self, price: float) -> None:
        self.prices.append(price)

    @property
    def average(self) -> Optional[float]:
        if not self.prices:
            return None
        return sum(self.prices) / len(self.prices)

    @property
    def last(self) -> Optional[float]:
        return self.prices[-1] if self.prices else None
