"""
装饰器组合

每个加料 (AddOn) 包装一个 CostComponent：价格相加，描述按应用顺序追加。
加料本身作为行为注册到注册表，CompositionBuilder 按名称逐层包装。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from behaviorkit.behavior.base import Behavior, BehaviorConfig, require_non_negative
from behaviorkit.behavior.registry import BehaviorRegistry


class CostComponent(ABC):
    """可计价组件"""

    @abstractmethod
    def cost(self) -> float:
        ...

    @abstractmethod
    def description(self) -> str:
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.description()!r} {self.cost()}>"


class BaseItem(CostComponent):
    """基础商品"""

    def __init__(self, name: str = "Simple Coffee", price: float = 5.0):
        require_non_negative("price", price)
        self.name = name
        self.price = price

    def cost(self) -> float:
        return self.price

    def description(self) -> str:
        return self.name


class CostDecorator(CostComponent):
    """装饰器基类，默认原样委托"""

    def __init__(self, component: CostComponent):
        self.component = component

    def cost(self) -> float:
        return self.component.cost()

    def description(self) -> str:
        return self.component.description()


class AddOn(CostDecorator):
    """加料：追加价格与描述"""

    def __init__(self, component: CostComponent, label: str, price: float):
        super().__init__(component)
        require_non_negative("price", price)
        self.label = label
        self.price = price

    def cost(self) -> float:
        return self.component.cost() + self.price

    def description(self) -> str:
        return f"{self.component.description()}, {self.label}"


class Topping(Behavior):
    """
    加料行为

    无状态，apply() 每次返回新的包装层，原组件不变。
    """

    def __init__(self, label: str, price: float):
        require_non_negative("price", price)
        super().__init__(BehaviorConfig(name=label, description=f"+{price} {label}", tags=["addon"]))
        self.label = label
        self.price = price

    def apply(self, component: CostComponent) -> AddOn:
        return AddOn(component, self.label, self.price)


DEFAULT_TOPPINGS = {
    "milk": ("Milk", 2.0),
    "sugar": ("Sugar", 1.0),
    "whipped_cream": ("Whipped Cream", 3.0),
    "caramel": ("Caramel", 2.0),
}


def register_toppings(registry: BehaviorRegistry) -> None:
    """注册默认加料"""
    for key, (label, price) in DEFAULT_TOPPINGS.items():
        registry.register(key, lambda label=label, price=price: Topping(label, price))


class CompositionBuilder:
    """
    流式组合构建器

    用法:
        coffee = CompositionBuilder(BaseItem(), toppings).add("milk").add("sugar").build()
        coffee.cost()         # 8.0
        coffee.description()  # "Simple Coffee, Milk, Sugar"
    """

    def __init__(self, base: Optional[CostComponent] = None, toppings: Optional[BehaviorRegistry] = None):
        self._component: CostComponent = base if base is not None else BaseItem()
        if toppings is None:
            toppings = BehaviorRegistry(name="toppings")
            register_toppings(toppings)
        self._toppings = toppings

    def add(self, key: str) -> "CompositionBuilder":
        """按名称追加一层加料，未注册的名称抛出 UnknownKeyError"""
        topping = self._toppings.create(key)
        self._component = topping.apply(self._component)
        return self

    def build(self) -> CostComponent:
        return self._component
