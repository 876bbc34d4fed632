# menu.py

import re
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

# leading integer of a string, the way a browser client would parse "2" or "2abc"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, examples=[2])
    name: str = Field(..., min_length=1, examples=["Green Pizza"])
    price: float = Field(..., gt=0, examples=[15.99])
    toppings: Tuple[str, ...] = Field(default=(), examples=[["pesto", "spinach"]])


class Menu(BaseModel):
    """
    Fixed catalog of pizzas, in display order.

    Built once at startup and shared read-only by every request.
    """
    model_config = ConfigDict(frozen=True)

    pizzas: Tuple[MenuItem, ...]

    @model_validator(mode="after")
    def check_unique_ids(self):
        seen = set()
        for pizza in self.pizzas:
            if pizza.id in seen:
                raise ValueError(f"duplicate pizza id: {pizza.id}")
            seen.add(pizza.id)
        return self

    def get(self, pizza_id: Optional[int]) -> Optional[MenuItem]:
        """ Return the pizza with this id, or None. """
        if pizza_id is None:
            return None
        for pizza in self.pizzas:
            if pizza.id == pizza_id:
                return pizza
        return None

    def __len__(self) -> int:
        return len(self.pizzas)


def parse_pizza_id(value: Any) -> Optional[int]:
    """
    Turn a path segment or body value into a pizza id.

    Numbers are truncated, strings are read up to the first non-digit.
    Returns None when no integer can be read, which never matches a pizza.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


DEFAULT_MENU = Menu(pizzas=(
    MenuItem(id=1, name="Margherita", price=12.99, toppings=("tomato", "mozzarella", "basil")),
    MenuItem(id=2, name="Green Pizza", price=15.99, toppings=("pesto", "spinach", "arugula", "mozzarella")),
    MenuItem(id=3, name="Pepperoni", price=14.99, toppings=("tomato", "mozzarella", "pepperoni")),
    MenuItem(id=4, name="Veggie Supreme", price=13.99, toppings=("tomato", "bell peppers", "mushrooms", "olives")),
))
