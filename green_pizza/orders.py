# orders.py

import uuid
from datetime import datetime, timezone
from typing import Optional

from green_pizza.errors import BadRequest, NotFound
from green_pizza.menu import Menu, MenuItem, parse_pizza_id
from green_pizza.schemas import OrderConfirmation, OrderRequest


def utc_timestamp() -> str:
    """ Current UTC time as ISO 8601 with milliseconds and a Z suffix. """
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_order_id() -> str:
    return uuid.uuid4().hex


def find_pizza(menu: Menu, raw_id) -> MenuItem:
    """ Look up a pizza by a raw id value, raising NotFound when nothing matches. """
    pizza = menu.get(parse_pizza_id(raw_id))
    if pizza is None:
        raise NotFound()
    return pizza


def place_order(menu: Menu, order: Optional[OrderRequest]) -> OrderConfirmation:
    """
    Validate an order against the menu and build its confirmation.

    CHECK, in this order:
      - Presence: pizzaId, quantity and customerName must all be truthy, else BadRequest.
      - Pizza: pizzaId must name a pizza on the menu, else NotFound.

    Nothing is stored; the confirmation only exists in the response.
    """
    if order is None or not order.pizza_id or not order.quantity or not order.customer_name:
        raise BadRequest()

    pizza = find_pizza(menu, order.pizza_id)

    return OrderConfirmation(
        order_id=new_order_id(),
        pizza=pizza.name,
        quantity=order.quantity,
        customer_name=order.customer_name,
        total_price=pizza.price * order.quantity,
        status="confirmed",
        timestamp=utc_timestamp(),
    )
