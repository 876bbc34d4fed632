import pytest
from fastapi.testclient import TestClient

from green_pizza.main import create_app
from green_pizza.menu import Menu, MenuItem


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.fixture
def small_menu():
    return Menu(pizzas=(
        MenuItem(id=10, name="Marinara", price=9.5, toppings=("tomato", "garlic")),
        MenuItem(id=20, name="Bianca", price=11.0),
    ))
