import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from green_pizza.main import create_app
from green_pizza.menu import DEFAULT_MENU, Menu, MenuItem, parse_pizza_id


def test_menu_lists_every_pizza_in_order(client):
    resp = client.get('/api/menu')
    assert resp.status_code == 200
    pizzas = resp.json()['pizzas']
    assert [p['name'] for p in pizzas] == ['Margherita', 'Green Pizza', 'Pepperoni', 'Veggie Supreme']
    assert pizzas[1] == {
        'id': 2,
        'name': 'Green Pizza',
        'price': 15.99,
        'toppings': ['pesto', 'spinach', 'arugula', 'mozzarella'],
    }


def test_menu_is_the_same_on_repeated_calls(client):
    first = client.get('/api/menu').json()
    second = client.get('/api/menu').json()
    assert first == second
    assert len(first['pizzas']) > 0


@pytest.mark.parametrize("pizza", DEFAULT_MENU.pizzas, ids=lambda p: p.name)
def test_pizza_by_id(client, pizza):
    resp = client.get(f'/api/pizza/{pizza.id}')
    assert resp.status_code == 200
    assert resp.json() == pizza.model_dump(mode='json')


@pytest.mark.parametrize("pizza_id", ["99", "0", "-1", "abc", "NaN"])
def test_pizza_not_found(client, pizza_id):
    resp = client.get(f'/api/pizza/{pizza_id}')
    assert resp.status_code == 404
    assert resp.json() == {'error': 'Pizza not found'}


def test_pizza_id_uses_leading_digits(client):
    resp = client.get('/api/pizza/2abc')
    assert resp.status_code == 200
    assert resp.json()['name'] == 'Green Pizza'


def test_app_serves_an_injected_menu(small_menu):
    client = TestClient(create_app(menu=small_menu))
    assert [p['id'] for p in client.get('/api/menu').json()['pizzas']] == [10, 20]
    assert client.get('/api/pizza/20').json()['toppings'] == []
    assert client.get('/api/pizza/2').status_code == 404


def test_menu_rejects_duplicate_ids():
    with pytest.raises(ValidationError):
        Menu(pizzas=(
            MenuItem(id=1, name="A", price=1.0),
            MenuItem(id=1, name="B", price=2.0),
        ))


@pytest.mark.parametrize("bad", [
    {"id": 0, "name": "A", "price": 1.0},
    {"id": 1, "name": "", "price": 1.0},
    {"id": 1, "name": "A", "price": 0},
    {"id": 1, "name": "A"},
])
def test_menu_item_invalid(bad):
    with pytest.raises(ValidationError):
        MenuItem(**bad)


def test_menu_items_are_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_MENU.pizzas[0].price = 1.0


@pytest.mark.parametrize("raw, expected", [
    (2, 2),
    (2.7, 2),
    ("3", 3),
    (" 4 pizzas", 4),
    ("abc", None),
    ("", None),
    (True, None),
    (None, None),
    (float("nan"), None),
])
def test_parse_pizza_id(raw, expected):
    assert parse_pizza_id(raw) == expected
