"""
Unit tests for the customer store.
"""

import pytest

from models.customer import Customer
from services.customer_service import CustomerStore
from services.order_service import OrderStore


@pytest.fixture
def customers(repo):
    return CustomerStore(repo)


@pytest.fixture
def orders(repo):
    return OrderStore(repo, flat_unit_rate=100.0)


def jane():
    return Customer(name="Jane Doe", contact_info="jane@example.com", address="1 Main St")


class TestCustomerStore:

    def test_empty_slot_loads_empty(self, customers):
        assert customers.list() == []

    def test_add_update_delete(self, customers):
        c = customers.add(jane())
        c.address = "2 Oak Ave"
        assert customers.update(c) is True
        assert customers.get(c.id).address == "2 Oak Ave"
        assert customers.delete(c.id) is True
        assert customers.list() == []

    def test_names_in_insertion_order(self, customers):
        customers.add(Customer(name="Zed"))
        customers.add(Customer(name="Amy"))
        assert customers.names() == ["Zed", "Amy"]

    def test_reload_round_trip(self, repo, customers):
        customers.add(jane())
        customers.add(Customer(name="Bob", contact_info="555-0101", address="3 Elm"))
        assert CustomerStore(repo).list() == customers.list()


class TestCrossReferences:

    def test_order_history_matches_by_name(self, customers, orders):
        c = customers.add(jane())
        orders.create("Ceramic Install", 3, "Jane Doe")
        orders.create("Backsplash", 1, "Bob")
        orders.create("Grout Repair", 2, "Jane Doe")

        history = customers.order_history(c, orders.list())
        assert [o.service_name for o in history] == ["Ceramic Install", "Grout Repair"]

    def test_delete_customer_leaves_orders_alone(self, customers, orders):
        c = customers.add(jane())
        order = orders.create("Ceramic Install", 3, "Jane Doe")
        before = orders.list()

        assert customers.delete(c.id) is True

        assert orders.list() == before
        assert orders.get(order.id).customer_name == "Jane Doe"
        assert "Jane Doe" not in customers.names()

    def test_rename_detaches_history(self, customers, orders):
        c = customers.add(jane())
        orders.create("Ceramic Install", 1, "Jane Doe")
        c.name = "Jane Smith"
        customers.update(c)
        assert customers.order_history(c, orders.list()) == []
