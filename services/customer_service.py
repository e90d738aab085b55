# services/customer_service.py
"""
customer_service.py

Customer store plus the helpers the UI uses to cross-reference orders.

Orders refer to customers by name only. Deleting a customer leaves any
orders carrying that name as they are (a dangling reference is allowed),
and renaming a customer detaches their earlier orders from the history.
"""

from typing import List

from data.repository import CUSTOMERS_SLOT
from models.customer import Customer
from models.order import Order
from services.record_store import RecordStore


class CustomerStore(RecordStore):
    slot = CUSTOMERS_SLOT
    record_type = Customer

    def names(self) -> List[str]:
        # Feeds the customer picker on the order form
        return [c.name for c in self._records]

    @staticmethod
    def order_history(customer: Customer, orders: List[Order]) -> List[Order]:
        # Derived by matching names, nothing is stored on the customer
        return [o for o in orders if o.customer_name == customer.name]
