"""
Record models for TileMaster: service offerings, customers and orders.
"""

from .service_offering import ServiceOffering
from .customer import Customer
from .order import Order, ORDER_STATUSES, PAYMENT_STATUSES

__all__ = [
    "ServiceOffering",
    "Customer",
    "Order",
    "ORDER_STATUSES",
    "PAYMENT_STATUSES",
]
