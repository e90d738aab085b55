"""
CRUD stores, one per record type, each persisted as a whole collection.
"""

from .catalog_service import ServiceCatalogStore
from .customer_service import CustomerStore
from .order_service import OrderStore

__all__ = ["ServiceCatalogStore", "CustomerStore", "OrderStore"]
