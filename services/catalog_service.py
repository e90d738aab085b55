# services/catalog_service.py
from data.repository import SERVICES_SLOT
from models.service_offering import ServiceOffering
from services.record_store import RecordStore


class ServiceCatalogStore(RecordStore):
    # Tile services the contractor offers, persisted under "services".

    slot = SERVICES_SLOT
    record_type = ServiceOffering

    @staticmethod
    def total_cost(offering: ServiceOffering) -> float:
        return offering.cost + offering.labor_cost
