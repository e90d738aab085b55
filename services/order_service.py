# services/order_service.py
from dataclasses import replace
from datetime import datetime

from config import Config
from data.repository import DataRepository, ORDERS_SLOT
from models.order import Order, ORDER_STATUSES, PAYMENT_STATUSES
from services.record_store import RecordStore


class OrderStore(RecordStore):
    # Orders persisted under "orders".
    # total_cost is stored, recomputed from quantity on every add/update.
    # order_date is fixed when the order is added.
    # The store trusts its caller: quantity is validated by the order form.

    slot = ORDERS_SLOT
    record_type = Order

    def __init__(self, repo: DataRepository, flat_unit_rate: float | None = None):
        if flat_unit_rate is None:
            flat_unit_rate = Config.FLAT_UNIT_RATE
        self.flat_unit_rate = flat_unit_rate
        super().__init__(repo)

    def compute_total(self, quantity: int) -> float:
        # Same rate for every service; the service's own price is not used
        return quantity * self.flat_unit_rate

    def _prepare_add(self, order: Order) -> Order:
        order.total_cost = self.compute_total(order.quantity)
        return order

    def _prepare_update(self, current: Order, incoming: Order) -> Order:
        return replace(
            incoming,
            total_cost=self.compute_total(incoming.quantity),
            order_date=current.order_date,
        )

    def create(
        self,
        service_name: str,
        quantity: int,
        customer_name: str,
        status: str = "Pending",
        payment_status: str = "Unpaid",
        order_date: datetime | None = None,
    ) -> Order:
        # What the "Add Order" form does on save
        order = Order(
            service_name=service_name,
            quantity=quantity,
            customer_name=customer_name,
            order_date=order_date or datetime.now(),
            status=status,
            payment_status=payment_status,
        )
        return self.add(order)

    # Plain setters: no transition rules, any listed value at any time.

    def set_status(self, order_id: str, status: str) -> bool:
        if status not in ORDER_STATUSES:
            raise ValueError(f"Unknown order status: {status!r}")
        return self._set_field(order_id, status=status)

    def set_payment_status(self, order_id: str, payment_status: str) -> bool:
        if payment_status not in PAYMENT_STATUSES:
            raise ValueError(f"Unknown payment status: {payment_status!r}")
        return self._set_field(order_id, payment_status=payment_status)

    def _set_field(self, order_id: str, **changes) -> bool:
        current = self.find(order_id)
        if current is None:
            self.logger.info(f"Change ignored: no orders record {order_id}")
            return False
        return self.update(replace(current, **changes))
