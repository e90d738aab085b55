# models/order.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Literal
from uuid import uuid4

OrderStatus = Literal["Pending", "Completed"]
PaymentStatus = Literal["Unpaid", "Paid"]

ORDER_STATUSES: tuple[str, ...] = ("Pending", "Completed")
PAYMENT_STATUSES: tuple[str, ...] = ("Unpaid", "Paid")


# Order model representing a customer order for one tile service.
# service_name and customer_name are free text, not foreign keys.
@dataclass
class Order:
    service_name: str
    quantity: int
    customer_name: str
    total_cost: float = 0.0
    order_date: datetime = field(default_factory=datetime.now)
    status: OrderStatus = "Pending"
    payment_status: PaymentStatus = "Unpaid"
    id: str = field(default_factory=lambda: str(uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "service_name": self.service_name,
            "quantity": self.quantity,
            "total_cost": self.total_cost,
            "customer_name": self.customer_name,
            "order_date": self.order_date.isoformat(),
            "status": self.status,
            "payment_status": self.payment_status,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        return cls(
            id=str(data["id"]),
            service_name=data["service_name"],
            quantity=int(data["quantity"]),
            total_cost=float(data["total_cost"]),
            customer_name=data["customer_name"],
            order_date=datetime.fromisoformat(data["order_date"]),
            status=data["status"],
            payment_status=data["payment_status"],
        )
