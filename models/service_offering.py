# models/service_offering.py
from dataclasses import dataclass, field, asdict
from typing import Any, Dict
from uuid import uuid4


# A tile service the contractor offers (e.g. "Ceramic Install").
@dataclass
class ServiceOffering:
    name: str
    type: str
    cost: float
    labor_cost: float
    time_required: str = ""
    description: str = ""
    material: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def total_cost(self) -> float:
        # computed on every read, never stored
        return self.cost + self.labor_cost

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServiceOffering":
        # Strict: a missing key raises so a stale schema is rejected as a whole
        return cls(
            id=str(data["id"]),
            name=data["name"],
            type=data["type"],
            cost=float(data["cost"]),
            labor_cost=float(data["labor_cost"]),
            time_required=data["time_required"],
            description=data["description"],
            material=data["material"],
        )
