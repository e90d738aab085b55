# models/customer.py
from dataclasses import dataclass, field, asdict
from typing import Any, Dict
from uuid import uuid4


# Customer contact record. Orders point back at it by name only.
@dataclass
class Customer:
    name: str
    contact_info: str = ""
    address: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Customer":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            contact_info=data["contact_info"],
            address=data["address"],
        )
