"""
Travel Package Model
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class PackageType(str, Enum):
    ECONOMY = "economy"
    LUXURY = "luxury"
    VIP = "vip"


@dataclass
class Package:
    id: int
    name: str
    description: str
    price: int  # Per person
    type: PackageType
    features: List[str] = field(default_factory=list)
    is_popular: bool = False

    def __repr__(self):
        return f"<Package {self.name} ({self.type.value})>"
