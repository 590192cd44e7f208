# domain/entities/customer.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from minride_data.domain.entities.geography import Point


@dataclass(frozen=True)
class Customer:
    HEADER: ClassVar[tuple[str, ...]] = ("ID", "Name", "District", "X", "Y")

    id: int
    name: str
    district: str
    loc: Point

    def to_row(self) -> list[str]:
        return [str(self.id), self.name, self.district, f"{self.loc.x:.1f}", f"{self.loc.y:.1f}"]

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Customer:
        id_, name, district, x, y = row
        return cls(id=int(id_), name=name, district=district, loc=Point(float(x), float(y)))
