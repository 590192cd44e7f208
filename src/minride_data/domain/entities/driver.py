# domain/entities/driver.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from minride_data.domain.entities.geography import Point


@dataclass(frozen=True)
class Driver:
    HEADER: ClassVar[tuple[str, ...]] = ("ID", "Name", "Rating", "X", "Y", "TotalRides")

    id: int
    name: str
    rating: float  # one decimal, [3.5, 5.0]
    loc: Point
    total_rides: int

    def to_row(self) -> list[str]:
        return [
            str(self.id),
            self.name,
            f"{self.rating:.1f}",
            f"{self.loc.x:.1f}",
            f"{self.loc.y:.1f}",
            str(self.total_rides),
        ]

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Driver:
        id_, name, rating, x, y, total_rides = row
        return cls(
            id=int(id_),
            name=name,
            rating=float(rating),
            loc=Point(float(x), float(y)),
            total_rides=int(total_rides),
        )
