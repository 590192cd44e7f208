# domain/entities/ride.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar

from minride_data.sim.clock import TIMESTAMP_FORMAT


class RideStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class Ride:
    HEADER: ClassVar[tuple[str, ...]] = (
        "RideId",
        "CustomerId",
        "DriverId",
        "Distance",
        "Fare",
        "Timestamp",
        "Status",
    )

    ride_id: int
    customer_id: int  # loose reference: only range-checked at generation
    driver_id: int
    distance: float  # km, one decimal
    fare: int
    timestamp: str  # YYYY-MM-DDTHH:MM:SS, local time
    status: RideStatus

    @property
    def when(self) -> datetime:
        return datetime.strptime(self.timestamp, TIMESTAMP_FORMAT)

    def to_row(self) -> list[str]:
        return [
            str(self.ride_id),
            str(self.customer_id),
            str(self.driver_id),
            f"{self.distance:.1f}",
            str(self.fare),
            self.timestamp,
            self.status.value,
        ]

    @classmethod
    def from_row(cls, row: Sequence[str]) -> Ride:
        ride_id, customer_id, driver_id, distance, fare, timestamp, status = row
        # reject malformed timestamps at load time
        datetime.strptime(timestamp, TIMESTAMP_FORMAT)
        return cls(
            ride_id=int(ride_id),
            customer_id=int(customer_id),
            driver_id=int(driver_id),
            distance=float(distance),
            fare=int(fare),
            timestamp=timestamp,
            status=RideStatus(status),
        )
