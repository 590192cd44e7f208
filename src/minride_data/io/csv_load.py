# io/csv_load.py
import csv
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

from minride_data.domain.entities.customer import Customer
from minride_data.domain.entities.driver import Driver
from minride_data.domain.entities.ride import Ride
from minride_data.errors import DatasetFormatError

T = TypeVar("T")


def _load(path: Path, parse: Callable[[Sequence[str]], T]) -> list[T]:
    """Skip the header and blank lines; any unparsable line raises DatasetFormatError."""
    path = Path(path)
    out: list[T] = []
    with open(path, newline="", encoding="utf-8") as fp:
        reader = csv.reader(fp)
        next(reader, None)
        for row in reader:
            if not row or not any(f.strip() for f in row):
                continue
            try:
                out.append(parse(row))
            except (ValueError, TypeError) as e:
                raise DatasetFormatError(path, reader.line_num, ",".join(row)) from e
    return out


def load_drivers(path: Path) -> list[Driver]:
    return _load(path, Driver.from_row)


def load_customers(path: Path) -> list[Customer]:
    return _load(path, Customer.from_row)


def load_rides(path: Path) -> list[Ride]:
    return _load(path, Ride.from_row)
