# domain/generators.py
from collections.abc import Iterator

import numpy as np

from minride_data.domain.entities.customer import Customer
from minride_data.domain.entities.driver import Driver
from minride_data.domain.entities.geography import Point
from minride_data.domain.entities.ride import Ride, RideStatus
from minride_data.domain.names import generate_district, generate_name
from minride_data.sim.clock import WallClock, past_timestamp
from minride_data.sim.rng import round1, uniform_float, uniform_int

RATING_RANGE = (3.5, 5.0)
GRID_RANGE = (0.0, 10.0)
TOTAL_RIDES_RANGE = (10, 80)
DISTANCE_KM_RANGE = (2.0, 12.0)
DAYS_BACK_RANGE = (1, 30)
HOUR_OFFSET_RANGE = (0, 23)
FARE_PER_KM = 12000
CONFIRMED_OUT_OF_TEN = 8


def sample_location(rng: np.random.Generator) -> Point:
    return Point(round1(uniform_float(rng, *GRID_RANGE)), round1(uniform_float(rng, *GRID_RANGE)))


def fare_for(distance_km: float) -> int:
    return int(round(distance_km * FARE_PER_KM))


def sample_status(rng: np.random.Generator) -> RideStatus:
    if uniform_int(rng, 1, 10) <= CONFIRMED_OUT_OF_TEN:
        return RideStatus.CONFIRMED
    return RideStatus.CANCELLED


def make_driver(rng: np.random.Generator, driver_id: int) -> Driver:
    name = generate_name(rng)
    rating = round1(uniform_float(rng, *RATING_RANGE))
    loc = sample_location(rng)
    return Driver(
        id=driver_id,
        name=name,
        rating=rating,
        loc=loc,
        total_rides=uniform_int(rng, *TOTAL_RIDES_RANGE),
    )


def make_customer(rng: np.random.Generator, customer_id: int) -> Customer:
    name = generate_name(rng)
    district = generate_district(rng)
    return Customer(id=customer_id, name=name, district=district, loc=sample_location(rng))


def make_ride(
    rng: np.random.Generator,
    ride_id: int,
    *,
    n_customers: int,
    n_drivers: int,
    clock: WallClock,
) -> Ride:
    customer_id = uniform_int(rng, 1, n_customers)
    driver_id = uniform_int(rng, 1, n_drivers)
    distance = round1(uniform_float(rng, *DISTANCE_KM_RANGE))
    days_back = uniform_int(rng, *DAYS_BACK_RANGE)
    hour_offset = uniform_int(rng, *HOUR_OFFSET_RANGE)
    return Ride(
        ride_id=ride_id,
        customer_id=customer_id,
        driver_id=driver_id,
        distance=distance,
        fare=fare_for(distance),
        timestamp=past_timestamp(clock.now(), days_back, hour_offset),
        status=sample_status(rng),
    )


# Streaming generators: one record alive at a time, ids start at 1


def iter_drivers(rng: np.random.Generator, count: int) -> Iterator[Driver]:
    for i in range(1, count + 1):
        yield make_driver(rng, i)


def iter_customers(rng: np.random.Generator, count: int) -> Iterator[Customer]:
    for i in range(1, count + 1):
        yield make_customer(rng, i)


def iter_rides(
    rng: np.random.Generator,
    count: int,
    *,
    n_customers: int,
    n_drivers: int,
    clock: WallClock,
) -> Iterator[Ride]:
    for i in range(1, count + 1):
        yield make_ride(rng, i, n_customers=n_customers, n_drivers=n_drivers, clock=clock)
