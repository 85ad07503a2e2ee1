"""Shared test fixtures."""

from datetime import datetime

import numpy as np
import pytest

from fleetsense.engine.signals import FixedSignals
from fleetsense.models.conditions import TrafficObservation, WeatherObservation
from fleetsense.models.truck import Location, Route, Truck, TruckStatus

OFF_PEAK  = datetime(2026, 3, 2, 10, 0)
RUSH_HOUR = datetime(2026, 3, 2, 17, 0)


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def signals():
    return FixedSignals(hours_on_duty=6, detour_score=90)


@pytest.fixture
def make_truck():
    def _make(
        capacity=48000,
        current_load=42000,
        status=TruckStatus.EN_ROUTE,
        fuel_efficiency=6.5,
        maintenance_score=92,
        distance=967,
        truck_id="7821",
    ):
        route = Route(start="Dallas, TX", end="Chicago, IL", distance=distance) if distance else None
        return Truck(
            id=truck_id,
            capacity=capacity,
            current_load=current_load,
            status=status,
            location=Location(lat=41.8781, lng=-87.6298),
            fuel_efficiency=fuel_efficiency,
            maintenance_score=maintenance_score,
            current_route=route,
            name="Peterbilt 579",
        )
    return _make


@pytest.fixture
def en_route_truck(make_truck):
    return make_truck()


@pytest.fixture
def parked_truck(make_truck):
    return make_truck(
        capacity=45000, current_load=0, status=TruckStatus.AVAILABLE,
        fuel_efficiency=7.8, maintenance_score=95, distance=None, truck_id="3390",
    )


@pytest.fixture
def make_weather():
    def _make(temperature=20, conditions="Sunny", wind_speed=10, visibility=10000):
        return WeatherObservation(
            location="Chicago",
            temperature=temperature,
            conditions=conditions,
            humidity=50,
            wind_speed=wind_speed,
            visibility=visibility,
            timestamp=OFF_PEAK,
        )
    return _make


@pytest.fixture
def make_traffic():
    def _make(congestion_level=20, delay_minutes=10):
        return TrafficObservation(
            route="Dallas, TX → Chicago, IL",
            congestion_level=congestion_level,
            average_speed=55,
            incidents=0,
            delay_minutes=delay_minutes,
        )
    return _make


class FakeClock:
    """Monotonic clock the test moves by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def off_peak():
    return OFF_PEAK


@pytest.fixture
def rush_hour():
    return RUSH_HOUR
