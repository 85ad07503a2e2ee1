"""
Truck model — a fleet vehicle, its position, and its planned route.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class TruckStatus(str, Enum):
    AVAILABLE = "available"
    LOADING   = "loading"
    EN_ROUTE  = "en_route"


@dataclass
class Location:
    lat: float
    lng: float

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}

    @staticmethod
    def from_dict(d: dict) -> "Location":
        return Location(lat=float(d["lat"]), lng=float(d["lng"]))


@dataclass
class Route:
    """
    Planned run between two named places.
    distance is in miles and always positive.
    """
    start:     str
    end:       str
    distance:  float
    waypoints: List[Tuple[float, float]] = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"{self.start} → {self.end}"

    def to_dict(self) -> dict:
        return {
            "start":     self.start,
            "end":       self.end,
            "distance":  self.distance,
            "waypoints": [list(w) for w in self.waypoints],
        }

    @staticmethod
    def from_dict(d: dict) -> "Route":
        return Route(
            start=d["start"],
            end=d["end"],
            distance=float(d["distance"]),
            waypoints=[tuple(w) for w in d.get("waypoints", [])],
        )


@dataclass
class TruckMetrics:
    """Lifetime odometer and consumption figures, passed through as-is."""
    total_miles:   float
    avg_speed:     float
    fuel_consumed: float
    co2_emitted:   float

    def to_dict(self) -> dict:
        return {
            "total_miles":   self.total_miles,
            "avg_speed":     self.avg_speed,
            "fuel_consumed": self.fuel_consumed,
            "co2_emitted":   self.co2_emitted,
        }

    @staticmethod
    def from_dict(d: dict) -> "TruckMetrics":
        return TruckMetrics(
            total_miles=d["total_miles"],
            avg_speed=d["avg_speed"],
            fuel_consumed=d["fuel_consumed"],
            co2_emitted=d["co2_emitted"],
        )


@dataclass
class Truck:
    """
    A fleet vehicle as the analytics engine sees it.

    current_load may exceed capacity; that is how an infeasible load is
    signalled. current_route is None for trucks with nothing planned, and
    every route-dependent metric then falls back to "not applicable".
    """
    id:                str
    capacity:          float          # lbs
    current_load:      float          # lbs
    status:            TruckStatus
    location:          Location
    fuel_efficiency:   float          # miles per gallon
    maintenance_score: float          # 0–100
    current_route:     Optional[Route] = None
    name:              str = ""
    type:              str = ""
    destination:       str = ""
    driver:            str = ""
    metrics:           Optional[TruckMetrics] = None

    @property
    def load_ratio(self) -> float:
        return self.current_load / self.capacity

    @property
    def utilization_pct(self) -> float:
        return self.current_load * 100 / self.capacity

    @property
    def in_transit(self) -> bool:
        return self.status is TruckStatus.EN_ROUTE and self.current_route is not None

    def to_dict(self) -> dict:
        return {
            "id":                self.id,
            "name":              self.name,
            "type":              self.type,
            "capacity":          self.capacity,
            "current_load":      self.current_load,
            "status":            self.status.value,
            "location":          self.location.to_dict(),
            "destination":       self.destination,
            "driver":            self.driver,
            "fuel_efficiency":   self.fuel_efficiency,
            "maintenance_score": self.maintenance_score,
            "current_route":     self.current_route.to_dict() if self.current_route else None,
            "metrics":           self.metrics.to_dict() if self.metrics else None,
        }

    @staticmethod
    def from_dict(d: dict) -> "Truck":
        truck_id = str(d["id"])
        try:
            status = TruckStatus(d["status"])
        except ValueError:
            raise ValueError(
                f"Truck '{truck_id}': unknown status '{d['status']}'."
            ) from None

        truck = Truck(
            id=truck_id,
            capacity=float(d["capacity"]),
            current_load=float(d.get("current_load", 0)),
            status=status,
            location=Location.from_dict(d["location"]),
            fuel_efficiency=float(d["fuel_efficiency"]),
            maintenance_score=float(d["maintenance_score"]),
            current_route=Route.from_dict(d["current_route"]) if d.get("current_route") else None,
            name=d.get("name", ""),
            type=d.get("type", ""),
            destination=d.get("destination", ""),
            driver=d.get("driver", ""),
            metrics=TruckMetrics.from_dict(d["metrics"]) if d.get("metrics") else None,
        )
        truck.validate()
        return truck

    def validate(self) -> None:
        if self.capacity <= 0:
            raise ValueError(f"Truck '{self.id}': capacity must be positive.")
        if self.current_load < 0:
            raise ValueError(f"Truck '{self.id}': current_load cannot be negative.")
        if self.fuel_efficiency <= 0:
            raise ValueError(f"Truck '{self.id}': fuel_efficiency must be positive.")
        if not 0 <= self.maintenance_score <= 100:
            raise ValueError(f"Truck '{self.id}': maintenance_score must be within 0–100.")
        if self.current_route is not None and self.current_route.distance <= 0:
            raise ValueError(f"Truck '{self.id}': route distance must be positive.")
