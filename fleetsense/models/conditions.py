"""
Road-condition models — weather and traffic readings and the weather impact.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


_LEADING_NUMBER = re.compile(r"^\s*(-?\d+(?:\.\d+)?)")


def _leading_percent(text: str) -> float:
    """'15%' -> 15.0, '10% reduction' -> 10.0, anything else -> 0.0."""
    match = _LEADING_NUMBER.match(text or "")
    return float(match.group(1)) if match else 0.0


@dataclass
class WeatherImpact:
    """
    What a weather reading means for a truck on the road.

    speed_reduction and fuel_efficiency stay in their display form
    ("15%", "10% reduction"); use the *_pct properties for arithmetic.
    """
    safety_score:    float
    speed_reduction: str = "0%"
    fuel_efficiency: str = "0% reduction"
    recommendations: List[str] = field(default_factory=list)

    @property
    def speed_reduction_pct(self) -> float:
        return _leading_percent(self.speed_reduction)

    @property
    def fuel_efficiency_reduction_pct(self) -> float:
        return _leading_percent(self.fuel_efficiency)

    def to_dict(self) -> dict:
        return {
            "safety_score":    self.safety_score,
            "speed_reduction": self.speed_reduction,
            "fuel_efficiency": self.fuel_efficiency,
            "recommendations": list(self.recommendations),
        }

    @staticmethod
    def from_dict(d: dict) -> "WeatherImpact":
        return WeatherImpact(
            safety_score=d["safety_score"],
            speed_reduction=d.get("speed_reduction", "0%"),
            fuel_efficiency=d.get("fuel_efficiency", "0% reduction"),
            recommendations=list(d.get("recommendations", [])),
        )


@dataclass
class WeatherObservation:
    location:    str
    temperature: float      # °C
    conditions:  str        # free text, e.g. "Light Rain"
    humidity:    float      # %
    wind_speed:  float      # mph
    visibility:  float      # metres
    timestamp:   datetime
    impact:      Optional[WeatherImpact] = None

    def mentions(self, keyword: str) -> bool:
        return keyword.lower() in (self.conditions or "").lower()

    def to_dict(self) -> dict:
        return {
            "location":    self.location,
            "temperature": self.temperature,
            "conditions":  self.conditions,
            "humidity":    self.humidity,
            "wind_speed":  self.wind_speed,
            "visibility":  self.visibility,
            "timestamp":   self.timestamp.isoformat(),
            "impact":      self.impact.to_dict() if self.impact else None,
        }

    @staticmethod
    def from_dict(d: dict) -> "WeatherObservation":
        ts = d.get("timestamp")
        return WeatherObservation(
            location=d["location"],
            temperature=d["temperature"],
            conditions=d["conditions"],
            humidity=d.get("humidity", 0),
            wind_speed=d["wind_speed"],
            visibility=d["visibility"],
            timestamp=datetime.fromisoformat(ts) if isinstance(ts, str) else (ts or datetime.now()),
            impact=WeatherImpact.from_dict(d["impact"]) if d.get("impact") else None,
        )


@dataclass
class TrafficObservation:
    route:            str
    congestion_level: float     # 0–100
    average_speed:    float     # mph
    incidents:        int
    delay_minutes:    float

    def to_dict(self) -> dict:
        return {
            "route":            self.route,
            "congestion_level": self.congestion_level,
            "average_speed":    self.average_speed,
            "incidents":        self.incidents,
            "delay_minutes":    self.delay_minutes,
        }

    @staticmethod
    def from_dict(d: dict) -> "TrafficObservation":
        return TrafficObservation(
            route=d.get("route", ""),
            congestion_level=d["congestion_level"],
            average_speed=d.get("average_speed", 0),
            incidents=d.get("incidents", 0),
            delay_minutes=d["delay_minutes"],
        )
