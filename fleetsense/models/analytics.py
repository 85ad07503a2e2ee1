"""
Analytics result models — everything the engine derives for one truck.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .conditions import TrafficObservation, WeatherObservation
from .truck import Truck

# Serialized form of a route-dependent metric that has no route to work on.
NOT_APPLICABLE = "N/A"


@dataclass
class LoadFeasibility:
    utilization: float      # %
    feasibility: str        # high | medium | low | infeasible
    score:       int

    def to_dict(self) -> dict:
        return {
            "utilization": self.utilization,
            "feasibility": self.feasibility,
            "score":       self.score,
        }


@dataclass
class EtaEstimate:
    base:           str     # "15h 31m"
    confidence:     str     # "±15min"
    adjusted_speed: str     # "62.3"

    def to_dict(self) -> dict:
        return {
            "base":           self.base,
            "confidence":     self.confidence,
            "adjusted_speed": self.adjusted_speed,
        }


@dataclass
class PenaltyRisk:
    level:  str             # low | medium | high
    amount: int

    def to_dict(self) -> dict:
        return {"level": self.level, "amount": self.amount}


@dataclass
class SafetyFactor:
    factor:  str
    impact:  float
    details: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "factor":  self.factor,
            "impact":  self.impact,
            "details": list(self.details),
        }


@dataclass
class SafetyScore:
    score:   int
    rating:  str
    factors: List[SafetyFactor] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score":   self.score,
            "rating":  self.rating,
            "factors": [f.to_dict() for f in self.factors],
        }


@dataclass
class EcoScore:
    score:        int
    rating:       str
    improvements: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score":        self.score,
            "rating":       self.rating,
            "improvements": list(self.improvements),
        }


@dataclass
class TruckAnalytics:
    load_feasibility: LoadFeasibility
    eta:              Union[EtaEstimate, str]     # NOT_APPLICABLE without a route
    fuel_cost:        float
    penalty_risk:     PenaltyRisk
    safety_score:     SafetyScore
    eco_score:        EcoScore

    def to_dict(self) -> dict:
        return {
            "load_feasibility": self.load_feasibility.to_dict(),
            "eta":              self.eta.to_dict() if isinstance(self.eta, EtaEstimate) else self.eta,
            "fuel_cost":        self.fuel_cost,
            "penalty_risk":     self.penalty_risk.to_dict(),
            "safety_score":     self.safety_score.to_dict(),
            "eco_score":        self.eco_score.to_dict(),
        }


@dataclass
class AnalyticsBundle:
    """
    Truck snapshot plus its analytics and the readings they were built from.
    """
    truck:     Truck
    analytics: TruckAnalytics
    weather:   Optional[WeatherObservation] = None
    traffic:   Optional[TrafficObservation] = None

    def to_dict(self) -> dict:
        payload = self.truck.to_dict()
        payload["analytics"] = self.analytics.to_dict()
        payload["weather"]   = self.weather.to_dict() if self.weather else None
        payload["traffic"]   = self.traffic.to_dict() if self.traffic else None
        return payload
