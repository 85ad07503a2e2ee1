from .truck import Truck, TruckStatus, Location, Route, TruckMetrics
from .conditions import WeatherObservation, WeatherImpact, TrafficObservation
from .analytics import (
    NOT_APPLICABLE,
    LoadFeasibility, EtaEstimate, PenaltyRisk,
    SafetyFactor, SafetyScore, EcoScore,
    TruckAnalytics, AnalyticsBundle,
)
from .fleet import FleetStats, Recommendation, RecommendationImpact

__all__ = [
    "Truck", "TruckStatus", "Location", "Route", "TruckMetrics",
    "WeatherObservation", "WeatherImpact", "TrafficObservation",
    "NOT_APPLICABLE",
    "LoadFeasibility", "EtaEstimate", "PenaltyRisk",
    "SafetyFactor", "SafetyScore", "EcoScore",
    "TruckAnalytics", "AnalyticsBundle",
    "FleetStats", "Recommendation", "RecommendationImpact",
]
