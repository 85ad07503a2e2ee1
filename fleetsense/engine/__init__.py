from .weather_service import (
    compute_weather_impact,
    location_name,
    simulated_weather_provider,
)
from .traffic_service import simulated_traffic_provider
from .weather_cache import WeatherCache
from .signals import RandomSignals, FixedSignals, SignalSource
from .analytics_engine import (
    load_feasibility,
    estimate_eta,
    estimate_fuel_cost,
    assess_penalty_risk,
    score_safety,
    score_eco,
    analyze_truck,
)
from .fleet_stats import fleet_stats, recommendation_catalog
from .fleet_service import FleetAnalyticsService

__all__ = [
    "compute_weather_impact",
    "location_name",
    "simulated_weather_provider",
    "simulated_traffic_provider",
    "WeatherCache",
    "RandomSignals",
    "FixedSignals",
    "SignalSource",
    "load_feasibility",
    "estimate_eta",
    "estimate_fuel_cost",
    "assess_penalty_risk",
    "score_safety",
    "score_eco",
    "analyze_truck",
    "fleet_stats",
    "recommendation_catalog",
    "FleetAnalyticsService",
]
