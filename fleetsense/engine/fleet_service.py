"""
Fleet analytics service
Per-request orchestration: look up the truck, get weather for where it is
(cached), get traffic if it is on the road, then run the analytics engine.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Optional

from ..models.analytics import AnalyticsBundle
from ..models.conditions import TrafficObservation, WeatherObservation
from ..models.fleet import FleetStats, Recommendation
from ..models.truck import Truck
from .analytics_engine import analyze_truck
from .fleet_stats import fleet_stats, recommendation_catalog
from .signals import Clock, SignalSource
from .traffic_service import TrafficProvider
from .weather_cache import WeatherCache
from .weather_service import WeatherProvider, location_name, observe_with_impact

logger = logging.getLogger(__name__)


class FleetAnalyticsService:
    """
    Wires the roster, reference data, providers and signal source together.

    All collaborators are injected; build_service() in fleetsense.main
    assembles the default simulated set from config and seed data.
    """

    def __init__(
        self,
        trucks:             Dict[str, Truck],
        locations:          Dict[str, str],
        weather_provider:   WeatherProvider,
        traffic_provider:   TrafficProvider,
        signals:            SignalSource,
        clock:              Clock = datetime.now,
        weather_cache:      Optional[WeatherCache] = None,
        recommendations:    Optional[List[dict]] = None,
        dashboard_baseline: Optional[dict] = None,
    ):
        self.trucks             = trucks
        self.locations          = locations
        self.weather_provider   = weather_provider
        self.traffic_provider   = traffic_provider
        self.signals            = signals
        self.clock              = clock
        self.weather_cache      = weather_cache if weather_cache is not None else WeatherCache()
        self.recommendation_records = recommendations or []
        self.dashboard_baseline = dashboard_baseline or {}

    # ── Inputs ───────────────────────────────────────────────────── #

    def get_weather(self, location: str) -> Optional[WeatherObservation]:
        """Weather (with impact) for a place name, at most TTL old."""
        return self.weather_cache.get_or_fetch(
            location, lambda key: observe_with_impact(key, self.weather_provider)
        )

    def get_traffic(self, truck: Truck) -> Optional[TrafficObservation]:
        if not truck.in_transit:
            return None
        return self.traffic_provider(truck.current_route)

    # ── Per truck ────────────────────────────────────────────────── #

    def get_truck(self, truck_id: str) -> Optional[Truck]:
        return self.trucks.get(str(truck_id))

    def get_truck_analytics(self, truck_id: str) -> Optional[AnalyticsBundle]:
        """Full analytics bundle, or None when the id is not in the fleet."""
        truck = self.get_truck(truck_id)
        if truck is None:
            logger.warning("Truck %s not found", truck_id)
            return None

        place   = location_name(truck.location, self.locations)
        weather = self.get_weather(place)
        traffic = self.get_traffic(truck)

        analytics = analyze_truck(truck, weather, traffic, self.signals, self.clock())
        return AnalyticsBundle(truck=truck, analytics=analytics, weather=weather, traffic=traffic)

    # ── Fleet wide ───────────────────────────────────────────────── #

    def list_trucks(self) -> List[Truck]:
        return list(self.trucks.values())

    def fleet_analytics(self) -> List[AnalyticsBundle]:
        return [self.get_truck_analytics(truck_id) for truck_id in self.trucks]

    def dashboard_stats(self) -> FleetStats:
        return fleet_stats(self.dashboard_baseline, self.signals)

    def recommendations(self) -> List[Recommendation]:
        return recommendation_catalog(self.recommendation_records)
