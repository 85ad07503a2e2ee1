"""
Traffic Service — congestion readings for a truck's active route
Simulated data for development; real feeds plug in as any callable
route -> TrafficObservation.
"""

import logging
from typing import Callable

from ..models.conditions import TrafficObservation
from ..models.truck import Route
from .signals import SignalSource

logger = logging.getLogger(__name__)

TrafficProvider = Callable[[Route], TrafficObservation]


def simulated_traffic_provider(signals: SignalSource) -> TrafficProvider:
    """
    Development provider.
    Congestion 10–60 %, average speed 45–70 mph, 0–3 incidents,
    5–45 minutes of delay.
    """
    def fetch(route: Route) -> TrafficObservation:
        observation = TrafficObservation(
            route=route.label,
            congestion_level=signals.integer(10, 60),
            average_speed=signals.integer(45, 70),
            incidents=signals.integer(0, 3),
            delay_minutes=signals.integer(5, 45),
        )
        logger.info(
            "Simulated traffic for %s: %s%% congestion, %s min delay",
            route.label, observation.congestion_level, observation.delay_minutes,
        )
        return observation

    return fetch
