"""
Weather Service — weather impact model & simulated readings
Turns a weather observation into a safety / speed / fuel impact summary.
Ships a simulated provider for development; real feeds plug in as any
callable location -> WeatherObservation.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from ..models.conditions import WeatherImpact, WeatherObservation
from ..models.truck import Location
from .signals import Clock, SignalSource

logger = logging.getLogger(__name__)

WeatherProvider = Callable[[str], WeatherObservation]

SAFETY_FLOOR = 50

SIMULATED_CONDITIONS = ["Sunny", "Partly Cloudy", "Cloudy", "Light Rain"]
UNKNOWN_LOCATION     = "Unknown Location"


def compute_weather_impact(weather: WeatherObservation) -> WeatherImpact:
    """
    Score how much a weather reading degrades driving.

    Rules run in a fixed order, each taking points off a safety score of
    100 and adding one recommendation:

      1. temperature < 0       −20   speed 15%, fuel 10% reduction
      2. temperature > 30      −10   fuel 5% reduction
      3. conditions ~ "rain"   −15   speed 10%
      4. else ~ "snow"         −25   speed 20%
      5. wind > 20             −10
      6. visibility < 5000     −15   speed 15%

    speed_reduction and fuel_efficiency are overwritten by later rules,
    not combined: the last rule that sets a field wins. The reported
    safety score never drops below 50.
    """
    safety_score    = 100
    speed_reduction = "0%"
    fuel_efficiency = "0% reduction"
    recommendations = []

    # Temperature
    if weather.temperature < 0:
        safety_score   -= 20
        speed_reduction = "15%"
        fuel_efficiency = "10% reduction"
        recommendations.append("Icy conditions - use winter tires")
    elif weather.temperature > 30:
        safety_score   -= 10
        fuel_efficiency = "5% reduction"
        recommendations.append("Hot weather - check engine temperature")

    # Precipitation
    if weather.mentions("rain"):
        safety_score   -= 15
        speed_reduction = "10%"
        recommendations.append("Wet roads - increase following distance")
    elif weather.mentions("snow"):
        safety_score   -= 25
        speed_reduction = "20%"
        recommendations.append("Snowy conditions - use chains if required")

    # Wind
    if weather.wind_speed > 20:
        safety_score -= 10
        recommendations.append("High winds - secure loads properly")

    # Visibility
    if weather.visibility < 5000:
        safety_score   -= 15
        speed_reduction = "15%"
        recommendations.append("Reduced visibility - use caution")

    return WeatherImpact(
        safety_score=max(SAFETY_FLOOR, safety_score),
        speed_reduction=speed_reduction,
        fuel_efficiency=fuel_efficiency,
        recommendations=recommendations,
    )


def location_name(location: Location, table: Dict[str, str]) -> str:
    """
    Resolve a truck position to a place name via the lookup table.
    Keys are "lat,lng" at 4 decimals, e.g. "32.7767,-96.7970".
    """
    key = f"{location.lat:.4f},{location.lng:.4f}"
    name = table.get(key)
    if name is None:
        logger.warning("No place name for coordinates %s", key)
        return UNKNOWN_LOCATION
    return name


def simulated_weather_provider(signals: SignalSource, clock: Clock) -> WeatherProvider:
    """
    Development provider with random readings in plausible ranges:
    15–30 °C, 40–85 % humidity, 5–25 mph wind, 5–15 km visibility.
    """
    def fetch(location: str) -> WeatherObservation:
        observation = WeatherObservation(
            location=location,
            temperature=signals.integer(15, 30),
            conditions=signals.choice(SIMULATED_CONDITIONS),
            humidity=signals.integer(40, 85),
            wind_speed=signals.integer(5, 25),
            visibility=signals.integer(5, 15) * 1000,
            timestamp=clock(),
        )
        logger.info(
            "Simulated weather for %s: %s, %s°C",
            location, observation.conditions, observation.temperature,
        )
        return observation

    return fetch


def observe_with_impact(
    location: str,
    provider: WeatherProvider,
) -> Optional[WeatherObservation]:
    """Fetch a reading and attach its computed impact."""
    observation = provider(location)
    if observation is None:
        return None
    observation.impact = compute_weather_impact(observation)
    return observation
