"""
FleetSense — Truck Analytics Engine
───────────────────────────────────
Combines a truck's static attributes with live weather & traffic signals.

  load_feasibility    — utilisation tier of the current load
  estimate_eta        — drive time at weather/traffic-adjusted speed
  estimate_fuel_cost  — fuel spend for the route, load- and weather-adjusted
  assess_penalty_risk — late-delivery penalty exposure for trucks en route
  score_safety        — min-of-factors safety score with factor breakdown
  score_eco           — environmental efficiency score with suggestions
  analyze_truck       — all of the above in one TruckAnalytics record

Everything here is pure. Sampled telemetry (driver hours, detour
efficiency) comes from the signal source and the time of day from the
`now` argument, both supplied by the caller.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import List, Optional, Union

from ..models.analytics import (
    NOT_APPLICABLE,
    EcoScore,
    EtaEstimate,
    LoadFeasibility,
    PenaltyRisk,
    SafetyFactor,
    SafetyScore,
    TruckAnalytics,
)
from ..models.conditions import TrafficObservation, WeatherImpact, WeatherObservation
from ..models.truck import Truck, TruckStatus
from .signals import SignalSource
from .weather_service import compute_weather_impact

NOMINAL_SPEED_MPH    = 65.0
FUEL_PRICE_PER_GAL   = 3.85
LOAD_PENALTY_FACTOR  = 0.15     # a full truck loses 15% of its mpg

BASE_CONFIDENCE_MIN      = 15
MISSING_INPUT_PENALTY_MIN = 10

RUSH_HOUR_START = 16
RUSH_HOUR_END   = 19

FATIGUE_THRESHOLD_HOURS = 8
FATIGUE_FLOOR           = 50
CONGESTION_SAFETY_THRESHOLD = 50

ECO_MIN, ECO_MAX = 50, 100


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# ─────────────────────────────────────────────────────────────────── #
#  Load feasibility                                                    #
# ─────────────────────────────────────────────────────────────────── #

def load_feasibility(truck: Truck) -> LoadFeasibility:
    """
    Tier the current load by utilisation (lower bounds exclusive):

        > 100 %  infeasible   0
        >  95 %  low         60
        >  85 %  medium      75
        else     high       100
    """
    utilization = truck.utilization_pct

    if utilization > 100:
        feasibility, score = "infeasible", 0
    elif utilization > 95:
        feasibility, score = "low", 60
    elif utilization > 85:
        feasibility, score = "medium", 75
    else:
        feasibility, score = "high", 100

    return LoadFeasibility(utilization=utilization, feasibility=feasibility, score=score)


# ─────────────────────────────────────────────────────────────────── #
#  ETA                                                                 #
# ─────────────────────────────────────────────────────────────────── #

def adjusted_speed(
    traffic: Optional[TrafficObservation] = None,
    impact:  Optional[WeatherImpact] = None,
) -> float:
    speed = NOMINAL_SPEED_MPH
    if traffic is not None:
        speed *= 1 - traffic.congestion_level / 100
    if impact is not None:
        speed *= 1 - impact.speed_reduction_pct / 100
    return speed


def estimate_eta(
    truck:   Truck,
    traffic: Optional[TrafficObservation] = None,
    impact:  Optional[WeatherImpact] = None,
) -> Union[EtaEstimate, str]:
    """
    Drive time for the current route at the adjusted speed.

    The ±confidence window starts at 15 min and widens by 10 min for each
    of traffic and weather that is missing. Without a route, or when
    traffic brings the truck to a standstill, the ETA is NOT_APPLICABLE.
    """
    if truck.current_route is None:
        return NOT_APPLICABLE

    speed = adjusted_speed(traffic, impact)
    if speed <= 0:
        return NOT_APPLICABLE

    hours   = truck.current_route.distance / speed
    whole   = int(math.floor(hours))
    minutes = _round_half_up((hours - whole) * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0

    confidence = BASE_CONFIDENCE_MIN
    if traffic is None:
        confidence += MISSING_INPUT_PENALTY_MIN
    if impact is None:
        confidence += MISSING_INPUT_PENALTY_MIN

    return EtaEstimate(
        base=f"{whole}h {minutes}m",
        confidence=f"±{confidence}min",
        adjusted_speed=f"{speed:.1f}",
    )


# ─────────────────────────────────────────────────────────────────── #
#  Fuel cost                                                           #
# ─────────────────────────────────────────────────────────────────── #

def estimate_fuel_cost(truck: Truck, impact: Optional[WeatherImpact] = None) -> float:
    """
    Fuel spend for the current route, in dollars (0 without a route).

        mpg      = fuel_efficiency × (1 − weather%) × (1 − load_ratio × 0.15)
        cost     = distance / mpg × 3.85

    The load multiplier bottoms out at 0; a truck that heavy has no
    usable mileage and the cost is infinite.
    """
    if truck.current_route is None:
        return 0.0

    efficiency = truck.fuel_efficiency
    if impact is not None:
        efficiency *= 1 - impact.fuel_efficiency_reduction_pct / 100
    efficiency *= max(0.0, 1 - truck.load_ratio * LOAD_PENALTY_FACTOR)
    if efficiency <= 0:
        return math.inf

    gallons = truck.current_route.distance / efficiency
    return gallons * FUEL_PRICE_PER_GAL


# ─────────────────────────────────────────────────────────────────── #
#  Penalty risk                                                        #
# ─────────────────────────────────────────────────────────────────── #

def assess_penalty_risk(
    truck:   Truck,
    traffic: Optional[TrafficObservation],
    impact:  Optional[WeatherImpact],
    now:     datetime,
) -> PenaltyRisk:
    """
    Late-delivery penalty exposure. Only trucks en route carry any.

    Risk points: +50 traffic delay over 30 min, +30 weather safety under
    70, +20 during rush hour (16:00–19:59). Over 70 is high ($1200),
    over 40 medium ($450).
    """
    if truck.status is not TruckStatus.EN_ROUTE:
        return PenaltyRisk(level="low", amount=0)

    risk = 0
    if traffic is not None and traffic.delay_minutes > 30:
        risk += 50
    if impact is not None and impact.safety_score < 70:
        risk += 30
    if RUSH_HOUR_START <= now.hour <= RUSH_HOUR_END:
        risk += 20

    if risk > 70:
        return PenaltyRisk(level="high", amount=1200)
    if risk > 40:
        return PenaltyRisk(level="medium", amount=450)
    return PenaltyRisk(level="low", amount=0)


# ─────────────────────────────────────────────────────────────────── #
#  Safety score                                                        #
# ─────────────────────────────────────────────────────────────────── #

def safety_rating(score: float) -> str:
    if score >= 90:
        return "Excellent"
    if score >= 80:
        return "Good"
    if score >= 70:
        return "Fair"
    return "Poor"


def score_safety(
    truck:   Truck,
    traffic: Optional[TrafficObservation],
    impact:  Optional[WeatherImpact],
    signals: SignalSource,
) -> SafetyScore:
    """
    Safety is only as good as its weakest factor. Factors, in order:
    weather (if known), maintenance, congestion above 50 %, and driver
    fatigue past 8 hours on duty.
    """
    score = 100.0
    factors: List[SafetyFactor] = []

    if impact is not None:
        score = min(score, impact.safety_score)
        factors.append(SafetyFactor(
            factor="Weather Conditions",
            impact=impact.safety_score,
            details=list(impact.recommendations),
        ))

    score = min(score, truck.maintenance_score)
    factors.append(SafetyFactor(
        factor="Vehicle Maintenance",
        impact=truck.maintenance_score,
        details=["Regular maintenance up to date"],
    ))

    if traffic is not None and traffic.congestion_level > CONGESTION_SAFETY_THRESHOLD:
        traffic_impact = 100 - traffic.congestion_level / 2
        score = min(score, traffic_impact)
        factors.append(SafetyFactor(
            factor="Traffic Congestion",
            impact=traffic_impact,
            details=[f"{traffic.congestion_level}% congestion level"],
        ))

    hours = signals.driver_hours()
    if hours > FATIGUE_THRESHOLD_HOURS:
        fatigue_impact = max(FATIGUE_FLOOR, 100 - (hours - FATIGUE_THRESHOLD_HOURS) * 10)
        score = min(score, fatigue_impact)
        factors.append(SafetyFactor(
            factor="Driver Fatigue",
            impact=fatigue_impact,
            details=[f"Driver has been on duty for {hours} hours"],
        ))

    return SafetyScore(score=_round_half_up(score), rating=safety_rating(score), factors=factors)


# ─────────────────────────────────────────────────────────────────── #
#  Eco score                                                           #
# ─────────────────────────────────────────────────────────────────── #

def eco_rating(score: float) -> str:
    if score >= 90:
        return "Excellent"
    if score >= 80:
        return "Good"
    if score >= 70:
        return "Average"
    return "Needs Improvement"


def score_eco(
    truck:   Truck,
    weather: Optional[WeatherObservation],
    signals: SignalSource,
) -> EcoScore:
    """
    Environmental efficiency, clamped to 50–100.

      mpg < 6          −20   (suggest a more efficient vehicle)
      mpg > 7          +10
      load < 50 %      −15   (suggest combining loads)
      load > 90 %       +5
      route            capped at the sampled detour efficiency (70–95)
      rain              −5
    """
    score = 100
    improvements: List[str] = []

    if truck.fuel_efficiency < 6:
        score -= 20
        improvements.append("Consider upgrading to more fuel-efficient vehicle")
    elif truck.fuel_efficiency > 7:
        score += 10

    ratio = truck.load_ratio
    if ratio < 0.5:
        score -= 15
        improvements.append("Low load efficiency - consider combining loads")
    elif ratio > 0.9:
        score += 5

    if truck.current_route is not None:
        detour = signals.detour_efficiency()
        score = min(score, detour)
        if detour < 80:
            improvements.append("Route could be optimized for fuel efficiency")

    if weather is not None and weather.mentions("rain"):
        score -= 5

    score = max(ECO_MIN, min(ECO_MAX, score))
    return EcoScore(score=_round_half_up(score), rating=eco_rating(score), improvements=improvements)


# ─────────────────────────────────────────────────────────────────── #
#  Everything at once                                                  #
# ─────────────────────────────────────────────────────────────────── #

def analyze_truck(
    truck:   Truck,
    weather: Optional[WeatherObservation],
    traffic: Optional[TrafficObservation],
    signals: SignalSource,
    now:     datetime,
) -> TruckAnalytics:
    impact: Optional[WeatherImpact] = None
    if weather is not None:
        impact = weather.impact or compute_weather_impact(weather)

    return TruckAnalytics(
        load_feasibility=load_feasibility(truck),
        eta=estimate_eta(truck, traffic, impact),
        fuel_cost=estimate_fuel_cost(truck, impact),
        penalty_risk=assess_penalty_risk(truck, traffic, impact, now),
        safety_score=score_safety(truck, traffic, impact, signals),
        eco_score=score_eco(truck, weather, signals),
    )
