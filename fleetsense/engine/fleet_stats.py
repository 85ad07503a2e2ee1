"""
Fleet dashboard figures and the advisory catalog.

Neither is derived from the truck roster yet. The headline KPIs are
sampled inside fixed ranges (FleetStats.simulated stays True), the rest
are baseline figures from seed data, and the recommendations are a fixed,
ordered list.
"""

from __future__ import annotations

from typing import Dict, List

from ..models.fleet import FleetStats, Recommendation
from .signals import SignalSource

# (low, high) inclusive sampling ranges for the simulated KPIs
SIMULATED_KPI_RANGES: Dict[str, tuple] = {
    "utilization":           (85, 94),
    "empty_miles_reduction": (35, 44),
    "revenue_per_trip":      (1150, 1349),
    "ai_recommendations":    (12, 16),
}


def fleet_stats(baseline: dict, signals: SignalSource) -> FleetStats:
    sampled = {
        name: signals.integer(low, high)
        for name, (low, high) in SIMULATED_KPI_RANGES.items()
    }
    return FleetStats(
        active_trucks=int(baseline["active_trucks"]),
        total_trucks=int(baseline["total_trucks"]),
        loads_today=int(baseline["loads_today"]),
        delayed_deliveries=int(baseline["delayed_deliveries"]),
        fuel_savings=baseline["fuel_savings"],
        co2_reduction=baseline["co2_reduction"],
        simulated=True,
        **sampled,
    )


def recommendation_catalog(records: List[dict]) -> List[Recommendation]:
    """Advisories in catalog order; no ranking or filtering."""
    return [Recommendation.from_dict(r) for r in records]
