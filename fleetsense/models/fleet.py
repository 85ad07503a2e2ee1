"""
Fleet-level models — dashboard figures and advisory records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class RecommendationImpact:
    financial:  str     # "+$1,240"
    time:       str     # "+45min"
    efficiency: str     # "+42%"

    def to_dict(self) -> dict:
        return {
            "financial":  self.financial,
            "time":       self.time,
            "efficiency": self.efficiency,
        }

    @staticmethod
    def from_dict(d: dict) -> "RecommendationImpact":
        return RecommendationImpact(
            financial=d.get("financial", ""),
            time=d.get("time", ""),
            efficiency=d.get("efficiency", ""),
        )


@dataclass
class Recommendation:
    id:          int
    type:        str
    priority:    str    # high | medium | low
    title:       str
    description: str
    impact:      RecommendationImpact
    actions:     List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id":          self.id,
            "type":        self.type,
            "priority":    self.priority,
            "title":       self.title,
            "description": self.description,
            "impact":      self.impact.to_dict(),
            "actions":     list(self.actions),
        }

    @staticmethod
    def from_dict(d: dict) -> "Recommendation":
        return Recommendation(
            id=int(d["id"]),
            type=d["type"],
            priority=d["priority"],
            title=d["title"],
            description=d.get("description", ""),
            impact=RecommendationImpact.from_dict(d.get("impact", {})),
            actions=list(d.get("actions", [])),
        )


@dataclass
class FleetStats:
    """
    Dashboard KPIs.

    utilization, empty_miles_reduction, revenue_per_trip and
    ai_recommendations are sampled placeholders, not aggregates over the
    roster; simulated stays True while that is the case.
    """
    utilization:           int
    empty_miles_reduction: int
    revenue_per_trip:      int
    ai_recommendations:    int
    active_trucks:         int
    total_trucks:          int
    loads_today:           int
    delayed_deliveries:    int
    fuel_savings:          float
    co2_reduction:         float
    simulated:             bool = True

    def to_dict(self) -> dict:
        return {
            "utilization":           self.utilization,
            "empty_miles_reduction": self.empty_miles_reduction,
            "revenue_per_trip":      self.revenue_per_trip,
            "ai_recommendations":    self.ai_recommendations,
            "active_trucks":         self.active_trucks,
            "total_trucks":          self.total_trucks,
            "loads_today":           self.loads_today,
            "delayed_deliveries":    self.delayed_deliveries,
            "fuel_savings":          self.fuel_savings,
            "co2_reduction":         self.co2_reduction,
            "simulated":             self.simulated,
        }
