from .store import (
    load_trucks, load_locations,
    load_recommendations, load_dashboard_baseline,
)

__all__ = [
    "load_trucks", "load_locations",
    "load_recommendations", "load_dashboard_baseline",
]
