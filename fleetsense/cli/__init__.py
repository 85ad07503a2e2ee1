from .prompts   import prompt_number, prompt_text, prompt_confirm, prompt_choice
from .workflows import (
    workflow_fleet_overview,
    workflow_truck_report,
    workflow_weather_whatif,
    workflow_dashboard_stats,
    workflow_recommendations,
    workflow_export_analytics,
)

__all__ = [
    "prompt_number", "prompt_text", "prompt_confirm", "prompt_choice",
    "workflow_fleet_overview", "workflow_truck_report", "workflow_weather_whatif",
    "workflow_dashboard_stats", "workflow_recommendations", "workflow_export_analytics",
]
