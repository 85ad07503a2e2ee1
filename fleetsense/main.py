#!/usr/bin/env python3
"""
FleetSense — Fleet Analytics Console
══════════════════════════════════════════════════════════════════════
Per-truck decision support: ETA, fuel cost, penalty risk, safety and
eco scores from the truck record plus live weather & traffic.

Weather and traffic come from the simulated providers; trucks, place
names, recommendations and dashboard baselines come from the seed files
in FLEETSENSE_DATA_DIR.

Run:
    python -m fleetsense
"""

import logging
from datetime import datetime

from . import config
from .cli.workflows import (
    workflow_fleet_overview,
    workflow_truck_report,
    workflow_weather_whatif,
    workflow_dashboard_stats,
    workflow_recommendations,
    workflow_export_analytics,
)
from .data.store import (
    load_trucks,
    load_locations,
    load_recommendations,
    load_dashboard_baseline,
)
from .engine.fleet_service import FleetAnalyticsService
from .engine.signals import RandomSignals
from .engine.traffic_service import simulated_traffic_provider
from .engine.weather_cache import WeatherCache
from .engine.weather_service import simulated_weather_provider

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────── #
#  UI strings                                                          #
# ─────────────────────────────────────────────────────────────────── #

BANNER = r"""
  ╔══════════════════════════════════════════════════════════╗
  ║   F L E E T S E N S E                                    ║
  ║   Adaptive logistics analytics                           ║
  ╚══════════════════════════════════════════════════════════╝
"""

MENU = """
  ┌──────────────────────────────────────────────────────────┐
  │   FleetSense  —  Main Menu                               │
  ├─────┬────────────────────────────────────────────────────┤
  │  1  │  Fleet overview                                    │
  │  2  │  Truck analytics report                            │
  │  3  │  Weather what-if                                   │
  │  4  │  Dashboard stats                                   │
  │  5  │  AI recommendations                                │
  │  6  │  Export truck analytics (JSON)                     │
  ├─────┼────────────────────────────────────────────────────┤
  │  0  │  Exit                                              │
  └─────┴────────────────────────────────────────────────────┘
"""


def build_service(data_dir=None, seed=None) -> FleetAnalyticsService:
    """Default service: seed data from disk, simulated weather & traffic."""
    signals = RandomSignals(seed=config.SIGNAL_SEED if seed is None else seed)
    return FleetAnalyticsService(
        trucks=load_trucks(data_dir),
        locations=load_locations(data_dir),
        weather_provider=simulated_weather_provider(signals, datetime.now),
        traffic_provider=simulated_traffic_provider(signals),
        signals=signals,
        clock=datetime.now,
        weather_cache=WeatherCache(ttl_seconds=config.WEATHER_CACHE_TTL),
        recommendations=load_recommendations(data_dir),
        dashboard_baseline=load_dashboard_baseline(data_dir),
    )


# ─────────────────────────────────────────────────────────────────── #
#  Main loop                                                           #
# ─────────────────────────────────────────────────────────────────── #

def main() -> None:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(BANNER)
    print("  Loading fleet data…")
    service = build_service()
    print(f"  {len(service.trucks)} truck(s) loaded.\n")

    actions = {
        "1": workflow_fleet_overview,
        "2": workflow_truck_report,
        "3": workflow_weather_whatif,
        "4": workflow_dashboard_stats,
        "5": workflow_recommendations,
        "6": workflow_export_analytics,
    }

    while True:
        print(MENU)
        choice = input("  Enter choice: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            break

        handler = actions.get(choice)
        if handler is None:
            print("  ⚠  Invalid choice. Please enter 0–6.\n")
            continue

        try:
            handler(service)
        except KeyboardInterrupt:
            print("\n\n  Interrupted. Returning to menu…\n")
        except Exception as exc:
            logger.exception("Menu action %s failed", choice)
            print(f"\n  ✗  Error: {exc}\n")


if __name__ == "__main__":
    main()
