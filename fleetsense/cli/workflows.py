"""
FleetSense — CLI Workflows
──────────────────────────
Menu handlers. Each takes the FleetAnalyticsService and prints a report.

  workflow_fleet_overview   — roster table
  workflow_truck_report     — full analytics for one truck
  workflow_weather_whatif   — impact of hand-entered weather
  workflow_dashboard_stats  — fleet KPIs
  workflow_recommendations  — advisory list
  workflow_export_analytics — one truck's bundle as a JSON file
"""

from __future__ import annotations

import json
from datetime import datetime

from ..engine.fleet_service import FleetAnalyticsService
from ..engine.weather_service import compute_weather_impact
from ..models.analytics import AnalyticsBundle, EtaEstimate
from ..models.conditions import WeatherObservation
from ..models.truck import Truck
from .prompts import prompt_choice, prompt_confirm, prompt_number, prompt_text


# ─────────────────────────────────────────────────────────────────── #
#  Shared helpers                                                      #
# ─────────────────────────────────────────────────────────────────── #

def _pick_truck(service: FleetAnalyticsService, verb: str = "inspect") -> Truck:
    trucks = service.list_trucks()
    print(f"\n  Select a truck to {verb}:")
    return prompt_choice(
        "  Enter number: ",
        trucks,
        labels=[f"#{t.id}  {t.name}  ({t.status.value})" for t in trucks],
    )


def _print_bundle(bundle: AnalyticsBundle) -> None:
    truck = bundle.truck
    a     = bundle.analytics
    route = truck.current_route.label if truck.current_route else "—"

    print(
        f"\n  +-- Truck #{truck.id}  {truck.name} ({truck.type})\n"
        f"  |   Driver      : {truck.driver}\n"
        f"  |   Status      : {truck.status.value}\n"
        f"  |   Route       : {route}\n"
        f"  +{'─' * 50}"
    )

    lf = a.load_feasibility
    print(f"  Load          : {lf.utilization:.1f}%  →  {lf.feasibility} ({lf.score})")

    if isinstance(a.eta, EtaEstimate):
        print(f"  ETA           : {a.eta.base} {a.eta.confidence}  @ {a.eta.adjusted_speed} mph")
    else:
        print(f"  ETA           : {a.eta}")

    print(f"  Fuel cost     : ${a.fuel_cost:,.2f}")
    print(f"  Penalty risk  : {a.penalty_risk.level}  (${a.penalty_risk.amount:,})")

    print(f"  Safety        : {a.safety_score.score}/100  {a.safety_score.rating}")
    for f in a.safety_score.factors:
        print(f"    • {f.factor:<20} {f.impact:>6.1f}")
        for detail in f.details:
            print(f"        - {detail}")

    print(f"  Eco           : {a.eco_score.score}/100  {a.eco_score.rating}")
    for tip in a.eco_score.improvements:
        print(f"    • {tip}")

    if bundle.weather is not None:
        w = bundle.weather
        print(
            f"  Weather       : {w.location} — {w.conditions}, {w.temperature}°C, "
            f"wind {w.wind_speed} mph, visibility {w.visibility:g} m"
        )
    if bundle.traffic is not None:
        t = bundle.traffic
        print(
            f"  Traffic       : {t.congestion_level}% congestion, "
            f"{t.delay_minutes} min delay, {t.incidents} incident(s)"
        )
    print()


# ─────────────────────────────────────────────────────────────────── #
#  Fleet                                                               #
# ─────────────────────────────────────────────────────────────────── #

def workflow_fleet_overview(service: FleetAnalyticsService) -> None:
    print("\n  ── Fleet Overview ────────────────────────────────────────")
    print(f"  {'ID':<6} {'Name':<24} {'Status':<10} {'Load':>7}  Route")
    print(f"  {'─' * 70}")
    for t in service.list_trucks():
        route = t.current_route.label if t.current_route else "—"
        print(f"  {t.id:<6} {t.name:<24} {t.status.value:<10} {t.utilization_pct:>6.1f}%  {route}")
    print()


def workflow_truck_report(service: FleetAnalyticsService) -> None:
    print("\n  ── Truck Analytics ───────────────────────────────────────")
    truck  = _pick_truck(service)
    bundle = service.get_truck_analytics(truck.id)
    if bundle is None:
        print(f"  Truck #{truck.id} not found.\n")
        return
    _print_bundle(bundle)


def workflow_dashboard_stats(service: FleetAnalyticsService) -> None:
    print("\n  ── Dashboard ─────────────────────────────────────────────")
    s = service.dashboard_stats()
    print(
        f"  Fleet utilisation     : {s.utilization}%\n"
        f"  Empty miles reduction : {s.empty_miles_reduction}%\n"
        f"  Revenue per trip      : ${s.revenue_per_trip:,}\n"
        f"  AI recommendations    : {s.ai_recommendations}\n"
        f"  Active trucks         : {s.active_trucks}/{s.total_trucks}\n"
        f"  Loads today           : {s.loads_today}\n"
        f"  Delayed deliveries    : {s.delayed_deliveries}\n"
        f"  Fuel savings          : ${s.fuel_savings:,}\n"
        f"  CO₂ reduction         : {s.co2_reduction}%"
    )
    if s.simulated:
        print("  (headline KPIs are simulated)")
    print()


def workflow_recommendations(service: FleetAnalyticsService) -> None:
    print("\n  ── AI Recommendations ────────────────────────────────────")
    for rec in service.recommendations():
        print(
            f"  [{rec.priority.upper():<6}] {rec.title}\n"
            f"           {rec.description}\n"
            f"           {rec.impact.financial} · {rec.impact.time} · {rec.impact.efficiency}"
            f"   actions: {', '.join(rec.actions)}"
        )
    print()


# ─────────────────────────────────────────────────────────────────── #
#  Weather what-if                                                     #
# ─────────────────────────────────────────────────────────────────── #

def workflow_weather_whatif(service: FleetAnalyticsService) -> None:
    print("\n  ── Weather What-If ───────────────────────────────────────")
    observation = WeatherObservation(
        location=prompt_text("  Location            : ", default="Custom"),
        temperature=prompt_number("  Temperature (°C)    : ", low=-60, high=60),
        conditions=prompt_text("  Conditions          : ", default="Clear"),
        humidity=0,
        wind_speed=prompt_number("  Wind speed (mph)    : ", low=0),
        visibility=prompt_number("  Visibility (m)      : ", low=0),
        timestamp=service.clock(),
    )
    impact = compute_weather_impact(observation)
    print(
        f"\n  Safety score       : {impact.safety_score}\n"
        f"  Speed reduction    : {impact.speed_reduction}\n"
        f"  Fuel efficiency    : {impact.fuel_efficiency}"
    )
    for rec in impact.recommendations:
        print(f"    • {rec}")
    print()


# ─────────────────────────────────────────────────────────────────── #
#  Export                                                              #
# ─────────────────────────────────────────────────────────────────── #

def workflow_export_analytics(service: FleetAnalyticsService) -> None:
    print("\n  ── Export Analytics ──────────────────────────────────────")
    truck  = _pick_truck(service, "export")
    bundle = service.get_truck_analytics(truck.id)
    if bundle is None:
        print(f"  Truck #{truck.id} not found.\n")
        return

    stamp = datetime.now().strftime("%Y%m%d_%H%M")
    path  = prompt_text("  Output file: ", default=f"truck_{truck.id}_{stamp}.json")
    if not prompt_confirm(f"  Write analytics to {path}?", default=True):
        print("  Cancelled.\n")
        return

    with open(path, "w", encoding="utf-8") as fh:
        json.dump(bundle.to_dict(), fh, indent=2)
    print(f"  ✔  Saved {path}\n")
