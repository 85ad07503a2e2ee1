#!/usr/bin/env python3
"""
Fleet Analytics Demo Script
Walks the seeded fleet through the analytics engine and a winter-storm
what-if, printing the results.
"""

from datetime import datetime

from fleetsense.engine.analytics_engine import analyze_truck
from fleetsense.engine.signals import FixedSignals
from fleetsense.engine.weather_service import compute_weather_impact
from fleetsense.main import build_service
from fleetsense.models.analytics import EtaEstimate
from fleetsense.models.conditions import TrafficObservation, WeatherObservation


def demo_fleet_snapshot():
    """Demo 1: analytics for every truck in the seed roster"""
    print("\n" + "=" * 80)
    print("DEMO 1: Fleet Snapshot (simulated weather + traffic)")
    print("=" * 80)

    service = build_service(seed=7)
    for bundle in service.fleet_analytics():
        truck, a = bundle.truck, bundle.analytics
        eta = f"{a.eta.base} {a.eta.confidence}" if isinstance(a.eta, EtaEstimate) else a.eta

        print(f"\n🚚 Truck #{truck.id} — {truck.name} ({truck.status.value})")
        print(f"  • Load: {a.load_feasibility.utilization:.1f}% ({a.load_feasibility.feasibility})")
        print(f"  • ETA: {eta}")
        print(f"  • Fuel cost: ${a.fuel_cost:.2f}")
        print(f"  • Penalty risk: {a.penalty_risk.level} (${a.penalty_risk.amount})")
        print(f"  • Safety: {a.safety_score.score} {a.safety_score.rating}")
        print(f"  • Eco: {a.eco_score.score} {a.eco_score.rating}")
        if bundle.weather is not None:
            print(f"  ☁  {bundle.weather.location}: {bundle.weather.conditions}, "
                  f"{bundle.weather.temperature}°C")
        if bundle.traffic is not None:
            print(f"  🚦 {bundle.traffic.congestion_level}% congestion, "
                  f"{bundle.traffic.delay_minutes} min delay")

    stats = service.dashboard_stats()
    print(f"\n📊 Dashboard: {stats.utilization}% utilisation, "
          f"${stats.revenue_per_trip}/trip, {stats.ai_recommendations} recommendations")


def demo_winter_storm():
    """Demo 2: same truck, clear skies vs a blizzard at rush hour"""
    print("\n" + "=" * 80)
    print("DEMO 2: Winter Storm - Truck #7821 on the Dallas → Chicago run")
    print("=" * 80)

    service = build_service(seed=7)
    truck   = service.get_truck("7821")
    rush    = datetime(2026, 1, 15, 17, 30)
    signals = FixedSignals(hours_on_duty=10, detour_score=88)
    traffic = TrafficObservation(
        route=truck.current_route.label,
        congestion_level=40,
        average_speed=48,
        incidents=2,
        delay_minutes=35,
    )

    scenarios = [
        WeatherObservation("Chicago", 22, "Sunny", 45, 8, 12000, rush),
        WeatherObservation("Chicago", -5, "Snow", 90, 25, 3000, rush),
    ]
    for weather in scenarios:
        weather.impact = compute_weather_impact(weather)
        a = analyze_truck(truck, weather, traffic, signals, rush)
        print(f"\n  {weather.conditions} ({weather.temperature}°C)")
        print(f"    Weather safety : {weather.impact.safety_score}  "
              f"speed −{weather.impact.speed_reduction}")
        print(f"    ETA            : {a.eta.base} @ {a.eta.adjusted_speed} mph")
        print(f"    Fuel cost      : ${a.fuel_cost:.2f}")
        print(f"    Penalty risk   : {a.penalty_risk.level} (${a.penalty_risk.amount})")
        print(f"    Safety         : {a.safety_score.score} {a.safety_score.rating}")
        for rec in weather.impact.recommendations:
            print(f"      • {rec}")


if __name__ == "__main__":
    demo_fleet_snapshot()
    demo_winter_storm()
