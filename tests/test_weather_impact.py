"""Tests for the weather impact model."""

import itertools

import pytest

from fleetsense.engine.weather_service import compute_weather_impact, location_name
from fleetsense.models.truck import Location


class TestSingleRules:
    def test_clear_day_has_no_impact(self, make_weather):
        impact = compute_weather_impact(make_weather())
        assert impact.safety_score == 100
        assert impact.speed_reduction == "0%"
        assert impact.fuel_efficiency == "0% reduction"
        assert impact.recommendations == []

    def test_freezing(self, make_weather):
        impact = compute_weather_impact(make_weather(temperature=-1))
        assert impact.safety_score == 80
        assert impact.speed_reduction == "15%"
        assert impact.fuel_efficiency == "10% reduction"
        assert impact.recommendations == ["Icy conditions - use winter tires"]

    def test_zero_degrees_is_not_freezing(self, make_weather):
        assert compute_weather_impact(make_weather(temperature=0)).safety_score == 100

    def test_heat(self, make_weather):
        impact = compute_weather_impact(make_weather(temperature=31))
        assert impact.safety_score == 90
        assert impact.speed_reduction == "0%"
        assert impact.fuel_efficiency == "5% reduction"

    def test_thirty_degrees_is_not_hot(self, make_weather):
        assert compute_weather_impact(make_weather(temperature=30)).safety_score == 100

    @pytest.mark.parametrize("conditions", ["Light Rain", "HEAVY RAIN", "rain showers"])
    def test_rain_matches_case_insensitively(self, make_weather, conditions):
        impact = compute_weather_impact(make_weather(conditions=conditions))
        assert impact.safety_score == 85
        assert impact.speed_reduction == "10%"
        assert impact.recommendations == ["Wet roads - increase following distance"]

    def test_snow(self, make_weather):
        impact = compute_weather_impact(make_weather(conditions="Snow"))
        assert impact.safety_score == 75
        assert impact.speed_reduction == "20%"

    def test_rain_wins_over_snow(self, make_weather):
        """Rain and snow are exclusive; rain is checked first."""
        impact = compute_weather_impact(make_weather(conditions="Rain and Snow"))
        assert impact.safety_score == 85
        assert impact.speed_reduction == "10%"
        assert len(impact.recommendations) == 1

    def test_high_wind_leaves_speed_and_fuel_alone(self, make_weather):
        impact = compute_weather_impact(make_weather(wind_speed=21))
        assert impact.safety_score == 90
        assert impact.speed_reduction == "0%"
        assert impact.fuel_efficiency == "0% reduction"
        assert impact.recommendations == ["High winds - secure loads properly"]

    def test_wind_threshold_is_exclusive(self, make_weather):
        assert compute_weather_impact(make_weather(wind_speed=20)).safety_score == 100

    def test_low_visibility(self, make_weather):
        impact = compute_weather_impact(make_weather(visibility=4999))
        assert impact.safety_score == 85
        assert impact.speed_reduction == "15%"

    def test_visibility_threshold_is_exclusive(self, make_weather):
        assert compute_weather_impact(make_weather(visibility=5000)).safety_score == 100


class TestRuleInteraction:
    def test_snow_storm_regression(self, make_weather):
        """-5°C, snow, 25 mph wind, 3 km visibility.

        100 − 20 − 25 − 10 − 15 = 30, floored to 50. Visibility runs last,
        so its 15% replaces the 20% set by snow.
        """
        impact = compute_weather_impact(
            make_weather(temperature=-5, conditions="Snow", wind_speed=25, visibility=3000)
        )
        assert impact.safety_score == 50
        assert impact.speed_reduction == "15%"
        assert impact.fuel_efficiency == "10% reduction"
        assert impact.recommendations == [
            "Icy conditions - use winter tires",
            "Snowy conditions - use chains if required",
            "High winds - secure loads properly",
            "Reduced visibility - use caution",
        ]

    def test_rain_overwrites_freezing_speed_reduction(self, make_weather):
        impact = compute_weather_impact(make_weather(temperature=-2, conditions="Freezing rain"))
        assert impact.safety_score == 65
        assert impact.speed_reduction == "10%"
        assert impact.fuel_efficiency == "10% reduction"

    def test_numeric_views_follow_final_strings(self, make_weather):
        impact = compute_weather_impact(
            make_weather(temperature=-5, conditions="Snow", wind_speed=25, visibility=3000)
        )
        assert impact.speed_reduction_pct == 15.0
        assert impact.fuel_efficiency_reduction_pct == 10.0

    @pytest.mark.parametrize(
        "temperature,conditions,wind_speed,visibility",
        list(itertools.product(
            [-10, 0, 35], ["Sunny", "Rain", "Snow"], [5, 30], [1000, 10000],
        )),
    )
    def test_safety_never_below_floor(
        self, make_weather, temperature, conditions, wind_speed, visibility
    ):
        impact = compute_weather_impact(make_weather(
            temperature=temperature, conditions=conditions,
            wind_speed=wind_speed, visibility=visibility,
        ))
        assert 50 <= impact.safety_score <= 100


class TestLocationName:
    TABLE = {"41.8781,-87.6298": "Chicago", "32.7767,-96.7970": "Dallas"}

    def test_known_coordinates(self):
        assert location_name(Location(41.8781, -87.6298), self.TABLE) == "Chicago"

    def test_trailing_zero_does_not_matter(self):
        assert location_name(Location(32.7767, -96.797), self.TABLE) == "Dallas"

    def test_unknown_coordinates(self):
        assert location_name(Location(0.0, 0.0), self.TABLE) == "Unknown Location"
