"""Tests for the TTL weather cache."""

from fleetsense.engine.weather_cache import WeatherCache


class TestWeatherCache:
    def test_miss_on_empty_cache(self, fake_clock):
        cache = WeatherCache(clock=fake_clock)
        assert cache.get("Chicago") is None

    def test_keys_are_case_insensitive(self, fake_clock):
        cache = WeatherCache(clock=fake_clock)
        reading = object()
        cache.put("Chicago", reading)
        assert cache.get("chicago") is reading
        assert cache.get("CHICAGO") is reading

    def test_two_reads_within_ttl_fetch_once(self, fake_clock):
        cache = WeatherCache(clock=fake_clock)
        calls = []

        def fetch(key):
            calls.append(key)
            return {"location": key}

        first = cache.get_or_fetch("Dallas", fetch)
        fake_clock.advance(120)
        second = cache.get_or_fetch("dallas", fetch)
        fake_clock.advance(179)
        third = cache.get_or_fetch("DALLAS", fetch)

        assert calls == ["Dallas"]
        assert first is second is third

    def test_entry_expires_at_ttl(self, fake_clock):
        cache = WeatherCache(ttl_seconds=300, clock=fake_clock)
        cache.put("Denver", "old")
        fake_clock.advance(300)
        assert cache.get("Denver") is None
        assert len(cache) == 0

    def test_read_after_expiry_refetches(self, fake_clock):
        cache = WeatherCache(clock=fake_clock)
        readings = iter(["first", "second"])
        assert cache.get_or_fetch("Denver", lambda key: next(readings)) == "first"
        fake_clock.advance(301)
        assert cache.get_or_fetch("Denver", lambda key: next(readings)) == "second"
        assert cache.get("denver") == "second"

    def test_put_overwrites(self, fake_clock):
        cache = WeatherCache(clock=fake_clock)
        cache.put("Chicago", "a")
        fake_clock.advance(250)
        cache.put("chicago", "b")
        fake_clock.advance(250)
        assert cache.get("Chicago") == "b"
        assert len(cache) == 1

    def test_missing_reading_is_not_cached(self, fake_clock):
        cache = WeatherCache(clock=fake_clock)
        assert cache.get_or_fetch("Nowhere", lambda key: None) is None
        assert len(cache) == 0
