import threading
import time

import pytest
from geopy.exc import GeocoderTimedOut

from donormatch.utils.gazetteer import INDIA_COORDINATES
from donormatch.utils.geocoding import GeocodingResolver, lookup_gazetteer, normalize_place


@pytest.mark.parametrize('raw, expected', [
    ('Kottayam', 'kottayam'),
    ('  Kochi City ', 'kochi'),
    ('Ernakulam District', 'ernakulam'),
    ('Pala Town', 'pala'),
    ('NEW   DELHI', 'new delhi'),
    ('', None),
    (None, None),
    ('District', None),
])
def test_normalize_place(raw, expected):
    assert normalize_place(raw) == expected


def test_gazetteer_is_read_only():
    with pytest.raises(TypeError):
        INDIA_COORDINATES['atlantis'] = (0.0, 0.0)


def test_gazetteer_has_a_few_hundred_places():
    assert len(INDIA_COORDINATES) >= 200
    for lat, lng in INDIA_COORDINATES.values():
        assert 6 <= lat <= 36
        assert 68 <= lng <= 98


def test_city_takes_priority_over_district():
    assert lookup_gazetteer('Pala', 'Kottayam') == INDIA_COORDINATES['pala']


def test_district_used_when_city_misses():
    assert lookup_gazetteer('Some Village', 'Kottayam District') == INDIA_COORDINATES['kottayam']


def test_both_miss_returns_none():
    assert lookup_gazetteer('Nowhere', 'Unknown') is None
    assert lookup_gazetteer(None, None) is None


def test_resolve_point_prefers_direct_coordinates():
    resolver = GeocodingResolver()
    assert resolver.resolve_point(10.0, 76.0, 'Delhi', None) == (10.0, 76.0)
    assert resolver.resolve_point(None, 76.0, 'Delhi', None) == INDIA_COORDINATES['delhi']


class FakeLocation:
    def __init__(self, latitude, longitude):
        self.latitude = latitude
        self.longitude = longitude


class FakeGeocoder:
    def __init__(self, results=None, error=None):
        self.results = results or {}
        self.error = error
        self.queries = []

    def geocode(self, query, timeout=None):
        self.queries.append((query, timeout))
        if self.error:
            raise self.error
        return self.results.get(query)


def test_online_fallback_disabled_by_default():
    geocoder = FakeGeocoder({'nowhere, India': FakeLocation(1.0, 2.0)})
    resolver = GeocodingResolver(geocoder=geocoder)
    assert resolver.resolve('Nowhere', None) is None
    assert geocoder.queries == []


def test_online_fallback_used_on_gazetteer_miss_and_cached():
    geocoder = FakeGeocoder({'erumely, India': FakeLocation(9.48, 76.84)})
    resolver = GeocodingResolver(online_fallback=True, timeout=1.5, geocoder=geocoder, min_delay=0)
    assert resolver.resolve('Erumely', None) == (9.48, 76.84)
    assert resolver.resolve('Erumely', None) == (9.48, 76.84)
    assert geocoder.queries == [('erumely, India', 1.5)]


def test_online_fallback_not_used_when_gazetteer_hits():
    geocoder = FakeGeocoder()
    resolver = GeocodingResolver(online_fallback=True, geocoder=geocoder, min_delay=0)
    assert resolver.resolve('Kottayam', None) == INDIA_COORDINATES['kottayam']
    assert geocoder.queries == []


def test_online_geocoder_errors_are_treated_as_a_miss():
    geocoder = FakeGeocoder(error=GeocoderTimedOut('slow'))
    resolver = GeocodingResolver(online_fallback=True, geocoder=geocoder, min_delay=0)
    assert resolver.resolve('Erumely', 'Nowhere') is None
    # Failures are not cached
    resolver.resolve('Erumely', None)
    assert len(geocoder.queries) == 3


def test_from_config():
    resolver = GeocodingResolver.from_config({'GEOCODER_ONLINE_FALLBACK': True, 'GEOCODER_TIMEOUT': 2.0})
    assert resolver.online_fallback is True
    assert resolver.timeout == 2.0


def test_concurrent_online_lookups_are_spaced_out():
    class TimedGeocoder(FakeGeocoder):
        def __init__(self):
            super().__init__()
            self.times = []

        def geocode(self, query, timeout=None):
            self.times.append(time.perf_counter())
            return FakeLocation(10.0, 76.0)

    geocoder = TimedGeocoder()
    resolver = GeocodingResolver(online_fallback=True, geocoder=geocoder, min_delay=0.05)
    threads = [threading.Thread(target=resolver.resolve, args=(f'Village {n}', None)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    times = sorted(geocoder.times)
    assert len(times) == 4
    assert all(later - earlier >= 0.04 for earlier, later in zip(times, times[1:]))


def test_min_delay_from_config():
    assert GeocodingResolver.from_config({'GEOCODER_MIN_DELAY': 2.5}).min_delay == 2.5
    assert GeocodingResolver.from_config({}).min_delay == 1.0
