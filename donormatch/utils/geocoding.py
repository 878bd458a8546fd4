import logging
import re
import threading

from geopy.exc import GeopyError
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from donormatch.utils.gazetteer import INDIA_COORDINATES

logger = logging.getLogger(__name__)

_SUFFIX_WORDS = re.compile(r'\b(city|town|district)\b')


def normalize_place(name):
    """Lower-case, trim and strip the words 'city', 'town' and 'district'"""
    if not name:
        return None
    s = _SUFFIX_WORDS.sub(' ', str(name).lower())
    s = ' '.join(s.split())
    return s or None


def lookup_gazetteer(city, district):
    """Return (lat, lng) for the city, else the district, else None"""
    for name in (normalize_place(city), normalize_place(district)):
        if name and name in INDIA_COORDINATES:
            return INDIA_COORDINATES[name]
    return None


class GeocodingResolver:
    """Resolves place names to coordinates.

    The static gazetteer is always consulted first. When online_fallback is set,
    misses are sent to Nominatim with a bounded timeout and cached, so a slow or
    unreachable geocoder costs at most one timeout per place name. Calls from
    concurrent scoring threads are spaced at least min_delay seconds apart.
    """

    def __init__(self, online_fallback=False, timeout=3.0, user_agent='donormatch', geocoder=None,
                 min_delay=1.0):
        self.online_fallback = online_fallback
        self.timeout = timeout
        self.min_delay = min_delay
        self._geocoder = geocoder
        self._geocode = None
        self._user_agent = user_agent
        self._cache = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config):
        return cls(
            online_fallback=config.get('GEOCODER_ONLINE_FALLBACK', False),
            timeout=config.get('GEOCODER_TIMEOUT', 3.0),
            user_agent=config.get('GEOCODER_USER_AGENT', 'donormatch'),
            min_delay=config.get('GEOCODER_MIN_DELAY', 1.0),
        )

    def resolve(self, city, district):
        coords = lookup_gazetteer(city, district)
        if coords is not None or not self.online_fallback:
            return coords
        for name in (normalize_place(city), normalize_place(district)):
            if name:
                coords = self._geocode_online(name)
                if coords is not None:
                    return coords
        return None

    def resolve_point(self, lat, lng, city, district):
        """Direct coordinates win; the place names are only a fallback"""
        if lat is not None and lng is not None:
            return lat, lng
        return self.resolve(city, district)

    def _geocode_online(self, name):
        with self._lock:
            if name in self._cache:
                return self._cache[name]
        coords = None
        try:
            location = self._rate_limited_geocode()(f'{name}, India', timeout=self.timeout)
            if location is not None:
                coords = (location.latitude, location.longitude)
        except GeopyError as e:
            logger.warning('Online geocoding failed for %r: %s', name, e)
            return None  # Not cached so a transient failure can be retried
        with self._lock:
            self._cache[name] = coords
        return coords

    def _rate_limited_geocode(self):
        # Nominatim allows one request per second per client
        with self._lock:
            if self._geocode is None:
                if self._geocoder is None:
                    self._geocoder = Nominatim(user_agent=self._user_agent, timeout=self.timeout)
                self._geocode = RateLimiter(self._geocoder.geocode, min_delay_seconds=self.min_delay,
                                            max_retries=0, swallow_exceptions=False)
            return self._geocode
