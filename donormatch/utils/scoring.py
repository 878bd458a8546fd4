"""
Suitability scoring for a single donor against a seeker request.

The heuristic blends four factors, each scaled 0-1 before weighting. Distance
dominates and is banded so that donors within a couple of kilometres score far
above donors a city away. The predictive model contributes a small share of the
final score and a proximity multiplier rewards hyper-local donors.
"""
import logging
import math
from dataclasses import dataclass, field
from datetime import date

from donormatch.utils.blood_types import compatibility_score
from donormatch.utils.distance import UNRESOLVED, distance_km, is_resolved
from donormatch.utils.prediction import PredictionFeatures

logger = logging.getLogger(__name__)

WEIGHTS = {
    'distance': 0.60,
    'compatibility': 0.20,
    'recency': 0.10,
    'history': 0.10,
}

RECENCY_FULL_DAYS = 180
HISTORY_FULL_DONATIONS = 10
HEURISTIC_SHARE = 0.9
MODEL_SHARE = 0.1
MAX_SCORE = 100.0


@dataclass(frozen=True)
class SeekerQuery:
    blood_type: str
    latitude: float = None
    longitude: float = None
    city: str = None
    district: str = None
    seeker_id: int = None


@dataclass(frozen=True)
class CandidateScore:
    donor: object = field(compare=False)
    donor_id: int
    distance_km: float
    compatibility_score: int
    heuristic_score: float
    ml_probability: float
    final_score: float  # unrounded

    @property
    def distance_resolved(self):
        return is_resolved(self.distance_km)

    @property
    def suitability_score(self):
        """Final score rounded half-up for reporting"""
        return int(math.floor(self.final_score + 0.5))

    @property
    def confidence(self):
        if self.ml_probability > 0.7:
            return 'High'
        if self.ml_probability > 0.4:
            return 'Moderate'
        return 'Low'


def distance_factor(distance):
    """Banded, non-linear proximity factor in [0, 1]"""
    if distance is None or not math.isfinite(distance) or distance < 0:
        return 0.0
    if distance <= 2.0:
        return 0.90 + (1 - distance / 2.0) * 0.10
    if distance <= 10.0:
        return 0.70 + (1 - (distance - 2.0) / 8.0) * 0.19
    if distance <= 30.0:
        return 0.40 + (1 - (distance - 10.0) / 20.0) * 0.29
    if distance <= 100.0:
        return 0.10 + (1 - (distance - 30.0) / 70.0) * 0.29
    if distance <= 500.0:
        return max(0.0, (1 - (distance - 100.0) / 400.0) * 0.09)
    return 0.0


def recency_factor(last_donation_date, today=None):
    """Time since the last donation, saturating at six months. Never donated = 1.0"""
    if last_donation_date is None:
        return 1.0
    today = today or date.today()
    days = (today - last_donation_date).days
    return min(max(days, 0) / RECENCY_FULL_DAYS, 1.0)


def history_factor(total_donations):
    return min((total_donations or 0) / HISTORY_FULL_DONATIONS, 1.0)


def proximity_multiplier(distance):
    if distance < 2.0:
        return 1.25
    if distance < 5.0:
        return 1.10
    return 1.0


def heuristic_score(dist, compat_score, last_donation_date, total_donations, today=None):
    return (
        distance_factor(dist) * WEIGHTS['distance']
        + (compat_score / 100.0) * WEIGHTS['compatibility']
        + recency_factor(last_donation_date, today) * WEIGHTS['recency']
        + history_factor(total_donations) * WEIGHTS['history']
    ) * 100


def final_score(heuristic, probability, dist):
    score = heuristic * HEURISTIC_SHARE + (probability * 100) * MODEL_SHARE
    score *= proximity_multiplier(dist)
    return min(max(score, 0.0), MAX_SCORE)


class SuitabilityScorer:
    """Scores donors against a seeker using a given model snapshot"""

    def __init__(self, geocoder):
        self.geocoder = geocoder

    def resolve_distance(self, donor, seeker):
        seeker_point = self.geocoder.resolve_point(seeker.latitude, seeker.longitude, seeker.city, seeker.district)
        if seeker_point is None:
            return UNRESOLVED
        try:
            donor_point = self.geocoder.resolve_point(donor.latitude, donor.longitude, donor.city, donor.district)
        except Exception:
            # An unresolvable donor is still ranked, just last
            logger.exception('Could not resolve location of donor %s', donor.id)
            donor_point = None
        if donor_point is None:
            return UNRESOLVED
        return distance_km(seeker_point[0], seeker_point[1], donor_point[0], donor_point[1])

    def score(self, donor, seeker, params, today=None):
        dist = self.resolve_distance(donor, seeker)
        compat = compatibility_score(donor.blood_type, seeker.blood_type)
        heuristic = heuristic_score(dist, compat, donor.last_donation_date, donor.total_donations, today)
        probability = params.predict(PredictionFeatures.for_donor(dist, donor.total_donations))
        return CandidateScore(
            donor=donor,
            donor_id=donor.id,
            distance_km=dist,
            compatibility_score=compat,
            heuristic_score=heuristic,
            ml_probability=probability,
            final_score=final_score(heuristic, probability, dist),
        )
