import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from datetime import date, datetime

from donormatch.services.outcome_logger import SuggestionRecord
from donormatch.utils.blood_types import canonical_blood_type, compatible_donor_types
from donormatch.utils.distance import is_resolved
from donormatch.utils.scoring import SeekerQuery, SuitabilityScorer

logger = logging.getLogger(__name__)


class InvalidMatchRequest(ValueError):
    """Raised before any work is done when a match request is unusable"""


class MatchingService:
    """Finds compatible, available donors for a seeker and ranks them.

    Results are ordered closest first. Every candidate still carries a
    suitability score, but the score does not decide the order.
    """

    def __init__(self, donor_repository, model_registry, geocoder, outcome_logger=None,
                 fetch_timeout=5.0, log_limit=50, max_workers=8, fetch_workers=4):
        self.donor_repository = donor_repository
        self.model_registry = model_registry
        self.geocoder = geocoder
        self.scorer = SuitabilityScorer(geocoder)
        self.outcome_logger = outcome_logger
        self.fetch_timeout = fetch_timeout
        self.log_limit = log_limit
        # Long-lived so a timed-out fetch does not hold the request open. A fetch
        # that outlives its timeout occupies a fetch worker, not a scoring worker.
        self._fetch_executor = ThreadPoolExecutor(max_workers=fetch_workers, thread_name_prefix='donor-fetch')
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='matching')

    def find_matches(self, blood_type, latitude=None, longitude=None, city=None, district=None,
                     seeker_id=None, today=None):
        requested = canonical_blood_type(blood_type)
        if not requested:
            raise InvalidMatchRequest('Missing blood_type')

        compatible_types = compatible_donor_types(requested)
        donors = self._fetch_donors(compatible_types)

        seeker = self._resolve_seeker(SeekerQuery(
            blood_type=requested,
            latitude=latitude,
            longitude=longitude,
            city=city,
            district=district,
            seeker_id=seeker_id,
        ))
        params = self.model_registry.current()  # one snapshot for the whole request
        today = today or date.today()

        candidates = self._score_all(donors, seeker, params, today)
        # Unresolved distances are infinite and sort last
        candidates.sort(key=lambda c: (c.distance_km, c.donor_id))

        self._log_suggestions(candidates[:self.log_limit], seeker)
        return candidates

    def _fetch_donors(self, compatible_types):
        try:
            future = self._fetch_executor.submit(self.donor_repository.fetch_available, compatible_types)
            donors = future.result(timeout=self.fetch_timeout)
        except FutureTimeoutError:
            logger.warning('Donor fetch exceeded %.1fs, continuing without candidates', self.fetch_timeout)
            return []
        except Exception:
            logger.exception('Donor fetch failed, continuing without candidates')
            return []
        # Guard against a repository that returns more than was asked for
        return [d for d in donors if canonical_blood_type(d.blood_type) in compatible_types]

    def _resolve_seeker(self, seeker):
        if seeker.latitude is not None and seeker.longitude is not None:
            return seeker
        try:
            point = self.geocoder.resolve(seeker.city, seeker.district)
        except Exception:
            logger.exception('Could not resolve seeker location %r/%r', seeker.city, seeker.district)
            point = None
        if point is None:
            return seeker
        return SeekerQuery(
            blood_type=seeker.blood_type,
            latitude=point[0],
            longitude=point[1],
            city=seeker.city,
            district=seeker.district,
            seeker_id=seeker.seeker_id,
        )

    def _score_all(self, donors, seeker, params, today):
        futures = [
            (donor, self._executor.submit(self.scorer.score, donor, seeker, params, today))
            for donor in donors
        ]
        candidates = []
        for donor, future in futures:
            try:
                candidates.append(future.result())
            except Exception:
                logger.exception('Scoring failed for donor %s, excluding it', donor.id)
        return candidates

    def _log_suggestions(self, candidates, seeker):
        if self.outcome_logger is None or not candidates:
            return
        try:
            now = datetime.utcnow()
            self.outcome_logger.submit(
                SuggestionRecord(
                    donor_id=c.donor_id,
                    seeker_id=seeker.seeker_id,
                    suggested_at=now,
                    suitability_score=c.suitability_score,
                    distance_km=c.distance_km if is_resolved(c.distance_km) else None,
                ) for c in candidates
            )
        except Exception:
            logger.exception('Could not log %d suggestions', len(candidates))

    def shutdown(self):
        self._fetch_executor.shutdown(wait=False)
        self._executor.shutdown(wait=False)
