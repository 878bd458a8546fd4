"""
Predictive refinement for donor suitability.

The model is a fixed-weight logistic unit. It is not trained: recalibration
only drifts the bias toward the observed success rate in the match outcome log,
a heuristic nudge rather than gradient descent. Parameters are immutable
snapshots; a recalibration builds a new snapshot and the registry swaps it in,
so a scoring call that already holds a snapshot never sees it change.
"""
import logging
import math
import threading
from dataclasses import dataclass, replace, asdict
from datetime import datetime

logger = logging.getLogger(__name__)

FALLBACK_DISTANCE_KM = 50.0  # Stand-in for an unresolved distance
ACTIVE_RESPONSE_RATE = 0.8
NEW_DONOR_RESPONSE_RATE = 0.5


def sigmoid(z):
    # Split on sign so exp() never overflows
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    ez = math.exp(z)
    return ez / (1.0 + ez)


@dataclass(frozen=True)
class PredictionFeatures:
    distance_km: float
    total_donations: int
    response_rate: float

    @classmethod
    def for_donor(cls, distance_km, total_donations):
        """Build features, substituting proxies for what is not measured yet.

        The response rate is a two-valued stand-in: donors with any recorded
        donation are assumed to respond more often than donors with none.
        """
        if distance_km is None or not math.isfinite(distance_km):
            distance_km = FALLBACK_DISTANCE_KM
        total = total_donations or 0
        response_rate = ACTIVE_RESPONSE_RATE if total > 0 else NEW_DONOR_RESPONSE_RATE
        return cls(distance_km=distance_km, total_donations=total, response_rate=response_rate)


@dataclass(frozen=True)
class ModelParameters:
    bias: float = 0.5
    w_distance: float = -0.05
    w_history: float = 0.1
    w_response_rate: float = 2.0
    learning_rate: float = 0.1
    version: int = 1
    calibrated_at: datetime = None

    def predict(self, features):
        """Probability in [0, 1] that the suggested donor follows through"""
        z = (self.bias
             + self.w_distance * features.distance_km
             + self.w_history * features.total_donations
             + self.w_response_rate * features.response_rate)
        return sigmoid(z)

    def recalibrate(self, success_rates, now=None):
        """Return a new snapshot with the bias nudged by (mean success rate - 0.5).

        success_rates holds one rate per donor, so heavily suggested donors do not
        dominate. No data means no change.
        """
        rates = list(success_rates)
        if not rates:
            return self
        overall = sum(rates) / len(rates)
        return replace(
            self,
            bias=self.bias + (overall - 0.5) * self.learning_rate,
            version=self.version + 1,
            calibrated_at=now or datetime.utcnow(),
        )

    def to_dict(self):
        data = asdict(self)
        data['calibrated_at'] = self.calibrated_at.isoformat() if self.calibrated_at else None
        return data


DEFAULT_PARAMETERS = ModelParameters()


class ModelRegistry:
    """Holds the published model snapshot for the process"""

    def __init__(self, params=DEFAULT_PARAMETERS):
        self._params = params
        self._recalibration_lock = threading.Lock()

    def current(self):
        return self._params

    def publish(self, params):
        # Rebinding one attribute is atomic; readers see the old or the new snapshot
        self._params = params

    def recalibrate(self, load_success_rates, now=None):
        """Recompute and publish a snapshot; concurrent calls run one after another.

        load_success_rates is called under the lock and returns per-donor
        success rates from the outcome log.
        """
        with self._recalibration_lock:
            rates = list(load_success_rates())
            previous = self._params
            updated = previous.recalibrate(rates, now=now)
            self.publish(updated)
            if updated is previous:
                logger.info('Recalibration skipped: no resolved match outcomes')
            else:
                logger.info('Model recalibrated on %d donors: bias %.4f -> %.4f (v%d)',
                            len(rates), previous.bias, updated.bias, updated.version)
            return updated
