"""
Fire-and-forget persistence of donor suggestions.

Requests hand suggestions to a bounded queue and return immediately. A single
daemon thread drains the queue and writes each batch, retrying a failed write a
few times before giving up on it. Nothing here ever raises into a request.
"""
import logging
import queue
import threading
import time
from dataclasses import dataclass
from datetime import datetime

from donormatch.extensions import db
from donormatch.models.match_outcome_model import MatchOutcome

logger = logging.getLogger(__name__)

_STOP = object()


@dataclass(frozen=True)
class SuggestionRecord:
    donor_id: int
    seeker_id: int
    suggested_at: datetime
    suitability_score: float
    distance_km: float  # None when unresolved
    outcome: str = 'Pending'
    response_time_seconds: int = None


def write_match_outcomes(app, records):
    """Insert suggestion rows into the match_outcome table"""
    with app.app_context():
        try:
            db.session.add_all([
                MatchOutcome(
                    donor_id=r.donor_id,
                    seeker_id=r.seeker_id,
                    suggested_at=r.suggested_at,
                    outcome=r.outcome,
                    response_time_seconds=r.response_time_seconds,
                    suitability_score=r.suitability_score,
                    distance_km=r.distance_km,
                ) for r in records
            ])
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise


class OutcomeLogger:

    def __init__(self, writer, maxsize=1000, max_retries=3, retry_delay=0.5):
        self.writer = writer
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._queue = queue.Queue(maxsize=maxsize)
        self._thread = None
        self._start_lock = threading.Lock()

    def start(self):
        with self._start_lock:
            if self._thread is None or not self._thread.is_alive():
                self._thread = threading.Thread(target=self._run, name='outcome-logger', daemon=True)
                self._thread.start()

    def submit(self, records):
        """Queue a batch without blocking. Returns False if it was dropped"""
        records = list(records)
        if not records:
            return True
        try:
            self.start()
            self._queue.put_nowait(records)
            return True
        except queue.Full:
            logger.warning('Outcome log queue full, dropping %d suggestions', len(records))
        except Exception:
            logger.exception('Could not queue %d suggestions', len(records))
        return False

    def drain(self, timeout=None):
        """Block until every queued batch has been handled. Returns False on timeout"""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._queue.all_tasks_done:
            while self._queue.unfinished_tasks:
                remaining = None if deadline is None else deadline - time.monotonic()
                if remaining is not None and remaining <= 0:
                    return False
                self._queue.all_tasks_done.wait(remaining)
        return True

    def stop(self, timeout=5.0):
        if self._thread is not None and self._thread.is_alive():
            self._queue.put(_STOP)
            self._thread.join(timeout)

    def _run(self):
        while True:
            batch = self._queue.get()
            try:
                if batch is _STOP:
                    return
                self._write_with_retries(batch)
            finally:
                self._queue.task_done()

    def _write_with_retries(self, batch):
        for attempt in range(1, self.max_retries + 1):
            try:
                self.writer(batch)
                return
            except Exception:
                if attempt == self.max_retries:
                    logger.exception('Giving up on %d suggestions after %d attempts', len(batch), attempt)
                    return
                logger.warning('Logging suggestions failed (attempt %d/%d), retrying',
                               attempt, self.max_retries)
                time.sleep(self.retry_delay * attempt)
