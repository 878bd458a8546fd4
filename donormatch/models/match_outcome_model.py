from datetime import datetime
from sqlalchemy import case, func
from donormatch.extensions import db

OUTCOMES = ('Pending', 'Accepted', 'Rejected', 'Completed', 'TimedOut')


class MatchOutcome(db.Model):
    """A logged donor suggestion and, once known, what actually happened"""
    id = db.Column(db.Integer, primary_key=True)
    donor_id = db.Column(db.Integer, db.ForeignKey('donor.id'), nullable=False, index=True)
    seeker_id = db.Column(db.Integer, nullable=True)
    suggested_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    outcome = db.Column(db.Enum(*OUTCOMES, name='match_outcome_status'), default='Pending', nullable=False)
    response_time_seconds = db.Column(db.Integer, nullable=True)
    suitability_score = db.Column(db.Float)
    distance_km = db.Column(db.Float, nullable=True)  # NULL when the distance could not be resolved

    donor = db.relationship('Donor', backref='match_outcomes')

    @classmethod
    def success_rates_by_donor(cls):
        """Share of logged suggestions per donor that ended in a completed donation.

        Every row counts, including suggestions still Pending.
        """
        completed = case((cls.outcome == 'Completed', 1.0), else_=0.0)
        rows = (db.session.query(cls.donor_id, func.avg(completed))
                .group_by(cls.donor_id)
                .all())
        return [float(rate) for _, rate in rows]

    def to_dict(self):
        return {
            'id': self.id,
            'donor_id': self.donor_id,
            'seeker_id': self.seeker_id,
            'suggested_at': self.suggested_at.isoformat() if self.suggested_at else None,
            'outcome': self.outcome,
            'response_time_seconds': self.response_time_seconds,
            'suitability_score': self.suitability_score,
            'distance_km': self.distance_km
        }
