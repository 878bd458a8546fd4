from datetime import datetime
from donormatch.extensions import db


class DonationRecord(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    donor_id = db.Column(db.Integer, db.ForeignKey('donor.id'), nullable=False)
    blood_type = db.Column(db.String(20), nullable=False)
    donated_at = db.Column(db.DateTime, default=datetime.utcnow)
