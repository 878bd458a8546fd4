from donormatch.extensions import db


class Donor(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    blood_type = db.Column(db.String(20), nullable=False, index=True)
    phone = db.Column(db.String(20), nullable=False, unique=True)
    email = db.Column(db.String(100), unique=True)
    city = db.Column(db.String(50))
    district = db.Column(db.String(50))
    state = db.Column(db.String(50))
    latitude = db.Column(db.Float)  # Optional GPS coordinates
    longitude = db.Column(db.Float)
    availability_status = db.Column(db.Boolean, default=True)  # True = Available
    last_donation_date = db.Column(db.Date)
    total_donations = db.Column(db.Integer, default=0, nullable=False)  # Seeded history, before live records

    donations = db.relationship('DonationRecord', backref='donor', lazy=True)

    @property
    def donation_count(self):
        """Prior donations, counting both the seeded total and recorded donations"""
        return max(self.total_donations or 0, len(self.donations))

    @property
    def latest_donation_date(self):
        dates = [record.donated_at.date() for record in self.donations if record.donated_at]
        if self.last_donation_date:
            dates.append(self.last_donation_date)
        return max(dates) if dates else None

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'blood_type': self.blood_type,
            'phone': self.phone,
            'email': self.email,
            'city': self.city,
            'district': self.district,
            'state': self.state,
            'latitude': self.latitude,
            'longitude': self.longitude,
            'availability_status': self.availability_status,
            'last_donation_date': self.last_donation_date.isoformat() if self.last_donation_date else None,
            'total_donations': self.donation_count
        }

    def __repr__(self):
        return f'<Donor {self.name}>'
