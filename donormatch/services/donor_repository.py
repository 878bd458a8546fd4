from dataclasses import dataclass
from datetime import date

from sqlalchemy.orm import selectinload

from donormatch.models.donor_model import Donor


@dataclass(frozen=True)
class DonorRecord:
    """Detached, read-only copy of a donor row, safe to hand to worker threads"""
    id: int
    name: str
    blood_type: str
    phone: str = None
    email: str = None
    city: str = None
    district: str = None
    state: str = None
    latitude: float = None
    longitude: float = None
    last_donation_date: date = None
    total_donations: int = 0

    @classmethod
    def from_model(cls, donor):
        return cls(
            id=donor.id,
            name=donor.name,
            blood_type=donor.blood_type,
            phone=donor.phone,
            email=donor.email,
            city=donor.city,
            district=donor.district,
            state=donor.state,
            latitude=donor.latitude,
            longitude=donor.longitude,
            last_donation_date=donor.latest_donation_date,
            total_donations=donor.donation_count,
        )


class SqlAlchemyDonorRepository:
    """Reads available donors from the database.

    Queries run inside their own application context because the matching
    service calls fetch_available from a worker thread.
    """

    def __init__(self, app):
        self.app = app

    def fetch_available(self, blood_types):
        if not blood_types:
            return []
        with self.app.app_context():
            donors = (Donor.query
                      .options(selectinload(Donor.donations))
                      .filter(Donor.blood_type.in_(sorted(blood_types)),
                              Donor.availability_status.is_(True))
                      .order_by(Donor.id)
                      .all())
            return [DonorRecord.from_model(donor) for donor in donors]
