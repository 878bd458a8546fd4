from datetime import date

import pytest

from donormatch import create_app
from donormatch.extensions import db
from donormatch.models.donor_model import Donor
from donormatch.services.donor_repository import DonorRecord
from donormatch.services.matching_service import MatchingService
from donormatch.utils.geocoding import GeocodingResolver
from donormatch.utils.prediction import ModelRegistry

TODAY = date(2026, 1, 1)
KOTTAYAM = (9.5916, 76.5222)


@pytest.fixture
def app(tmp_path):
    # A file database so worker threads share the same data
    app = create_app('testing', SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'test.db'}")
    with app.app_context():
        db.create_all()
    yield app
    app.extensions['outcome_logger'].stop()
    app.extensions['matching_service'].shutdown()
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_donor(app):
    counter = {'n': 0}

    def _add(**fields):
        counter['n'] += 1
        n = counter['n']
        values = {
            'name': f'Donor {n}',
            'blood_type': 'O+',
            'phone': f'+91900000{n:04d}',
            'email': f'donor{n}@example.com',
            'availability_status': True,
            'total_donations': 0,
        }
        values.update(fields)
        with app.app_context():
            donor = Donor(**values)
            db.session.add(donor)
            db.session.commit()
            return donor.id

    return _add


class FakeRepository:
    def __init__(self, donors=()):
        self.donors = list(donors)
        self.calls = []

    def fetch_available(self, blood_types):
        self.calls.append(frozenset(blood_types))
        return [d for d in self.donors if d.blood_type in blood_types]


class RecordingLogger:
    def __init__(self):
        self.batches = []

    def submit(self, records):
        self.batches.append(list(records))
        return True


def donor_record(id, blood_type='O+', **fields):
    values = {'name': f'Donor {id}', 'phone': f'+91800000{id:04d}'}
    values.update(fields)
    return DonorRecord(id=id, blood_type=blood_type, **values)


@pytest.fixture
def make_service():
    services = []

    def _make(donors=(), repository=None, outcome_logger=None, **kwargs):
        kwargs.setdefault('fetch_timeout', 2.0)
        kwargs.setdefault('max_workers', 4)
        service = MatchingService(
            donor_repository=repository or FakeRepository(donors),
            model_registry=kwargs.pop('model_registry', ModelRegistry()),
            geocoder=kwargs.pop('geocoder', GeocodingResolver()),
            outcome_logger=outcome_logger,
            **kwargs
        )
        services.append(service)
        return service

    yield _make
    for service in services:
        service.shutdown()
