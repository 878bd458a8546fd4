import logging

from flask import Flask

from donormatch.config import config_by_name
from donormatch.extensions import db, migrate, cors, scheduler

# Import models so migrations see every table
from donormatch.models.donor_model import Donor  # noqa: F401
from donormatch.models.donation_record_model import DonationRecord  # noqa: F401
from donormatch.models.match_outcome_model import MatchOutcome

from donormatch.controllers.donor_match_controller import donor_match_bp
from donormatch.services.donor_repository import SqlAlchemyDonorRepository
from donormatch.services.matching_service import MatchingService
from donormatch.services.outcome_logger import OutcomeLogger, write_match_outcomes
from donormatch.utils.geocoding import GeocodingResolver
from donormatch.utils.prediction import ModelRegistry

RECALIBRATION_JOB_ID = 'recalibrate-match-model'


def create_app(config_name='default', **overrides):
    """Flask application factory"""
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.config.update(overrides)

    logging.getLogger('donormatch').setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app)

    init_matching(app)

    # Register Blueprints with appropriate URL prefixes
    app.register_blueprint(donor_match_bp, url_prefix='/api/v1/donormatches')

    if app.config['RECALIBRATION_ENABLED']:
        schedule_recalibration(app)

    return app


def init_matching(app):
    """Build the matching engine and keep it on app.extensions"""
    registry = ModelRegistry()
    outcome_logger = OutcomeLogger(
        writer=lambda records: write_match_outcomes(app, records),
        maxsize=app.config['MATCH_LOG_QUEUE_SIZE'],
        max_retries=app.config['MATCH_LOG_MAX_RETRIES'],
    )
    service = MatchingService(
        donor_repository=SqlAlchemyDonorRepository(app),
        model_registry=registry,
        geocoder=GeocodingResolver.from_config(app.config),
        outcome_logger=outcome_logger,
        fetch_timeout=app.config['DONOR_FETCH_TIMEOUT'],
        log_limit=app.config['MATCH_LOG_LIMIT'],
        max_workers=app.config['SCORING_WORKERS'],
        fetch_workers=app.config['DONOR_FETCH_WORKERS'],
    )
    app.extensions['model_registry'] = registry
    app.extensions['outcome_logger'] = outcome_logger
    app.extensions['matching_service'] = service


def recalibrate_model(app):
    """Out-of-band recalibration from the outcome log"""
    with app.app_context():
        registry = app.extensions['model_registry']
        try:
            return registry.recalibrate(MatchOutcome.success_rates_by_donor)
        except Exception:
            app.logger.exception('Scheduled recalibration failed')
            return None


def schedule_recalibration(app):
    if not scheduler.running:
        scheduler.init_app(app)
    scheduler.add_job(
        id=RECALIBRATION_JOB_ID,
        func=recalibrate_model,
        args=[app],
        trigger='interval',
        minutes=app.config['RECALIBRATION_INTERVAL_MINUTES'],
        max_instances=1,
        replace_existing=True,
    )
    if not scheduler.running:
        scheduler.start()

