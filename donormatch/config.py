import os


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration, overridable through environment variables"""
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'mysql+pymysql://root:@localhost/outreach')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your_secret_key')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Matching engine
    DONOR_FETCH_TIMEOUT = float(os.environ.get('DONOR_FETCH_TIMEOUT', 5.0))  # seconds
    SCORING_WORKERS = int(os.environ.get('SCORING_WORKERS', 8))
    DONOR_FETCH_WORKERS = int(os.environ.get('DONOR_FETCH_WORKERS', 4))
    MATCH_LOG_LIMIT = int(os.environ.get('MATCH_LOG_LIMIT', 50))  # suggestions persisted per request
    MATCH_LOG_QUEUE_SIZE = int(os.environ.get('MATCH_LOG_QUEUE_SIZE', 1000))
    MATCH_LOG_MAX_RETRIES = int(os.environ.get('MATCH_LOG_MAX_RETRIES', 3))

    # Predictive model recalibration
    RECALIBRATION_ENABLED = _env_bool('RECALIBRATION_ENABLED', True)
    RECALIBRATION_INTERVAL_MINUTES = int(os.environ.get('RECALIBRATION_INTERVAL_MINUTES', 60))
    SCHEDULER_API_ENABLED = False

    # Online geocoding is only consulted when the gazetteer misses
    GEOCODER_ONLINE_FALLBACK = _env_bool('GEOCODER_ONLINE_FALLBACK', False)
    GEOCODER_TIMEOUT = float(os.environ.get('GEOCODER_TIMEOUT', 3.0))
    GEOCODER_USER_AGENT = os.environ.get('GEOCODER_USER_AGENT', 'donormatch')
    GEOCODER_MIN_DELAY = float(os.environ.get('GEOCODER_MIN_DELAY', 1.0))  # seconds between online lookups


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = 'DEBUG'


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    RECALIBRATION_ENABLED = False
    DONOR_FETCH_TIMEOUT = 2.0
    SCORING_WORKERS = 4
    MATCH_LOG_MAX_RETRIES = 1


config_by_name = {
    'default': Config,
    'development': DevelopmentConfig,
    'testing': TestingConfig,
}
