from flask import Blueprint, current_app, request, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import NotFound, BadRequest

from donormatch.extensions import db
from donormatch.models.match_outcome_model import MatchOutcome, OUTCOMES
from donormatch.services.matching_service import InvalidMatchRequest

# Define Blueprint for the Donor Match controller
donor_match_bp = Blueprint('donor_match_bp', __name__, url_prefix='/api/v1/donormatches')


def _float_arg(name):
    value = request.args.get(name)
    if value is None or value.strip() == '':
        return None
    try:
        return float(value)
    except ValueError:
        raise BadRequest(f'Invalid value for {name}: {value}')


def _int_arg(name):
    value = request.args.get(name)
    if value is None or value.strip() == '':
        return None
    try:
        return int(value)
    except ValueError:
        raise BadRequest(f'Invalid value for {name}: {value}')


def candidate_to_dict(candidate):
    donor = candidate.donor
    return {
        'id': donor.id,
        'name': donor.name,
        'email': donor.email,
        'phone': donor.phone,
        'blood_type': donor.blood_type,
        'city': donor.city or 'N/A',
        'district': donor.district or 'N/A',
        'state': donor.state or 'N/A',
        'distance': round(candidate.distance_km, 2) if candidate.distance_resolved else None,
        'suitability_score': candidate.suitability_score,
        'heuristic_score': round(candidate.heuristic_score, 2),
        'compatibility_score': candidate.compatibility_score,
        'total_donations': donor.total_donations,
        'ai_confidence': round(candidate.ml_probability, 2),
        'predicted_probability': candidate.ml_probability,
        'prediction_type': candidate.confidence
    }


@donor_match_bp.route('/smart', methods=['GET'])
def get_smart_matches():
    """Rank compatible, available donors for a seeker, closest first"""
    try:
        lat = _float_arg('lat')
        lng = _float_arg('lng')
        seeker_id = _int_arg('seeker_id')
        service = current_app.extensions['matching_service']
        candidates = service.find_matches(
            request.args.get('blood_type'),
            latitude=lat,
            longitude=lng,
            city=request.args.get('city'),
            district=request.args.get('district'),
            seeker_id=seeker_id
        )
        return jsonify([candidate_to_dict(c) for c in candidates]), 200
    except (BadRequest, InvalidMatchRequest) as e:
        message = e.description if isinstance(e, BadRequest) else str(e)
        return jsonify({'error': message}), 400
    except Exception as e:
        current_app.logger.exception('Matching failed')
        return jsonify({'error': f'Unexpected error: {str(e)}'}), 500


@donor_match_bp.route('/model', methods=['GET'])
def get_model():
    registry = current_app.extensions['model_registry']
    return jsonify(registry.current().to_dict()), 200


@donor_match_bp.route('/recalibrate', methods=['POST'])
def recalibrate_model():
    """Nudge the prediction model toward the logged outcomes"""
    try:
        registry = current_app.extensions['model_registry']
        params = registry.recalibrate(MatchOutcome.success_rates_by_donor)
        return jsonify(params.to_dict()), 200
    except SQLAlchemyError:
        current_app.logger.exception('Recalibration failed')
        return jsonify({'error': 'Database error occurred'}), 500


@donor_match_bp.route('/outcomes/<int:id>', methods=['PUT'])
def update_match_outcome(id):
    """Record what happened after a donor was suggested"""
    try:
        data = request.get_json(silent=True)
        if not data:
            raise BadRequest('No input data provided')

        outcome = db.session.get(MatchOutcome, id)
        if not outcome:
            raise NotFound('Match outcome not found')

        if 'outcome' in data:
            if data['outcome'] not in OUTCOMES:
                raise BadRequest(f"Invalid outcome: {data['outcome']}")
            outcome.outcome = data['outcome']
        if 'response_time_seconds' in data:
            seconds = data['response_time_seconds']
            if seconds is not None and (not isinstance(seconds, int) or isinstance(seconds, bool) or seconds < 0):
                raise BadRequest('response_time_seconds must be a non-negative integer')
            outcome.response_time_seconds = seconds

        db.session.commit()
        return jsonify(outcome.to_dict()), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
    except NotFound as e:
        return jsonify({'error': e.description}), 404
    except SQLAlchemyError:
        db.session.rollback()
        return jsonify({'error': 'Database error occurred'}), 500
