"""Personnel module API routes."""
import logging

from flask import request

from . import personnel_bp
from .services import PersonnelService
from core.utils.api_helpers import (
    success_response, error_response, get_json_or_error, safe_error_response,
)

logger = logging.getLogger('agency.personnel')

_service = PersonnelService()


@personnel_bp.route('/api/personnel', methods=['GET'])
def api_list_personnel():
    """List personnel with optional ?search= filter."""
    try:
        return success_response(_service.list(request.args.get('search')))
    except Exception as e:
        return safe_error_response(e)


@personnel_bp.route('/api/personnel/<int:personnel_id>', methods=['GET'])
def api_get_personnel(personnel_id):
    try:
        person = _service.get(personnel_id)
    except Exception as e:
        return safe_error_response(e)
    if not person:
        return error_response('Personnel not found', 404)
    return success_response(person)


@personnel_bp.route('/api/personnel', methods=['POST'])
def api_create_personnel():
    data, error = get_json_or_error()
    if error:
        return error

    try:
        person = _service.create(data)
    except Exception as e:
        return safe_error_response(e)
    logger.info(f"Personnel {person['personnel_id']} created")
    return success_response(person, message='Personnel added successfully', status_code=201)


@personnel_bp.route('/api/personnel/<int:personnel_id>', methods=['PUT'])
def api_update_personnel(personnel_id):
    data, error = get_json_or_error()
    if error:
        return error

    try:
        person = _service.update(personnel_id, data)
    except Exception as e:
        return safe_error_response(e)
    if not person:
        return error_response('Personnel not found', 404)
    return success_response(person, message='Personnel updated successfully')


@personnel_bp.route('/api/personnel/<int:personnel_id>', methods=['DELETE'])
def api_delete_personnel(personnel_id):
    try:
        deleted = _service.delete(personnel_id)
    except Exception as e:
        return safe_error_response(e)
    if not deleted:
        return error_response('Personnel not found', 404)
    logger.info(f'Personnel {personnel_id} deleted')
    return success_response(message='Personnel deleted successfully')


@personnel_bp.route('/api/lookup-data', methods=['GET'])
def api_lookup_data():
    """Genders and civil statuses for the personnel form dropdowns."""
    try:
        return success_response(_service.lookup_data())
    except Exception as e:
        return safe_error_response(e)
