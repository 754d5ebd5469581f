"""Assignment module API routes."""
import logging

from flask import request

from . import assignments_bp
from .services import AssignmentService
from core.utils.api_helpers import (
    success_response, error_response, get_json_or_error, safe_error_response,
)

logger = logging.getLogger('agency.assignments')

_service = AssignmentService()


@assignments_bp.route('/api/assignments', methods=['GET'])
def api_list_assignments():
    try:
        return success_response(_service.list(request.args.get('search')))
    except Exception as e:
        return safe_error_response(e)


@assignments_bp.route('/api/assignments/<int:assignment_id>', methods=['GET'])
def api_get_assignment(assignment_id):
    try:
        assignment = _service.get(assignment_id)
    except Exception as e:
        return safe_error_response(e)
    if not assignment:
        return error_response('Assignment not found', 404)
    return success_response(assignment)


@assignments_bp.route('/api/assignments', methods=['POST'])
def api_create_assignment():
    data, error = get_json_or_error()
    if error:
        return error

    try:
        assignment = _service.create(data)
    except Exception as e:
        return safe_error_response(e)
    logger.info(f"Assignment {assignment['assignment_id']} created for personnel {assignment['personnel_id']}")
    return success_response(assignment, message='Assignment added successfully', status_code=201)


@assignments_bp.route('/api/assignments/<int:assignment_id>', methods=['PUT'])
def api_update_assignment(assignment_id):
    data, error = get_json_or_error()
    if error:
        return error

    try:
        assignment = _service.update(assignment_id, data)
    except Exception as e:
        return safe_error_response(e)
    if not assignment:
        return error_response('Assignment not found', 404)
    return success_response(assignment, message='Assignment updated successfully')


@assignments_bp.route('/api/assignments/<int:assignment_id>', methods=['DELETE'])
def api_delete_assignment(assignment_id):
    try:
        deleted = _service.delete(assignment_id)
    except Exception as e:
        return safe_error_response(e)
    if not deleted:
        return error_response('Assignment not found', 404)
    return success_response(message='Assignment deleted successfully')


@assignments_bp.route('/api/assignment-statuses', methods=['GET'])
def api_assignment_statuses():
    try:
        return success_response(_service.statuses())
    except Exception as e:
        return safe_error_response(e)
