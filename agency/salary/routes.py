"""Salary module API routes."""
from . import salary_bp
from .services import SalaryService
from core.utils.api_helpers import (
    success_response, error_response, get_json_or_error, safe_error_response,
)

_service = SalaryService()


@salary_bp.route('/api/salary/personnel', methods=['GET'])
def api_personnel_salaries():
    """All personnel with their current salary figures."""
    try:
        return success_response(_service.personnel_salaries())
    except Exception as e:
        return safe_error_response(e)


@salary_bp.route('/api/salary/deductions', methods=['GET'])
def api_deduction_types():
    try:
        return success_response(_service.deduction_types())
    except Exception as e:
        return safe_error_response(e)


@salary_bp.route('/api/salary/<int:personnel_id>/deductions', methods=['GET'])
def api_personnel_deductions(personnel_id):
    try:
        return success_response(_service.personnel_deductions(personnel_id))
    except Exception as e:
        return safe_error_response(e)


@salary_bp.route('/api/salary/calculate', methods=['POST'])
def api_calculate_salary():
    """Compute gross/deductions/net and store them for one personnel."""
    data, error = get_json_or_error()
    if error:
        return error

    try:
        result = _service.calculate_and_save(data)
    except Exception as e:
        return safe_error_response(e)
    if result is None:
        return error_response('Personnel not found', 404)
    return success_response(result, message='Salary calculated and saved successfully')


@salary_bp.route('/api/salary/<int:personnel_id>', methods=['DELETE'])
def api_delete_salary(personnel_id):
    try:
        _service.delete(personnel_id)
    except Exception as e:
        return safe_error_response(e)
    return success_response(message='Salary record deleted successfully')
