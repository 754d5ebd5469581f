"""Contract module API routes."""
import logging

from flask import request

from . import contracts_bp
from .services import ContractService
from core.utils.api_helpers import (
    success_response, error_response, get_json_or_error, safe_error_response,
)

logger = logging.getLogger('agency.contracts')

_service = ContractService()


@contracts_bp.route('/api/contracts', methods=['GET'])
def api_list_contracts():
    """List contracts with term fields. Filters: ?search=, ?status=active|expiring|expired."""
    try:
        contracts = _service.list(
            search=request.args.get('search'),
            term=request.args.get('status'),
        )
        return success_response(contracts)
    except Exception as e:
        return safe_error_response(e)


@contracts_bp.route('/api/contracts/<int:contract_id>', methods=['GET'])
def api_get_contract(contract_id):
    try:
        contract = _service.get(contract_id)
    except Exception as e:
        return safe_error_response(e)
    if not contract:
        return error_response('Contract not found', 404)
    return success_response(contract)


@contracts_bp.route('/api/contracts', methods=['POST'])
def api_create_contract():
    data, error = get_json_or_error()
    if error:
        return error

    try:
        contract = _service.create(data)
    except Exception as e:
        return safe_error_response(e)
    logger.info(f"Contract {contract['contract_id']} created for {contract['company_name']}")
    return success_response(contract, message='Contract created successfully', status_code=201)


@contracts_bp.route('/api/contracts/<int:contract_id>', methods=['PUT'])
def api_update_contract(contract_id):
    data, error = get_json_or_error()
    if error:
        return error

    try:
        contract = _service.update(contract_id, data)
    except Exception as e:
        return safe_error_response(e)
    if not contract:
        return error_response('Contract not found', 404)
    return success_response(contract, message='Contract updated successfully')


@contracts_bp.route('/api/contracts/<int:contract_id>/extend', methods=['POST'])
def api_extend_contract(contract_id):
    """Renew a contract: body {"years": N} (default 1)."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    try:
        contract = _service.extend(contract_id, data.get('years', 1))
    except Exception as e:
        return safe_error_response(e)
    if not contract:
        return error_response('Contract not found', 404)
    logger.info(f"Contract {contract_id} extended to {contract['end_date']}")
    return success_response(contract, message='Contract extended successfully')


@contracts_bp.route('/api/contracts/<int:contract_id>', methods=['DELETE'])
def api_delete_contract(contract_id):
    try:
        deleted = _service.delete(contract_id)
    except Exception as e:
        return safe_error_response(e)
    if not deleted:
        return error_response('Contract not found', 404)
    logger.info(f'Contract {contract_id} deleted')
    return success_response(message='Contract deleted successfully')
