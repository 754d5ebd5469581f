"""Client module API routes."""
import logging

from flask import request

from . import clients_bp
from .services import ClientService
from core.utils.api_helpers import (
    success_response, error_response, get_json_or_error, safe_error_response,
)

logger = logging.getLogger('agency.clients')

_service = ClientService()


@clients_bp.route('/api/clients', methods=['GET'])
def api_list_clients():
    try:
        return success_response(_service.list(request.args.get('search')))
    except Exception as e:
        return safe_error_response(e)


@clients_bp.route('/api/clients/<int:client_id>', methods=['GET'])
def api_get_client(client_id):
    try:
        client = _service.get(client_id)
    except Exception as e:
        return safe_error_response(e)
    if not client:
        return error_response('Client not found', 404)
    return success_response(client)


@clients_bp.route('/api/clients', methods=['POST'])
def api_create_client():
    data, error = get_json_or_error()
    if error:
        return error

    try:
        client = _service.create(data)
    except Exception as e:
        return safe_error_response(e)
    logger.info(f"Client {client['client_id']} created")
    return success_response(client, message='Client added successfully', status_code=201)


@clients_bp.route('/api/clients/<int:client_id>', methods=['PUT'])
def api_update_client(client_id):
    data, error = get_json_or_error()
    if error:
        return error

    try:
        client = _service.update(client_id, data)
    except Exception as e:
        return safe_error_response(e)
    if not client:
        return error_response('Client not found', 404)
    return success_response(client, message='Client updated successfully')


@clients_bp.route('/api/clients/<int:client_id>', methods=['DELETE'])
def api_delete_client(client_id):
    try:
        deleted = _service.delete(client_id)
    except Exception as e:
        return safe_error_response(e)
    if not deleted:
        return error_response('Client not found', 404)
    logger.info(f'Client {client_id} deleted')
    return success_response(message='Client deleted successfully')


@clients_bp.route('/api/client-types', methods=['GET'])
def api_client_types():
    try:
        return success_response(_service.client_types())
    except Exception as e:
        return safe_error_response(e)
