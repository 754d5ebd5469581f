"""Dashboard API routes."""
from . import dashboard_bp
from .services import DashboardService
from core.utils.api_helpers import success_response, safe_error_response

_service = DashboardService()


@dashboard_bp.route('/api/dashboard', methods=['GET'])
def api_dashboard():
    try:
        return success_response(_service.summary())
    except Exception as e:
        return safe_error_response(e)
