import sys
import os
import logging
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from flask import Flask, jsonify

# Structured logging
from core.utils.logging_config import setup_logging
logger = setup_logging(level=os.environ.get('LOG_LEVEL', 'INFO'))
app_logger = logging.getLogger('agency.app')
app_logger.info('Agency app module loading...')
from flask_compress import Compress
from flask_cors import CORS
from flask_login import LoginManager
from core.auth.models import User
from core.auth.repositories import UserRepository
from database import init_db, ping_db

_user_repo = UserRepository()


app = Flask(__name__)

# Secret key, required unless FLASK_DEBUG=true
_secret_key = os.environ.get('FLASK_SECRET_KEY', os.environ.get('SECRET_KEY'))
if not _secret_key:
    if os.environ.get('FLASK_DEBUG', 'false').lower() == 'true':
        _secret_key = 'dev-secret-key-for-local-only'
        app_logger.warning('Using development secret key, set FLASK_SECRET_KEY for production')
    else:
        raise RuntimeError('FLASK_SECRET_KEY environment variable is required')
app.secret_key = _secret_key

compress = Compress()
compress.init_app(app)

# The dashboard SPA is served from its own origin
_cors_origins = [o.strip() for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o.strip()]
CORS(app, origins=_cors_origins, supports_credentials=True)

# Flask-Login setup
login_manager = LoginManager()
login_manager.init_app(app)

# Session cookie hardening
_production = os.environ.get('PRODUCTION', 'false').lower() == 'true'
app.config['SESSION_COOKIE_SECURE'] = _production
app.config['SESSION_COOKIE_HTTPONLY'] = True
app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'

# ============== Blueprint Registrations ==============

from core.auth import auth_bp
app.register_blueprint(auth_bp)

from personnel import personnel_bp
app.register_blueprint(personnel_bp)

from clients import clients_bp
app.register_blueprint(clients_bp)

from contracts import contracts_bp
app.register_blueprint(contracts_bp)

from assignments import assignments_bp
app.register_blueprint(assignments_bp)

from salary import salary_bp
app.register_blueprint(salary_bp)

from dashboard import dashboard_bp
app.register_blueprint(dashboard_bp)

app_logger.info(f'Agency startup complete, {len(app.url_map._rules)} routes registered')

# ============== Global Error Handlers ==============

@app.errorhandler(404)
def handle_404(e):
    return jsonify({'success': False, 'message': 'Not found'}), 404

@app.errorhandler(405)
def handle_405(e):
    return jsonify({'success': False, 'message': 'Method not allowed'}), 405

@app.errorhandler(500)
def handle_500(e):
    app_logger.exception('Unhandled 500 error')
    return jsonify({'success': False, 'message': 'An internal error occurred'}), 500

# ============== Schema Bootstrap ==============

if not os.environ.get('TESTING'):
    init_db()


# ============== Flask-Login ==============

@login_manager.user_loader
def load_user(user_id):
    """Load user by ID for Flask-Login."""
    user_data = _user_repo.get_by_id(int(user_id))
    if user_data:
        return User(user_data)
    return None


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'success': False, 'message': 'Authentication required'}), 401


# ============== Health Check ==============

@app.route('/api/health')
def health_check():
    """Health check; reports database reachability without failing."""
    try:
        db_ok = ping_db()
    except Exception as e:
        db_ok = False
        app_logger.error(f'Health check - database failed: {e}')

    return jsonify({
        'status': 'Server is running',
        'database': db_ok,
    })


if __name__ == '__main__':
    debug = os.environ.get('FLASK_DEBUG', 'false').lower() == 'true'
    port = int(os.environ.get('PORT', 5000))
    app.run(debug=debug, host='0.0.0.0', port=port)
