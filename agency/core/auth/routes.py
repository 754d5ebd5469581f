"""Auth module routes.

Login/logout for the dashboard, the current-session lookup and the
one-off plain-text password hashing endpoint.
"""
from flask import jsonify, request
from flask_login import login_user, logout_user, current_user

from . import auth_bp
from .models import User
from .repositories import UserRepository
from core.utils.api_helpers import (
    api_login_required, error_response, safe_error_response, RateLimiter,
)

_user_repo = UserRepository()
_auth_limiter = RateLimiter()

LOGIN_MAX_ATTEMPTS = 10
LOGIN_WINDOW_SECONDS = 300


# ============== AUTHENTICATION ROUTES ==============

@auth_bp.route('/api/login', methods=['POST'])
def api_login():
    """Check email + password and open a session."""
    allowed, retry_after = _auth_limiter.is_allowed(
        f'login:{request.remote_addr}', max_requests=LOGIN_MAX_ATTEMPTS, window_seconds=LOGIN_WINDOW_SECONDS)
    if not allowed:
        return error_response(f'Too many login attempts. Try again in {retry_after} seconds.', 429)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    email = str(data.get('email') or '').strip()
    password = str(data.get('password') or '')
    if not email or not password:
        return error_response('Email and password are required', 400)

    try:
        user_data = _user_repo.authenticate(email, password)
    except Exception as e:
        return safe_error_response(e)

    if not user_data:
        return error_response('Invalid email or password', 401)

    user = User(user_data)
    login_user(user)
    return jsonify({
        'success': True,
        'message': 'Login successful',
        'user': user.to_dict(),
    })


@auth_bp.route('/api/logout', methods=['POST'])
@api_login_required
def api_logout():
    logout_user()
    return jsonify({'success': True, 'message': 'Logged out'})


@auth_bp.route('/api/me', methods=['GET'])
@api_login_required
def api_me():
    return jsonify({'success': True, 'user': current_user.to_dict()})


# ============== PASSWORD MAINTENANCE ==============

@auth_bp.route('/api/hash-passwords', methods=['GET'])
def api_hash_passwords():
    """Hash every plain-text password left in the users table."""
    try:
        emails = _user_repo.hash_plaintext_passwords()
    except Exception as e:
        return safe_error_response(e)

    if not emails:
        return jsonify({'success': True, 'message': 'All passwords are already hashed!'})
    return jsonify({
        'success': True,
        'message': f'Successfully hashed passwords for {len(emails)} user(s)',
        'users': emails,
    })
