"""Shared API utilities: responses, request validation and rate limiting.

Every route answers with the same envelope the dashboard expects:
    {'success': True, 'data': ..., 'message': ...}
    {'success': False, 'message': ...}
"""
import time
import logging
from functools import wraps

import psycopg2
from flask import jsonify, request
from flask_login import current_user

logger = logging.getLogger('agency.api')


# ============== Decorators ==============

def api_login_required(f):
    """Like @login_required but returns JSON 401 instead of redirect."""
    @wraps(f)
    def decorated(*args, **kwargs):
        if not current_user.is_authenticated:
            return error_response('Authentication required', 401)
        return f(*args, **kwargs)
    return decorated


# ============== Responses ==============

def success_response(data=None, message=None, status_code=200, **extra):
    """Build the standard success envelope."""
    body = {'success': True}
    if message is not None:
        body['message'] = message
    if data is not None:
        body['data'] = data
    body.update(extra)
    return jsonify(body), status_code


def error_response(message, status_code=400):
    """Build the standard failure envelope."""
    return jsonify({'success': False, 'message': message}), status_code


# ============== Request Validation ==============

def get_json_or_error():
    """Get JSON from request body with null check.

    Returns (data, error_response) tuple. Caller pattern:
        data, error = get_json_or_error()
        if error:
            return error
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, error_response('Invalid or missing JSON body', 400)
    return data, None


# ============== Error Handling ==============

def safe_error_response(e, status_code=500):
    """Return error response without leaking DB internals.

    - ValueError/KeyError: returns str(e) as 400 (business validation, safe to expose)
    - IntegrityError: 409, the record conflicts with or is still referenced by another
    - Everything else: logs full exception, returns generic message
    """
    if isinstance(e, KeyError):
        return error_response(f'Missing field: {e.args[0]}', 400)
    if isinstance(e, ValueError):
        return error_response(str(e), 400)
    if isinstance(e, psycopg2.IntegrityError):
        logger.warning(f'Integrity error in API route: {e}')
        return error_response('Record conflicts with existing data or is still in use', 409)

    logger.exception('Unhandled error in API route')
    return error_response('An internal error occurred', status_code)


# ============== Rate Limiter ==============

class RateLimiter:
    """Simple in-memory rate limiter.

    Per-worker state (3 gunicorn workers = 3 separate states).
    Acceptable for an internal admin panel, not for public-facing APIs.
    """

    def __init__(self):
        self._requests = {}
        self._last_sweep = 0.0

    def _sweep(self, window_start):
        """Drop keys with no request inside the window."""
        stale = [key for key, stamps in self._requests.items() if not stamps or stamps[-1] <= window_start]
        for key in stale:
            del self._requests[key]

    def is_allowed(self, key, max_requests=10, window_seconds=60):
        """Check if request is allowed.

        Args:
            key: String identifier (user_id, IP address, etc.)
            max_requests: Max requests per window
            window_seconds: Window duration in seconds

        Returns:
            (is_allowed: bool, retry_after: int) tuple
        """
        now = time.time()
        window_start = now - window_seconds

        # Keys that stopped sending are removed once per window
        if now - self._last_sweep >= window_seconds:
            self._sweep(window_start)
            self._last_sweep = now

        recent = [ts for ts in self._requests.get(key, ()) if ts > window_start]

        if len(recent) >= max_requests:
            self._requests[key] = recent
            retry_after = int(recent[0] + window_seconds - now) + 1
            return False, max(1, retry_after)

        recent.append(now)
        self._requests[key] = recent
        return True, 0
