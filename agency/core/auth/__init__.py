"""Core Authentication Module.

Admin login against the users table and password-hash maintenance.
"""
from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from . import routes  # noqa: E402, F401
