"""Contracts Section.

Service agreements with clients, including term tracking and renewals.
"""
from flask import Blueprint

contracts_bp = Blueprint('contracts', __name__)

from . import routes  # noqa: E402, F401
