"""Clients Section.

Businesses that hire the agency's guards.
"""
from flask import Blueprint

clients_bp = Blueprint('clients', __name__)

from . import routes  # noqa: E402, F401
