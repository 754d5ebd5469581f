"""Personnel Section.

Security guard roster: personal details, address and lookups.
"""
from flask import Blueprint

personnel_bp = Blueprint('personnel', __name__)

from . import routes  # noqa: E402, F401
