"""Dashboard Section.

Headline counts, upcoming deployments and payroll dates for the admin home page.
"""
from flask import Blueprint

dashboard_bp = Blueprint('dashboard', __name__)

from . import routes  # noqa: E402, F401
