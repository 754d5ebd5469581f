"""Salary Section.

Base pay components, deductions and net salary per personnel.
"""
from flask import Blueprint

salary_bp = Blueprint('salary', __name__)

from . import routes  # noqa: E402, F401
