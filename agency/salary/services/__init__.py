"""Salary services package."""
from .calculator import SalaryInput, SalaryBreakdown, DeductionLine, calculate_salary, parse_salary_input
from .salary_service import SalaryService

__all__ = [
    'SalaryInput',
    'SalaryBreakdown',
    'DeductionLine',
    'calculate_salary',
    'parse_salary_input',
    'SalaryService',
]
