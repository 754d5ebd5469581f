"""Salary repositories package."""
from .salary_repository import SalaryRepository

__all__ = ['SalaryRepository']
