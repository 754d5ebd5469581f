"""Salary Service - Coordinates salary calculation and persistence."""
import logging
from typing import Optional, List, Dict, Any

from core.utils.logging_config import log_with_context
from ..repositories import SalaryRepository
from .calculator import calculate_salary, parse_salary_input

logger = logging.getLogger('agency.salary')


class SalaryService:
    """Service for salary business logic."""

    def __init__(self, repo: SalaryRepository = None):
        self.repo = repo or SalaryRepository()

    def personnel_salaries(self) -> List[Dict[str, Any]]:
        return self.repo.get_personnel_salaries()

    def deduction_types(self) -> List[Dict[str, Any]]:
        return self.repo.get_deduction_types()

    def personnel_deductions(self, personnel_id: int) -> List[Dict[str, Any]]:
        return self.repo.get_personnel_deductions(personnel_id)

    def calculate_and_save(self, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Validate the payload, compute totals and store them.

        Returns:
            Dict with salary_id and the computed figures, or None when the
            personnel does not exist

        Raises:
            ValueError: on an invalid payload
        """
        salary = parse_salary_input(data)
        breakdown = calculate_salary(salary)

        salary_id = self.repo.save_salary(salary, breakdown)
        if salary_id is None:
            return None

        log_with_context(
            logger, logging.INFO, 'Salary saved',
            personnel_id=salary.personnel_id,
            salary_id=salary_id,
            net_salary=str(breakdown.net_salary),
        )
        return {
            'salary_id': salary_id,
            'gross_salary': float(breakdown.gross_salary),
            'total_deductions': float(breakdown.total_deductions),
            'net_salary': float(breakdown.net_salary),
            'payment_status': salary.payment_status,
        }

    def delete(self, personnel_id: int) -> bool:
        deleted = self.repo.delete_salary(personnel_id)
        if deleted:
            logger.info(f'Salary record deleted for personnel {personnel_id}')
        return deleted
