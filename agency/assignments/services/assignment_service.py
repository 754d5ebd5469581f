"""Assignment Service - Validation for personnel deployments."""
from typing import Optional, List, Dict, Any

from core.utils.validators import (
    clean_str, require_int, require_date, optional_date, check_date_range,
)
from ..repositories import AssignmentRepository


def parse_assignment(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate an assignment form payload. Raises ValueError."""
    start_date = require_date(data.get('start_date'), 'Start date')
    end_date = optional_date(data.get('end_date'), 'End date')
    check_date_range(start_date, end_date)
    return {
        'personnel_id': require_int(data.get('personnel_id'), 'Personnel'),
        'contract_id': require_int(data.get('contract_id'), 'Contract'),
        'start_date': start_date,
        'end_date': end_date,
        'status_id': require_int(data.get('status_id'), 'Status'),
    }


class AssignmentService:
    """Service for assignment business logic."""

    def __init__(self, repo: AssignmentRepository = None):
        self.repo = repo or AssignmentRepository()

    def list(self, search: str = None) -> List[Dict[str, Any]]:
        return self.repo.get_all(search=clean_str(search))

    def get(self, assignment_id: int) -> Optional[Dict[str, Any]]:
        return self.repo.get_by_id(assignment_id)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        assignment_id = self.repo.create(parse_assignment(data))
        return self.repo.get_by_id(assignment_id)

    def update(self, assignment_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if not self.repo.update(assignment_id, parse_assignment(data)):
            return None
        return self.repo.get_by_id(assignment_id)

    def delete(self, assignment_id: int) -> bool:
        return self.repo.delete(assignment_id)

    def statuses(self) -> List[Dict[str, Any]]:
        return self.repo.get_statuses()
