"""Personnel Service - Payload validation and coordination for personnel records."""
from typing import Optional, List, Dict, Any

from core.address import extract_address
from core.utils.validators import clean_str, require_str, optional_int
from ..repositories import PersonnelRepository

MIN_AGE = 18
MAX_AGE = 100


def parse_personnel(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a personnel form payload.

    Raises:
        ValueError: on a missing name or an out-of-range age
    """
    return {
        'personnel_name': require_str(data.get('personnel_name'), 'Personnel name'),
        'personnel_age': optional_int(data.get('personnel_age'), 'Age', MIN_AGE, MAX_AGE),
        'civilstatus_id': optional_int(data.get('civilstatus_id'), 'Civil status'),
        'gender_id': optional_int(data.get('gender_id'), 'Gender'),
        'contact_no': clean_str(data.get('contact_no')),
        'email': clean_str(data.get('email')),
    }


class PersonnelService:
    """Service for personnel business logic."""

    def __init__(self, repo: PersonnelRepository = None):
        self.repo = repo or PersonnelRepository()

    def list(self, search: str = None) -> List[Dict[str, Any]]:
        return self.repo.get_all(search=clean_str(search))

    def get(self, personnel_id: int) -> Optional[Dict[str, Any]]:
        return self.repo.get_by_id(personnel_id)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.repo.create(parse_personnel(data), extract_address(data))

    def update(self, personnel_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.repo.update(personnel_id, parse_personnel(data), extract_address(data))

    def delete(self, personnel_id: int) -> bool:
        return self.repo.delete(personnel_id)

    def lookup_data(self) -> Dict[str, Any]:
        return {
            'genders': self.repo.get_genders(),
            'civilStatuses': self.repo.get_civil_statuses(),
        }
