"""Client Service - Payload validation and coordination for client records."""
from typing import Optional, List, Dict, Any

from core.address import extract_address
from core.utils.validators import clean_str, require_str, optional_int
from ..repositories import ClientRepository


def parse_client(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a client form payload. Raises ValueError."""
    return {
        'business_name': require_str(data.get('business_name'), 'Business name'),
        'contact_person': clean_str(data.get('contact_person')),
        'contact_no': clean_str(data.get('contact_no')),
        'email': clean_str(data.get('email')),
        'clienttype_id': optional_int(data.get('clienttype_id'), 'Client type'),
    }


class ClientService:
    """Service for client business logic."""

    def __init__(self, repo: ClientRepository = None):
        self.repo = repo or ClientRepository()

    def list(self, search: str = None) -> List[Dict[str, Any]]:
        return self.repo.get_all(search=clean_str(search))

    def get(self, client_id: int) -> Optional[Dict[str, Any]]:
        return self.repo.get_by_id(client_id)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.repo.create(parse_client(data), extract_address(data))

    def update(self, client_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.repo.update(client_id, parse_client(data), extract_address(data))

    def delete(self, client_id: int) -> bool:
        return self.repo.delete(client_id)

    def client_types(self) -> List[Dict[str, Any]]:
        return self.repo.get_client_types()
