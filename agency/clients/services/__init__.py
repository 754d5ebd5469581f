"""Client services package."""
from .client_service import ClientService, parse_client

__all__ = ['ClientService', 'parse_client']
