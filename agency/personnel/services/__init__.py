"""Personnel services package."""
from .personnel_service import PersonnelService, parse_personnel

__all__ = ['PersonnelService', 'parse_personnel']
