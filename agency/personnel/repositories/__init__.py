"""Personnel repositories package."""
from .personnel_repository import PersonnelRepository

__all__ = ['PersonnelRepository']
