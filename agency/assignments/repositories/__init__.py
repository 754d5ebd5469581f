"""Assignment repositories package."""
from .assignment_repository import AssignmentRepository

__all__ = ['AssignmentRepository']
