"""Assignment services package."""
from .assignment_service import AssignmentService, parse_assignment

__all__ = ['AssignmentService', 'parse_assignment']
