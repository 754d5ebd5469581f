"""Dashboard Service - Aggregates figures from the other sections."""
import calendar
from datetime import date, timedelta
from typing import List, Dict, Any

from personnel.repositories import PersonnelRepository
from clients.repositories import ClientRepository
from contracts.repositories import ContractRepository
from assignments.repositories import AssignmentRepository

PAYDAYS = (15, 30)
UPCOMING_WINDOW_DAYS = 7
LIST_LIMIT = 5


def _payday(year: int, month: int, day: int) -> date:
    """Payday in the given month, clamped to the month's last day (Feb 30 -> Feb 28/29)."""
    if month > 12:
        year, month = year + 1, month - 12
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def next_payroll_dates(today: date = None) -> List[Dict[str, Any]]:
    """The next two paydays on or after today (15th and 30th of each month)."""
    today = today or date.today()
    first_half = _payday(today.year, today.month, PAYDAYS[0])
    second_half = _payday(today.year, today.month, PAYDAYS[1])

    if today <= first_half:
        upcoming = [first_half, second_half]
    elif today <= second_half:
        upcoming = [second_half, _payday(today.year, today.month + 1, PAYDAYS[0])]
    else:
        upcoming = [
            _payday(today.year, today.month + 1, PAYDAYS[0]),
            _payday(today.year, today.month + 1, PAYDAYS[1]),
        ]

    return [
        {
            'id': index,
            'date': payday.isoformat(),
            'days_remaining': max(0, (payday - today).days),
        }
        for index, payday in enumerate(upcoming)
    ]


def _activity(assignment: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'id': f"assignment-{assignment['assignment_id']}",
        'message': f"Assignment for {assignment.get('client_name') or 'Client'} "
                   f"({assignment.get('status') or 'Status'})",
        'date': assignment.get('start_date'),
    }


class DashboardService:
    """Service for the admin dashboard summary."""

    def __init__(self):
        self.personnel_repo = PersonnelRepository()
        self.client_repo = ClientRepository()
        self.contract_repo = ContractRepository()
        self.assignment_repo = AssignmentRepository()

    def summary(self, today: date = None) -> Dict[str, Any]:
        today = today or date.today()

        total_personnel = self.personnel_repo.count()
        active_assignments = self.assignment_repo.count_by_status('Active')

        return {
            'stats': {
                'total_personnel': total_personnel,
                'total_clients': self.client_repo.count(),
                'active_assignments': active_assignments,
                'total_contracts': self.contract_repo.count(),
                'available_personnel': max(total_personnel - active_assignments, 0),
            },
            'upcoming_assignments': self.assignment_repo.get_starting_between(
                today, today + timedelta(days=UPCOMING_WINDOW_DAYS), limit=LIST_LIMIT),
            'recent_activities': [
                _activity(a) for a in self.assignment_repo.get_latest(limit=LIST_LIMIT)
            ],
            'upcoming_payrolls': next_payroll_dates(today),
        }
