"""Assignment Repository - Data access for personnel deployments."""
from datetime import date
from typing import Optional, List, Dict, Any

from core.base_repository import BaseRepository

_LIST_SQL = '''
    SELECT
        asg.assignment_id,
        asg.personnel_id,
        p.personnel_name,
        asg.contract_id,
        CONCAT_WS(' - ', COALESCE(NULLIF(ct.company_name, ''), cl.business_name), ct.contract_type)
            AS contract_title,
        COALESCE(NULLIF(ct.company_name, ''), cl.business_name) AS client_name,
        asg.start_date,
        asg.end_date,
        asg.status_id,
        s.status_name AS status
    FROM assignment asg
    JOIN personnel p ON asg.personnel_id = p.personnel_id
    JOIN contract ct ON asg.contract_id = ct.contract_id
    LEFT JOIN client cl ON ct.client_id = cl.client_id
    LEFT JOIN assignmentstatus s ON asg.status_id = s.status_id
'''

_COLUMNS = ('personnel_id', 'contract_id', 'start_date', 'end_date', 'status_id')


class AssignmentRepository(BaseRepository):
    """Repository for assignment data access operations."""

    def get_all(self, search: str = None) -> List[Dict[str, Any]]:
        """Get all assignments, newest first.

        Args:
            search: Optional substring matched against assignment id,
                    personnel name, contract title and status
        """
        query = _LIST_SQL
        params = []
        if search:
            query += '''
                WHERE CAST(asg.assignment_id AS TEXT) LIKE %s
                   OR p.personnel_name ILIKE %s
                   OR COALESCE(NULLIF(ct.company_name, ''), cl.business_name) ILIKE %s
                   OR ct.contract_type ILIKE %s
                   OR s.status_name ILIKE %s
            '''
            params = [f'%{search}%'] * 5
        query += ' ORDER BY asg.assignment_id DESC'
        return self.query_all(query, params)

    def get_by_id(self, assignment_id: int) -> Optional[Dict[str, Any]]:
        return self.query_one(_LIST_SQL + ' WHERE asg.assignment_id = %s', (assignment_id,))

    def create(self, fields: Dict[str, Any]) -> int:
        result = self.execute('''
            INSERT INTO assignment (personnel_id, contract_id, start_date, end_date, status_id)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING assignment_id
        ''', tuple(fields.get(c) for c in _COLUMNS), returning=True)
        return result['assignment_id']

    def update(self, assignment_id: int, fields: Dict[str, Any]) -> bool:
        return self.execute('''
            UPDATE assignment
            SET personnel_id = %s, contract_id = %s, start_date = %s, end_date = %s, status_id = %s
            WHERE assignment_id = %s
        ''', tuple(fields.get(c) for c in _COLUMNS) + (assignment_id,)) > 0

    def delete(self, assignment_id: int) -> bool:
        return self.execute('DELETE FROM assignment WHERE assignment_id = %s', (assignment_id,)) > 0

    def get_statuses(self) -> List[Dict[str, Any]]:
        return self.query_all('SELECT * FROM assignmentstatus ORDER BY status_id')

    # --- Dashboard queries ---

    def count_by_status(self, status_name: str) -> int:
        row = self.query_one('''
            SELECT COUNT(*) AS total
            FROM assignment asg
            JOIN assignmentstatus s ON asg.status_id = s.status_id
            WHERE LOWER(s.status_name) = LOWER(%s)
        ''', (status_name,))
        return row['total']

    def get_starting_between(self, first_day: date, last_day: date, limit: int = 5) -> List[Dict[str, Any]]:
        """Assignments whose start date falls within [first_day, last_day], earliest first."""
        return self.query_all(_LIST_SQL + '''
            WHERE asg.start_date BETWEEN %s AND %s
            ORDER BY asg.start_date, asg.assignment_id
            LIMIT %s
        ''', (first_day, last_day, limit))

    def get_latest(self, limit: int = 5) -> List[Dict[str, Any]]:
        return self.query_all(_LIST_SQL + ' ORDER BY asg.assignment_id DESC LIMIT %s', (limit,))
