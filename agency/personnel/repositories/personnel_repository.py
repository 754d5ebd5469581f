"""Personnel Repository - Data access for security personnel records.

Handles the personnel table together with its address row and the
gender/civil status lookups used by the personnel form.
"""
from typing import Optional, List, Dict, Any

from core.base_repository import BaseRepository
from core.address import ADDRESS_SQL, save_address, delete_address
from database import dict_from_row

_LIST_SQL = f'''
    SELECT
        p.personnel_id,
        p.personnel_name,
        p.personnel_age,
        p.contact_no,
        p.email,
        p.civilstatus_id,
        p.gender_id,
        p.address_id,
        cs.title AS civil_status,
        g.gender_name AS gender,
        a.street,
        a.barangay,
        a.city,
        a.province,
        a.postal_code,
        {ADDRESS_SQL} AS address
    FROM personnel p
    LEFT JOIN civilstatus cs ON p.civilstatus_id = cs.civilstatus_id
    LEFT JOIN gender g ON p.gender_id = g.gender_id
    LEFT JOIN address a ON p.address_id = a.address_id
'''

_COLUMNS = ('personnel_name', 'personnel_age', 'civilstatus_id', 'gender_id', 'contact_no', 'email')


class PersonnelRepository(BaseRepository):
    """Repository for personnel data access operations."""

    def get_all(self, search: str = None) -> List[Dict[str, Any]]:
        """Get all personnel, newest first.

        Args:
            search: Optional case-insensitive substring matched against
                    name, email and contact number
        """
        query = _LIST_SQL
        params = []
        if search:
            query += '''
                WHERE p.personnel_name ILIKE %s
                   OR p.email ILIKE %s
                   OR p.contact_no ILIKE %s
            '''
            pattern = f'%{search}%'
            params = [pattern, pattern, pattern]
        query += ' ORDER BY p.personnel_id DESC'
        return self.query_all(query, params)

    def get_by_id(self, personnel_id: int) -> Optional[Dict[str, Any]]:
        return self.query_one(_LIST_SQL + ' WHERE p.personnel_id = %s', (personnel_id,))

    def exists(self, personnel_id: int) -> bool:
        return self.query_one(
            'SELECT 1 AS found FROM personnel WHERE personnel_id = %s', (personnel_id,)
        ) is not None

    def count(self) -> int:
        return self.query_one('SELECT COUNT(*) AS total FROM personnel')['total']

    def create(self, fields: Dict[str, Any], address: Dict[str, Any]) -> Dict[str, Any]:
        """Insert the address (when given) and the personnel row in one transaction.

        Returns:
            The inserted personnel row
        """
        def _work(cursor):
            address_id = save_address(cursor, address)
            cursor.execute('''
                INSERT INTO personnel
                    (personnel_name, personnel_age, civilstatus_id, gender_id, contact_no, email, address_id)
                VALUES (%s, %s, %s, %s, %s, %s, %s)
                RETURNING *
            ''', tuple(fields.get(c) for c in _COLUMNS) + (address_id,))
            return dict_from_row(cursor.fetchone())

        return self.execute_many(_work)

    def update(
        self,
        personnel_id: int,
        fields: Dict[str, Any],
        address: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Update personnel and its address in one transaction.

        Returns:
            The updated row, or None if the personnel does not exist
        """
        def _work(cursor):
            cursor.execute('SELECT address_id FROM personnel WHERE personnel_id = %s FOR UPDATE',
                           (personnel_id,))
            current = cursor.fetchone()
            if not current:
                return None
            new_address_id = save_address(cursor, address, current['address_id'])
            cursor.execute('''
                UPDATE personnel
                SET personnel_name = %s, personnel_age = %s, civilstatus_id = %s,
                    gender_id = %s, contact_no = %s, email = %s, address_id = %s
                WHERE personnel_id = %s
                RETURNING *
            ''', tuple(fields.get(c) for c in _COLUMNS) + (new_address_id, personnel_id))
            return dict_from_row(cursor.fetchone())

        return self.execute_many(_work)

    def delete(self, personnel_id: int) -> bool:
        """Delete a personnel row and its address.

        Raises psycopg2.IntegrityError while assignments or salary records
        still reference the personnel.
        """
        def _work(cursor):
            cursor.execute('DELETE FROM personnel WHERE personnel_id = %s RETURNING address_id',
                           (personnel_id,))
            row = cursor.fetchone()
            if not row:
                return False
            delete_address(cursor, row['address_id'])
            return True

        return self.execute_many(_work)

    # --- Lookups ---

    def get_genders(self) -> List[Dict[str, Any]]:
        return self.query_all('SELECT * FROM gender ORDER BY gender_id')

    def get_civil_statuses(self) -> List[Dict[str, Any]]:
        return self.query_all('SELECT * FROM civilstatus ORDER BY civilstatus_id')
