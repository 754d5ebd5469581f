"""Client Repository - Data access for client businesses."""
from typing import Optional, List, Dict, Any

from core.base_repository import BaseRepository
from core.address import ADDRESS_SQL, save_address, delete_address
from database import dict_from_row

_LIST_SQL = f'''
    SELECT
        c.client_id,
        c.business_name,
        c.contact_person,
        c.contact_no,
        c.email,
        c.clienttype_id,
        c.address_id,
        ct.type_name AS client_type,
        a.street,
        a.barangay,
        a.city,
        a.province,
        a.postal_code,
        {ADDRESS_SQL} AS address
    FROM client c
    LEFT JOIN clienttype ct ON c.clienttype_id = ct.clienttype_id
    LEFT JOIN address a ON c.address_id = a.address_id
'''

_COLUMNS = ('business_name', 'contact_person', 'contact_no', 'email', 'clienttype_id')


class ClientRepository(BaseRepository):
    """Repository for client data access operations."""

    def get_all(self, search: str = None) -> List[Dict[str, Any]]:
        query = _LIST_SQL
        params = []
        if search:
            query += '''
                WHERE c.business_name ILIKE %s
                   OR c.contact_person ILIKE %s
                   OR c.email ILIKE %s
                   OR c.contact_no ILIKE %s
            '''
            params = [f'%{search}%'] * 4
        query += ' ORDER BY c.client_id DESC'
        return self.query_all(query, params)

    def get_by_id(self, client_id: int) -> Optional[Dict[str, Any]]:
        return self.query_one(_LIST_SQL + ' WHERE c.client_id = %s', (client_id,))

    def count(self) -> int:
        return self.query_one('SELECT COUNT(*) AS total FROM client')['total']

    def create(self, fields: Dict[str, Any], address: Dict[str, Any]) -> Dict[str, Any]:
        def _work(cursor):
            address_id = save_address(cursor, address)
            cursor.execute('''
                INSERT INTO client
                    (business_name, contact_person, contact_no, email, clienttype_id, address_id)
                VALUES (%s, %s, %s, %s, %s, %s)
                RETURNING *
            ''', tuple(fields.get(c) for c in _COLUMNS) + (address_id,))
            return dict_from_row(cursor.fetchone())

        return self.execute_many(_work)

    def update(
        self,
        client_id: int,
        fields: Dict[str, Any],
        address: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Update a client and its address. Returns None when the client is missing."""
        def _work(cursor):
            cursor.execute('SELECT address_id FROM client WHERE client_id = %s FOR UPDATE', (client_id,))
            current = cursor.fetchone()
            if not current:
                return None
            new_address_id = save_address(cursor, address, current['address_id'])
            cursor.execute('''
                UPDATE client
                SET business_name = %s, contact_person = %s, contact_no = %s,
                    email = %s, clienttype_id = %s, address_id = %s
                WHERE client_id = %s
                RETURNING *
            ''', tuple(fields.get(c) for c in _COLUMNS) + (new_address_id, client_id))
            return dict_from_row(cursor.fetchone())

        return self.execute_many(_work)

    def delete(self, client_id: int) -> bool:
        """Delete a client and its address. Raises IntegrityError while contracts reference it."""
        def _work(cursor):
            cursor.execute('DELETE FROM client WHERE client_id = %s RETURNING address_id', (client_id,))
            row = cursor.fetchone()
            if not row:
                return False
            delete_address(cursor, row['address_id'])
            return True

        return self.execute_many(_work)

    def get_client_types(self) -> List[Dict[str, Any]]:
        return self.query_all('SELECT * FROM clienttype ORDER BY clienttype_id')
