"""Contract Repository - Data access for client contracts."""
from datetime import date
from typing import Optional, List, Dict, Any

from core.base_repository import BaseRepository

_LIST_SQL = '''
    SELECT
        ct.contract_id,
        ct.client_id,
        COALESCE(NULLIF(ct.company_name, ''), cl.business_name) AS company_name,
        cl.business_name AS client_name,
        ct.contract_type,
        CONCAT_WS(' - ', COALESCE(NULLIF(ct.company_name, ''), cl.business_name), ct.contract_type)
            AS contract_title,
        ct.start_date,
        ct.end_date,
        ct.contract_value,
        ct.payment_terms,
        ct.status,
        ct.notes
    FROM contract ct
    LEFT JOIN client cl ON ct.client_id = cl.client_id
'''

_COLUMNS = ('client_id', 'company_name', 'contract_type', 'start_date', 'end_date',
            'contract_value', 'payment_terms', 'status', 'notes')


class ContractRepository(BaseRepository):
    """Repository for contract data access operations."""

    def get_all(self, search: str = None) -> List[Dict[str, Any]]:
        """Get all contracts, newest first.

        Args:
            search: Optional substring matched against company name,
                    contract type and contract id
        """
        query = _LIST_SQL
        params = []
        if search:
            query += '''
                WHERE COALESCE(NULLIF(ct.company_name, ''), cl.business_name) ILIKE %s
                   OR ct.contract_type ILIKE %s
                   OR CAST(ct.contract_id AS TEXT) LIKE %s
            '''
            params = [f'%{search}%'] * 3
        query += ' ORDER BY ct.contract_id DESC'
        return self.query_all(query, params)

    def get_by_id(self, contract_id: int) -> Optional[Dict[str, Any]]:
        return self.query_one(_LIST_SQL + ' WHERE ct.contract_id = %s', (contract_id,))

    def count(self) -> int:
        return self.query_one('SELECT COUNT(*) AS total FROM contract')['total']

    def create(self, fields: Dict[str, Any]) -> int:
        """Insert a contract. Returns the new contract_id."""
        result = self.execute('''
            INSERT INTO contract
                (client_id, company_name, contract_type, start_date, end_date,
                 contract_value, payment_terms, status, notes)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING contract_id
        ''', tuple(fields.get(c) for c in _COLUMNS), returning=True)
        return result['contract_id']

    def update(self, contract_id: int, fields: Dict[str, Any]) -> bool:
        return self.execute('''
            UPDATE contract
            SET client_id = %s, company_name = %s, contract_type = %s, start_date = %s,
                end_date = %s, contract_value = %s, payment_terms = %s, status = %s, notes = %s
            WHERE contract_id = %s
        ''', tuple(fields.get(c) for c in _COLUMNS) + (contract_id,)) > 0

    def set_end_date(self, contract_id: int, end_date: date, status: str = 'active') -> bool:
        return self.execute('''
            UPDATE contract SET end_date = %s, status = %s WHERE contract_id = %s
        ''', (end_date, status, contract_id)) > 0

    def delete(self, contract_id: int) -> bool:
        """Delete a contract. Raises IntegrityError while assignments reference it."""
        return self.execute('DELETE FROM contract WHERE contract_id = %s', (contract_id,)) > 0
