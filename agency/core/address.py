"""Address helpers shared by personnel and client records.

Both records own at most one row in the address table. These helpers run on
the caller's cursor so the address write and the owning record's write land
in the same transaction.
"""
from typing import Optional

from core.utils.validators import clean_str

ADDRESS_FIELDS = ('street', 'barangay', 'city', 'province', 'postal_code')

# A postal code alone is not enough to create an address row
_LOCATION_FIELDS = ('street', 'barangay', 'city', 'province')

# Comma-joined one-line address for list views
ADDRESS_SQL = '''CONCAT_WS(', ',
            NULLIF(a.street, ''),
            NULLIF(a.barangay, ''),
            NULLIF(a.city, ''),
            NULLIF(a.province, '')
        )'''


def extract_address(data: dict) -> dict:
    """Pick the address fields out of a request payload."""
    return {field: clean_str(data.get(field)) for field in ADDRESS_FIELDS}


def has_location(address: dict) -> bool:
    return any(address.get(field) for field in _LOCATION_FIELDS)


def save_address(cursor, address: dict, address_id: Optional[int] = None) -> Optional[int]:
    """Update the existing address or insert a new one.

    Returns the address_id to store on the owning record: the given id when
    one exists, a fresh id when location fields were supplied, else None.
    """
    values = tuple(address.get(field) for field in ADDRESS_FIELDS)
    if address_id:
        cursor.execute('''
            UPDATE address
            SET street = %s, barangay = %s, city = %s, province = %s, postal_code = %s
            WHERE address_id = %s
        ''', values + (address_id,))
        if cursor.rowcount:
            return address_id

    if not has_location(address):
        return None

    cursor.execute('''
        INSERT INTO address (street, barangay, city, province, postal_code)
        VALUES (%s, %s, %s, %s, %s)
        RETURNING address_id
    ''', values)
    return cursor.fetchone()['address_id']


def delete_address(cursor, address_id: Optional[int]):
    if address_id:
        cursor.execute('DELETE FROM address WHERE address_id = %s', (address_id,))
