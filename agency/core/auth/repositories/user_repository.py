"""User Repository - Data access layer for admin users.

Handles lookup, authentication and password-hash upgrades.
"""
import logging
from typing import Optional, Dict, Any, List

from core.base_repository import BaseRepository
from ..passwords import verify_password, hash_password, is_hashed

logger = logging.getLogger('agency.auth')


class UserRepository(BaseRepository):
    """Repository for user data access operations."""

    def get_by_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        return self.query_one('SELECT * FROM users WHERE user_id = %s', (user_id,))

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return self.query_one('SELECT * FROM users WHERE email = %s', (email,))

    def update_password_hash(self, user_id: int, password_hash: str) -> bool:
        return self.execute('''
            UPDATE users SET password_hash = %s WHERE user_id = %s
        ''', (password_hash, user_id)) > 0

    # --- Authentication Methods ---

    def authenticate(self, email: str, password: str) -> Optional[Dict[str, Any]]:
        """Authenticate user by email and password.

        A plain-text password that matches is re-hashed and stored.
        """
        user = self.get_by_email(email)
        if not user or not user.get('password_hash'):
            return None
        stored = user['password_hash']
        if not verify_password(stored, password):
            return None
        if not is_hashed(stored):
            self.update_password_hash(user['user_id'], hash_password(password))
            logger.info(f"Password hashed for user: {user['email']}")
        return user

    # --- Bulk hashing ---

    def get_plaintext_users(self) -> List[Dict[str, Any]]:
        """Users whose password_hash column still holds a plain-text password."""
        return self.query_all('''
            SELECT user_id, email, password_hash
            FROM users
            WHERE password_hash NOT LIKE %s
              AND password_hash NOT LIKE %s
              AND password_hash NOT LIKE %s
            ORDER BY user_id
        ''', ('$2%', 'pbkdf2:%', 'scrypt:%'))

    def hash_plaintext_passwords(self, dry_run: bool = False) -> List[str]:
        """Hash every plain-text password in one transaction.

        Returns:
            Emails of the users whose passwords were (or would be) hashed
        """
        users = self.get_plaintext_users()
        if dry_run or not users:
            return [u['email'] for u in users]

        def _work(cursor):
            for user in users:
                cursor.execute('UPDATE users SET password_hash = %s WHERE user_id = %s',
                               (hash_password(user['password_hash']), user['user_id']))
            return [u['email'] for u in users]

        emails = self.execute_many(_work)
        logger.info(f'Hashed passwords for {len(emails)} user(s)')
        return emails
