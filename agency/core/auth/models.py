"""Core Auth Models.

User model for Flask-Login authentication.
"""
from flask_login import UserMixin

# Every account in the users table administers the agency
ADMIN_ROLE = 'admin'


class User(UserMixin):
    """User class for Flask-Login."""

    def __init__(self, user_data):
        self.id = user_data['user_id']
        self.email = user_data['email']
        self.name = self.email.split('@')[0]
        self.role = ADMIN_ROLE

    def to_dict(self):
        """Public view of the user, as returned by the login endpoint."""
        return {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'role': self.role,
        }
