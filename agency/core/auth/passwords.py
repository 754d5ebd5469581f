"""Password hash handling.

The users table holds three kinds of values:
- bcrypt hashes ("$2a$", "$2b$", "$2y$")
- werkzeug hashes ("pbkdf2:...", "scrypt:...")
- legacy plain-text passwords, upgraded to bcrypt on first successful login
"""
import hmac

import bcrypt
from werkzeug.security import check_password_hash

BCRYPT_ROUNDS = 10

_WERKZEUG_PREFIXES = ('pbkdf2:', 'scrypt:')


def is_bcrypt_hash(stored: str) -> bool:
    return stored.startswith('$2')


def is_hashed(stored: str) -> bool:
    return is_bcrypt_hash(stored) or stored.startswith(_WERKZEUG_PREFIXES)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode('utf-8')


def verify_password(stored: str, password: str) -> bool:
    """Check a password against any of the stored formats."""
    if not stored or password is None:
        return False
    if is_bcrypt_hash(stored):
        try:
            return bcrypt.checkpw(password.encode('utf-8'), stored.encode('utf-8'))
        except ValueError:
            # Malformed hash or password over bcrypt's 72-byte limit
            return False
    if stored.startswith(_WERKZEUG_PREFIXES):
        return check_password_hash(stored, password)
    return hmac.compare_digest(stored.encode('utf-8'), password.encode('utf-8'))
