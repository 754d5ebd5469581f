#!/usr/bin/env python3
"""
Hash legacy plain-text passwords in the users table.

Accounts created before password hashing store the password as-is in
users.password_hash. This script rewrites each of them as a bcrypt hash,
in one transaction. Users are also upgraded one by one on their next
successful login, so running it is optional.

Usage:
    DATABASE_URL='postgresql://...' python scripts/hash_passwords.py

Options:
    --dry-run    List the affected users without changing anything
"""

import os
import sys
import argparse

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'agency'))


def main():
    parser = argparse.ArgumentParser(description='Hash plain-text user passwords')
    parser.add_argument('--dry-run', action='store_true', help='Show what would be done')
    args = parser.parse_args()

    if not os.environ.get('DATABASE_URL'):
        print("ERROR: DATABASE_URL environment variable not set")
        sys.exit(1)

    from core.auth.repositories import UserRepository

    print("="*60)
    print("HASH PLAIN-TEXT PASSWORDS")
    print("="*60)
    print(f"Mode: {'DRY RUN' if args.dry_run else 'LIVE'}")

    emails = UserRepository().hash_plaintext_passwords(dry_run=args.dry_run)

    if not emails:
        print("\nAll passwords are already hashed!")
        return

    verb = 'Would hash' if args.dry_run else 'Hashed'
    print(f"\n{verb} passwords for {len(emails)} user(s):")
    for email in emails:
        print(f"  - {email}")


if __name__ == '__main__':
    main()
