"""Core Platform Module.

Shared infrastructure used by every section of the agency backend:
- Repository base class over the database connection pool
- Authentication (users, password checks)
- Address helpers, request validation, logging
"""
