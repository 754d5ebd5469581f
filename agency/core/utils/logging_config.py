"""Log output for the agency backend.

Under gunicorn (or with PRODUCTION=true) every record is one JSON line so
the host's log collector can index fields such as personnel_id. Locally the
same records print as short text lines.
"""

import os
import sys
import json
import logging
from datetime import datetime, timezone

# Attribute that log_with_context() stores its fields under
CONTEXT_ATTR = 'context'


def _context(record: logging.LogRecord) -> dict:
    return getattr(record, CONTEXT_ATTR, None) or {}


class JSONFormatter(logging.Formatter):
    """Record as a flat JSON object; context fields sit beside the message."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'time': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'source': f'{record.module}:{record.lineno}',
            'message': record.getMessage(),
        }
        entry.update(_context(record))
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class DevelopmentFormatter(logging.Formatter):
    """`12:00:01 INFO    agency.salary: Salary saved salary_id=11`"""

    def __init__(self):
        super().__init__('%(asctime)s %(levelname)-7s %(name)s: %(message)s', datefmt='%H:%M:%S')

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = ' '.join(f'{key}={value}' for key, value in _context(record).items())
        if not fields:
            return line
        # exception text, when present, follows the first line
        head, sep, tail = line.partition('\n')
        return f'{head} {fields}{sep}{tail}'


def _json_by_default() -> bool:
    if os.environ.get('PRODUCTION', '').lower() == 'true':
        return True
    return 'gunicorn' in os.environ.get('SERVER_SOFTWARE', '')


def setup_logging(
    level: str = 'INFO',
    json_format: bool = None,
    logger_name: str = 'agency'
) -> logging.Logger:
    """Attach a single stdout handler to `logger_name` and return the logger.

    Calling it again replaces the handler instead of adding a second one.
    json_format=None picks JSON under gunicorn or PRODUCTION=true.
    """
    if json_format is None:
        json_format = _json_by_default()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if json_format else DevelopmentFormatter())

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers = [handler]
    logger.propagate = False
    return logger


def log_with_context(logger: logging.Logger, level: int, message: str, **context):
    """logger.log() with keyword fields that both formatters render."""
    logger.log(level, message, extra={CONTEXT_ATTR: context}, stacklevel=2)
