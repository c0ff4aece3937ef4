"""
Small utilities shared across lop API modules.
"""

import re
import sys
from datetime import datetime, timezone
from urllib.parse import urljoin

# fromisoformat on 3.10 only takes 3 or 6 fractional digits.
_FRACTION = re.compile(r'\.(\d+)')


def parse_rfc3339(value):
    """
    '2024-01-01T00:00:00Z' → aware UTC datetime.
    Returns None for missing or unparseable values; a bad timestamp is never
    worth failing an upload over.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        value = _FRACTION.sub(lambda m: '.' + m.group(1).ljust(6, '0')[:6], value, count=1)
        dt = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return None
    if dt.tzinfo is None:
        return None
    return dt.astimezone(timezone.utc)


def public_url(api_base, key):
    """Resolve a resource id against the parent of the API path."""
    return urljoin(urljoin(api_base, '..'), key)


def error_message(res, limit=200):
    """Best human-readable message from a failed response."""
    try:
        return res.json().get('error', res.text[:limit])
    except Exception:
        return res.text[:limit]


def err(msg):
    """Print a formatted error to stderr."""
    from lop.format import red
    print(f'  {red("✗", stream=sys.stderr)} {msg}', file=sys.stderr)



def status(msg, enabled=True):
    """Print a dim progress line to stderr before a blocking call. TTY only."""
    if not enabled or not sys.stderr.isatty():
        return
    from lop.format import dim
    print(f'  {dim(msg + "…", stream=sys.stderr)}', file=sys.stderr)
