"""
Runtime defaults for the lop CLI.

lop keeps no config file: every setting is a compiled-in default that a
command-line flag can override for the current invocation.
"""

from datetime import timedelta

DEFAULT_SERVICE = 'vh7'
DEFAULT_API_URL = 'https://vh7.uk/api/'
DEFAULT_EXPIRY_DAYS = 29

REQUEST_TIMEOUT = 30   # seconds, form posts
UPLOAD_TIMEOUT = 120   # seconds, multipart uploads

# Uploads are never content-sniffed.
UPLOAD_MIME_TYPE = 'text/plain'


def options_from_args(args):
    """
    Build ServiceOptions from parsed global flags.

    --no-expire clears the default expiry; --expire N then overrides it, so
    passing both keeps the explicit day count.
    """
    from lop.api.base import ServiceOptions

    expiry = timedelta(days=DEFAULT_EXPIRY_DAYS)
    if getattr(args, 'no_expire', False):
        expiry = None
    expire_days = getattr(args, 'expire_days', None)
    if expire_days is not None:
        try:
            expiry = timedelta(days=expire_days)
        except OverflowError as e:
            from lop.errors import ConfigError
            raise ConfigError(f'Expiry of {expire_days} days is out of range.') from e
    return ServiceOptions(expiry=expiry)
