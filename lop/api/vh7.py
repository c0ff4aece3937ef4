"""
vh7 backend.

  POST <api>/shorten   form:      url,  expires
  POST <api>/paste     form:      code, expires
  POST <api>/upload    multipart: file, expires

``expires`` is an absolute epoch-millisecond timestamp, or the literal string
"null" to ask for a resource that never expires. Every endpoint answers with
a JSON record whose ``id`` becomes the public path next to the API root:

  https://vh7.uk/api/  +  {"id": "abc123"}  →  https://vh7.uk/abc123
"""

import logging
from urllib.parse import urlsplit

import requests

from lop import config
from lop.errors import ConfigError, DecodeError, ServiceError, TransportError

from .base import PasteService, Service, ServiceResult, ShortenService, UploadService
from .helpers import error_message, parse_rfc3339, public_url

logger = logging.getLogger(__name__)


class Vh7Service(Service, ShortenService, PasteService, UploadService):
    name = 'vh7'

    def __init__(self, api_url=None, session=None, timeout=None):
        self.api_base = _validate_base(api_url or config.DEFAULT_API_URL)
        self.session = session or requests.Session()
        self.timeout = timeout or config.REQUEST_TIMEOUT

    def close(self):
        self.session.close()

    # ── Operations ────────────────────────────────────────────────────────────

    def shorten(self, options, url):
        data = {'url': url, 'expires': _expires_field(options)}
        record = self._post('shorten', data=data)
        return self._result(record)

    def paste(self, options, code, language=''):
        # The server has no language field yet; ``language`` is not sent.
        data = {'code': code, 'expires': _expires_field(options)}
        record = self._post('paste', data=data)
        return self._result(record)

    def upload(self, options, data, file_name, mime_type):
        files = {
            'file':    (file_name, data, mime_type),
            'expires': (None, _expires_field(options)),
        }
        record = self._post('upload', files=files,
                            timeout=max(self.timeout, config.UPLOAD_TIMEOUT))
        return self._result(record)

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _route(self, name):
        return f'{self.api_base}{name}'

    def _post(self, route, data=None, files=None, timeout=None):
        """POST to an API route and return the decoded JSON record."""
        url = self._route(route)
        logger.debug('POST %s', url)
        try:
            res = self.session.post(url, data=data, files=files,
                                    timeout=timeout or self.timeout)
        except requests.RequestException as e:
            raise TransportError(f'Could not reach {url}: {e}') from e

        logger.debug('%s %s → %s', route, url, res.status_code)
        if not res.ok:
            raise TransportError(
                f'Server returned {res.status_code}: {error_message(res)}',
                status_code=res.status_code,
            )

        try:
            record = res.json()
        except ValueError as e:
            raise DecodeError(f'Malformed response from {route}: {e}') from e

        if not isinstance(record, dict) or not record.get('id'):
            raise DecodeError(f'Response from {route} has no id.')
        return record

    def _result(self, record):
        try:
            url = public_url(self.api_base, str(record['id']))
        except ValueError as e:
            raise ServiceError(f'Could not build URL for {record["id"]!r}: {e}') from e
        return ServiceResult(url=url, expires=parse_rfc3339(record.get('expiresAt')))


def _expires_field(options):
    ms = options.expiry_epoch_ms()
    return 'null' if ms is None else str(ms)


def _validate_base(api_url):
    try:
        parts = urlsplit(api_url)
    except ValueError as e:
        raise ConfigError(f'Invalid API URL: {api_url!r} ({e})') from e
    if parts.scheme not in ('http', 'https') or not parts.netloc:
        raise ConfigError(f'Invalid API URL: {api_url!r}')
    if not api_url.endswith('/'):
        api_url += '/'
    return api_url
