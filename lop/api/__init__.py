"""
Public API surface for lop.
Import from here to keep command modules clean.
"""

from .base import (
    PasteService, Service, ServiceOptions, ServiceResult, ShortenService, UploadService,
)
from .helpers import err, parse_rfc3339, public_url
from .vh7 import Vh7Service

# Backends selectable by name. The CLI only ever builds the default one.
SERVICES = {
    Vh7Service.name: Vh7Service,
}


def get_service(name, **kwargs):
    """Instantiate a registered backend by name."""
    try:
        cls = SERVICES[name]
    except KeyError:
        from lop.errors import ConfigError
        raise ConfigError(f'Unknown service: {name!r}') from None
    return cls(**kwargs)


__all__ = [
    'Service', 'ShortenService', 'PasteService', 'UploadService',
    'ServiceOptions', 'ServiceResult',
    'Vh7Service', 'SERVICES', 'get_service',
    'err', 'parse_rfc3339', 'public_url',
]
