"""
Service interfaces shared by every hosting backend.

A backend implements whichever of ShortenService, PasteService and
UploadService it supports. Each operation takes a ServiceOptions value and
returns a ServiceResult, so the command layer never sees backend-specific
JSON.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from lop.errors import ConfigError


@dataclass(frozen=True)
class ServiceOptions:
    """Per-invocation options threaded through every service call."""

    expiry: timedelta | None = None

    def expiry_epoch_ms(self, now: datetime | None = None) -> int | None:
        """Absolute expiry as milliseconds since the epoch, or None for never."""
        if self.expiry is None:
            return None
        now = now or datetime.now(timezone.utc)
        try:
            return int((now + self.expiry).timestamp() * 1000)
        except OverflowError as e:
            raise ConfigError(f'Expiry of {self.expiry.days} days is out of range.') from e


@dataclass(frozen=True)
class ServiceResult:
    url: str
    expires: datetime | None = None


class Service(ABC):
    """A hosting backend. Usable as a context manager to release its session."""

    name = ''

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *_):
        self.close()


class ShortenService(ABC):
    @abstractmethod
    def shorten(self, options: ServiceOptions, url: str) -> ServiceResult:
        ...


class PasteService(ABC):
    @abstractmethod
    def paste(self, options: ServiceOptions, code: str, language: str = '') -> ServiceResult:
        """
        Host a block of text.

        ``language`` is part of the interface for backends that can tag
        syntax; a backend may ignore it.
        """


class UploadService(ABC):
    @abstractmethod
    def upload(self, options: ServiceOptions, data: bytes, file_name: str,
               mime_type: str) -> ServiceResult:
        ...
