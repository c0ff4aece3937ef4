"""
Exception hierarchy for lop.

Everything the CLI reports to the user derives from LopError. The dispatcher
in lop.lop catches it, prints one line and exits non-zero.
"""


class LopError(Exception):
    """Base class for every error lop reports to the user."""


class ConfigError(LopError):
    """The service was configured with an unusable API base URL."""


class IoError(LopError):
    """A local input (file, clipboard) could not be read."""


class ServiceError(LopError):
    """A remote operation failed."""


class TransportError(ServiceError):
    """Network failure, timeout or a non-2xx response."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ServiceError):
    """The server answered with a body we could not understand."""
