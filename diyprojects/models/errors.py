# diyprojects error taxonomy
# Rev 0.2.0

from __future__ import annotations


class DiyProjectsError(Exception):
    """Base class for every error raised by diyprojects."""


class PersistenceError(DiyProjectsError):
    """A statement or transaction against the store failed (already rolled back)."""


class DbConnectionError(PersistenceError):
    """The store could not be reached. `url` is the attempted URL with the password masked."""

    def __init__(self, url: str, message: str | None = None):
        self.url = url
        super().__init__(message or f"Unable to get connection with url {url}")


class InputError(DiyProjectsError):
    """User input could not be parsed (non-numeric, malformed decimal, ...)."""
