"""Exception hierarchy for contacts feed failures.

Transport, status and decode errors are terminal for an in-flight fetch:
the client never retries and never fetches further pages after one of them.
"""


class ContactsError(Exception):
    """Base exception for all contacts feed failures."""


class ConfigError(ContactsError):
    """Raised for invalid or missing client configuration."""


class TransportError(ContactsError):
    """Raised when the connection to the API fails."""


class StatusError(ContactsError):
    """Raised when the API answers with a status outside 200-299."""

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        super().__init__(message or f"Bad client request status: {status_code}")


class DecodeError(ContactsError):
    """Raised when a response body is not valid JSON or not the expected shape."""


class PaginationLimitError(ContactsError):
    """Raised when a feed keeps emitting next links past the configured page cap."""
