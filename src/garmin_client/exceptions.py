"""Exception hierarchy for Garmin Connect submission."""

from __future__ import annotations


class GarminClientError(Exception):
    """Base exception for all garmin_client errors."""


class GarminAuthError(GarminClientError):
    """No usable session: bad credentials, expired or missing tokens."""


class GarminCredentialsMissing(GarminAuthError):
    """Neither saved tokens nor email/password are available.

    Nothing may be submitted without a session, so this stops the run.
    """


class GarminMFARequired(GarminAuthError):
    """Multi-factor authentication is required to complete login."""


class GarminAPIError(GarminClientError):
    """The workout service rejected a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GarminRateLimitError(GarminAPIError):
    """HTTP 429: still rate limited after all retries."""

    def __init__(self, message: str = "Rate limited by Garmin Connect") -> None:
        super().__init__(message, status_code=429)
