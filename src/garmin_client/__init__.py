"""Garmin Connect client — all Garmin network I/O lives here."""

from garmin_client.auth import acquire_session, complete_mfa_login, resume_session
from garmin_client.client import GarminClient, UploadResult
from garmin_client.exceptions import (
    GarminAPIError,
    GarminAuthError,
    GarminClientError,
    GarminCredentialsMissing,
    GarminMFARequired,
    GarminRateLimitError,
)

__all__ = [
    "GarminAPIError",
    "GarminAuthError",
    "GarminClient",
    "GarminClientError",
    "GarminCredentialsMissing",
    "GarminMFARequired",
    "GarminRateLimitError",
    "UploadResult",
    "acquire_session",
    "complete_mfa_login",
    "resume_session",
]
