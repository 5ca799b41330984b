"""Session acquisition for Garmin Connect.

A session comes from saved garth tokens or from an email/password SSO
login (with optional MFA). Uploads must not be attempted without one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from garminconnect import Garmin

from garmin_client.exceptions import (
    GarminAuthError,
    GarminCredentialsMissing,
    GarminMFARequired,
)

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_DIR = Path("~/.garminconnect").expanduser()
_TOKEN_FILE = "oauth1_token.json"


def has_saved_tokens(token_dir: Path | str = DEFAULT_TOKEN_DIR) -> bool:
    return (Path(token_dir) / _TOKEN_FILE).exists()


def resume_session(token_dir: Path | str = DEFAULT_TOKEN_DIR) -> Garmin:
    """Resume a session from saved tokens (no credentials needed).

    Raises:
        GarminCredentialsMissing: no tokens at *token_dir*.
        GarminAuthError: tokens exist but cannot be used.
    """
    token_dir = Path(token_dir)
    if not has_saved_tokens(token_dir):
        raise GarminCredentialsMissing(f"No saved tokens at {token_dir}")

    try:
        client = Garmin()
        client.login(tokenstore=str(token_dir))
        logger.debug("Resumed session from %s", token_dir)
        return client
    except Exception as exc:
        raise GarminAuthError(f"Token resume failed: {exc}") from exc


def login(
    email: str,
    password: str,
    token_dir: Path | str = DEFAULT_TOKEN_DIR,
    prompt_mfa: Optional[Callable[[], str]] = None,
) -> Garmin:
    """SSO login with email/password; tokens are saved to *token_dir*.

    Without *prompt_mfa* the login returns early when MFA is needed and
    ``GarminMFARequired`` is raised carrying ``garmin_client``,
    ``mfa_state`` and ``token_dir``; finish with :func:`complete_mfa_login`.
    """
    token_dir = Path(token_dir)
    token_dir.mkdir(parents=True, exist_ok=True)
    return_on_mfa = prompt_mfa is None

    try:
        client = Garmin(
            email=email,
            password=password,
            prompt_mfa=prompt_mfa,
            return_on_mfa=return_on_mfa,
        )
        result = client.login()

        # return_on_mfa=True → ("needs_mfa", client_state)
        if return_on_mfa and isinstance(result, tuple) and len(result) >= 2:
            if result[0] == "needs_mfa":
                exc = GarminMFARequired("MFA verification required")
                exc.garmin_client = client  # type: ignore[attr-defined]
                exc.mfa_state = result[1]  # type: ignore[attr-defined]
                exc.token_dir = token_dir  # type: ignore[attr-defined]
                raise exc

        client.garth.dump(str(token_dir))
        logger.info("Logged in as %s, tokens saved to %s", email, token_dir)
        return client
    except GarminMFARequired:
        raise
    except Exception as exc:
        if "mfa" in str(exc).lower():
            raise GarminMFARequired(str(exc)) from exc
        raise GarminAuthError(f"Login failed: {exc}") from exc


def complete_mfa_login(
    garmin_client: Garmin,
    mfa_state: dict,
    mfa_code: str,
    token_dir: Path | str = DEFAULT_TOKEN_DIR,
) -> Garmin:
    """Finish a login interrupted by ``GarminMFARequired``."""
    token_dir = Path(token_dir)
    token_dir.mkdir(parents=True, exist_ok=True)

    try:
        garmin_client.resume_login(mfa_state, mfa_code)
        garmin_client.garth.dump(str(token_dir))
        logger.info("MFA login completed, tokens saved to %s", token_dir)
        return garmin_client
    except Exception as exc:
        raise GarminAuthError(f"MFA verification failed: {exc}") from exc


def acquire_session(
    email: str | None = None,
    password: str | None = None,
    token_dir: Path | str = DEFAULT_TOKEN_DIR,
    prompt_mfa: Optional[Callable[[], str]] = None,
) -> Garmin:
    """Return a session, preferring saved tokens over a fresh login.

    Falls back to SSO login when tokens are missing or stale and
    credentials were given.

    Raises:
        GarminCredentialsMissing: no usable tokens and no credentials.
    """
    if has_saved_tokens(token_dir):
        try:
            return resume_session(token_dir)
        except GarminAuthError:
            logger.info("Saved tokens unusable, trying SSO login")

    if not email or not password:
        raise GarminCredentialsMissing(
            "No usable Garmin tokens and no email/password given"
        )
    return login(email, password, token_dir=token_dir, prompt_mfa=prompt_mfa)
