"""Garmin Connect workout-service client.

Uploads assembled workouts one at a time, keeping a minimum spacing
between calls and retrying HTTP 429 with exponential backoff.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from garminconnect import Garmin

from garmin_client.auth import DEFAULT_TOKEN_DIR, acquire_session
from garmin_client.exceptions import (
    GarminAPIError,
    GarminRateLimitError,
)

logger = logging.getLogger(__name__)

_MAX_RETRIES = 3
_BASE_BACKOFF_S = 2
DEFAULT_MIN_INTERVAL_S = 0.4


@dataclass(frozen=True)
class UploadResult:
    """Disposition of one submitted workout."""

    workout_name: str
    ok: bool
    workout_id: int | None = None
    payload: Any = None
    error: str | None = None


class GarminClient:
    """Facade for submitting workouts to Garmin Connect."""

    def __init__(
        self,
        email: str | None = None,
        password: str | None = None,
        token_dir: Path | str = DEFAULT_TOKEN_DIR,
        prompt_mfa: Optional[Callable[[], str]] = None,
        min_interval_s: float = DEFAULT_MIN_INTERVAL_S,
    ) -> None:
        self._token_dir = Path(token_dir)
        self._garmin = acquire_session(
            email=email,
            password=password,
            token_dir=self._token_dir,
            prompt_mfa=prompt_mfa,
        )
        self.min_interval_s = min_interval_s
        self._last_call_at: float | None = None

    @classmethod
    def from_garmin(
        cls,
        garmin: Garmin,
        token_dir: Path | str = DEFAULT_TOKEN_DIR,
        min_interval_s: float = DEFAULT_MIN_INTERVAL_S,
    ) -> "GarminClient":
        """Construct from an already-authenticated Garmin object.

        Used after completing MFA login via :func:`complete_mfa_login`.
        """
        obj = cls.__new__(cls)
        obj._token_dir = Path(token_dir)
        obj._garmin = garmin
        obj.min_interval_s = min_interval_s
        obj._last_call_at = None
        return obj

    # ------------------------------------------------------------------
    # Workout operations
    # ------------------------------------------------------------------

    def upload_workout(self, workout_json: dict) -> int:
        """Upload one workout. Returns the workoutId assigned by Garmin."""
        workout_id, _ = self._upload(workout_json)
        return workout_id

    def upload_workouts(self, workout_jsons: Iterable[dict]) -> list[UploadResult]:
        """Upload workouts sequentially, one result per workout.

        A failed upload is recorded and the next workout is still sent.
        *workout_jsons* is consumed lazily, so a generator stops being
        built as soon as the caller stops it.
        """
        results: list[UploadResult] = []
        for wj in workout_jsons:
            name = str(wj.get("workoutName", ""))
            try:
                workout_id, resp = self._upload(wj)
            except GarminAPIError as exc:
                logger.error("Upload of %r failed: %s", name, exc)
                results.append(UploadResult(name, ok=False, error=str(exc)))
                continue
            results.append(UploadResult(
                name, ok=True, workout_id=workout_id, payload=resp,
            ))
        return results

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _upload(self, workout_json: dict) -> tuple[int, dict]:
        self._wait_for_slot()
        resp = self._safe_call(self._garmin.upload_workout, workout_json)
        if isinstance(resp, dict) and "workoutId" in resp:
            try:
                workout_id = int(resp["workoutId"])
            except (TypeError, ValueError) as exc:
                raise GarminAPIError(
                    f"Invalid workoutId in upload response: {resp['workoutId']!r}"
                ) from exc
            logger.info(
                "Uploaded workout %r id=%d", workout_json.get("workoutName"), workout_id
            )
            return workout_id, resp
        raise GarminAPIError(f"Unexpected upload response: {resp}")

    def _wait_for_slot(self) -> None:
        """Sleep so consecutive calls are at least ``min_interval_s`` apart."""
        now = time.monotonic()
        if self._last_call_at is not None:
            remaining = self.min_interval_s - (now - self._last_call_at)
            if remaining > 0:
                time.sleep(remaining)
        self._last_call_at = time.monotonic()

    def _safe_call(self, fn: Callable, *args: Any, **kwargs: Any) -> Any:
        """Call *fn* with retry + exponential backoff on 429."""
        last_exc: Exception | None = None
        for attempt in range(_MAX_RETRIES):
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                last_exc = exc
                status = getattr(exc, "status", None) or getattr(
                    exc, "status_code", None
                )
                if status == 429:
                    wait = _BASE_BACKOFF_S * (2 ** attempt)
                    logger.warning(
                        "Rate limited (attempt %d/%d), retrying in %ds",
                        attempt + 1,
                        _MAX_RETRIES,
                        wait,
                    )
                    time.sleep(wait)
                    continue
                raise GarminAPIError(str(exc), status_code=status) from exc

        raise GarminRateLimitError(
            f"Rate limited after {_MAX_RETRIES} retries: {last_exc}"
        )
