"""Tests for garmin_client.client — mock-based, no real network calls."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from garmin_client.client import GarminClient
from garmin_client.exceptions import GarminAPIError, GarminRateLimitError


@pytest.fixture
def mock_garmin():
    """Create a mock Garmin instance."""
    mock = MagicMock()
    mock.garth = MagicMock()
    return mock


@pytest.fixture
def client(mock_garmin):
    """Create a GarminClient with a mocked Garmin session and no spacing."""
    with patch("garmin_client.client.acquire_session", return_value=mock_garmin):
        c = GarminClient(email="test@test.com", password="pass", min_interval_s=0)
    return c


def _http_error(status: int) -> Exception:
    exc = Exception(f"HTTP {status}")
    exc.status = status
    return exc


# ---------------------------------------------------------------------------
# construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_acquires_session_with_credentials(self, mock_garmin, tmp_path):
        with patch(
            "garmin_client.client.acquire_session", return_value=mock_garmin
        ) as mock_acquire:
            GarminClient(email="a@b.com", password="pw", token_dir=tmp_path)
        mock_acquire.assert_called_once_with(
            email="a@b.com", password="pw", token_dir=tmp_path, prompt_mfa=None
        )

    def test_from_garmin(self, mock_garmin, upload_response, workout_json):
        mock_garmin.upload_workout.return_value = upload_response
        c = GarminClient.from_garmin(mock_garmin, min_interval_s=0)
        assert c.upload_workout(workout_json) == 987654321


# ---------------------------------------------------------------------------
# upload_workout
# ---------------------------------------------------------------------------


class TestUploadWorkout:
    def test_returns_workout_id(self, client, mock_garmin, upload_response, workout_json):
        mock_garmin.upload_workout.return_value = upload_response
        wid = client.upload_workout(workout_json)
        assert wid == 987654321
        mock_garmin.upload_workout.assert_called_once_with(workout_json)

    def test_raises_on_unexpected_response(self, client, mock_garmin):
        mock_garmin.upload_workout.return_value = {"error": "bad"}
        with pytest.raises(GarminAPIError, match="Unexpected upload response"):
            client.upload_workout({"workoutName": "Test"})

    @pytest.mark.parametrize("bad_id", [None, "abc", {"id": 1}])
    def test_raises_on_invalid_workout_id(self, client, mock_garmin, bad_id):
        mock_garmin.upload_workout.return_value = {"workoutId": bad_id}
        with pytest.raises(GarminAPIError, match="Invalid workoutId"):
            client.upload_workout({"workoutName": "Test"})

    def test_raises_on_api_error(self, client, mock_garmin):
        mock_garmin.upload_workout.side_effect = _http_error(500)
        with pytest.raises(GarminAPIError) as exc_info:
            client.upload_workout({"workoutName": "Test"})
        assert exc_info.value.status_code == 500


# ---------------------------------------------------------------------------
# upload_workouts
# ---------------------------------------------------------------------------


class TestUploadWorkouts:
    def test_one_result_per_workout(self, client, mock_garmin):
        mock_garmin.upload_workout.side_effect = [{"workoutId": i} for i in range(3)]
        jsons = [{"workoutName": f"W{i}"} for i in range(3)]
        results = client.upload_workouts(jsons)
        assert [r.workout_id for r in results] == [0, 1, 2]
        assert [r.workout_name for r in results] == ["W0", "W1", "W2"]
        assert all(r.ok for r in results)
        assert results[0].payload == {"workoutId": 0}

    def test_failure_does_not_stop_later_uploads(self, client, mock_garmin):
        mock_garmin.upload_workout.side_effect = [
            {"workoutId": 1},
            _http_error(400),
            {"workoutId": 3},
        ]
        jsons = [{"workoutName": n} for n in ("A", "B", "C")]
        results = client.upload_workouts(jsons)
        assert [r.ok for r in results] == [True, False, True]
        assert results[1].workout_id is None
        assert "HTTP 400" in results[1].error
        assert mock_garmin.upload_workout.call_count == 3

    def test_invalid_workout_id_does_not_stop_later_uploads(self, client, mock_garmin):
        mock_garmin.upload_workout.side_effect = [{"workoutId": None}, {"workoutId": 2}]
        results = client.upload_workouts([{"workoutName": "A"}, {"workoutName": "B"}])
        assert [r.ok for r in results] == [False, True]
        assert results[1].workout_id == 2

    def test_consumes_lazily(self, client, mock_garmin):
        mock_garmin.upload_workout.return_value = {"workoutId": 7}
        seen = []

        def gen():
            for name in ("A", "B"):
                seen.append(name)
                yield {"workoutName": name}

        client.upload_workouts(gen())
        assert seen == ["A", "B"]
        assert mock_garmin.upload_workout.call_count == 2


# ---------------------------------------------------------------------------
# Spacing between calls
# ---------------------------------------------------------------------------


class TestCallSpacing:
    @patch("garmin_client.client.time")
    def test_sleeps_for_remaining_interval(self, mock_time, client, mock_garmin):
        client.min_interval_s = 0.4
        mock_time.monotonic.side_effect = [100.0, 100.0, 100.1, 100.4]
        mock_garmin.upload_workout.return_value = {"workoutId": 1}

        client.upload_workout({"workoutName": "A"})
        client.upload_workout({"workoutName": "B"})

        mock_time.sleep.assert_called_once()
        assert mock_time.sleep.call_args.args[0] == pytest.approx(0.3)

    @patch("garmin_client.client.time")
    def test_no_sleep_when_interval_elapsed(self, mock_time, client, mock_garmin):
        client.min_interval_s = 0.4
        mock_time.monotonic.side_effect = [100.0, 100.0, 101.0, 101.0]
        mock_garmin.upload_workout.return_value = {"workoutId": 1}

        client.upload_workout({"workoutName": "A"})
        client.upload_workout({"workoutName": "B"})

        mock_time.sleep.assert_not_called()


# ---------------------------------------------------------------------------
# Retry on 429
# ---------------------------------------------------------------------------


class TestRetryLogic:
    @patch("garmin_client.client.time.sleep")
    def test_retries_on_429(self, mock_sleep, client, mock_garmin):
        mock_garmin.upload_workout.side_effect = [
            _http_error(429),
            _http_error(429),
            {"workoutId": 42},
        ]
        wid = client.upload_workout({"workoutName": "Retry Test"})
        assert wid == 42
        assert [c.args[0] for c in mock_sleep.call_args_list] == [2, 4]

    @patch("garmin_client.client.time.sleep")
    def test_raises_after_max_retries(self, mock_sleep, client, mock_garmin):
        mock_garmin.upload_workout.side_effect = [_http_error(429)] * 3
        with pytest.raises(GarminRateLimitError):
            client.upload_workout({"workoutName": "Fail"})

    @patch("garmin_client.client.time.sleep")
    def test_rate_limit_recorded_per_workout(self, mock_sleep, client, mock_garmin):
        mock_garmin.upload_workout.side_effect = [_http_error(429)] * 3 + [
            {"workoutId": 5}
        ]
        results = client.upload_workouts([{"workoutName": "X"}, {"workoutName": "Y"}])
        assert [r.ok for r in results] == [False, True]
