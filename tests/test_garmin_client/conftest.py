"""Fixtures with realistic Garmin workout-service payloads for testing."""

from __future__ import annotations

import pytest


@pytest.fixture
def workout_json() -> dict:
    """Minimal running workout as produced by the serializer."""
    return {
        "sportType": {"sportTypeId": 1, "sportTypeKey": "running", "displayOrder": 1},
        "workoutName": "MorningRun",
        "workoutSegments": [
            {
                "segmentOrder": 1,
                "sportType": {"sportTypeId": 1, "sportTypeKey": "running", "displayOrder": 1},
                "workoutSteps": [],
            }
        ],
        "estimatedDurationInSecs": 1800,
        "estimatedDistanceInMeters": 5292.0,
    }


@pytest.fixture
def upload_response() -> dict:
    """Realistic Garmin response to POST /workout-service/workout."""
    return {
        "workoutId": 987654321,
        "ownerId": 12345678,
        "workoutName": "MorningRun",
        "sportType": {"sportTypeId": 1, "sportTypeKey": "running", "displayOrder": 1},
        "createdDate": "2025-01-15T07:30:00.0",
        "updatedDate": "2025-01-15T07:30:00.0",
        "estimatedDurationInSecs": 1800,
        "estimatedDistanceInMeters": 5292.0,
        "workoutProvider": None,
    }
