"""Serialization module — export workouts to Garmin Connect JSON."""

from workout_converter.serialization.garmin import to_garmin_json, to_garmin_json_string

__all__ = ["to_garmin_json", "to_garmin_json_string"]
