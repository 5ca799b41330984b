"""CSV training plan → Garmin Connect workout converter."""

from workout_converter.dialects import COMMA_DIALECT, SEMICOLON_DIALECT, CsvDialect, get_dialect
from workout_converter.pipeline import ConversionResult, convert_csv_text, iter_conversions

__all__ = [
    "COMMA_DIALECT",
    "ConversionResult",
    "CsvDialect",
    "SEMICOLON_DIALECT",
    "convert_csv_text",
    "get_dialect",
    "iter_conversions",
]
