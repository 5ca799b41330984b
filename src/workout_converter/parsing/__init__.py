"""CSV parsing: tokenizer, plan reader and row parser."""

from workout_converter.parsing.plan_reader import read_plan
from workout_converter.parsing.row_parser import parse_int_or_zero, parse_row
from workout_converter.parsing.tokenizer import format_csv_line, tokenize_line

__all__ = [
    "format_csv_line",
    "parse_int_or_zero",
    "parse_row",
    "read_plan",
    "tokenize_line",
]
