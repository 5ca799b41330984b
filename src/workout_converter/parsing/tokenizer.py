"""Single-line CSV tokenizer.

Permissive by design of the plan format: unbalanced quotes are not an
error, the line is simply read to its end in quoted mode. Column counts
are not checked here.
"""

from __future__ import annotations

_QUOTE = '"'


def tokenize_line(line: str, delimiter: str = ",") -> list[str]:
    """Split one CSV line into trimmed fields.

    A double quote toggles quoted mode, except ``""`` inside quotes which
    yields a literal quote. The delimiter only splits outside quotes.
    Fields still wrapped in quotes after trimming are unwrapped and their
    doubled quotes collapsed.

    Example: ``a, "b,c" ,x`` → ``["a", "b,c", "x"]``
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == _QUOTE:
            if in_quotes and i + 1 < n and line[i + 1] == _QUOTE:
                current.append(_QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current).strip())
    return [_unwrap(field) for field in fields]


def _unwrap(field: str) -> str:
    if field.startswith(_QUOTE) and field.endswith(_QUOTE):
        return field[1:-1].replace(_QUOTE * 2, _QUOTE)
    return field


def format_csv_line(fields, delimiter: str = ",") -> str:
    """Serialize *fields* so that :func:`tokenize_line` reads them back.

    Fields containing the delimiter or a quote are quoted with embedded
    quotes doubled. Exact for trimmed values not themselves wrapped in
    quotes; the tokenizer strips both.
    """
    return delimiter.join(_quote(str(field), delimiter) for field in fields)


def _quote(value: str, delimiter: str) -> str:
    if delimiter in value or _QUOTE in value:
        return _QUOTE + value.replace(_QUOTE, _QUOTE * 2) + _QUOTE
    return value
