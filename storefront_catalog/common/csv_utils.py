"""
CSV Utilities

Record parser for the storefront export files. The exports embed HTML
with commas and line breaks inside double-quoted fields, so a record may
span several physical lines.

Rules:
- The first physical line is the header; header names are trimmed
- A field wrapped in double quotes may contain commas and line breaks
- Inside a quoted field, a doubled quote ("") is one literal quote
- A record is emitted only when its field count equals the header count
- Nothing is type-coerced; every value is a string
"""

import logging
from pathlib import Path
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

QUOTE = '"'
SEPARATOR = ','


def _scan_line(line: str, field: str, in_quotes: bool) -> Tuple[List[str], str, bool]:
    """
    Tokenize one physical line.

    Args:
        line: Physical line (no trailing newline)
        field: Partial field carried over from the previous line
        in_quotes: Quote state carried over from the previous line

    Returns:
        Tuple of (completed_fields, partial_field, in_quotes)
    """
    completed = []
    chars = list(field)
    i = 0
    length = len(line)

    while i < length:
        char = line[i]
        if char == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                chars.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == SEPARATOR and not in_quotes:
            completed.append(''.join(chars))
            chars = []
        else:
            chars.append(char)
        i += 1

    return completed, ''.join(chars), in_quotes


def parse_line(line: str) -> List[str]:
    """
    Parse a single physical line into trimmed fields.

    Used for the header row. Quotes never span past the end of the line.

    Example:
        >>> parse_line('ID, "post_title" ,"a, b"')
        ['ID', 'post_title', 'a, b']
    """
    fields, last, _ = _scan_line(line, '', False)
    fields.append(last)
    return [f.strip() for f in fields]


def _to_record(headers: List[str], values: List[str]) -> Dict[str, str]:
    return {header: values[index] for index, header in enumerate(headers)}


def parse_records(content: str) -> List[Dict[str, str]]:
    """
    Parse full export file content into records.

    Best effort: malformed input never raises. Records whose field count
    never reconciles with the header are dropped. If the accumulated field
    count overshoots the header count, the fragment is discarded and
    accumulation restarts on the next line.

    Args:
        content: Full file text

    Returns:
        List of dictionaries keyed by header name, in file order
    """
    if not content or not content.strip():
        return []

    lines = content.split('\n')
    headers = parse_line(lines[0])
    expected = len(headers)

    records: List[Dict[str, str]] = []
    current: List[str] = []
    field = ''
    in_quotes = False

    for line_number, line in enumerate(lines[1:], start=2):
        completed, field, in_quotes = _scan_line(line, field, in_quotes)
        current.extend(completed)

        if in_quotes:
            # Line break inside a quoted field is part of the value
            field += '\n'
            continue

        if not field and not current:
            continue

        current.append(field)
        field = ''

        if len(current) == expected:
            records.append(_to_record(headers, current))
            current = []
        elif len(current) > expected:
            logger.debug(
                "Line %d: discarding fragment with %d fields (expected %d)",
                line_number, len(current), expected,
            )
            current = []

    # Trailing fragment (file without final newline or unterminated quote)
    if field or current:
        current.append(field)
        if len(current) == expected:
            records.append(_to_record(headers, current))
        else:
            logger.debug(
                "Dropping trailing fragment with %d fields (expected %d)",
                len(current), expected,
            )

    return records


def read_records(file_path: str | Path, encoding: str = 'utf-8') -> List[Dict[str, str]]:
    """
    Read an export file and parse it into records.

    Args:
        file_path: Path to CSV file
        encoding: File encoding (default: utf-8, BOM kept in the first header)

    Returns:
        List of records

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid in the given encoding
    """
    with open(file_path, 'r', encoding=encoding) as f:
        return parse_records(f.read())
