"""
Tabular text parser.

Extracts one column of activity titles from comma-delimited text. Only as
much CSV handling as that job needs: quoted fields, embedded commas, doubled
quotes inside quoted fields and LF, CRLF or bare CR line endings.
"""

import logging
from typing import List, Optional

from .exceptions import MalformedInputError, MissingColumnError
from .models import Label
from ...core.config import DEFAULT_COLUMN_KEY

logger = logging.getLogger(__name__)

QUOTE = '"'
DELIMITER = ","


def split_rows(raw_text: str) -> List[List[str]]:
    """
    Split raw delimited text into rows of trimmed fields.

    Args:
        raw_text: Complete file contents

    Returns:
        List of rows, each a list of field strings
    """
    rows: List[List[str]] = []
    current_row: List[str] = []
    current_field: List[str] = []
    in_quotes = False
    i = 0
    length = len(raw_text)

    while i < length:
        char = raw_text[i]
        next_char = raw_text[i + 1] if i + 1 < length else None

        if char == QUOTE:
            if not in_quotes:
                in_quotes = True
            elif next_char == QUOTE:
                current_field.append(QUOTE)
                i += 1
            else:
                in_quotes = False
        elif in_quotes:
            current_field.append(char)
        elif char == DELIMITER:
            current_row.append("".join(current_field).strip())
            current_field = []
        elif char in ("\n", "\r"):
            current_row.append("".join(current_field).strip())
            current_field = []
            rows.append(current_row)
            current_row = []
            if char == "\r" and next_char == "\n":
                i += 1
        else:
            current_field.append(char)
        i += 1

    if current_field or current_row:
        current_row.append("".join(current_field).strip())
        rows.append(current_row)

    return rows


def normalize_label(value: Optional[str]) -> str:
    """Strip one surrounding pair of literal quotes, spell out '&' and trim."""
    if not value:
        return ""
    if value.startswith(QUOTE):
        value = value[1:]
    if value.endswith(QUOTE):
        value = value[:-1]
    return value.replace("&", "and").strip()


def find_column(header: List[str], column_key: str) -> int:
    """Index of the header cell equal to ``column_key``, ignoring case and padding."""
    wanted = column_key.strip().lower()
    headers = [cell.strip().lower() for cell in header]
    try:
        return headers.index(wanted)
    except ValueError:
        raise MissingColumnError(column_key, headers) from None


def parse(raw_text: str, column_key: str = DEFAULT_COLUMN_KEY) -> List[Label]:
    """
    Parse raw text and extract the labels of one column.

    Row numbers are 1-based source rows, so the first data row is row 2.

    Args:
        raw_text: Complete file contents
        column_key: Header name of the column to extract

    Returns:
        Labels in source order, empty values dropped

    Raises:
        MalformedInputError: If the input is empty
        MissingColumnError: If no header cell matches column_key
    """
    if raw_text is None or not raw_text.strip():
        raise MalformedInputError("Input is empty")

    rows = split_rows(raw_text)
    column_index = find_column(rows[0], column_key)

    labels: List[Label] = []
    for offset, row in enumerate(rows[1:]):
        value = row[column_index] if column_index < len(row) else None
        text = normalize_label(value)
        if text:
            labels.append(Label(text=text, row_number=offset + 2))

    logger.debug(f"Parsed {len(rows) - 1} data rows, extracted {len(labels)} labels from '{column_key}'")
    return labels
