"""
CSV parser for FlashFreq.

Turns raw CSV text into a ``TabularModel``.  Handles:

- Comma delimiters with double-quote escaping (``csv`` module dialect)
- ``\\n``, ``\\r\\n`` and ``\\r`` line endings, including newlines
  inside quoted fields
- UTF-8 BOM markers
- Blank lines (skipped, never turned into empty rows)
- Ragged rows (kept as-is; missing cells read as ``""`` downstream)

No type coercion happens here — every cell stays a string.
"""

import csv
import io
import os
import warnings

from .constants import CSV_EXTENSION, SIZE_ADVISORY_BYTES
from .data_model import TabularModel
from .errors import EmptyInputError, FileTypeError, ParseError, ReadError


def _is_blank_record(record) -> bool:
    """A record produced by a truly empty line.

    Whitespace-only lines are data: they yield one cell holding the
    whitespace, which later counts as an empty value.
    """
    return not record or (len(record) == 1 and record[0] == "")


# ── Text parser ──────────────────────────────────────────────────────────

def parse_csv_text(text: str) -> TabularModel:
    """Parse CSV text into headers and rows.

    The first non-empty record becomes the header row; every later
    non-empty record becomes one data row.

    Raises
    ------
    EmptyInputError
        If no record remains after skipping empty lines.
    ParseError
        If the ``csv`` module rejects the input (e.g. an oversized
        field).
    """
    if text.startswith('\ufeff'):
        text = text[1:]

    # newline='' keeps quoted line breaks intact for csv.reader
    reader = csv.reader(io.StringIO(text, newline=''))
    try:
        records = [
            tuple(record) for record in reader
            if not _is_blank_record(record)
        ]
    except csv.Error as exc:
        raise ParseError(
            f"Malformed CSV near line {reader.line_num}: {exc}"
        ) from exc

    if not records:
        raise EmptyInputError("Empty CSV file: no header row found.")

    return TabularModel(headers=records[0], rows=tuple(records[1:]))


# ── File loading ─────────────────────────────────────────────────────────

def check_file_type(filepath: str) -> None:
    """Raise ``FileTypeError`` unless *filepath* names a ``.csv`` file."""
    if not filepath.lower().endswith(CSV_EXTENSION):
        raise FileTypeError(
            f"'{os.path.basename(filepath)}' is not a CSV file. "
            f"Please choose a file ending in {CSV_EXTENSION}."
        )


def load_csv_file(filepath: str) -> TabularModel:
    """Read *filepath* and parse it with ``parse_csv_text``.

    Raises
    ------
    ReadError
        If the file cannot be opened or decoded as UTF-8.
    EmptyInputError, ParseError
        As for ``parse_csv_text``.
    """
    try:
        file_size = os.path.getsize(filepath)
        with open(filepath, 'r', encoding='utf-8-sig', newline='') as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(
            f"Could not read '{os.path.basename(filepath)}': {exc}"
        ) from exc

    if file_size > SIZE_ADVISORY_BYTES:
        warnings.warn(
            f"File is very large ({file_size / (1024 * 1024):.0f} MB). "
            f"The whole table is held in memory; analysis may be slow.",
            stacklevel=2,
        )

    return parse_csv_text(text)
