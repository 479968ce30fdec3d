"""Tabular (CSV) input reader.

Tokenizing is delegated to the standard library csv module; this module only
decodes the upload, drops blank lines and enforces the header + data shape.
"""

import csv
import io
import logging

log = logging.getLogger(__name__)


class ParseError(Exception):
    """Raised when tabular input is malformed or lacks a header and a data row.

    Aborts the whole import before any term is processed.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


def decode_content(content: bytes | str, encoding: str = "utf-8-sig") -> str:
    """Decode uploaded bytes to text.

    Args:
        content: Raw upload or already decoded text
        encoding: Codec used for bytes

    Returns:
        The decoded text

    Raises:
        ParseError: If the bytes cannot be decoded
    """
    if isinstance(content, str):
        return content
    try:
        return content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise ParseError(f"Could not decode input as {encoding}: {e}", cause=e) from e


def read_rows(content: bytes | str, encoding: str = "utf-8-sig") -> list[list[str]]:
    """Parse CSV content into rows of cell strings, skipping blank lines.

    Args:
        content: CSV text or bytes
        encoding: Codec used when ``content`` is bytes

    Returns:
        All non-blank rows, header first

    Raises:
        ParseError: If the input is malformed or has fewer than two rows
    """
    text = decode_content(content, encoding)
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        rows = [row for row in reader if row and any(cell != "" for cell in row)]
    except csv.Error as e:
        raise ParseError(f"CSV parsing error on line {reader.line_num}: {e}", cause=e) from e

    if len(rows) < 2:
        raise ParseError("CSV input is empty or missing headers/data")

    log.debug(f"Parsed {len(rows)} rows ({len(rows) - 1} data rows)")
    return rows
