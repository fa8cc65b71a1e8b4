"""Loading of the local list files that steer profile generation."""

import logging
from typing import List, Optional, Tuple

from src.domain.repository import AICredit

logger = logging.getLogger(__name__)

AI_CREDIT_FIELDS = ("name", "image_path", "alt_text", "title_text", "width", "height")


class InputReadFailure(Exception):
    """Raised when a local input file cannot be read or parsed."""
    pass


def _read_entries(path: str) -> List[Tuple[int, str]]:
    """Return (line number, text) for the non-blank, non-comment lines of a file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadFailure(f"Cannot read {path}: {e}") from e

    entries = []
    for line_number, line in enumerate(lines, start=1):
        line = line.strip()
        if line and not line.startswith("#"):
            entries.append((line_number, line))
    return entries


def load_text_lines(path: Optional[str]) -> List[str]:
    """
    Load a newline-delimited list file.

    Blank lines and lines starting with '#' are skipped.

    Args:
        path: File path. If None or empty, no file is read.

    Returns:
        Remaining lines with surrounding whitespace stripped

    Raises:
        InputReadFailure: If the file cannot be read
    """
    if not path:
        return []
    entries = [text for _, text in _read_entries(path)]
    logger.debug(f"Loaded {len(entries)} entries from {path}")
    return entries


def _parse_dimension(value: str, field: str, path: str, line_number: int) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number <= 0:
        raise InputReadFailure(
            f"{path}:{line_number}: {field} must be a positive integer, got {value!r}"
        )
    return number


def load_ai_credits(path: Optional[str]) -> List[AICredit]:
    """
    Load pipe-delimited AI-credit annotations.

    Each entry has the form ``name|image-path|alt-text|title-text|width|height``.

    Raises:
        InputReadFailure: If the file cannot be read or an entry is malformed
    """
    if not path:
        return []

    credits = []
    for line_number, entry in _read_entries(path):
        fields = [field.strip() for field in entry.split("|")]
        if len(fields) != len(AI_CREDIT_FIELDS):
            raise InputReadFailure(
                f"{path}:{line_number}: expected {len(AI_CREDIT_FIELDS)} '|'-separated fields "
                f"({'|'.join(AI_CREDIT_FIELDS)}), got {len(fields)}"
            )
        name, image_path, alt_text, title_text, width, height = fields
        if not name or not image_path:
            raise InputReadFailure(f"{path}:{line_number}: name and image path are required")

        credits.append(AICredit(
            name=name,
            image_path=image_path,
            alt_text=alt_text,
            title_text=title_text,
            width=_parse_dimension(width, "width", path, line_number),
            height=_parse_dimension(height, "height", path, line_number),
        ))

    logger.debug(f"Loaded {len(credits)} AI credits from {path}")
    return credits
