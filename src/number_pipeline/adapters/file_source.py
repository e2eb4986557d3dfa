"""
File Number Source.

Reads whitespace-separated integers from a text file. Reading stops at the
first token that is not an integer; numbers before it are kept.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional

from number_pipeline.domain.value_objects import ReadResult

logger = logging.getLogger(__name__)

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def _to_int(token: str) -> Optional[int]:
    """Integer value of ``token``, or None if it is not a readable integer."""
    if not _INTEGER_TOKEN.fullmatch(token):
        return None
    try:
        return int(token)
    except ValueError:
        # Longer than the interpreter's int conversion limit
        return None


class FileNumberSource:
    """Number source backed by text files."""

    def __init__(self, encoding: str = "utf-8") -> None:
        """
        Initialize file source.

        Args:
            encoding: Text encoding of the input files
        """
        self._encoding = encoding

    def read(self, identifier: str) -> ReadResult:
        """Read integers from the file at ``identifier``."""
        path = Path(identifier)
        try:
            with open(path, encoding=self._encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            reason = getattr(e, "strerror", None) or str(e)
            logger.warning(f"Cannot read numbers from {path}: {reason}")
            return ReadResult.unavailable(identifier, reason)

        numbers = self._parse(text, identifier)
        logger.debug(f"Read {len(numbers)} numbers from {path}")
        return ReadResult(numbers=numbers)

    def _parse(self, text: str, identifier: str) -> List[int]:
        """Parse tokens up to the first non-integer."""
        numbers: List[int] = []
        for token in text.split():
            value = _to_int(token)
            if value is None:
                shown = token if len(token) <= 40 else f"{token[:37]}..."
                logger.warning(
                    f"Stopped reading {identifier} at non-integer token '{shown}' "
                    f"after {len(numbers)} numbers"
                )
                break
            numbers.append(value)
        return numbers
