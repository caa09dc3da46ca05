"""Typed decoding of awful.remote reply text."""

import re

from .errors import DecodeError, DecodeStep

# Largest value of the unsigned 32-bit integers awesome hands out
UNSIGNED_MAX = 2**32 - 1

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+", re.ASCII)


def decode_text(raw: str) -> str:
    """Opaque string replies pass through unchanged."""
    return raw


def decode_unsigned(raw: str, step: DecodeStep) -> int:
    """Parse reply text as a base-10 unsigned 32-bit integer.

    Args:
        raw: Reply text
        step: Parse step reported if conversion fails

    Returns:
        Parsed integer

    Raises:
        DecodeError: If the text is not a number or is out of range
    """
    if not _UNSIGNED_PATTERN.fullmatch(raw):
        raise DecodeError(step, raw)

    value = int(raw)
    if value > UNSIGNED_MAX:
        raise DecodeError(step, raw)
    return value
