"""Hex color parsing: canonical 6-digit form and integer channels."""

from __future__ import annotations

import logging
import re
from typing import Any

from wcagcontrast.models import RGB, Invalid, InvalidReason

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{3}|[0-9a-fA-F]{6}")


def normalize_hex(value: Any) -> str | Invalid:
    """Return *value* as 6 lowercase hex digits without ``#``.

    Surrounding whitespace and one leading ``#`` are ignored. Shorthand
    ``abc`` expands to ``aabbcc``. Anything else yields :class:`Invalid`.
    """
    if not isinstance(value, str):
        logger.debug("Rejected non-string color %r", value)
        return Invalid(reason=InvalidReason.NOT_A_STRING, value=repr(value))

    hex_str = value.strip()
    if hex_str.startswith("#"):
        hex_str = hex_str[1:]

    if not _HEX_PATTERN.fullmatch(hex_str):
        logger.debug("Rejected malformed hex color %r", value)
        return Invalid(reason=InvalidReason.MALFORMED_HEX, value=repr(value))

    if len(hex_str) == 3:
        hex_str = "".join(ch * 2 for ch in hex_str)
    return hex_str.lower()


def hex_to_rgb(value: Any) -> RGB | Invalid:
    """Decode a hex color into an ``(r, g, b)`` tuple, each 0-255."""
    normalized = normalize_hex(value)
    if isinstance(normalized, Invalid):
        return normalized
    return (
        int(normalized[0:2], 16),
        int(normalized[2:4], 16),
        int(normalized[4:6], 16),
    )
