"""WCAG 2.0 relative luminance utilities.

Implements the relative luminance definition from WCAG 2.0 (G17/G18),
including its 0.03928 linear-segment threshold.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from wcagcontrast.models import RGB, Invalid

LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722

_LINEAR_THRESHOLD = 0.03928


def srgb_channel_to_linear(c255: int) -> float:
    """Convert an sRGB channel (0-255) to linear light (0-1)."""
    c = c255 / 255
    if c <= _LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB | Invalid) -> float | Invalid:
    """Compute relative luminance for an ``(r, g, b)`` tuple (0-255 per channel).

    L = 0.2126*R + 0.7152*G + 0.0722*B over linearized channels.
    An :class:`Invalid` input is passed straight through.
    """
    if isinstance(rgb, Invalid):
        return rgb
    r, g, b = rgb
    return (
        LUMA_R * srgb_channel_to_linear(r)
        + LUMA_G * srgb_channel_to_linear(g)
        + LUMA_B * srgb_channel_to_linear(b)
    )


def round_half_up(value: float, places: int) -> float:
    """Round the exact binary value of *value*, ties away from zero.

    Unlike :func:`round`, an exact tie such as ``0.125`` to 2 places gives
    ``0.13``.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
