"""Contrast ratio between two hex colors and its WCAG classification."""

from __future__ import annotations

import logging
from typing import Any

from wcagcontrast.hexcolor import hex_to_rgb
from wcagcontrast.models import (
    ContrastResult,
    Invalid,
    Lighter,
    LuminancePair,
    WcagPasses,
    WcagVerdict,
)
from wcagcontrast.utils.contrast import relative_luminance, round_half_up

logger = logging.getLogger(__name__)

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

_LUMINANCE_OFFSET = 0.05


def _luminance_of(value: Any, argument: str) -> float | Invalid:
    lum = relative_luminance(hex_to_rgb(value))
    if isinstance(lum, Invalid):
        return lum.for_argument(argument)
    return lum


def contrast(hex_a: Any, hex_b: Any) -> ContrastResult | Invalid:
    """Compute the WCAG contrast ratio between two hex colors.

    ``lighter_is`` refers to argument position: ``foreground`` is *hex_a*,
    and wins ties.
    """
    lum_a = _luminance_of(hex_a, Lighter.FOREGROUND.value)
    if isinstance(lum_a, Invalid):
        return lum_a
    lum_b = _luminance_of(hex_b, Lighter.BACKGROUND.value)
    if isinstance(lum_b, Invalid):
        return lum_b

    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    ratio = (lighter + _LUMINANCE_OFFSET) / (darker + _LUMINANCE_OFFSET)

    return ContrastResult(
        ratio=round_half_up(ratio, 2),
        lum_a=round_half_up(lum_a, 4),
        lum_b=round_half_up(lum_b, 4),
        lighter_is=Lighter.FOREGROUND if lum_a >= lum_b else Lighter.BACKGROUND,
    )


def classify_ratio(ratio: float) -> WcagPasses:
    """Apply the WCAG thresholds to an already rounded ratio.

    AA normal and AAA large are strict (``>``), the rest inclusive.
    """
    return WcagPasses(
        aa_normal=ratio > AA_NORMAL,
        aa_large=ratio >= AA_LARGE,
        aaa_normal=ratio >= AAA_NORMAL,
        aaa_large=ratio > AAA_LARGE,
    )


def evaluate(hex_foreground: Any, hex_background: Any) -> WcagVerdict | Invalid:
    """Evaluate a foreground/background pair against WCAG AA and AAA.

    Usage::

        verdict = evaluate("#767676", "#fff")
        if verdict:
            print(verdict.ratio, verdict.passes.aa_normal)
    """
    result = contrast(hex_foreground, hex_background)
    if isinstance(result, Invalid):
        logger.debug("Cannot evaluate contrast: %s", result.message)
        return result

    return WcagVerdict(
        ratio=result.ratio,
        passes=classify_ratio(result.ratio),
        lum=LuminancePair(fg=result.lum_a, bg=result.lum_b, lighter_is=result.lighter_is),
    )
