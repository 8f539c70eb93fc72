"""WCAG 2.0 contrast ratios between two hex colors."""

from __future__ import annotations

from wcagcontrast.evaluator import classify_ratio, contrast, evaluate
from wcagcontrast.hexcolor import hex_to_rgb, normalize_hex
from wcagcontrast.models import (
    ContrastResult,
    Invalid,
    InvalidReason,
    Lighter,
    LuminancePair,
    WcagPasses,
    WcagVerdict,
)
from wcagcontrast.utils.contrast import relative_luminance, srgb_channel_to_linear

__version__ = "0.1.0"

__all__ = [
    "ContrastResult",
    "Invalid",
    "InvalidReason",
    "Lighter",
    "LuminancePair",
    "WcagPasses",
    "WcagVerdict",
    "classify_ratio",
    "contrast",
    "evaluate",
    "hex_to_rgb",
    "normalize_hex",
    "relative_luminance",
    "srgb_channel_to_linear",
]
