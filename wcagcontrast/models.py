"""Value types returned by the contrast pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

RGB = tuple[int, int, int]


class InvalidReason(str, enum.Enum):
    """Why an input color was rejected."""

    NOT_A_STRING = "not_a_string"
    MALFORMED_HEX = "malformed_hex"


class Lighter(str, enum.Enum):
    """Which of the two positional arguments has the higher luminance."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"


@dataclass(frozen=True)
class Invalid:
    """Failed outcome of any pipeline stage.

    Returned instead of raising. Falsy, so ``if not result:`` works.
    """

    reason: InvalidReason
    value: str = ""  # repr() of the rejected input
    argument: str | None = None  # "foreground" / "background" when part of a pair

    def __bool__(self) -> bool:
        return False

    def for_argument(self, argument: str) -> Invalid:
        """Return a copy labelled with the argument position that failed."""
        return Invalid(reason=self.reason, value=self.value, argument=argument)

    @property
    def message(self) -> str:
        what = "not a string" if self.reason == InvalidReason.NOT_A_STRING else "not a 3 or 6 digit hex color"
        if self.argument:
            return f"{self.argument} {self.value} is {what}"
        return f"{self.value} is {what}"


@dataclass(frozen=True)
class ContrastResult:
    """Ratio and luminances for an ordered pair of colors."""

    ratio: float  # 2 decimal places
    lum_a: float  # 4 decimal places
    lum_b: float
    lighter_is: Lighter


@dataclass(frozen=True)
class WcagPasses:
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool

    def as_dict(self) -> dict[str, bool]:
        return {
            "AA_normal": self.aa_normal,
            "AA_large": self.aa_large,
            "AAA_normal": self.aaa_normal,
            "AAA_large": self.aaa_large,
        }


@dataclass(frozen=True)
class LuminancePair:
    fg: float
    bg: float
    lighter_is: Lighter


@dataclass(frozen=True)
class WcagVerdict:
    """Contrast ratio of a foreground/background pair and its WCAG pass flags."""

    ratio: float
    passes: WcagPasses
    lum: LuminancePair

    def as_dict(self) -> dict[str, Any]:
        """Plain nested dict, suitable for JSON output."""
        return {
            "ratio": self.ratio,
            "passes": self.passes.as_dict(),
            "lum": {
                "fg": self.lum.fg,
                "bg": self.lum.bg,
                "lighterIs": self.lum.lighter_is.value,
            },
        }
