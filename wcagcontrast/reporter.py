"""Report generation — JSON and Markdown output."""

from __future__ import annotations

import json

from wcagcontrast.hexcolor import normalize_hex
from wcagcontrast.models import WcagVerdict

LEVEL_LABELS = {
    "AA_normal": "AA (normal text)",
    "AA_large": "AA (large text)",
    "AAA_normal": "AAA (normal text)",
    "AAA_large": "AAA (large text)",
}


def _canonical(color: str) -> str:
    return f"#{normalize_hex(color)}"


def format_json_report(foreground: str, background: str, verdict: WcagVerdict) -> str:
    """Return a verdict as indented JSON, including both input colors."""
    data = {
        "foreground": _canonical(foreground),
        "background": _canonical(background),
        **verdict.as_dict(),
    }
    return json.dumps(data, indent=2)


def format_markdown_report(foreground: str, background: str, verdict: WcagVerdict) -> str:
    """Return a verdict as a Markdown snippet."""
    lines: list[str] = [
        f"# Contrast: `{_canonical(foreground)}` on `{_canonical(background)}`",
        "",
        f"- **Ratio:** {verdict.ratio:.2f}:1",
        f"- **Luminance:** fg {verdict.lum.fg:.4f}, bg {verdict.lum.bg:.4f} "
        f"(lighter: {verdict.lum.lighter_is.value})",
        "",
        "## WCAG levels",
        "",
    ]
    for key, passed in verdict.passes.as_dict().items():
        marker = "PASS" if passed else "FAIL"
        lines.append(f"- **[{marker}]** {LEVEL_LABELS[key]}")

    lines.append("")
    return "\n".join(lines)
