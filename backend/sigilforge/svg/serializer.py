"""Write SVG markup for a sigil's path data.

Coordinates stay vector: each path becomes one ``<polyline>`` scaled from
the unit square to a ``size``×``size`` viewBox.
"""

from __future__ import annotations

import re
from xml.sax.saxutils import escape

from sigilforge.engine.context import SigilPaths

HEX_COLOR = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")

DEFAULT_STROKE = "#6366f1"
DEFAULT_BACKGROUND = "#0f172a"
MIN_STROKE_WIDTH = 1
MAX_STROKE_WIDTH = 10


def validate_style(stroke_color: str, stroke_width: float, background_color: str) -> None:
    """Raise ValueError for colors that are not #rgb/#rrggbb or a width outside 1-10."""
    for name, color in (("stroke color", stroke_color), ("background color", background_color)):
        if not HEX_COLOR.fullmatch(color):
            raise ValueError(f"Invalid hex color format for {name}: {color!r}")
    if not MIN_STROKE_WIDTH <= stroke_width <= MAX_STROKE_WIDTH:
        raise ValueError(
            f"Stroke width must be between {MIN_STROKE_WIDTH} and {MAX_STROKE_WIDTH}, got {stroke_width}"
        )


def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def points_attr(path: list[tuple[float, float]], size: float) -> str:
    return " ".join(f"{_fmt(x * size)},{_fmt(y * size)}" for x, y in path)


def serialize_sigil(
    paths: SigilPaths,
    size: int = 512,
    stroke_color: str = DEFAULT_STROKE,
    stroke_width: float = 3,
    background_color: str = DEFAULT_BACKGROUND,
    title: str = "",
) -> str:
    """Generate SVG markup for the paths; single-point paths are skipped."""
    validate_style(stroke_color, stroke_width, background_color)

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {size} {size}" width="{size}" height="{size}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]
    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    lines.append(f'  <rect width="{size}" height="{size}" fill="{background_color}" />')
    lines.append(
        f'  <g fill="none" stroke="{stroke_color}" stroke-width="{_fmt(stroke_width)}"'
        f' stroke-linecap="round" stroke-linejoin="round">'
    )
    for path in paths:
        if len(path) < 2:
            continue
        lines.append(f'    <polyline points="{points_attr(path, size)}" />')
    lines.append("  </g>")

    lines.append("</svg>")
    return "\n".join(lines)
