"""Sample xdot drawing attributes.

Provides builders that return ready-to-parse ``_draw_``/``_ldraw_`` strings
for common node, edge and label shapes, plus a handful of attribute values
captured from real Graphviz output.  Useful for tests and quick benchmarks
without requiring external .xdot files.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from xdotdraw.xdot.operations import Align


def encode_payload(text: str, encoding: str = "utf-8") -> str:
    """Encode *text* as a length-prefixed payload ``"<n> -<text>"``.

    The length is a byte count in *encoding*, as Graphviz writes it.
    """
    return f"{len(text.encode(encoding))} -{text}"


def _format_points(points: Sequence[tuple[int, int]]) -> str:
    coords = " ".join(f"{int(x)} {int(y)}" for x, y in points)
    return f"{len(points)} {coords}"


def style_xdot(*styles: str) -> str:
    """Generate a Style operation for the given style tokens."""
    return f"S {encode_payload(','.join(styles))} "


def ellipse_node_xdot(
    x: int,
    y: int,
    rx: float,
    ry: float,
    fill_color: str = "lightgrey",
    pen_color: str = "black",
    filled: bool = True,
) -> str:
    """Generate the ``_draw_`` attribute of an ellipse-shaped node.

    Parameters
    ----------
    x, y:
        Centre of the ellipse.
    rx, ry:
        Horizontal and vertical radii.
    fill_color, pen_color:
        Colour names or ``#rrggbb`` values.
    filled:
        Emit a filled ellipse (``E``) preceded by a ``filled`` style,
        otherwise an outline (``e``).

    Returns
    -------
    Drawing attribute string.
    """
    parts = []
    if filled:
        parts.append(style_xdot("filled"))
    parts.append(f"c {encode_payload(pen_color)} ")
    if filled:
        parts.append(f"C {encode_payload(fill_color)} ")
        parts.append(f"E {x} {y} {rx:g} {ry:g} ")
    else:
        parts.append(f"e {x} {y} {rx:g} {ry:g} ")
    return "".join(parts)


def box_node_xdot(
    x: int,
    y: int,
    width: int,
    height: int,
    fill_color: str = "white",
    pen_color: str = "black",
    filled: bool = True,
) -> str:
    """Generate the ``_draw_`` attribute of a box-shaped node.

    The box is centred on (*x*, *y*); corners are listed clockwise from the
    lower left, as dot emits them.
    """
    hw, hh = width // 2, height // 2
    corners = [
        (x - hw, y - hh),
        (x - hw, y + hh),
        (x + hw, y + hh),
        (x + hw, y - hh),
    ]
    parts = []
    if filled:
        parts.append(style_xdot("filled"))
    parts.append(f"c {encode_payload(pen_color)} ")
    if filled:
        parts.append(f"C {encode_payload(fill_color)} ")
        parts.append(f"P {_format_points(corners)} ")
    else:
        parts.append(f"p {_format_points(corners)} ")
    return "".join(parts)


def label_xdot(
    x: int,
    y: int,
    text: str,
    font_name: str = "Times-Roman",
    font_size: float = 14.0,
    color: str = "black",
    align: Align = Align.CENTER,
    width: float | None = None,
) -> str:
    """Generate the ``_ldraw_`` attribute of a text label.

    *width* defaults to a rough estimate of half the font size per
    character.
    """
    if width is None:
        width = len(text) * font_size * 0.5
    return (
        f"F {font_size:f} {encode_payload(font_name)} "
        f"c {encode_payload(color)} "
        f"T {x} {y} {align.value} {width:g} {encode_payload(text)} "
    )


def _arrowhead(
    tail: tuple[int, int], tip: tuple[int, int], length: float = 10.0
) -> list[tuple[int, int]]:
    """Triangle with its apex *length* beyond *tip* along the tail->tip direction."""
    dx = tip[0] - tail[0]
    dy = tip[1] - tail[1]
    norm = math.hypot(dx, dy) or 1.0
    ux, uy = dx / norm, dy / norm
    # Half-width of the arrow base
    half = length / 3.0
    apex = (round(tip[0] + ux * length), round(tip[1] + uy * length))
    left = (round(tip[0] - uy * half), round(tip[1] + ux * half))
    right = (round(tip[0] + uy * half), round(tip[1] - ux * half))
    return [left, apex, right]


def edge_xdot(
    points: Sequence[tuple[int, int]],
    color: str = "black",
    arrowhead: bool = True,
) -> str:
    """Generate the ``_draw_`` (and arrowhead ``_hdraw_``) text of an edge.

    *points* are B-spline control points and must number 3k+1 (k >= 1).
    """
    if len(points) < 4 or (len(points) - 1) % 3 != 0:
        raise ValueError(
            f"B-spline needs 3k+1 control points, got {len(points)}"
        )
    pen = encode_payload(color)
    parts = [style_xdot("solid"), f"c {pen} ", f"B {_format_points(points)} "]
    if arrowhead:
        head = _arrowhead(points[-2], points[-1])
        parts.append(style_xdot("solid"))
        parts.append(f"c {pen} C {pen} P {_format_points(head)} ")
    return "".join(parts)


# Attribute values captured from dot output.  The last two contain the
# backslash-newline continuations dot inserts into long lines.
SAMPLE_DRAWINGS: tuple[str, ...] = (
    "c 5 -white C 5 -white P 4 0 0 0 409 228 409 228 0 ",
    "S 6 -filled c 9 -lightgrey C 9 -lightgrey P 4 8 72 8 365 101 365 101 72 ",
    "S 6 -filled c 5 -white C 5 -white E 65 314 27 18 ",
    "F 14.000000 11 -Times-Roman c 5 -black T 39 109 0 35 4 -LR_0 ",
    "S 5 -solid S 15 -setlinewidth(1) c 5 -black C 5 -black P 3 69 270 65 260 62 270 ",
    "S 6 -filled c 7 -salmon2 C 7 -salmon2 P 9 865 1177 877 1193 841 1200 760 1192 "
    "695 1178 700 1167 756 1161 810 1160 841 1165 ",
    "F 14.000000 17 -Helvetica-Outline c 5 -black T 529 1005 0 65 9 -Mini Unix ",
    "S 6 -filled c 11 -greenyellow C 11 -greenyellow P 10 1254 819 1263 834 1247 843 "
    "1197 841 1137 830 1110 817 1131 808 1177 805 121\\\n6 804 1238 809 ",
    "S 6 -filled c 11 -greenyellow C 11 -greenyellow P 10 255 282 264 297 248 306 "
    "198 304 138 293 111 280 132 271 178 268 217 267 239\\\n 272 ",
)
