"""Drawing operations decoded from xdot ``_draw_`` attributes.

Every operation is an immutable dataclass tagged with the one-letter code
that introduces it in the attribute string.  ``DrawingOperation`` is the
closed union of all twelve variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, NamedTuple, Union


class Position(NamedTuple):
    """A point in device-space coordinates."""

    x: int
    y: int


class Align(Enum):
    """Horizontal anchor of a text operation, keyed by its xdot code."""

    LEFT = -1
    CENTER = 0
    RIGHT = 1

    @classmethod
    def from_code(cls, code: int) -> Align:
        """Return the alignment for anchor *code* (-1, 0 or 1).

        Raises ``ValueError`` for any other code.
        """
        return cls(code)


class StyleAttr(Enum):
    """Known style keywords."""

    FILLED = "filled"
    INVISIBLE = "invisible"
    DIAGONALS = "diagonals"
    ROUNDED = "rounded"
    DASHED = "dashed"
    DOTTED = "dotted"
    SOLID = "solid"
    BOLD = "bold"


@dataclass(frozen=True)
class StyleString:
    """A style token that is not one of the known keywords."""

    raw: str


StyleItem = Union[StyleAttr, StyleString]


# Exact, case-sensitive token table.  "blod" is the spelling the xdot
# reader has always matched for BOLD, so "bold" falls through to StyleString.
STYLE_TOKENS: dict[str, StyleAttr] = {
    "filled": StyleAttr.FILLED,
    "invisible": StyleAttr.INVISIBLE,
    "diagonals": StyleAttr.DIAGONALS,
    "rounded": StyleAttr.ROUNDED,
    "dashed": StyleAttr.DASHED,
    "dotted": StyleAttr.DOTTED,
    "solid": StyleAttr.SOLID,
    "blod": StyleAttr.BOLD,
}


def read_style(token: str) -> StyleItem:
    """Map a single style token to a StyleAttr, or wrap it as StyleString."""
    attr = STYLE_TOKENS.get(token)
    if attr is None:
        return StyleString(token)
    return attr


def split_styles(payload: str) -> tuple[StyleItem, ...]:
    """Split a comma-separated style payload into style items.

    An empty payload yields no items.  Otherwise every comma separates a
    token, so ``"a,,b"`` gives three items, the middle one ``StyleString("")``.
    """
    if not payload:
        return ()
    return tuple(read_style(token) for token in payload.split(","))


class OpTag(str, Enum):
    """Operation codes recognised at the start of each xdot operation."""

    FILLED_ELLIPSE = "E"
    UNFILLED_ELLIPSE = "e"
    FILLED_POLYGON = "P"
    UNFILLED_POLYGON = "p"
    POLYLINE = "L"
    BSPLINE = "B"
    FILLED_BSPLINE = "b"
    TEXT = "T"
    FILL_COLOR = "C"
    PEN_COLOR = "c"
    FONT = "F"
    STYLE = "S"


# ------------------------------------------------------------------
# Shapes
# ------------------------------------------------------------------


@dataclass(frozen=True)
class FilledEllipse:
    tag: ClassVar[OpTag] = OpTag.FILLED_ELLIPSE

    pos: Position
    width: float
    height: float


@dataclass(frozen=True)
class UnfilledEllipse:
    tag: ClassVar[OpTag] = OpTag.UNFILLED_ELLIPSE

    pos: Position
    width: float
    height: float


@dataclass(frozen=True)
class FilledPolygon:
    tag: ClassVar[OpTag] = OpTag.FILLED_POLYGON

    points: tuple[Position, ...]


@dataclass(frozen=True)
class UnfilledPolygon:
    tag: ClassVar[OpTag] = OpTag.UNFILLED_POLYGON

    points: tuple[Position, ...]


@dataclass(frozen=True)
class Polyline:
    tag: ClassVar[OpTag] = OpTag.POLYLINE

    points: tuple[Position, ...]


@dataclass(frozen=True)
class Bspline:
    tag: ClassVar[OpTag] = OpTag.BSPLINE

    points: tuple[Position, ...]


@dataclass(frozen=True)
class FilledBspline:
    tag: ClassVar[OpTag] = OpTag.FILLED_BSPLINE

    points: tuple[Position, ...]


@dataclass(frozen=True)
class Text:
    """A text label anchored at *pos*; *width* is the layout's expected width."""

    tag: ClassVar[OpTag] = OpTag.TEXT

    pos: Position
    align: Align
    width: float
    text: str


# ------------------------------------------------------------------
# State-setting directives
# ------------------------------------------------------------------


@dataclass(frozen=True)
class FillColor:
    tag: ClassVar[OpTag] = OpTag.FILL_COLOR

    color: str


@dataclass(frozen=True)
class PenColor:
    tag: ClassVar[OpTag] = OpTag.PEN_COLOR

    color: str


@dataclass(frozen=True)
class Font:
    tag: ClassVar[OpTag] = OpTag.FONT

    size: float
    name: str


@dataclass(frozen=True)
class Style:
    tag: ClassVar[OpTag] = OpTag.STYLE

    attrs: tuple[StyleItem, ...]


DrawingOperation = Union[
    FilledEllipse,
    UnfilledEllipse,
    FilledPolygon,
    UnfilledPolygon,
    Polyline,
    Bspline,
    FilledBspline,
    Text,
    FillColor,
    PenColor,
    Font,
    Style,
]

# Parser output: operations in source order
OperationList = tuple[DrawingOperation, ...]

POINT_LIST_OPERATIONS = (
    FilledPolygon,
    UnfilledPolygon,
    Polyline,
    Bspline,
    FilledBspline,
)
ELLIPSE_OPERATIONS = (FilledEllipse, UnfilledEllipse)
STATE_OPERATIONS = (FillColor, PenColor, Font)
