"""xdot drawing-attribute tokenizer and parser.

Parses the value of an xdot ``_draw_``/``_ldraw_``-style attribute into an
ordered tuple of drawing operations for downstream replay by the
draw-state interpreter.

The grammar is whitespace separated, except for string payloads, which are
length prefixed (``<n> -<n raw bytes>``) and consumed verbatim.
"""

from __future__ import annotations

import logging
import re

from xdotdraw.config import DEFAULT_CONFIG, DrawConfig
from xdotdraw.xdot.operations import (
    Align,
    Bspline,
    DrawingOperation,
    FillColor,
    FilledBspline,
    FilledEllipse,
    FilledPolygon,
    Font,
    OperationList,
    OpTag,
    PenColor,
    Polyline,
    Position,
    Style,
    Text,
    UnfilledEllipse,
    UnfilledPolygon,
    split_styles,
)

logger = logging.getLogger(__name__)

# Byte values that separate words
_SPACES = frozenset(b" \t\n")
_PAYLOAD_SEPARATOR = ord("-")

# Numerals are plain ASCII; no underscores or other Unicode digits
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class MalformedOperandError(ValueError):
    """A recognised operation tag is followed by operands that break its grammar."""

    def __init__(self, message: str, offset: int = 0) -> None:
        self.message = message
        self.offset = offset
        super().__init__(f"{message} (at byte {offset})")


class NoOperation(Exception):
    """No operation tag at the current position (absent or unrecognised).

    Used only as a signal inside the parse loop; never escapes ``parse``.
    """

    def __init__(self, word: str | None = None) -> None:
        self.word = word
        super().__init__(word)


# ------------------------------------------------------------------ #
# Preprocessing
# ------------------------------------------------------------------ #


def normalize(raw: str | bytes) -> str | bytes:
    """Remove every backslash that immediately precedes a newline.

    Graphviz sometimes wraps long attribute values with such continuations,
    which would otherwise split a token in two.  Nothing else is touched.
    """
    if isinstance(raw, bytes):
        return raw.replace(b"\\\n", b"")
    return raw.replace("\\\n", "")


# ------------------------------------------------------------------ #
# Scanner
# ------------------------------------------------------------------ #


class Scanner:
    """Cursor over an encoded attribute string.

    All offsets are byte offsets into *data*, which is never modified.
    """

    def __init__(self, data: bytes, encoding: str = "utf-8") -> None:
        self._data = data
        self._encoding = encoding
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self._data)

    def skip_spaces(self) -> None:
        data = self._data
        while self.pos < len(data) and data[self.pos] in _SPACES:
            self.pos += 1

    def next_word(self) -> str | None:
        """Consume the next run of non-space bytes, or return None at end of input."""
        self.skip_spaces()
        data = self._data
        start = self.pos
        while self.pos < len(data) and data[self.pos] not in _SPACES:
            self.pos += 1
        if self.pos == start:
            return None
        return data[start:self.pos].decode(self._encoding, errors="replace")

    def next_int(self) -> int:
        self.skip_spaces()
        offset = self.pos
        word = self.next_word()
        if word is None or not _INT_RE.fullmatch(word):
            raise MalformedOperandError("Cannot parse int", offset)
        return int(word)

    def next_float(self) -> float:
        self.skip_spaces()
        offset = self.pos
        word = self.next_word()
        if word is None or not _FLOAT_RE.fullmatch(word):
            raise MalformedOperandError("Cannot parse float", offset)
        return float(word)

    def next_position(self) -> Position:
        self.skip_spaces()
        offset = self.pos
        try:
            x = self.next_int()
            y = self.next_int()
        except MalformedOperandError as exc:
            raise MalformedOperandError(
                "Cannot parse point in position", offset
            ) from exc
        return Position(x, y)

    def next_points(self) -> tuple[Position, ...]:
        """Read a point count followed by exactly that many positions."""
        self.skip_spaces()
        offset = self.pos
        count = self.next_int()
        if count < 0:
            raise MalformedOperandError("Cannot parse point count", offset)
        points: list[Position] = []
        # Each read advances the shared cursor, so order matters
        for _ in range(count):
            points.append(self.next_position())
        return tuple(points)

    def next_payload(self) -> str:
        """Read a length-prefixed payload ``<n> -<n bytes>``.

        The *n* bytes after the ``-`` are returned verbatim (spaces, digits
        and tag letters included) and the cursor moves past exactly *n* bytes.
        """
        self.skip_spaces()
        offset = self.pos
        try:
            length = self.next_int()
        except MalformedOperandError as exc:
            raise MalformedOperandError("Cannot parse bytes", offset) from exc
        self.skip_spaces()
        if self.at_end or self._data[self.pos] != _PAYLOAD_SEPARATOR:
            raise MalformedOperandError("Cannot parse bytes", self.pos)
        self.pos += 1
        if length < 0 or self.pos + length > len(self._data):
            raise MalformedOperandError("Cannot parse bytes", self.pos)
        chunk = self._data[self.pos:self.pos + length]
        try:
            payload = chunk.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise MalformedOperandError("Cannot parse bytes", self.pos) from exc
        self.pos += length
        return payload


# ------------------------------------------------------------------ #
# Parser
# ------------------------------------------------------------------ #


class XDotParser:
    """Converts xdot drawing attributes into drawing operations.

    The parser only holds configuration; every ``parse`` call scans with its
    own ``Scanner``, so one instance can be shared freely.
    """

    def __init__(self, config: DrawConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, raw: str | bytes) -> OperationList:
        """Parse a complete drawing attribute.

        Parameters
        ----------
        raw:
            Attribute value as found in the xdot file, possibly containing
            backslash-newline continuations.

        Returns
        -------
        Tuple of drawing operations in source order.  Unrecognised tags are
        skipped.

        Raises
        ------
        MalformedOperandError
            If the operands following a recognised tag are invalid.  No
            partial result is returned in that case.
        """
        text = normalize(raw)
        if isinstance(text, str):
            # Characters the encoding cannot represent become "?"
            text = text.encode(self.config.payload_encoding, errors="replace")
        scanner = Scanner(text, self.config.payload_encoding)

        operations: list[DrawingOperation] = []
        while True:
            try:
                operations.append(self.parse_operation(scanner))
            except NoOperation as signal:
                if signal.word is not None:
                    logger.debug(
                        "Skipping unrecognised xdot tag %r before byte %d",
                        signal.word,
                        scanner.pos,
                    )
            if scanner.at_end:
                break

        logger.debug("Parsed %d xdot operations", len(operations))
        return tuple(operations)

    def parse_operation(self, scanner: Scanner) -> DrawingOperation:
        """Parse one operation at the scanner's position.

        Raises ``NoOperation`` when no recognised tag is found there.
        """
        tag = self._read_tag(scanner)
        return self._DISPATCH[tag](self, scanner)

    # ------------------------------------------------------------------
    # Tag recognition
    # ------------------------------------------------------------------

    @staticmethod
    def _read_tag(scanner: Scanner) -> OpTag:
        word = scanner.next_word()
        if word is None:
            raise NoOperation()
        try:
            return OpTag(word)
        except ValueError:
            raise NoOperation(word) from None

    # ------------------------------------------------------------------
    # Operand grammars (private)
    # ------------------------------------------------------------------

    def _parse_filled_ellipse(self, scanner: Scanner) -> FilledEllipse:
        """E pos width height"""
        pos = scanner.next_position()
        width = scanner.next_float()
        height = scanner.next_float()
        return FilledEllipse(pos, width, height)

    def _parse_unfilled_ellipse(self, scanner: Scanner) -> UnfilledEllipse:
        """e pos width height"""
        pos = scanner.next_position()
        width = scanner.next_float()
        height = scanner.next_float()
        return UnfilledEllipse(pos, width, height)

    def _parse_filled_polygon(self, scanner: Scanner) -> FilledPolygon:
        return FilledPolygon(scanner.next_points())

    def _parse_unfilled_polygon(self, scanner: Scanner) -> UnfilledPolygon:
        return UnfilledPolygon(scanner.next_points())

    def _parse_polyline(self, scanner: Scanner) -> Polyline:
        return Polyline(scanner.next_points())

    def _parse_bspline(self, scanner: Scanner) -> Bspline:
        return Bspline(scanner.next_points())

    def _parse_filled_bspline(self, scanner: Scanner) -> FilledBspline:
        return FilledBspline(scanner.next_points())

    def _parse_text(self, scanner: Scanner) -> Text:
        """T pos anchor width payload"""
        pos = scanner.next_position()
        offset = scanner.pos
        code = scanner.next_int()
        try:
            align = Align.from_code(code)
        except ValueError as exc:
            raise MalformedOperandError("Cannot parse anchor", offset) from exc
        width = scanner.next_float()
        text = scanner.next_payload()
        return Text(pos, align, width, text)

    def _parse_fill_color(self, scanner: Scanner) -> FillColor:
        return FillColor(scanner.next_payload())

    def _parse_pen_color(self, scanner: Scanner) -> PenColor:
        return PenColor(scanner.next_payload())

    def _parse_font(self, scanner: Scanner) -> Font:
        """F size payload"""
        size = scanner.next_float()
        name = scanner.next_payload()
        return Font(size, name)

    def _parse_style(self, scanner: Scanner) -> Style:
        return Style(split_styles(scanner.next_payload()))

    # ------------------------------------------------------------------
    # Dispatch table
    # ------------------------------------------------------------------

    _DISPATCH: dict[OpTag, callable] = {
        OpTag.FILLED_ELLIPSE: _parse_filled_ellipse,
        OpTag.UNFILLED_ELLIPSE: _parse_unfilled_ellipse,
        OpTag.FILLED_POLYGON: _parse_filled_polygon,
        OpTag.UNFILLED_POLYGON: _parse_unfilled_polygon,
        OpTag.POLYLINE: _parse_polyline,
        OpTag.BSPLINE: _parse_bspline,
        OpTag.FILLED_BSPLINE: _parse_filled_bspline,
        OpTag.TEXT: _parse_text,
        OpTag.FILL_COLOR: _parse_fill_color,
        OpTag.PEN_COLOR: _parse_pen_color,
        OpTag.FONT: _parse_font,
        OpTag.STYLE: _parse_style,
    }


def parse(raw: str | bytes, config: DrawConfig = DEFAULT_CONFIG) -> OperationList:
    """Parse an xdot drawing attribute with a fresh parser."""
    return XDotParser(config).parse(raw)
