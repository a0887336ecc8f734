"""Draw-state interpreter.

Replays a parsed operation list through a caller-supplied visitor while
tracking the cumulative drawing state (fill colour, pen colour, font and
style) that xdot operations inherit from the ones before them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from xdotdraw.config import DEFAULT_CONFIG, DrawConfig
from xdotdraw.xdot.operations import (
    DrawingOperation,
    FillColor,
    Font,
    PenColor,
    Style,
    StyleItem,
)

logger = logging.getLogger(__name__)


@dataclass
class DrawState:
    """Mutable drawing context for one interpretation pass."""

    fill_color: str = "white"
    pen_color: str = "black"
    font: tuple[float, str] = (0.0, "")  # (size, name)
    style: list[StyleItem] = field(default_factory=list)

    @classmethod
    def from_config(cls, config: DrawConfig = DEFAULT_CONFIG) -> DrawState:
        return cls(
            fill_color=config.default_fill_color,
            pen_color=config.default_pen_color,
            font=(config.default_font_size, config.default_font_name),
        )

    def set_fill_color(self, color: str) -> None:
        self.fill_color = color

    def set_pen_color(self, color: str) -> None:
        self.pen_color = color

    def set_font(self, font: tuple[float, str]) -> None:
        self.font = font

    def set_style(self, style: Iterable[StyleItem]) -> None:
        self.style = list(style)

    def copy(self) -> DrawState:
        """Return an independent snapshot of this state."""
        return DrawState(
            fill_color=self.fill_color,
            pen_color=self.pen_color,
            font=self.font,
            style=list(self.style),
        )

    def reset(self, config: DrawConfig = DEFAULT_CONFIG) -> None:
        """Reset state to the configured defaults."""
        self.fill_color = config.default_fill_color
        self.pen_color = config.default_pen_color
        self.font = (config.default_font_size, config.default_font_name)
        self.style = []


Visitor = Callable[[DrawState, DrawingOperation], None]


class DrawInterpreter:
    """Stateful interpreter that walks an operation list and calls a visitor.

    FillColor, PenColor and Font update the state *before* the visitor sees
    them.  Every other operation, Style included, passes the state through
    unchanged unless ``config.apply_style`` is set.
    """

    def __init__(self, config: DrawConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.state = DrawState.from_config(config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def apply(self, op: DrawingOperation) -> None:
        """Fold the state effect of a single operation into ``self.state``."""
        handler = self._DISPATCH.get(type(op))
        if handler is not None:
            handler(self, op)

    def interpret(self, ops: Iterable[DrawingOperation], visit: Visitor) -> None:
        """Replay *ops* in order, calling ``visit(state, op)`` once per operation.

        The pass starts from a fresh default state.  The visitor receives the
        live state object, which later operations keep mutating; use
        ``DrawState.copy`` (or ``collect``) to keep a snapshot.  Exceptions
        raised by the visitor propagate and stop the pass.
        """
        self.reset()
        count = 0
        for op in ops:
            self.apply(op)
            visit(self.state, op)
            count += 1
        logger.debug("Interpreted %d drawing operations", count)

    def collect(
        self, ops: Iterable[DrawingOperation]
    ) -> list[tuple[DrawState, DrawingOperation]]:
        """Interpret *ops* and return a state snapshot paired with each operation."""
        pairs: list[tuple[DrawState, DrawingOperation]] = []
        self.interpret(ops, lambda state, op: pairs.append((state.copy(), op)))
        return pairs

    def reset(self) -> None:
        """Start over from a fresh default state."""
        self.state = DrawState.from_config(self.config)

    # ------------------------------------------------------------------
    # State handlers (private)
    # ------------------------------------------------------------------

    def _handle_fill_color(self, op: FillColor) -> None:
        self.state.set_fill_color(op.color)

    def _handle_pen_color(self, op: PenColor) -> None:
        self.state.set_pen_color(op.color)

    def _handle_font(self, op: Font) -> None:
        self.state.set_font((op.size, op.name))

    def _handle_style(self, op: Style) -> None:
        if self.config.apply_style:
            self.state.set_style(op.attrs)

    # ------------------------------------------------------------------
    # Dispatch table
    # ------------------------------------------------------------------

    _DISPATCH: dict[type, callable] = {
        FillColor: _handle_fill_color,
        PenColor: _handle_pen_color,
        Font: _handle_font,
        Style: _handle_style,
    }


def interpret(
    ops: Iterable[DrawingOperation],
    visit: Visitor,
    config: DrawConfig = DEFAULT_CONFIG,
) -> None:
    """Replay *ops* through *visit* with a fresh interpreter and draw state."""
    DrawInterpreter(config).interpret(ops, visit)
