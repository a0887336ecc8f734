"""DrawConfig — defaults for parsing and replaying xdot drawing attributes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DrawConfig:
    """Settings shared by the xdot parser and the draw-state interpreter."""

    # --- Initial draw state ---
    default_fill_color: str = "white"
    default_pen_color: str = "black"
    default_font_size: float = 0.0  # points
    default_font_name: str = ""

    # --- Parsing ---
    # Payload lengths are byte counts in this encoding (Graphviz writes UTF-8)
    payload_encoding: str = "utf-8"

    # --- Interpretation ---
    # Fold Style operations into the draw state (off: Style never touches it)
    apply_style: bool = False


# Singleton default config
DEFAULT_CONFIG = DrawConfig()
