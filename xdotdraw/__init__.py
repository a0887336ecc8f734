from xdotdraw.config import DEFAULT_CONFIG, DrawConfig
from xdotdraw.xdot import (
    DrawInterpreter,
    DrawState,
    MalformedOperandError,
    XDotParser,
    interpret,
    normalize,
    parse,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DrawConfig",
    "DrawInterpreter",
    "DrawState",
    "MalformedOperandError",
    "XDotParser",
    "interpret",
    "normalize",
    "parse",
]
