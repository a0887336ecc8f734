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
    StyleAttr,
    StyleString,
    Text,
    UnfilledEllipse,
    UnfilledPolygon,
)
from xdotdraw.xdot.parser import MalformedOperandError, XDotParser, normalize, parse
from xdotdraw.xdot.interpreter import DrawInterpreter, DrawState, interpret

__all__ = [
    "Align",
    "Bspline",
    "DrawingOperation",
    "FillColor",
    "FilledBspline",
    "FilledEllipse",
    "FilledPolygon",
    "Font",
    "OperationList",
    "OpTag",
    "PenColor",
    "Polyline",
    "Position",
    "Style",
    "StyleAttr",
    "StyleString",
    "Text",
    "UnfilledEllipse",
    "UnfilledPolygon",
    "MalformedOperandError",
    "XDotParser",
    "normalize",
    "parse",
    "DrawInterpreter",
    "DrawState",
    "interpret",
]
