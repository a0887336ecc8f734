"""Geometry helpers for parsed drawing operations."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from xdotdraw.xdot.operations import (
    ELLIPSE_OPERATIONS,
    POINT_LIST_OPERATIONS,
    Align,
    DrawingOperation,
    Text,
)


def _empty() -> np.ndarray:
    return np.empty((0, 2), dtype=float)


def operation_points(op: DrawingOperation) -> np.ndarray:
    """Return the extent points of *op* as an ``(n, 2)`` float array.

    Ellipses contribute the two opposite corners of their bounding box
    (xdot ellipse sizes are radii).  Text contributes the two ends of its
    baseline, placed according to its alignment.  State-setting operations
    have no extent and return an empty array.
    """
    if isinstance(op, POINT_LIST_OPERATIONS):
        if not op.points:
            return _empty()
        return np.asarray(op.points, dtype=float)
    if isinstance(op, ELLIPSE_OPERATIONS):
        cx, cy = op.pos
        return np.array(
            [[cx - op.width, cy - op.height], [cx + op.width, cy + op.height]],
            dtype=float,
        )
    if isinstance(op, Text):
        x, y = op.pos
        if op.align is Align.LEFT:
            left = x
        elif op.align is Align.RIGHT:
            left = x - op.width
        else:
            left = x - op.width / 2.0
        return np.array([[left, y], [left + op.width, y]], dtype=float)
    return _empty()


def bounding_box(
    ops: Iterable[DrawingOperation],
) -> tuple[float, float, float, float] | None:
    """Axis-aligned bounding box ``(xmin, ymin, xmax, ymax)`` of *ops*.

    Returns None when no operation has an extent.
    """
    arrays = [pts for pts in (operation_points(op) for op in ops) if len(pts)]
    if not arrays:
        return None
    pts = np.vstack(arrays)
    xmin, ymin = pts.min(axis=0)
    xmax, ymax = pts.max(axis=0)
    return float(xmin), float(ymin), float(xmax), float(ymax)


def centroid(op: DrawingOperation) -> tuple[float, float] | None:
    """Mean of the extent points of *op*, or None for state-setting operations."""
    pts = operation_points(op)
    if not len(pts):
        return None
    cx, cy = pts.mean(axis=0)
    return float(cx), float(cy)
