"""Kotlin and SVG literal formatting. No generator imports."""

from __future__ import annotations

import numpy as np


def kotlin_float(value: float | None) -> str:
    """Format ``value`` the way Kotlin prints a Float, with the ``f`` suffix.

    Kotlin Floats are 32-bit, so the shortest representation that round-trips
    through float32 is used (``0.1`` stays ``0.1f`` rather than growing the
    float64 noise digits). ``None`` becomes ``null``.
    """
    if value is None:
        return "null"
    text = np.format_float_positional(np.float32(value), unique=True, trim="0")
    return f"{text}f"


def kotlin_boolean(value: bool) -> str:
    return "true" if value else "false"


def svg_number(value: float) -> str:
    """Compact number for SVG path data: ``3.0`` -> ``3``, ``0.5`` -> ``0.5``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
