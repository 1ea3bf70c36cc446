"""A processed icon source file, ready to be parsed and generated."""

from __future__ import annotations

from dataclasses import dataclass

from symbolgen.variance.variance import Variance


@dataclass(frozen=True)
class Icon:
    """A processed icon variant.

    ``kotlin_name`` is the PascalCase form of the source directory name, e.g.
    ``ZoomOutMap``; names starting with a digit get a leading underscore.
    ``file_content`` is the cleaned XML, ``auto_mirrored`` marks icons that
    flip in right-to-left layouts.
    """

    kotlin_name: str
    file_content: str
    auto_mirrored: bool
    variance: Variance


def to_kotlin_property_name(name: str) -> str:
    """Convert a snake_case icon name to a Kotlin property name.

    ``add_alarm`` -> ``AddAlarm``, ``360`` -> ``_360``.
    """
    words = (word for word in name.split("_") if word)
    result = "".join(word[0].upper() + word[1:].lower() for word in words)
    if result[:1].isdigit():
        return f"_{result}"
    return result
