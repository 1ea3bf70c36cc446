"""Symbol grades."""

from __future__ import annotations

import enum


class Grade(enum.Enum):
    """Fine stroke-thickness adjustment of a symbol.

    ``file_indicator`` is the keyword in the source file name selecting this
    grade (None for the default), ``package_name`` / ``class_name`` are the
    names used in generated code.
    """

    G_0 = (None, "g0", "Grade0")
    G_200 = ("grad200", "g200", "Grade200")
    G_N25 = ("gradN25", "gn25", "GradeN25")

    def __init__(self, file_indicator: str | None, package_name: str, class_name: str) -> None:
        self.file_indicator = file_indicator
        self.package_name = package_name
        self.class_name = class_name

    @classmethod
    def default(cls) -> Grade:
        return cls.G_0

    @classmethod
    def extract_from_string(cls, variations: str) -> Grade:
        """Get the grade named in ``variations``; first match in enum order wins."""
        for grade in cls:
            if grade.file_indicator is not None and grade.file_indicator in variations:
                return grade
        return cls.default()
