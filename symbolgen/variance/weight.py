"""Symbol weights."""

from __future__ import annotations

import enum


class Weight(enum.Enum):
    """Stroke weight of a symbol, from thin (100) to bold (700)."""

    W_100 = ("wght100", "w100", "Weight100")
    W_200 = ("wght200", "w200", "Weight200")
    W_300 = ("wght300", "w300", "Weight300")
    W_400 = (None, "w400", "Weight400")
    W_500 = ("wght500", "w500", "Weight500")
    W_600 = ("wght600", "w600", "Weight600")
    W_700 = ("wght700", "w700", "Weight700")

    def __init__(self, file_indicator: str | None, package_name: str, class_name: str) -> None:
        self.file_indicator = file_indicator
        self.package_name = package_name
        self.class_name = class_name

    @classmethod
    def default(cls) -> Weight:
        return cls.W_400

    @classmethod
    def extract_from_string(cls, variations: str) -> Weight:
        for weight in cls:
            if weight.file_indicator is not None and weight.file_indicator in variations:
                return weight
        return cls.default()
