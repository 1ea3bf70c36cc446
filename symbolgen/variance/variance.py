"""Variance: the (theme, grade, weight, filled) combination of one icon rendering.

Every generated name (receiver class, package, output flavor folder) is
derived from a Variance, so two icons with equal variances always land in the
same generated group.
"""

from __future__ import annotations

from dataclasses import dataclass

from symbolgen.codegen.kotlin import ClassName
from symbolgen.codegen.names import PackageNames
from symbolgen.variance.grade import Grade
from symbolgen.variance.theme import (
    AUTO_MIRRORED_NAME,
    AUTO_MIRRORED_PACKAGE_NAME,
    FILLED_NAME,
    FILLED_PACKAGE_NAME,
    IconTheme,
)
from symbolgen.variance.weight import Weight

_BASE = PackageNames.MATERIAL_SYMBOLS_PACKAGE


@dataclass(frozen=True)
class Variance:
    theme: IconTheme
    weight: Weight
    grade: Grade
    is_filled: bool

    @property
    def sort_key(self) -> tuple[int, int, int, bool]:
        return (
            list(IconTheme).index(self.theme),
            list(Grade).index(self.grade),
            list(Weight).index(self.weight),
            self.is_filled,
        )

    def _package(self, *segments: str) -> str:
        return ".".join((_BASE.package_name, self.theme.theme_package_name, *segments,
                         self.grade.package_name, self.weight.package_name))

    @property
    def class_name(self) -> ClassName:
        return _BASE.class_name("Symbols", self.theme.theme_class_name,
                                self.grade.class_name, self.weight.class_name)

    @property
    def package_name(self) -> str:
        return self._package()

    @property
    def auto_mirrored_class_name(self) -> ClassName:
        return _BASE.class_name("Symbols", AUTO_MIRRORED_NAME, self.theme.theme_class_name,
                                self.grade.class_name, self.weight.class_name)

    @property
    def auto_mirrored_package_name(self) -> str:
        return self._package(AUTO_MIRRORED_PACKAGE_NAME)

    @property
    def filled_class_name(self) -> ClassName:
        return self.class_name.nested(FILLED_NAME)

    @property
    def filled_package_name(self) -> str:
        return self._package(FILLED_PACKAGE_NAME)

    @property
    def auto_mirrored_filled_class_name(self) -> ClassName:
        return self.auto_mirrored_class_name.nested(FILLED_NAME)

    @property
    def auto_mirrored_filled_package_name(self) -> str:
        return self._package(AUTO_MIRRORED_PACKAGE_NAME, FILLED_PACKAGE_NAME)

    def target_class_name(self, auto_mirror: bool) -> ClassName:
        """Receiver class for a generated property of this variance."""
        if auto_mirror:
            return self.auto_mirrored_filled_class_name if self.is_filled else self.auto_mirrored_class_name
        return self.filled_class_name if self.is_filled else self.class_name

    def target_package_name(self, auto_mirror: bool) -> str:
        """Package a generated property of this variance is written to."""
        if auto_mirror:
            return self.auto_mirrored_filled_package_name if self.is_filled else self.auto_mirrored_package_name
        return self.filled_package_name if self.is_filled else self.package_name

    @property
    def flavor_folder_name(self) -> str:
        """Output folder, e.g. ``outlinedG0W400`` or ``roundedGn25W700``."""
        return (
            self.theme.theme_package_name
            + _upper_first(self.grade.package_name)
            + _upper_first(self.weight.package_name)
        )


def _upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]
