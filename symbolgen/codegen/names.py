"""Fixed Kotlin names referenced by generated code."""

from __future__ import annotations

import enum

from symbolgen.codegen.kotlin import ClassName, MemberName


class PackageNames(enum.Enum):
    MATERIAL_SYMBOLS_PACKAGE = "dev.tclement.compose.symbols"
    GRAPHICS_PACKAGE = "androidx.compose.ui.graphics"
    VECTOR_PACKAGE = "androidx.compose.ui.graphics.vector"

    @property
    def package_name(self) -> str:
        return self.value

    def class_name(self, *simple_names: str) -> ClassName:
        return ClassName.of(self.value, *simple_names)


class ClassNames:
    IMAGE_VECTOR = PackageNames.VECTOR_PACKAGE.class_name("ImageVector")
    PATH_FILL_TYPE = PackageNames.GRAPHICS_PACKAGE.class_name("PathFillType")
    SYMBOLS = PackageNames.MATERIAL_SYMBOLS_PACKAGE.class_name("Symbols")


class MemberNames:
    MATERIAL_SYMBOL = MemberName(PackageNames.MATERIAL_SYMBOLS_PACKAGE.value, "materialSymbol")
    MATERIAL_PATH = MemberName(PackageNames.MATERIAL_SYMBOLS_PACKAGE.value, "materialPath")
    GROUP = MemberName(PackageNames.VECTOR_PACKAGE.value, "group")
    EVEN_ODD = MemberName(ClassNames.PATH_FILL_TYPE.nested("Companion").canonical_name, "EvenOdd")


# File-level suppressions on every generated file
SUPPRESSED_WARNINGS = ("UnusedReceiverParameter", "RedundantVisibilityModifier", "ObjectPropertyName")

# File name used for one-file-per-variance output
GROUPED_FILE_NAME = "SymbolsExtensions"
