"""Icon themes and the fixed names derived from them."""

from __future__ import annotations

import enum

from symbolgen.errors import UnknownThemeError

# Prefix of every theme folder in the source tree, e.g. "materialsymbolsoutlined"
THEME_FOLDER_PREFIX = "materialsymbols"

AUTO_MIRRORED_NAME = "AutoMirrored"
AUTO_MIRRORED_PACKAGE_NAME = AUTO_MIRRORED_NAME.lower()
FILLED_NAME = "Filled"
FILLED_PACKAGE_NAME = FILLED_NAME.lower()


class IconTheme(enum.Enum):
    """The three visual styles of Material Symbols.

    ``theme_package_name`` is the lower case name used in package names and
    folder names, ``theme_class_name`` the name of the theme object in Kotlin.
    """

    OUTLINED = ("outlined", "Outlined")
    ROUNDED = ("rounded", "Rounded")
    SHARP = ("sharp", "Sharp")

    def __init__(self, theme_package_name: str, theme_class_name: str) -> None:
        self.theme_package_name = theme_package_name
        self.theme_class_name = theme_class_name


def to_icon_theme(folder_name: str) -> IconTheme:
    """Return the IconTheme for a folder such as ``materialsymbolsrounded``."""
    # Without the prefix the whole name is compared
    suffix = folder_name.split(THEME_FOLDER_PREFIX, 1)[-1]
    for theme in IconTheme:
        if theme.theme_package_name == suffix:
            return theme
    raise UnknownThemeError(f"No matching theme found for input {folder_name}")
