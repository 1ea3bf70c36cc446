"""Exception hierarchy for the symbol generator."""


class SymbolGenError(Exception):
    """Base exception for all generator errors."""
    pass


class PathParseError(SymbolGenError):
    """Malformed path data (unknown command, missing operands)."""
    pass


class IconParseError(SymbolGenError):
    """The icon XML has no <vector> root or could not be read."""
    pass


class UnknownThemeError(SymbolGenError):
    """A theme folder name does not map to any IconTheme."""
    pass


class CompletenessError(SymbolGenError):
    """The loaded icons do not cover every theme uniformly."""
    pass


class MissingThemeError(CompletenessError):
    """At least one theme produced no icons at all."""
    pass


class IncompleteThemeError(CompletenessError):
    """Two themes produced different icon name lists."""

    def __init__(self, actual: list[str], expected: list[str]):
        self.actual = actual
        self.expected = expected
        missing = sorted(set(expected) - set(actual))
        extra = sorted(set(actual) - set(expected))
        super().__init__(
            f"Not all icons were found in all themes {actual} {expected} "
            f"(missing: {missing}, unexpected: {extra})"
        )


class TaskConfigurationError(SymbolGenError):
    """The generation task was started without usable input/output directories."""
    pass
