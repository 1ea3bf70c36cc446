"""Material Symbols → Compose ImageVector code generator."""

from symbolgen.errors import SymbolGenError
from symbolgen.task import generate_symbols

__all__ = ["SymbolGenError", "generate_symbols"]
