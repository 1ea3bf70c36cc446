"""Command-line entry point: ``symbolgen FROM INTO``."""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from symbolgen.config import OutputMode, settings
from symbolgen.errors import SymbolGenError
from symbolgen.task import generate_symbols

logger = logging.getLogger("symbolgen")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symbolgen",
        description="Generate Compose ImageVector properties from Material Symbols XML.",
    )
    parser.add_argument("from_dir", help="Directory holding one sub-directory per icon.")
    parser.add_argument("into_dir", help="Directory the flavor source trees are written to.")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in OutputMode],
        default=None,
        help=f"Output layout (default: {settings.output_mode.value}).",
    )
    parser.add_argument("--log-level", default=None, help=f"Logging level (default: {settings.log_level}).")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    level_name = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        generate_symbols(args.from_dir, args.into_dir, mode=args.mode)
    except SymbolGenError as e:
        logger.error("Generation failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
