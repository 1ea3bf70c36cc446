"""Generation task: icon source tree in, Kotlin source tree out."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from symbolgen.codegen.writer import IconWriter
from symbolgen.config import OutputMode, settings
from symbolgen.errors import TaskConfigurationError
from symbolgen.icons.processor import IconProcessor

logger = logging.getLogger(__name__)


def generate_symbols(
    from_dir: Path | str | None,
    into_dir: Path | str | None,
    mode: OutputMode | str | None = None,
) -> list[Path]:
    """Process every icon directory under ``from_dir`` and write Kotlin files into ``into_dir``.

    Returns the written file paths. Any validation or parse error aborts the
    run; files written before the failure are left in place.
    """
    if from_dir is None or into_dir is None:
        raise TaskConfigurationError("Please define both from and into dirs")

    from_dir = Path(from_dir)
    into_dir = Path(into_dir)
    if not from_dir.is_dir():
        raise TaskConfigurationError(f"Icon source directory does not exist: {from_dir}")

    mode = OutputMode(mode) if mode is not None else settings.output_mode
    start = time.perf_counter()

    icon_directories = sorted(p for p in from_dir.iterdir() if p.is_dir())
    icons = IconProcessor(icon_directories).process()

    into_dir.mkdir(parents=True, exist_ok=True)
    writer = IconWriter(icons)
    if mode == OutputMode.GROUPED:
        written = writer.generate_to_single(into_dir)
    else:
        written = writer.generate_to_multiple(into_dir)

    total = (time.perf_counter() - start) * 1000
    logger.info("Generated %d files (%s mode) in %.0fms", len(written), mode.value, total)
    return written
