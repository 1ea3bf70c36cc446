"""Icon writer — parses every Icon and writes the generated Kotlin tree.

Output layout: ``<out>/<flavor folder>/kotlin/<package path>/<file>.kt``,
where the flavor folder is the variance's theme+grade+weight name
(``outlinedG0W400``).
"""

from __future__ import annotations

import datetime
import logging
from collections import defaultdict
from pathlib import Path

from symbolgen.codegen.generator import ImageVectorGenerator, new_file_spec
from symbolgen.codegen.kotlin import FileSpec
from symbolgen.codegen.names import GROUPED_FILE_NAME
from symbolgen.config import settings
from symbolgen.icons.icon import Icon
from symbolgen.icons.parser import IconParser
from symbolgen.variance.variance import Variance

logger = logging.getLogger(__name__)

_LICENSE_HEADER = """\
/*
 * Copyright {year} {holder}
 *
 * Licensed under the Apache License, Version 2.0 (the "License");
 * you may not use this file except in compliance with the License.
 * You may obtain a copy of the License at
 *
 *      http://www.apache.org/licenses/LICENSE-2.0
 *
 * Unless required by applicable law or agreed to in writing, software
 * distributed under the License is distributed on an "AS IS" BASIS,
 * WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
 * See the License for the specific language governing permissions and
 * limitations under the License.
 */
"""


def license_header(holder: str | None = None, year: int | None = None) -> str:
    return _LICENSE_HEADER.format(
        year=year or datetime.date.today().year,
        holder=holder or settings.copyright_holder,
    )


def source_directory(output_dir: Path, variance: Variance) -> Path:
    """Kotlin source root for one flavor combination."""
    return Path(output_dir) / variance.flavor_folder_name / "kotlin"


class IconWriter:
    """Generates programmatic representations of ``icons``."""

    def __init__(self, icons: list[Icon], header: str | None = None) -> None:
        self.icons = icons
        self.header = license_header() if header is None else header

    def generate_to_single(self, output_dir: Path) -> list[Path]:
        """One ``SymbolsExtensions.kt`` per Variance, plus an auto-mirrored twin when needed."""
        grouped: dict[Variance, list[Icon]] = defaultdict(list)
        for icon in self.icons:
            grouped[icon.variance].append(icon)

        written: list[Path] = []
        for variance in sorted(grouped, key=lambda v: v.sort_key):
            file_spec = new_file_spec(variance.target_package_name(False), GROUPED_FILE_NAME)
            mirrored_spec = new_file_spec(variance.target_package_name(True), GROUPED_FILE_NAME)

            for icon in grouped[variance]:
                generator = ImageVectorGenerator(icon, IconParser(icon).parse())
                generator.edit_file_spec(file_spec)
                if generator.vector.auto_mirrored:
                    generator.edit_auto_mirrored_file_spec(mirrored_spec)

            out_dir = source_directory(output_dir, variance)
            written.append(self._write(file_spec, out_dir))
            if mirrored_spec.member_count:
                written.append(self._write(mirrored_spec, out_dir))

        logger.info("Wrote %d grouped files for %d variances", len(written), len(grouped))
        return written

    def generate_to_multiple(self, output_dir: Path) -> list[Path]:
        """One file per icon variant, plus one per auto-mirrored variant."""
        written: list[Path] = []
        for icon in self.icons:
            out_dir = source_directory(output_dir, icon.variance)
            generator = ImageVectorGenerator(icon, IconParser(icon).parse())
            written.append(self._write(generator.create_file_spec(), out_dir))

            # Auto-mirrored copies live in the automirrored package of the same flavor
            if generator.vector.auto_mirrored:
                written.append(self._write(generator.create_auto_mirrored_file_spec(), out_dir))

        logger.info("Wrote %d files for %d icon variants", len(written), len(self.icons))
        return written

    def _write(self, file_spec: FileSpec, out_dir: Path) -> Path:
        return file_spec.write_to(out_dir, self.header)
