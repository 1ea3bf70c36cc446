"""Minimal Kotlin source model: qualified names, code blocks and files.

Only what the icon generator needs: imports are collected from the
ClassName / MemberName objects a file references, code is indented with two
spaces, and members are separated by a blank line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

INDENT = "  "


@dataclass(frozen=True)
class ClassName:
    """A (possibly nested) Kotlin class, e.g. ``Symbols.Outlined.Grade0``."""

    package_name: str
    simple_names: tuple[str, ...]

    @classmethod
    def of(cls, package_name: str, *simple_names: str) -> ClassName:
        return cls(package_name, tuple(simple_names))

    @property
    def simple_name(self) -> str:
        return self.simple_names[-1]

    @property
    def reference(self) -> str:
        """How the class is written once its top-level class is imported."""
        return ".".join(self.simple_names)

    @property
    def import_path(self) -> str:
        return f"{self.package_name}.{self.simple_names[0]}"

    @property
    def canonical_name(self) -> str:
        return f"{self.package_name}.{self.reference}"

    def nested(self, *names: str) -> ClassName:
        return ClassName(self.package_name, self.simple_names + tuple(names))


@dataclass(frozen=True)
class MemberName:
    """A top-level function or property, or a member of an imported object."""

    qualifier: str
    name: str

    @property
    def import_path(self) -> str:
        return f"{self.qualifier}.{self.name}"


class CodeBlock:
    """Indented lines with control-flow helpers."""

    def __init__(self, level: int = 0) -> None:
        self._lines: list[str] = []
        self._level = level

    def add_statement(self, text: str) -> CodeBlock:
        self._lines.append(INDENT * self._level + text)
        return self

    def begin_control_flow(self, text: str) -> CodeBlock:
        self.add_statement(f"{text} {{")
        self._level += 1
        return self

    def end_control_flow(self) -> CodeBlock:
        if self._level == 0:
            raise ValueError("end_control_flow() without a matching begin_control_flow()")
        self._level -= 1
        return self.add_statement("}")

    def add_block(self, block: CodeBlock) -> CodeBlock:
        for line in block.lines:
            self.add_statement(line)
        return self

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def __str__(self) -> str:
        return "\n".join(self._lines)


class FileSpec:
    """One generated ``.kt`` file in ``package_name`` named ``file_name``."""

    def __init__(self, package_name: str, file_name: str) -> None:
        self.package_name = package_name
        self.file_name = file_name
        self._file_annotations: list[str] = []
        self._imports: set[str] = set()
        self._members: list[CodeBlock] = []

    def add_file_annotation(self, annotation: str) -> FileSpec:
        self._file_annotations.append(annotation)
        return self

    def add_import(self, name: ClassName | MemberName) -> FileSpec:
        path = name.import_path
        qualifier = path.rpartition(".")[0]
        # Names from the file's own package need no import
        if qualifier != self.package_name:
            self._imports.add(path)
        return self

    def add_member(self, member: CodeBlock) -> FileSpec:
        self._members.append(member)
        return self

    @property
    def imports(self) -> list[str]:
        return sorted(self._imports)

    @property
    def member_count(self) -> int:
        return len(self._members)

    @property
    def relative_path(self) -> Path:
        return Path(*self.package_name.split(".")) / f"{self.file_name}.kt"

    def build(self, header: str = "") -> str:
        parts: list[str] = []
        if header:
            parts.append(header.rstrip("\n"))
        if self._file_annotations:
            parts.append("\n".join(f"@file:{a}" for a in self._file_annotations))
        parts.append(f"package {self.package_name}")
        if self._imports:
            parts.append("\n".join(f"import {path}" for path in self.imports))
        parts.extend(str(member) for member in self._members)
        return "\n\n".join(parts) + "\n"

    def write_to(self, directory: Path, header: str = "") -> Path:
        """Write the file under ``directory``, creating package folders as needed."""
        target = Path(directory) / self.relative_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.build(header), encoding="utf-8")
        logger.debug("Wrote %s", target)
        return target
