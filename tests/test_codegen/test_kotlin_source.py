"""Tests for the Kotlin source model."""

from pathlib import Path

import pytest

from symbolgen.codegen.kotlin import ClassName, CodeBlock, FileSpec, MemberName


def test_class_name_references():
    name = ClassName.of("dev.example", "Symbols", "Outlined")
    assert name.reference == "Symbols.Outlined"
    assert name.import_path == "dev.example.Symbols"
    assert name.canonical_name == "dev.example.Symbols.Outlined"
    assert name.nested("Filled").simple_name == "Filled"


def test_code_block_indentation():
    block = CodeBlock()
    block.begin_control_flow("if (x)").add_statement("y()").end_control_flow()
    assert str(block) == "if (x) {\n  y()\n}"


def test_unbalanced_control_flow():
    with pytest.raises(ValueError):
        CodeBlock().end_control_flow()


def test_file_spec_imports_are_sorted_and_skip_own_package():
    spec = FileSpec("dev.example.icons", "Icons")
    spec.add_import(MemberName("dev.example", "materialSymbol"))
    spec.add_import(ClassName.of("androidx.compose", "ImageVector"))
    spec.add_import(MemberName("dev.example.icons", "local"))
    spec.add_import(MemberName("dev.example", "materialSymbol"))
    assert spec.imports == ["androidx.compose.ImageVector", "dev.example.materialSymbol"]


def test_file_spec_build_and_write(tmp_path):
    spec = FileSpec("dev.example.icons", "Icons")
    spec.add_file_annotation('Suppress("Unused")')
    spec.add_member(CodeBlock().add_statement("val a = 1"))
    spec.add_member(CodeBlock().add_statement("val b = 2"))
    text = spec.build(header="// header\n")
    assert text == '// header\n\n@file:Suppress("Unused")\n\npackage dev.example.icons\n\nval a = 1\n\nval b = 2\n'

    written = spec.write_to(tmp_path, header="// header\n")
    assert written == tmp_path / Path("dev/example/icons/Icons.kt")
    assert written.read_text(encoding="utf-8") == text
