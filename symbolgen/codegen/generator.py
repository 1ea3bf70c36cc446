"""ImageVector generator — one Icon + its Vector → Kotlin property source.

Each icon becomes an extension property whose getter builds the ImageVector
on first access and caches it in a private backing property:

    public val Symbols.Outlined.Grade0.Weight400.Alarm: ImageVector
      get() {
        if (_alarm != null) {
          return _alarm!!
        }
        _alarm = materialSymbol(name="Outlined.Grade0.Weight400.Alarm", ...) {
          materialPath {
            moveTo(...)
          }
        }
        return _alarm!!
      }

    private var _alarm: ImageVector? = null
"""

from __future__ import annotations

from symbolgen.codegen.kotlin import INDENT, CodeBlock, FileSpec
from symbolgen.codegen.names import SUPPRESSED_WARNINGS, ClassNames, MemberNames
from symbolgen.icons.icon import Icon
from symbolgen.utils.literals import kotlin_float
from symbolgen.variance.theme import AUTO_MIRRORED_NAME, AUTO_MIRRORED_PACKAGE_NAME, FILLED_NAME
from symbolgen.vector.model import FillType, Group, Path, Vector, VectorNode


class ImageVectorGenerator:
    """Generates the property for ``icon`` from its parsed ``vector``."""

    def __init__(self, icon: Icon, vector: Vector) -> None:
        self.icon = icon
        self.vector = vector

    def edit_file_spec(self, file_spec: FileSpec) -> None:
        """Add the icon property (and its backing property) to ``file_spec``."""
        backing_name = self._backing_property_name(auto_mirror=False)
        prop = CodeBlock()
        # Point callers at the auto-mirrored copy when one is generated
        if self.vector.auto_mirrored:
            self._add_deprecation(prop, file_spec)
        self._add_property(prop, file_spec, backing_name, auto_mirror=False)
        file_spec.add_member(prop)
        file_spec.add_member(_backing_property(backing_name))

    def edit_auto_mirrored_file_spec(self, file_spec: FileSpec) -> None:
        backing_name = self._backing_property_name(auto_mirror=True)
        prop = CodeBlock()
        self._add_property(prop, file_spec, backing_name, auto_mirror=True)
        file_spec.add_member(prop)
        file_spec.add_member(_backing_property(backing_name))

    def create_file_spec(self) -> FileSpec:
        file_spec = new_file_spec(self.icon.variance.target_package_name(False), self.icon.kotlin_name)
        self.edit_file_spec(file_spec)
        return file_spec

    def create_auto_mirrored_file_spec(self) -> FileSpec:
        file_spec = new_file_spec(self.icon.variance.target_package_name(True), self.icon.kotlin_name)
        self.edit_auto_mirrored_file_spec(file_spec)
        return file_spec

    def _backing_property_name(self, auto_mirror: bool) -> str:
        # Unique per file so the Kotlin compiler resolves one candidate, not thousands
        name = "_" + self.icon.kotlin_name[:1].lower() + self.icon.kotlin_name[1:]
        if auto_mirror:
            name += f"_{AUTO_MIRRORED_PACKAGE_NAME}"
        if self.icon.variance.is_filled:
            name += "_filled"
        return name

    def _symbol_path(self, auto_mirror: bool) -> str:
        """Dotted path of the icon under ``Symbols``, e.g. ``Outlined.Grade0.Weight400.Filled.Alarm``."""
        variance = self.icon.variance
        parts = [variance.theme.theme_class_name, variance.grade.class_name, variance.weight.class_name]
        if auto_mirror:
            parts.insert(0, AUTO_MIRRORED_NAME)
        if variance.is_filled:
            parts.append(FILLED_NAME)
        parts.append(self.icon.kotlin_name)
        return ".".join(parts)

    def _add_deprecation(self, prop: CodeBlock, file_spec: FileSpec) -> None:
        replacement = f"{ClassNames.SYMBOLS.simple_name}.{self._symbol_path(auto_mirror=True)}"
        import_path = f"{self.icon.variance.target_package_name(True)}.{self.icon.kotlin_name}"
        file_spec.add_import(ClassNames.SYMBOLS)
        prop.add_statement("@Deprecated(")
        prop.add_statement(f'{INDENT}"""Use the AutoMirrored version at {replacement}""",')
        prop.add_statement(f'{INDENT}ReplaceWith("{replacement}", "{import_path}")')
        prop.add_statement(")")

    def _add_property(self, prop: CodeBlock, file_spec: FileSpec, backing_name: str, auto_mirror: bool) -> None:
        receiver = self.icon.variance.target_class_name(auto_mirror)
        file_spec.add_import(receiver)
        file_spec.add_import(ClassNames.IMAGE_VECTOR)
        file_spec.add_import(MemberNames.MATERIAL_SYMBOL)

        prop.add_statement(
            f"public val {receiver.reference}.{self.icon.kotlin_name}: {ClassNames.IMAGE_VECTOR.simple_name}"
        )
        prop.add_statement(f"{INDENT}get() {{")

        body = CodeBlock(level=2)
        body.begin_control_flow(f"if ({backing_name} != null)")
        body.add_statement(f"return {backing_name}!!")
        body.end_control_flow()

        arguments = [
            f'name="{self._symbol_path(auto_mirror)}"',
            f"viewportWidth={kotlin_float(self.vector.viewport_width)}",
            f"viewportHeight={kotlin_float(self.vector.viewport_height)}",
        ]
        if auto_mirror:
            arguments.append("autoMirror=true")
        body.begin_control_flow(f"{backing_name} = {MemberNames.MATERIAL_SYMBOL.name}({', '.join(arguments)})")
        for node in self.vector.nodes:
            _add_recursively(body, file_spec, node)
        body.end_control_flow()
        body.add_statement(f"return {backing_name}!!")

        prop.add_block(body)
        prop.add_statement(f"{INDENT}}}")


def new_file_spec(package_name: str, file_name: str) -> FileSpec:
    """A FileSpec carrying the file-level suppressions every generated file has."""
    file_spec = FileSpec(package_name, file_name)
    warnings = ", ".join(f'"{w}"' for w in SUPPRESSED_WARNINGS)
    file_spec.add_file_annotation(f"Suppress({warnings})")
    return file_spec


def _backing_property(name: str) -> CodeBlock:
    """The private nullable property caching the built ImageVector."""
    return CodeBlock().add_statement(
        f"private var {name}: {ClassNames.IMAGE_VECTOR.simple_name}? = null"
    )


def _add_recursively(block: CodeBlock, file_spec: FileSpec, node: VectorNode) -> None:
    if isinstance(node, Group):
        file_spec.add_import(MemberNames.GROUP)
        block.begin_control_flow(MemberNames.GROUP.name)
        for path in node.paths:
            _add_recursively(block, file_spec, path)
        block.end_control_flow()
    else:
        _add_path(block, file_spec, node)


def _add_path(block: CodeBlock, file_spec: FileSpec, path: Path) -> None:
    file_spec.add_import(MemberNames.MATERIAL_PATH)

    # Only non-default parameters are passed
    parameters: list[str] = []
    if path.fill_alpha != 1.0:
        parameters.append(f"fillAlpha = {kotlin_float(path.fill_alpha)}")
    if path.stroke_alpha != 1.0:
        parameters.append(f"strokeAlpha = {kotlin_float(path.stroke_alpha)}")
    if path.fill_type == FillType.EVEN_ODD:
        file_spec.add_import(MemberNames.EVEN_ODD)
        parameters.append(f"pathFillType = {MemberNames.EVEN_ODD.name}")

    call = MemberNames.MATERIAL_PATH.name
    if parameters:
        call += f"({', '.join(parameters)})"

    block.begin_control_flow(call)
    for path_node in path.nodes:
        block.add_statement(path_node.as_function_call())
    block.end_control_flow()
