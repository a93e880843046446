"""
Java AST Serializer.

Converts Java AST nodes to Java source code:
- Braces on the declaration line
- 4-space indentation
- Blank line after each interface, nested class, constructor and method body
- Annotations on separate lines above declarations

The file header (generation comment and imports) is rendered from a
Jinja2 template.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .java_ast_nodes import (
    JavaClass,
    JavaConstructor,
    JavaField,
    JavaFile,
    JavaInterface,
    JavaMethod,
    JavaModifier,
)


class JavaSerializer:
    """Serializes Java AST nodes to source code."""

    INDENT = "    "  # 4 spaces

    TEMPLATE_LANG = "java"

    def __init__(self):
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.TEMPLATE_LANG}.jinja2")

    def serialize(self, file: JavaFile) -> str:
        """Serialize a complete Java file to source code."""
        lines: list[str] = []

        header = self.prefix_template.render(
            generation_comment=file.generation_comment,
            imports=[directive.name for directive in file.imports],
        )
        if header:
            lines.extend(header.splitlines())
            lines.append("")

        lines.extend(self._serialize_class(file.root, 0))

        return "\n".join(lines) + "\n"

    def _prefix(self, indent: int) -> str:
        return self.INDENT * indent

    def _modifiers(self, modifiers: list[JavaModifier]) -> str:
        """Render modifiers followed by a space, or nothing."""
        return "".join(f"{m.value} " for m in modifiers)

    def _type_parameters(self, type_parameters: list[str]) -> str:
        if not type_parameters:
            return ""
        return f"<{', '.join(type_parameters)}>"

    def _serialize_class(self, cls: JavaClass, indent: int) -> list[str]:
        """Serialize a class declaration (without a trailing blank line)."""
        lines: list[str] = []
        prefix = self._prefix(indent)

        declaration = f"{prefix}{self._modifiers(cls.modifiers)}class {cls.name}"
        if cls.base_class:
            declaration += f" extends {cls.base_class}"
        lines.append(f"{declaration} {{")

        for interface in cls.interfaces:
            lines.extend(self._serialize_interface(interface, indent + 1))
            lines.append("")

        for nested_cls in cls.nested_classes:
            lines.extend(self._serialize_class(nested_cls, indent + 1))
            lines.append("")

        for constructor in cls.constructors:
            lines.extend(self._serialize_constructor(constructor, indent + 1))
            lines.append("")

        for method in cls.methods:
            lines.extend(self._serialize_method(method, indent + 1))
            if method.body is not None:
                lines.append("")

        for field in cls.fields:
            lines.append(self._serialize_field(field, indent + 1))

        lines.append(f"{prefix}}}")

        return lines

    def _serialize_interface(self, interface: JavaInterface, indent: int) -> list[str]:
        """Serialize an interface declaration."""
        prefix = self._prefix(indent)
        lines = [f"{prefix}interface {interface.name}{self._type_parameters(interface.type_parameters)} {{"]

        for method in interface.methods:
            lines.extend(self._serialize_method(method, indent + 1))

        lines.append(f"{prefix}}}")
        return lines

    def _serialize_constructor(self, constructor: JavaConstructor, indent: int) -> list[str]:
        """Serialize a constructor declaration."""
        prefix = self._prefix(indent)
        params = ", ".join(f"{p.type_name} {p.name}" for p in constructor.parameters)

        lines = [f"{prefix}{constructor.class_name}({params}) {{"]

        body_prefix = prefix + self.INDENT
        for stmt in constructor.body:
            lines.append(f"{body_prefix}{stmt}")

        lines.append(f"{prefix}}}")
        return lines

    def _serialize_method(self, method: JavaMethod, indent: int) -> list[str]:
        """Serialize a method, or a bare declaration when it has no body."""
        lines: list[str] = []
        prefix = self._prefix(indent)

        for annotation in method.annotations:
            lines.append(f"{prefix}{annotation.to_string()}")

        type_params = self._type_parameters(method.type_parameters)
        if type_params:
            type_params += " "
        params = ", ".join(f"{p.type_name} {p.name}" for p in method.parameters)
        signature = f"{prefix}{self._modifiers(method.modifiers)}{type_params}{method.return_type} {method.name}({params})"

        if method.body is None:
            lines.append(f"{signature};")
            return lines

        lines.append(f"{signature} {{")
        body_prefix = prefix + self.INDENT
        for stmt in method.body:
            lines.append(f"{body_prefix}{stmt}")
        lines.append(f"{prefix}}}")

        return lines

    def _serialize_field(self, field: JavaField, indent: int) -> str:
        """Serialize a field declaration."""
        return f"{self._prefix(indent)}{self._modifiers(field.modifiers)}{field.type_name} {field.name};"
