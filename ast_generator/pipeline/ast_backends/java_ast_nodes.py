"""
Java AST node definitions.

These nodes represent the structure of a generated Java source file.
They are used to build a Java AST which is then serialized to source code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class JavaModifier(str, Enum):
    """Java declaration modifiers."""

    ABSTRACT = "abstract"
    STATIC = "static"
    FINAL = "final"


@dataclass
class JavaNode:
    """Base class for all Java AST nodes."""

    pass


@dataclass
class JavaAnnotation(JavaNode):
    """Represents a Java annotation (e.g., @Override)."""

    name: str = ""

    def to_string(self) -> str:
        """Convert to annotation string."""
        return f"@{self.name}"


@dataclass
class JavaParameter(JavaNode):
    """Represents a method/constructor parameter."""

    name: str = ""
    type_name: str = ""


@dataclass
class JavaField(JavaNode):
    """Represents a class field."""

    name: str = ""
    type_name: str = ""
    modifiers: list[JavaModifier] = field(default_factory=list)


@dataclass
class JavaConstructor(JavaNode):
    """Represents a class constructor."""

    class_name: str = ""
    parameters: list[JavaParameter] = field(default_factory=list)
    body: list[str] = field(default_factory=list)  # Assignment statements


@dataclass
class JavaMethod(JavaNode):
    """Represents a method.

    A method without a body (``body is None``) is serialized as a bare
    declaration, as used for abstract and interface methods.
    """

    name: str = ""
    return_type: str = "void"
    type_parameters: list[str] = field(default_factory=list)
    modifiers: list[JavaModifier] = field(default_factory=list)
    annotations: list[JavaAnnotation] = field(default_factory=list)
    parameters: list[JavaParameter] = field(default_factory=list)
    body: list[str] | None = None


@dataclass
class JavaInterface(JavaNode):
    """Represents an interface declaration."""

    name: str = ""
    type_parameters: list[str] = field(default_factory=list)
    methods: list[JavaMethod] = field(default_factory=list)


@dataclass
class JavaClass(JavaNode):
    """Represents a class declaration.

    Members are serialized in this order: interfaces, nested classes,
    constructors, methods, fields.
    """

    name: str = ""
    modifiers: list[JavaModifier] = field(default_factory=list)
    base_class: str | None = None
    interfaces: list[JavaInterface] = field(default_factory=list)
    nested_classes: list[JavaClass] = field(default_factory=list)
    constructors: list[JavaConstructor] = field(default_factory=list)
    methods: list[JavaMethod] = field(default_factory=list)
    fields: list[JavaField] = field(default_factory=list)


@dataclass
class ImportDirective(JavaNode):
    """Represents an import statement."""

    name: str = ""


@dataclass
class JavaFile(JavaNode):
    """Represents a complete Java source file."""

    imports: list[ImportDirective] = field(default_factory=list)
    generation_comment: str = ""
    root: JavaClass = field(default_factory=JavaClass)
