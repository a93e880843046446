"""
Java AST-based code generation backend.

Generates a visitor-pattern class hierarchy from a TypeGroup:
an abstract base class enclosing a generic visitor interface, one static
nested subclass per variant, and the abstract ``accept`` dispatch method.
"""

from __future__ import annotations

from ..config import GeneratorConfig
from ..type_ast.nodes import TypeGroup, Variant
from .base import AstBackend
from .java_ast_nodes import (
    ImportDirective,
    JavaAnnotation,
    JavaClass,
    JavaConstructor,
    JavaField,
    JavaFile,
    JavaInterface,
    JavaMethod,
    JavaModifier,
    JavaParameter,
)
from .java_serializer import JavaSerializer

VISIT_PREFIX = "visit"


def visit_method_name(variant_name: str, basename: str) -> str:
    """Name of the visitor method for a variant, e.g. ``visitBinaryExpr``."""
    return f"{VISIT_PREFIX}{variant_name}{basename}"


class JavaAstBackend(AstBackend):
    """Java code generation backend using custom AST."""

    FILE_EXTENSION = "java"

    VISITOR_INTERFACE = "Visitor"
    ACCEPT_METHOD = "accept"
    RESULT_TYPE = "R"

    def __init__(self, config: GeneratorConfig):
        super().__init__(config)
        self.serializer = JavaSerializer()

    def generate(self, type_group: TypeGroup, generation_comment: str = "") -> str:
        """Generate Java code for a type group using AST."""
        return self.serializer.serialize(self.build(type_group, generation_comment))

    def build(self, type_group: TypeGroup, generation_comment: str = "") -> JavaFile:
        """Build the Java AST for a type group."""
        file = JavaFile(generation_comment=generation_comment)
        for name in self.config.imports:
            file.imports.append(ImportDirective(name=name))

        root = JavaClass(name=type_group.basename, modifiers=[JavaModifier.ABSTRACT])
        root.interfaces.append(self._generate_visitor(type_group))

        for variant in type_group.variants:
            root.nested_classes.append(self._generate_variant(variant, type_group.basename))

        root.methods.append(self._generate_accept(modifiers=[JavaModifier.ABSTRACT]))

        file.root = root
        return file

    def _visitor_type(self) -> str:
        return f"{self.VISITOR_INTERFACE}<{self.RESULT_TYPE}>"

    def _generate_visitor(self, type_group: TypeGroup) -> JavaInterface:
        """Generate the visitor interface with one method per variant."""
        interface = JavaInterface(name=self.VISITOR_INTERFACE, type_parameters=[self.RESULT_TYPE])
        param_name = type_group.basename.lower()

        for variant in type_group.variants:
            interface.methods.append(
                JavaMethod(
                    name=visit_method_name(variant.name, type_group.basename),
                    return_type=self.RESULT_TYPE,
                    parameters=[JavaParameter(name=param_name, type_name=variant.name)],
                )
            )

        return interface

    def _generate_variant(self, variant: Variant, basename: str) -> JavaClass:
        """Generate the concrete subclass for a variant."""
        cls = JavaClass(
            name=variant.name,
            modifiers=[JavaModifier.STATIC],
            base_class=basename,
        )

        cls.constructors.append(
            JavaConstructor(
                class_name=variant.name,
                parameters=[JavaParameter(name=f.name, type_name=f.type_name) for f in variant.fields],
                body=[f"this.{f.name} = {f.name};" for f in variant.fields],
            )
        )

        cls.methods.append(
            self._generate_accept(
                annotations=[JavaAnnotation(name="Override")],
                body=[f"return visitor.{visit_method_name(variant.name, basename)}(this);"],
            )
        )

        for f in variant.fields:
            cls.fields.append(JavaField(name=f.name, type_name=f.type_name, modifiers=[JavaModifier.FINAL]))

        return cls

    def _generate_accept(
        self,
        modifiers: list[JavaModifier] | None = None,
        annotations: list[JavaAnnotation] | None = None,
        body: list[str] | None = None,
    ) -> JavaMethod:
        """Generate the ``<R> R accept(Visitor<R> visitor)`` dispatch method."""
        return JavaMethod(
            name=self.ACCEPT_METHOD,
            return_type=self.RESULT_TYPE,
            type_parameters=[self.RESULT_TYPE],
            modifiers=modifiers or [],
            annotations=annotations or [],
            parameters=[JavaParameter(name="visitor", type_name=self._visitor_type())],
            body=body,
        )
