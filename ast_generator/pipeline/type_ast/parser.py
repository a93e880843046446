"""
Variant spec parser that builds the type AST.

Phase 1 of the pipeline: split raw ``"Name : Type field, Type field"``
strings into structured variants. Splitting is purely syntactic; field
types are passed through verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import SpecMalformed
from .nodes import FieldDecl, TypeGroup, Variant


class VariantSpecParser:
    """Parses variant spec strings into a TypeGroup."""

    # Separates the variant name from its field list
    NAME_SEPARATOR = ":"

    # Separates field declarations from each other
    FIELD_SEPARATOR = ", "

    # Separates a field's type from its name
    DECL_SEPARATOR = " "

    def parse(self, basename: str, variant_specs: Iterable[str]) -> TypeGroup:
        """
        Parse every variant spec of a base type.

        Args:
            basename: Name of the abstract base type
            variant_specs: Raw variant spec strings, in emission order

        Returns:
            TypeGroup with the parsed variants in input order

        Raises:
            SpecMalformed: On the first spec that cannot be split
        """
        variants = tuple(self.parse_variant(spec) for spec in variant_specs)
        return TypeGroup(basename=basename, variants=variants)

    def parse_variant(self, spec: str) -> Variant:
        """Parse a ``"Name : Type field, ..."`` string into a Variant."""
        name, separator, fields = spec.partition(self.NAME_SEPARATOR)
        if not separator:
            raise SpecMalformed(f"Variant spec {spec!r} has no '{self.NAME_SEPARATOR}' between name and fields")

        name = name.strip()
        if not name:
            raise SpecMalformed(f"Variant spec {spec!r} has no class name")

        decls = fields.strip().split(self.FIELD_SEPARATOR)
        return Variant(
            name=name,
            fields=tuple(self.parse_field_decl(decl, name) for decl in decls),
        )

    def parse_field_decl(self, decl: str, variant_name: str = "") -> FieldDecl:
        """
        Split a ``"Type name"`` declaration on its first space.

        Args:
            decl: The raw field declaration
            variant_name: Owning variant, used in error messages

        Returns:
            FieldDecl with the type and name
        """
        type_name, separator, name = decl.partition(self.DECL_SEPARATOR)
        if not separator or not type_name or not name:
            owner = f" of variant {variant_name!r}" if variant_name else ""
            raise SpecMalformed(f"Field {decl!r}{owner} doesn't have a type and a name")
        return FieldDecl(type_name=type_name, name=name)
