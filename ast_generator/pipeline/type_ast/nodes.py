"""
Type AST node definitions.

These nodes hold the parsed form of a type group description: a base type
name and its ordered variants, each with ordered field declarations.
They are built fresh for every output unit and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldDecl:
    """A single ``Type name`` field declaration."""

    type_name: str
    name: str

    @property
    def declaration(self) -> str:
        """The declaration as written in the source spec."""
        return f"{self.type_name} {self.name}"


@dataclass(frozen=True)
class Variant:
    """A concrete subtype of the base type."""

    name: str
    fields: tuple[FieldDecl, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TypeGroup:
    """A base type and all of its variants, in emission order."""

    basename: str
    variants: tuple[Variant, ...] = field(default_factory=tuple)
