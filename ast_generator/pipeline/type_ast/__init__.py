"""
Type AST - parsed representation of variant specs.
"""

from __future__ import annotations

from .nodes import FieldDecl, TypeGroup, Variant
from .parser import VariantSpecParser

__all__ = [
    "FieldDecl",
    "TypeGroup",
    "Variant",
    "VariantSpecParser",
]
