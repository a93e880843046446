"""
AST backends - build a language AST from a TypeGroup and serialize it.
"""

from __future__ import annotations

from .base import AstBackend
from .java_ast_backend import JavaAstBackend, visit_method_name
from .java_serializer import JavaSerializer

__all__ = [
    "AstBackend",
    "JavaAstBackend",
    "JavaSerializer",
    "visit_method_name",
]
