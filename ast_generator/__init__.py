"""AST Generator

Generates Java visitor-pattern class hierarchies from compact
``"Name : Type field, ..."`` variant descriptions, read from a JSON
document or taken from the built-in expression grammar.
"""

__version__ = "1.0.0"

from .pipeline import (
    AstGeneratorError,
    AtomicWriter,
    ConstantSpecLoader,
    DocumentSpecLoader,
    GeneratorConfig,
    PipelineGenerator,
)

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "ConstantSpecLoader",
    "DocumentSpecLoader",
    "AstGeneratorError",
    "AtomicWriter",
]
