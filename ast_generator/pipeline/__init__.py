"""
Pipeline - AST-based visitor pattern generator.

Phases:

1. Loader: Read the spec (JSON document or built-in grammar)
2. Parser: Split variant specs into the type AST
3. AST Backend: Build a Java AST from each type group
4. Serializer: Convert the AST to source code
5. Writer: Atomically write one file per base type
"""

from __future__ import annotations

from .config import GeneratorConfig, load_config
from .errors import (
    AstGeneratorError,
    ConfigError,
    OutputError,
    SourceMalformed,
    SourceUnreadable,
    SpecMalformed,
)
from .generator import PipelineGenerator
from .spec_loader import (
    BUILTIN_BASENAME,
    BUILTIN_VARIANTS,
    DEFAULT_SOURCE,
    ConstantSpecLoader,
    DocumentSpecLoader,
    Spec,
    SpecLoader,
)
from .writer import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "load_config",
    "AstGeneratorError",
    "ConfigError",
    "OutputError",
    "SourceMalformed",
    "SourceUnreadable",
    "SpecMalformed",
    "BUILTIN_BASENAME",
    "BUILTIN_VARIANTS",
    "DEFAULT_SOURCE",
    "ConstantSpecLoader",
    "DocumentSpecLoader",
    "Spec",
    "SpecLoader",
    "AtomicWriter",
]
