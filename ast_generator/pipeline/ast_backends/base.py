"""
Base class for AST-based code generation backends.

Defines the interface that all language-specific AST backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import GeneratorConfig
from ..type_ast.nodes import TypeGroup


class AstBackend(ABC):
    """Abstract base class for AST-based code generation backends."""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config

    @abstractmethod
    def generate(self, type_group: TypeGroup, generation_comment: str = "") -> str:
        """
        Generate the source of one output unit.

        Args:
            type_group: The base type and its variants
            generation_comment: Comment line placed at the top of the file

        Returns:
            Generated code as a string
        """

    def _get_comment_prefix(self) -> str:
        """Get the comment prefix for the language."""
        return "//"
