"""
Spec loaders.

A spec maps each base type name to its ordered list of raw variant specs.
It comes either from a JSON document on disk or from the built-in
expression grammar.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from .errors import ConfigError, SourceMalformed, SourceUnreadable

logger = logging.getLogger(__name__)

Spec = dict[str, list[str]]

BUILTIN_BASENAME = "Expr"

BUILTIN_VARIANTS: tuple[str, ...] = (
    "Binary   : Expr left, Token operator, Expr right",
    "Grouping : Expr expression",
    "Literal  : Object value",
    "Unary    : Token operator, Expr right",
)

DEFAULT_SOURCE = "./ast.json"


class SpecLoader(ABC):
    """Abstract base class for spec sources."""

    @abstractmethod
    def load(self) -> Spec:
        """
        Load the spec.

        Returns:
            Mapping from basename to raw variant specs, in generation order
        """


class DocumentSpecLoader(SpecLoader):
    """Loads a spec from a JSON document of the form ``{"Expr": ["Binary : ..."]}``."""

    def __init__(self, path: str | Path = DEFAULT_SOURCE):
        self.path = Path(path)

    def load(self) -> Spec:
        try:
            with open(self.path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise SourceUnreadable(f"Cannot open ast config file {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise SourceMalformed(f"Ast config file {self.path} is not UTF-8 text: {e}") from e

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise SourceMalformed(f"Failed to parse ast config file {self.path}: {e}") from e

        spec = self._validate(document)
        logger.debug("Loaded %d base type(s) from %s", len(spec), self.path)
        return spec

    def _validate(self, document: Any) -> Spec:
        """Check the document is an object of string arrays and copy it."""
        if not isinstance(document, dict):
            raise SourceMalformed(f"{self.path}: expected an object mapping base type names to variant lists")

        spec: Spec = {}
        for basename, variants in document.items():
            if not isinstance(variants, list):
                raise SourceMalformed(f"{self.path}: variants of {basename!r} must be a list of strings")
            for variant in variants:
                if not isinstance(variant, str):
                    raise SourceMalformed(f"{self.path}: variant {variant!r} of {basename!r} is not a string")
            spec[basename] = list(variants)
        return spec


class ConstantSpecLoader(SpecLoader):
    """Supplies a fixed spec, by default the built-in expression grammar."""

    def __init__(
        self,
        variants: Sequence[str] = BUILTIN_VARIANTS,
        basename: str = BUILTIN_BASENAME,
    ):
        if not basename:
            raise ConfigError("Base type name must not be empty")
        self.variants = tuple(variants)
        self.basename = basename

    def load(self) -> Spec:
        logger.debug("Using built-in spec for %s (%d variants)", self.basename, len(self.variants))
        return {self.basename: list(self.variants)}
