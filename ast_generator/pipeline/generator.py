"""
Pipeline generator.

Drives the phases for every base type of a spec, in spec order:
parse the variant specs, build and serialize the AST, write the file.
The first error aborts the remaining base types.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .ast_backends import AstBackend, JavaAstBackend
from .config import GeneratorConfig
from .errors import OutputError
from .spec_loader import Spec
from .type_ast import VariantSpecParser
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates one source file per base type of a spec."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        backend: AstBackend | None = None,
        writer: AtomicWriter | None = None,
    ):
        self.config = config or GeneratorConfig()
        self.backend = backend or JavaAstBackend(self.config)
        self.writer = writer or AtomicWriter()
        self.parser = VariantSpecParser()

    def generate(self, basename: str, variant_specs: Iterable[str]) -> str:
        """
        Generate the source of one output unit.

        Args:
            basename: Name of the abstract base type
            variant_specs: Raw variant spec strings

        Returns:
            Generated source code

        Raises:
            SpecMalformed: If a variant spec cannot be parsed
        """
        type_group = self.parser.parse(basename, variant_specs)
        logger.debug("Parsed %s with %d variant(s)", basename, len(type_group.variants))
        return self.backend.generate(type_group, self._generate_command_comment())

    def output_path(self, directory: str | Path, basename: str) -> Path:
        """Path of the file generated for a base type."""
        return Path(directory) / f"{basename}.{self.backend.FILE_EXTENSION}"

    def write(self, spec: Spec, directory: str | Path) -> list[Path]:
        """
        Generate and write every base type of a spec.

        Args:
            spec: Mapping from basename to raw variant specs
            directory: Output directory

        Returns:
            Paths of the written files, in spec order

        Raises:
            SpecMalformed: If a variant spec cannot be parsed
            OutputError: If a file cannot be written
        """
        written: list[Path] = []
        for basename, variant_specs in spec.items():
            code = self.generate(basename, variant_specs)
            path = self.output_path(directory, basename)
            try:
                self.writer.write(path, code, validate=self.config.validate_output)
            except (OSError, UnicodeError) as e:
                raise OutputError(f"Cannot write {path}: {e}") from e
            logger.info("Wrote %s", path)
            written.append(path)
        return written

    def _generate_command_comment(self) -> str:
        """Generate a command line comment for the generated file."""
        if not self.config.add_generation_comment:
            return ""

        from .. import __version__
        from ..cli_utils import reconstruct_command_line

        # Reconstruct command line using CLI utilities
        try:
            from ..ast_generator import ast_generator as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "ast_generator"

        return f"{self.backend._get_comment_prefix()} Generated by ast_generator v{__version__} : {command_line}"
