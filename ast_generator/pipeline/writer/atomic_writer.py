"""
Atomic file writer for generated sources.

Ensures that a generated file is either fully written or not written at
all, so an interrupted or failed run never leaves a half-emitted class
hierarchy behind.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import OutputError


def _current_umask() -> int:
    """Read the process umask (it can only be read by setting it)."""
    umask = os.umask(0)
    os.umask(umask)
    return umask


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_java: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_java: Optional validation function for Java code
        """
        self._validate_java = validate_java or self._default_validate_java

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            OutputError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_java(content)

            # mkstemp creates 0600 files; generated sources get the usual umask mode
            temp_path.chmod(0o666 & ~_current_umask())
            temp_path.replace(path)

        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _default_validate_java(self, content: str) -> None:
        """Default Java validation.

        Args:
            content: Java code to validate

        Raises:
            OutputError: If validation fails
        """
        # Basic structural checks, no full parsing
        if "class " not in content:
            raise OutputError("Generated Java code has no class declaration")

        open_braces = content.count("{")
        close_braces = content.count("}")
        if open_braces != close_braces:
            raise OutputError(f"Generated Java code has unbalanced braces: {open_braces} open, {close_braces} close")
