"""
Error types raised by the generator pipeline.

Every error is fatal to a run: the command line reports the message and
exits with a non-zero status.
"""

from __future__ import annotations


class AstGeneratorError(Exception):
    """Base class for all generator errors."""

    pass


class ConfigError(AstGeneratorError):
    """Raised for invalid command line options or configuration files."""

    pass


class SourceUnreadable(AstGeneratorError):
    """Raised when the input document cannot be opened or read."""

    pass


class SourceMalformed(AstGeneratorError):
    """Raised when the input document is not a mapping of names to string lists.

    This can happen when:
    - The document is not valid JSON
    - The top level is not an object
    - A value is not an array, or an array element is not a string
    """

    pass


class SpecMalformed(AstGeneratorError):
    """Raised when a variant spec or field declaration cannot be split.

    A variant spec needs a ``:`` between its name and fields, and every
    field declaration needs a type and a name separated by a space.
    """

    pass


class OutputError(AstGeneratorError):
    """Raised when an output file cannot be created, written or validated."""

    pass
