#!/usr/bin/env python3

import click
import pytest

from ast_generator.ast_generator import ast_generator
from ast_generator.cli_utils import reconstruct_command_line


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Test command reconstruction without active Click context (fallback)"""
        result = reconstruct_command_line(ast_generator)
        assert result == "ast_generator"

    def test_reconstruct_command_line_with_defaults(self):
        """Options left at their defaults are omitted"""
        ctx = click.Context(ast_generator)
        ctx.params = {"source": "./ast.json", "directory": "./", "builtin": False, "basename": None, "config": None, "verbose": False}
        with ctx:
            assert reconstruct_command_line(ast_generator) == "ast_generator"

    def test_reconstruct_command_line_with_options(self):
        """Flags appear bare, values follow their option, verbose is dropped"""
        ctx = click.Context(ast_generator)
        ctx.params = {"source": "./ast.json", "directory": "gen", "builtin": True, "basename": "Node", "config": None, "verbose": True}
        with ctx:
            result = reconstruct_command_line(ast_generator)
        assert result == "ast_generator --directory gen --builtin --basename Node"

    def test_reconstruct_command_line_keeps_values_as_given(self):
        """Values are recorded verbatim, whether or not the path exists"""
        ctx = click.Context(ast_generator)
        ctx.params = {"source": "specs/missing.json", "directory": ".", "builtin": False, "basename": None, "config": None, "verbose": False}
        with ctx:
            result = reconstruct_command_line(ast_generator)
        assert result == "ast_generator --source specs/missing.json --directory ."


if __name__ == "__main__":
    pytest.main([__file__])
