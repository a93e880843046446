"""
Configuration for the generator pipeline.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Import statements emitted at the top of every file
    imports: list[str] = field(default_factory=lambda: ["java.util.List"])

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Run structural checks on generated code before writing it
    validate_output: bool = True

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "imports": self.imports,
            "add_generation_comment": self.add_generation_comment,
            "validate_output": self.validate_output,
        }


def load_config(path: str | Path | None) -> GeneratorConfig:
    """
    Load a GeneratorConfig from a JSON file.

    Args:
        path: Path to the config file, or None for the defaults

    Returns:
        The loaded configuration

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object
    """
    if path is None:
        return GeneratorConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    return GeneratorConfig.from_dict(data)
