"""
CLI utilities for command line reconstruction and introspection.
"""

import click

COMMAND_NAME = "ast_generator"

# Options that do not affect the generated code
IGNORED_PARAMS = {"verbose"}


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Only options that differ from their defaults are included, so the
    result is stable for a given set of inputs.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return COMMAND_NAME

    if not cli_args:
        return COMMAND_NAME

    cmd_parts = [COMMAND_NAME]

    for param in click_command.params:
        if not isinstance(param, click.Option) or param.name in IGNORED_PARAMS or param.name not in cli_args:
            continue

        value = cli_args[param.name]
        if not value or value == param.default:
            continue

        # Get the primary option name (first in opts list)
        flag = param.opts[0] if param.opts else f"--{param.name}"
        if param.is_flag:
            cmd_parts.append(flag)
            continue

        # Values are recorded exactly as given
        cmd_parts.extend([flag, str(value)])

    return " ".join(cmd_parts)
