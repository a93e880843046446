import logging
from pathlib import Path

import click

from .pipeline import (
    BUILTIN_BASENAME,
    DEFAULT_SOURCE,
    AstGeneratorError,
    ConfigError,
    ConstantSpecLoader,
    DocumentSpecLoader,
    PipelineGenerator,
    load_config,
)

logger = logging.getLogger(__name__)


@click.command()
@click.option("--source", "-s", default=DEFAULT_SOURCE, show_default=True, type=click.Path(), help="JSON file mapping base type names to variant specs")
@click.option("--directory", "-d", default="./", show_default=True, type=click.Path(file_okay=False), help="Target directory for generated files")
@click.option("--builtin", is_flag=True, default=False, help="Generate the built-in expression grammar instead of reading --source")
@click.option("--basename", "-b", default=None, type=str, help=f"Base type name for --builtin  [default: {BUILTIN_BASENAME}]")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each generation step")
def ast_generator(source, directory, builtin, basename, config, verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        generator_config = load_config(config)

        if builtin:
            loader = ConstantSpecLoader(basename=BUILTIN_BASENAME if basename is None else basename)
        elif basename is not None:
            raise ConfigError("--basename can only be used together with --builtin")
        else:
            loader = DocumentSpecLoader(source)

        spec = loader.load()
        written = PipelineGenerator(generator_config).write(spec, Path(directory))
    except AstGeneratorError as e:
        raise click.ClickException(str(e)) from e

    logger.debug("Generated %d file(s) in %s", len(written), directory)
