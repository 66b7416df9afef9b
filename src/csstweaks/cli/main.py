"""csstweaks CLI entry point: Click group with subcommands."""

import logging
from dataclasses import replace

import click

from csstweaks import __version__
from csstweaks.config import TweaksConfig
from csstweaks.engine.resolver import ClassTokenPolicy


@click.group()
@click.version_option(version=__version__, prog_name="csstweaks")
@click.option("--home", default=None, help="Directory holding tweak sidecars")
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Style catalog file (.json or .toml)",
)
@click.option(
    "--class-tokens",
    type=click.Choice([p.value for p in ClassTokenPolicy]),
    default=None,
    help="Offer the first class token of an element, or all of them",
)
@click.option("--verbose", "-v", is_flag=True, help="Log engine activity")
@click.pass_context
def cli(
    ctx: click.Context,
    home: str | None,
    catalog: str | None,
    class_tokens: str | None,
    verbose: bool,
) -> None:
    """csstweaks - durable per-element CSS overrides for reflowable books."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = TweaksConfig.from_env()
    if home:
        config = replace(config, sidecar_dir=home)
    if catalog:
        config = replace(config, catalog_path=catalog)
    if class_tokens:
        config = replace(config, class_token_policy=ClassTokenPolicy(class_tokens))
    ctx.obj = config


# Import and register subcommands
from csstweaks.cli.apply import apply, import_css, propose  # noqa: E402
from csstweaks.cli.show import build, show, styles  # noqa: E402
from csstweaks.cli.undo import undo  # noqa: E402

cli.add_command(styles)
cli.add_command(propose)
cli.add_command(apply)
cli.add_command(undo)
cli.add_command(show)
cli.add_command(build)
cli.add_command(import_css)
