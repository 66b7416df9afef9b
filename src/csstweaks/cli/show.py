"""CLI commands: csstweaks styles / show / build."""

from __future__ import annotations

import click

from csstweaks.cli.common import document_options, handle_errors, open_session, parse_chain_arg
from csstweaks.config import TweaksConfig
from csstweaks.model.bindings import Bindings, TextAlign


@click.command()
@click.pass_obj
@handle_errors
def styles(config: TweaksConfig) -> None:
    """List the styles in the catalog."""
    catalog = config.load_catalog()
    if not len(catalog):
        click.echo("No styles configured")
        return
    for style in catalog:
        click.echo(f"{style.name}: {style.declaration_text}")


@click.command()
@document_options
@click.option("--html", "as_html", is_flag=True, help="Render the HTML inspection page")
@click.option("--chain", "chain_text", default=None, help="Include the selection under this chain")
@click.pass_obj
@handle_errors
def show(
    config: TweaksConfig,
    document: str | None,
    doc_id: str | None,
    as_html: bool,
    chain_text: str | None,
) -> None:
    """Show the tweaks applied to a document, in precedence order."""
    session = open_session(config, document, doc_id)
    if as_html:
        chain = parse_chain_arg(chain_text) if chain_text else None
        click.echo(session.report(chain))
        return

    if not session.ledger:
        click.echo("No tweaks applied")
        return
    click.echo(f"Tweaks ({len(session.ledger)}), last wins:")
    for i, record in enumerate(session.ledger, start=1):
        origin = record.style or "imported"
        click.echo(f"  {i}. {record.selector} [{origin}] {record.declaration_text}")


@click.command()
@document_options
@click.option("--font-size", type=float, default=None, help="Live font size in points")
@click.option("--line-height", type=float, default=None, help="Live line height in em")
@click.option(
    "--text-align",
    type=click.Choice([t.value for t in TextAlign]),
    default=None,
    help="Live text alignment",
)
@click.pass_obj
@handle_errors
def build(
    config: TweaksConfig,
    document: str | None,
    doc_id: str | None,
    font_size: float | None,
    line_height: float | None,
    text_align: str | None,
) -> None:
    """Print the CSS to merge for the document.

    Live values not given on the command line fall back to the configured
    defaults.
    """
    session = open_session(config, document, doc_id)
    live = Bindings(
        font_size=font_size,
        line_height=line_height,
        text_align=TextAlign(text_align) if text_align else None,
    )
    css = session.stylesheet(live)
    if css:
        click.echo(css)
