"""CLI commands: csstweaks propose / apply / import-css."""

from __future__ import annotations

from pathlib import Path

import click

from csstweaks.cli.common import (
    chain_option,
    document_options,
    handle_errors,
    open_session,
    parse_chain_arg,
)
from csstweaks.config import TweaksConfig
from csstweaks.engine.resolver import Proposal
from csstweaks.interviewer.console import ConsoleInterviewer


@click.command()
@document_options
@chain_option
@click.pass_obj
@handle_errors
def propose(config: TweaksConfig, document: str | None, doc_id: str | None, chain_text: str) -> None:
    """List the elements a tweak at this location could target.

    Candidates are numbered innermost first; the last one is the most
    comprehensive.
    """
    session = open_session(config, document, doc_id)
    proposal = session.propose(parse_chain_arg(chain_text))
    if not proposal.is_ambiguous:
        click.echo(f"Target: {proposal.innermost.label}")
        return
    click.echo("Ambiguous target, candidates (innermost first):")
    for i, candidate in enumerate(proposal.candidates, start=1):
        click.echo(f"  [{i}] {candidate.label}")


@click.command()
@click.argument("style")
@document_options
@chain_option
@click.option(
    "--choice",
    type=int,
    default=None,
    help="1-based candidate to use when the target is ambiguous (-1 for the outermost)",
)
@click.pass_obj
@handle_errors
def apply(
    config: TweaksConfig,
    document: str | None,
    doc_id: str | None,
    style: str,
    chain_text: str,
    choice: int | None,
) -> None:
    """Apply catalog STYLE to the element under the selection in DOCUMENT.

    Ambiguous targets are resolved with --choice, or by prompting.
    """
    session = open_session(config, document, doc_id)
    chain = parse_chain_arg(chain_text)

    if choice is not None:
        if choice == 0:
            raise click.BadParameter("candidates are numbered from 1", param_hint="--choice")
        proposal = session.propose(chain)
        index = choice - 1 if choice > 0 else choice
        try:
            session.apply_choice(proposal, index, style)
        except IndexError:
            raise click.BadParameter(
                f"choose 1..{len(proposal.candidates)}", param_hint="--choice"
            ) from None
        return

    result = session.apply_to_selection(
        chain, style, interviewer=ConsoleInterviewer(output=click.echo)
    )
    if result is None or isinstance(result, Proposal):
        click.echo("Nothing applied", err=True)


@click.command("import-css")
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@document_options
@click.pass_obj
@handle_errors
def import_css(config: TweaksConfig, document: str | None, doc_id: str | None, cssfile: str) -> None:
    """Append the class rules of CSSFILE to the tweaks of DOCUMENT."""
    session = open_session(config, document, doc_id)
    before = len(session.ledger)
    session.import_css(Path(cssfile).read_text(encoding="utf-8"))
    click.echo(f"Imported {len(session.ledger) - before} rule(s)")
