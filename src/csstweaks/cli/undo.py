"""CLI command: csstweaks undo -- remove the last (or every) tweak."""

from __future__ import annotations

import click

from csstweaks.cli.common import document_options, handle_errors, open_session
from csstweaks.config import TweaksConfig


@click.command()
@document_options
@click.option("--all", "undo_all", is_flag=True, help="Remove every tweak")
@click.pass_obj
@handle_errors
def undo(config: TweaksConfig, document: str | None, doc_id: str | None, undo_all: bool) -> None:
    """Remove the most recent tweak from a document."""
    session = open_session(config, document, doc_id)
    if undo_all:
        session.undo_all()
    else:
        session.undo_last()
    click.echo(f"{len(session.ledger)} tweak(s) remaining")
