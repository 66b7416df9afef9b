"""Helpers shared by the CLI commands."""

from __future__ import annotations

import functools
import sys
from pathlib import Path
from typing import Any, Callable

import click

from csstweaks.config import TweaksConfig
from csstweaks.engine.session import TweakSession
from csstweaks.errors import TweakError
from csstweaks.events.bus import EventBus
from csstweaks.model.node import NodeDescriptor, parse_chain
from csstweaks.store.sidecar import SidecarStore, document_id


def document_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Add the DOCUMENT argument and ``--id`` override to a command."""
    fn = click.option(
        "--id",
        "doc_id",
        default=None,
        help="Document identity (defaults to the SHA-256 of DOCUMENT)",
    )(fn)
    fn = click.argument(
        "document",
        required=False,
        type=click.Path(exists=True, dir_okay=False),
    )(fn)
    return fn


def chain_option(fn: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--chain",
        "chain_text",
        required=True,
        help='Ancestor chain, root to leaf, e.g. "div.outer > span > p.inner"',
    )(fn)


def parse_chain_arg(chain_text: str) -> list[NodeDescriptor]:
    try:
        return parse_chain(chain_text)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--chain") from exc


def open_session(config: TweaksConfig, document: str | None, doc_id: str | None) -> TweakSession:
    """Open the tweak session for a document path or explicit identity."""
    if doc_id is None:
        if document is None:
            raise click.UsageError("Either DOCUMENT or --id is required")
        doc_id = document_id(Path(document))

    bus = EventBus()
    bus.on_all(lambda event: click.echo(event.message, err=True))
    return TweakSession.open(
        doc_id,
        SidecarStore(Path(config.sidecar_dir)),
        config.load_catalog(),
        config.default_bindings(),
        bus=bus,
        policy=config.class_token_policy,
    )


def handle_errors(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Report engine errors as a one-line message and exit status 1."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except TweakError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)

    return wrapper
