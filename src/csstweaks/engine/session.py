"""Tweak session: owns one open document's ledger and keeps it on disk.

Every mutation follows the same transaction: compute the new ledger, flush
it to the sidecar, and only then make it current. A failed flush leaves the
previous ledger in place, so memory and disk never diverge.
"""

from __future__ import annotations

import logging
from typing import Sequence

from csstweaks.engine.ledger import Ledger
from csstweaks.engine.resolver import (
    ChainOrder,
    ClassTokenPolicy,
    Proposal,
    answer_index,
    propose,
    resolve,
)
from csstweaks.errors import CorruptStore, EmptyLedger, PersistenceFailure
from csstweaks.events.bus import EventBus
from csstweaks.events.types import (
    LedgerRolledBack,
    NothingToUndo,
    SidecarCorrupt,
    TweakApplied,
    TweaksCleared,
    TweakUndone,
)
from csstweaks.interviewer.base import Interviewer
from csstweaks.model.bindings import Bindings
from csstweaks.model.node import NodeDescriptor
from csstweaks.model.selector import ClassSelector
from csstweaks.model.style import StyleCatalog
from csstweaks.store.sidecar import SidecarStore
from csstweaks.stylesheet.parser import import_css
from csstweaks.stylesheet.report import render_report
from csstweaks.stylesheet.synthesizer import build
from csstweaks.transforms.base import StylesheetSink

log = logging.getLogger("csstweaks.session")


class TweakSession:
    """Single-document, single-reader owner of a ledger."""

    def __init__(
        self,
        document_id: str,
        store: SidecarStore,
        catalog: StyleCatalog,
        defaults: Bindings | None = None,
        *,
        ledger: Ledger | None = None,
        bus: EventBus | None = None,
        sink: StylesheetSink | None = None,
        live: Bindings | None = None,
        policy: ClassTokenPolicy = ClassTokenPolicy.FIRST,
    ) -> None:
        self.document_id = document_id
        self.store = store
        self.catalog = catalog
        self.defaults = defaults if defaults is not None else Bindings.defaults()
        self.bus = bus or EventBus()
        self.sink = sink
        self.policy = policy
        self.live = live
        self._ledger = ledger if ledger is not None else Ledger()

    @classmethod
    def open(
        cls,
        document_id: str,
        store: SidecarStore,
        catalog: StyleCatalog,
        defaults: Bindings | None = None,
        **kwargs,
    ) -> TweakSession:
        """Hydrate a session from the document's sidecar.

        A corrupt sidecar opens as an empty ledger; the file stays on disk
        until the next successful save replaces it.
        """
        bus = kwargs.pop("bus", None) or EventBus()
        try:
            ledger = store.load(document_id, strict=True)
        except CorruptStore as exc:
            ledger = Ledger()
            bus.emit(SidecarCorrupt(document_id=document_id, path=str(exc.path)))
        session = cls(document_id, store, catalog, defaults, ledger=ledger, bus=bus, **kwargs)
        session._push()
        log.info("Opened %s with %d tweak(s)", document_id, len(ledger))
        return session

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    # --- selection ------------------------------------------------------------

    def propose(
        self,
        chain: Sequence[NodeDescriptor],
        order: ChainOrder = ChainOrder.ROOT_FIRST,
    ) -> Proposal:
        return propose(chain, order=order, policy=self.policy)

    # --- mutations ------------------------------------------------------------

    def apply(self, selector: ClassSelector, style_name: str) -> Ledger:
        """Apply the catalog style *style_name* to *selector*.

        The declaration text is copied from the catalog now; later catalog
        changes do not affect this record.

        Raises:
            UnknownStyle: *style_name* is not in the catalog.
            PersistenceFailure: the sidecar write failed; nothing changed.
        """
        style = self.catalog.get(style_name)
        promoted = self._ledger.promotes(selector, style.name, style.declaration_text)
        self._commit(self._ledger.apply(selector, style.name, style.declaration_text))
        log.info("%s applied to %s", style.name, selector)
        self.bus.emit(
            TweakApplied(
                document_id=self.document_id,
                selector=str(selector),
                style=style.name,
                promoted=promoted,
            )
        )
        return self._ledger

    def apply_choice(self, selection: Proposal, index: int, style_name: str) -> Ledger:
        """Apply *style_name* to the candidate picked from *selection*."""
        self.catalog.get(style_name)
        return self.apply(resolve(selection, index), style_name)

    def apply_to_selection(
        self,
        chain: Sequence[NodeDescriptor],
        style_name: str,
        interviewer: Interviewer | None = None,
        order: ChainOrder = ChainOrder.ROOT_FIRST,
    ) -> Ledger | Proposal | None:
        """Resolve *chain* and apply *style_name* to the target.

        Returns the new ledger when applied. An ambiguous selection with no
        interviewer returns the pending proposal untouched; a skipped or
        timed-out answer returns None.
        """
        self.catalog.get(style_name)
        proposal = self.propose(chain, order=order)
        if not proposal.is_ambiguous:
            return self.apply_choice(proposal, 0, style_name)
        if interviewer is None:
            return proposal

        question = proposal.to_question()
        answer = interviewer.ask(question)
        index = answer_index(question, answer)
        if index is None:
            log.info("No target chosen for %s", style_name)
            return None
        return self.apply_choice(proposal, index, style_name)

    def import_css(self, source: str) -> Ledger:
        """Append the class rules of a plain CSS blob as style-less records."""
        new_ledger = import_css(self._ledger, source)
        added = len(new_ledger) - len(self._ledger)
        self._commit(new_ledger)
        log.info("Imported CSS into %s (%+d record(s))", self.document_id, added)
        return self._ledger

    def undo_last(self) -> Ledger:
        """Remove the most recent tweak; a no-op on an empty ledger."""
        try:
            new_ledger = self._ledger.undo_last()
        except EmptyLedger:
            log.info("Nothing to undo for %s", self.document_id)
            self.bus.emit(NothingToUndo(document_id=self.document_id))
            return self._ledger
        removed = self._ledger.last
        self._commit(new_ledger)
        self.bus.emit(TweakUndone(document_id=self.document_id, selector=str(removed.selector)))
        return self._ledger

    def undo_all(self) -> Ledger:
        count = len(self._ledger)
        self._commit(self._ledger.undo_all())
        self.bus.emit(TweaksCleared(document_id=self.document_id, count=count))
        return self._ledger

    def _commit(self, new_ledger: Ledger) -> None:
        try:
            self.store.save(self.document_id, new_ledger)
        except PersistenceFailure as exc:
            log.warning("Rolled back tweak for %s: %s", self.document_id, exc)
            self.bus.emit(LedgerRolledBack(document_id=self.document_id, error=str(exc)))
            raise
        self._ledger = new_ledger
        self._push()

    # --- rendering ------------------------------------------------------------

    def stylesheet(self, live: Bindings | None = None) -> str:
        """Synthesize CSS for the current ledger.

        Uses *live*, or the last values passed to :meth:`refresh`. Live
        fields left unbound fall back to the defaults, so no placeholder
        reaches the renderer.
        """
        live = live if live is not None else self.live
        effective = self.defaults.overlay(live) if live is not None else self.defaults
        return build(self._ledger, self.defaults, effective)

    def refresh(self, live: Bindings) -> str:
        """Record new live settings and push the re-synthesized CSS."""
        self.live = live
        return self._push()

    def report(self, chain: Sequence[NodeDescriptor] | None = None) -> str:
        """Render the inspection page, including the selection if given."""
        selection = self.propose(chain) if chain else None
        return render_report(self._ledger, self.catalog, selection)

    def _push(self) -> str:
        css = self.stylesheet()
        if self.sink is not None:
            self.sink.set_extra_css(css)
        return css
