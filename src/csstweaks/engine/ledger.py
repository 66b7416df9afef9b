"""Override ledger: ordered per-document list of applied tweaks.

Order is the precedence mechanism. Records are emitted as CSS in ledger
order, so a later record beats an earlier one targeting the same selector
and property under ordinary source-order tie-breaking. Re-applying a tweak
moves it to the tail instead of duplicating it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from csstweaks.errors import EmptyLedger
from csstweaks.model.override import OverrideRecord
from csstweaks.model.selector import ClassSelector


@dataclass(frozen=True)
class Ledger:
    """Immutable snapshot of a document's overrides.

    Every operation returns a new ledger, which lets callers keep the
    previous snapshot around for rollback.
    """

    records: tuple[OverrideRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_records(cls, records: Iterable[OverrideRecord]) -> Ledger:
        return cls(records=tuple(records))

    # --- mutations ------------------------------------------------------------

    def apply(
        self,
        selector: ClassSelector,
        style: str | None,
        declaration_text: str,
    ) -> Ledger:
        """Append a record, first removing an existing one for the same tweak."""
        kept = tuple(
            r for r in self.records if not r.same_tweak(selector, style, declaration_text)
        )
        record = OverrideRecord(
            selector=selector,
            declaration_text=declaration_text,
            style=style,
        )
        return Ledger(records=kept + (record,))

    def undo_last(self) -> Ledger:
        """Drop the tail record. Raises :class:`EmptyLedger` if there is none."""
        if not self.records:
            raise EmptyLedger()
        return Ledger(records=self.records[:-1])

    def undo_all(self) -> Ledger:
        return Ledger()

    # --- queries --------------------------------------------------------------

    def promotes(self, selector: ClassSelector, style: str | None, declaration_text: str) -> bool:
        """Return True if applying this tweak would relocate an existing record."""
        return any(r.same_tweak(selector, style, declaration_text) for r in self.records)

    def for_selector(self, selector: ClassSelector) -> list[OverrideRecord]:
        return [r for r in self.records if r.selector == selector]

    @property
    def last(self) -> OverrideRecord | None:
        return self.records[-1] if self.records else None

    def __iter__(self) -> Iterator[OverrideRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)
