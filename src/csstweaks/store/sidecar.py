"""Sidecar store: persists each document's ledger outside the document.

Layout: {root}/{id[:2]}/{id}.json

The file holds a JSON list of ``{"selector", "declarationText"}`` objects
(plus an optional ``"style"``); list order is ledger order. A sidecar that
cannot be decoded is never overwritten: the first save after it moves it
aside to ``{id}.json.corrupt-{timestamp}``.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from csstweaks.engine.ledger import Ledger
from csstweaks.errors import CorruptStore, PersistenceFailure
from csstweaks.model.override import OverrideRecord

log = logging.getLogger("csstweaks.store")

_CHUNK_SIZE = 1 << 16

_DECODE_ERRORS = (UnicodeDecodeError, json.JSONDecodeError, KeyError, TypeError, ValueError)


def document_id(path: Path) -> str:
    """Stable identity for a document: SHA-256 of its bytes.

    Moving or renaming the file inside a library keeps the identity.
    """
    digest = hashlib.sha256()
    with Path(path).open("rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def _read_records(path: Path) -> list[OverrideRecord]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise TypeError("sidecar root must be a list")
    return [OverrideRecord.from_dict(entry) for entry in data]


class SidecarStore:
    """One JSON sidecar per document, keyed by document identity."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, doc_id: str) -> Path:
        """Get the sidecar path for a document identity."""
        if not doc_id or "/" in doc_id or "\\" in doc_id or doc_id.startswith("."):
            raise ValueError(f"Invalid document id: {doc_id!r}")
        return self.root / doc_id[:2] / f"{doc_id}.json"

    # --- persistence ----------------------------------------------------------

    def load(self, doc_id: str, strict: bool = False) -> Ledger:
        """Read the ledger for *doc_id*.

        Returns an empty ledger when no sidecar exists. A malformed sidecar
        is left on disk for inspection; it yields an empty ledger, or raises
        :class:`CorruptStore` when *strict* is set.
        """
        path = self.path_for(doc_id)
        if not path.exists():
            return Ledger()

        try:
            records = _read_records(path)
        except (OSError, *_DECODE_ERRORS) as exc:
            log.warning("Corrupt sidecar %s: %s", path, exc)
            if strict:
                raise CorruptStore(f"Corrupt sidecar {path}: {exc}", path=path, cause=exc) from exc
            return Ledger()

        return Ledger.from_records(records)

    def save(self, doc_id: str, ledger: Ledger) -> None:
        """Atomically replace the sidecar for *doc_id* with *ledger*.

        An existing sidecar that does not decode is renamed first, so its
        bytes survive for manual recovery.

        Raises:
            PersistenceFailure: the sidecar could not be written.
        """
        path = self.path_for(doc_id)
        payload = json.dumps([r.to_dict() for r in ledger], indent=2, ensure_ascii=False)

        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._preserve_unreadable(path)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{doc_id[:8]}-", suffix=".tmp", dir=path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise PersistenceFailure(
                f"Cannot write sidecar {path}: {exc}", path=path, cause=exc
            ) from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

        log.debug("Saved %d record(s) to %s", len(ledger), path)

    def _preserve_unreadable(self, path: Path) -> Path | None:
        """Rename *path* aside if it exists and does not decode."""
        if not path.exists():
            return None
        try:
            _read_records(path)
            return None
        except _DECODE_ERRORS:
            pass

        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%f")
        target = path.with_name(f"{path.name}.corrupt-{stamp}")
        os.replace(path, target)
        log.warning("Moved unreadable sidecar %s to %s", path, target)
        return target

    def corrupt_copies(self, doc_id: str) -> list[Path]:
        """List sidecars for *doc_id* that were moved aside, oldest first."""
        path = self.path_for(doc_id)
        if not path.parent.exists():
            return []
        return sorted(path.parent.glob(f"{path.name}.corrupt-*"))

    def exists(self, doc_id: str) -> bool:
        """Check if a sidecar exists for *doc_id*."""
        return self.path_for(doc_id).exists()

    def delete(self, doc_id: str) -> bool:
        """Remove the sidecar for *doc_id*.

        Returns:
            True if removed, False if not found
        """
        path = self.path_for(doc_id)
        if not path.exists():
            return False
        path.unlink()
        return True
