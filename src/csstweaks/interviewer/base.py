"""The seam through which a session asks which element a tweak targets."""

from __future__ import annotations

from typing import Protocol

from csstweaks.model.question import Answer, Question


class Interviewer(Protocol):
    """Answers a target question built by ``Proposal.to_question``.

    Options are keyed "1".."n", innermost element first. Returning a
    skipped or timed-out answer leaves the ledger unchanged.
    """

    def ask(self, question: Question) -> Answer: ...
