"""CallbackInterviewer: lets an embedding reader answer target questions."""

from __future__ import annotations

from typing import Callable

from csstweaks.model.question import Answer, Question


class CallbackInterviewer:
    """Hands the target question to *choose*, typically a reader's menu.

    The candidate proposal travels in ``question.metadata["proposal"]`` for
    callers that want to highlight elements rather than read labels.
    """

    def __init__(self, choose: Callable[[Question], Answer]) -> None:
        self._choose = choose

    def ask(self, question: Question) -> Answer:
        return self._choose(question)
