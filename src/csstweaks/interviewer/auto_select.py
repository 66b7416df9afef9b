"""AutoSelectInterviewer: answers target questions without user interaction."""

from __future__ import annotations

from csstweaks.model.question import Answer, AnswerValue, Question


class AutoSelectInterviewer:
    """Picks the innermost option, or the last (most comprehensive) one.

    Useful for batch tools and tests. Questions without options are
    answered as skipped.
    """

    def __init__(self, most_comprehensive: bool = False) -> None:
        self.most_comprehensive = most_comprehensive

    def ask(self, question: Question) -> Answer:
        if not question.options:
            return Answer(value=AnswerValue.SKIPPED)
        option = question.options[-1] if self.most_comprehensive else question.options[0]
        return Answer(value=option.key, selected_option=option, text=option.label)
