"""Question model: types for asking the user to pick a tweak target."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AnswerValue(Enum):
    """Answer values that carry no option."""

    SKIPPED = "SKIPPED"
    TIMEOUT = "TIMEOUT"


@dataclass(frozen=True)
class Option:
    """A single selectable option."""

    key: str
    label: str


@dataclass(frozen=True)
class Question:
    """A multiple-choice question posed while a tweak is pending."""

    text: str
    options: list[Option] = field(default_factory=list)
    default: str | None = None
    timeout_seconds: float | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def index_of(self, option: Option) -> int:
        return self.options.index(option)


@dataclass
class Answer:
    """The user's response to a Question."""

    value: AnswerValue | str | None = None
    selected_option: Option | None = None
    text: str = ""

    @property
    def was_skipped(self) -> bool:
        return self.value is AnswerValue.SKIPPED

    @property
    def timed_out(self) -> bool:
        return self.value is AnswerValue.TIMEOUT
