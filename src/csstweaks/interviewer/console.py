"""ConsoleInterviewer: prompts for the target element at the terminal."""

from __future__ import annotations

import signal
from typing import Any, Callable

from csstweaks.model.question import Answer, AnswerValue, Question


class ConsoleInterviewer:
    """Interviewer that uses stdin/stdout for interactive prompts.

    Lists the options by key, reads a key or label, and parses it into an
    Answer. An empty reply skips unless the question has a default.
    Supports an optional timeout (POSIX only, via SIGALRM).
    """

    def __init__(
        self,
        output: Callable[[str], None] = print,
        read: Callable[[str], str] = input,
    ) -> None:
        self._output = output
        self._read = read

    def ask(self, question: Question) -> Answer:
        self._output(f"  {question.text}")
        for opt in question.options:
            self._output(f"  [{opt.key}] {opt.label}")

        raw = self._get_input("  Choice: ", question.timeout_seconds)
        if raw is None:
            return Answer(value=AnswerValue.TIMEOUT)
        raw = raw.strip()
        if not raw:
            raw = question.default or ""
        if not raw:
            return Answer(value=AnswerValue.SKIPPED)

        # Match by option key
        for opt in question.options:
            if raw == opt.key:
                return Answer(value=opt.key, selected_option=opt, text=opt.label)

        # Match by label, or by the selector at the start of a label
        lowered = raw.lower()
        for opt in question.options:
            label = opt.label.strip().lower()
            if label == lowered or label.split(" ", 1)[0] == lowered:
                return Answer(value=opt.key, selected_option=opt, text=opt.label)

        return Answer(value=raw, text=raw)

    def _get_input(self, prompt: str, timeout: float | None) -> str | None:
        """Read input with optional timeout. Returns None on timeout or EOF."""
        if timeout is None or timeout <= 0:
            try:
                return self._read(prompt)
            except EOFError:
                return None

        def _handler(signum: Any, frame: Any) -> None:
            raise TimeoutError

        old_handler = signal.signal(signal.SIGALRM, _handler)
        try:
            signal.alarm(max(1, int(timeout)))
            return self._read(prompt)
        except (TimeoutError, EOFError):
            return None
        finally:
            signal.alarm(0)
            signal.signal(signal.SIGALRM, old_handler)
