"""QueueInterviewer: hands the target choice to another thread via queues."""

from __future__ import annotations

import queue

from csstweaks.model.question import Answer, AnswerValue, Question


class QueueInterviewer:
    """Interviewer that uses a thread-safe queue pair for Q&A exchange.

    Questions are put onto ``question_queue``; answers are read from
    ``answer_queue``. A UI thread can show the candidate menu and reply
    while the session thread waits.
    """

    def __init__(
        self,
        question_queue: queue.Queue[Question] | None = None,
        answer_queue: queue.Queue[Answer] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.question_queue: queue.Queue[Question] = question_queue or queue.Queue()
        self.answer_queue: queue.Queue[Answer] = answer_queue or queue.Queue()
        self._timeout = timeout

    def ask(self, question: Question) -> Answer:
        self.question_queue.put(question)
        timeout = question.timeout_seconds if question.timeout_seconds is not None else self._timeout
        try:
            return self.answer_queue.get(timeout=timeout)
        except queue.Empty:
            return Answer(value=AnswerValue.TIMEOUT)

    def respond(self, answer: Answer) -> None:
        """Submit an answer from the UI side."""
        self.answer_queue.put(answer)

    def choose(self, question: Question, index: int) -> None:
        """Answer *question* by picking the option at *index*."""
        option = question.options[index]
        self.respond(Answer(value=option.key, selected_option=option, text=option.label))

    def pending_question(self, timeout: float | None = None) -> Question | None:
        """Retrieve a pending question, if any."""
        try:
            return self.question_queue.get(timeout=timeout)
        except queue.Empty:
            return None
