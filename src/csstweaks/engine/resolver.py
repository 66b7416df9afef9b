"""Selector resolver: maps a tapped location to the element a tweak targets.

Two steps, usable independently of how the user is asked:

1. ``propose`` filters the ancestor chain to block-level elements and
   decides whether the target is obvious or needs a choice.
2. ``resolve`` turns the chosen candidate into a class selector.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from csstweaks.errors import NoClassAttribute, UnresolvableSelection
from csstweaks.model.node import NodeDescriptor
from csstweaks.model.question import Answer, Option, Question
from csstweaks.model.selector import ClassSelector


class ChainOrder(Enum):
    """Direction in which an ancestor chain is listed."""

    ROOT_FIRST = "root-first"
    LEAF_FIRST = "leaf-first"


class ClassTokenPolicy(Enum):
    """Which class tokens of an element are offered as selectors."""

    FIRST = "first"
    ALL = "all"


@dataclass(frozen=True)
class Candidate:
    """A block-level element the tweak could target.

    ``depth`` counts block ancestors outward from the selection (0 is the
    innermost). ``selector`` is None when the element has no class.
    """

    node: NodeDescriptor
    selector: ClassSelector | None
    depth: int

    @property
    def label(self) -> str:
        if self.selector is None:
            return f"<{self.node.tag}> (no class)"
        return f"{self.selector} <{self.node.tag}>"


@dataclass(frozen=True)
class Proposal:
    """Candidates for one selection, innermost first."""

    candidates: tuple[Candidate, ...]

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1

    @property
    def innermost(self) -> Candidate:
        return self.candidates[0]

    @property
    def most_comprehensive(self) -> Candidate:
        return self.candidates[-1]

    def selectors(self) -> list[str]:
        return [str(c.selector) for c in self.candidates if c.selector is not None]

    def to_question(self, text: str = "Apply the tweak to which element?") -> Question:
        options = [
            Option(key=str(i + 1), label=c.label) for i, c in enumerate(self.candidates)
        ]
        return Question(text=text, options=options, metadata={"proposal": self})


def propose(
    chain: Sequence[NodeDescriptor],
    order: ChainOrder = ChainOrder.ROOT_FIRST,
    policy: ClassTokenPolicy = ClassTokenPolicy.FIRST,
) -> Proposal:
    """Collect the tweak targets for a selection's ancestor chain.

    A single block ancestor, or nested blocks reached without any inline
    wrapper, resolve to the innermost block. When an inline wrapper sits in
    the chain and two or more block ancestors enclose the selection, every
    block ancestor is offered, innermost first.

    Raises:
        UnresolvableSelection: no block-level element in the chain.
    """
    leaf_first = list(chain)
    if order is ChainOrder.ROOT_FIRST:
        leaf_first.reverse()

    blocks = [n for n in leaf_first if n.is_block]
    if not blocks:
        raise UnresolvableSelection("Unable to determine CSS selector: no block-level element")

    has_wrapper = any(not n.is_block for n in leaf_first)
    targets = blocks if has_wrapper and len(blocks) > 1 else blocks[:1]

    candidates: list[Candidate] = []
    for depth, node in enumerate(targets):
        if not node.classes:
            candidates.append(Candidate(node=node, selector=None, depth=depth))
            continue
        tokens = node.classes if policy is ClassTokenPolicy.ALL else node.classes[:1]
        for token in tokens:
            candidates.append(
                Candidate(node=node, selector=ClassSelector(class_name=token), depth=depth)
            )
    return Proposal(candidates=tuple(candidates))


def resolve(selection: Proposal | Sequence[Candidate], index: int = 0) -> ClassSelector:
    """Return the selector of the candidate at *index*.

    Negative indices count from the end, so ``-1`` picks the most
    comprehensive element.

    Raises:
        NoClassAttribute: the chosen element has no class.
        IndexError: *index* is out of range.
    """
    candidates = selection.candidates if isinstance(selection, Proposal) else tuple(selection)
    if not candidates:
        raise IndexError("No candidates to choose from")
    candidate = candidates[index]
    if candidate.selector is None:
        raise NoClassAttribute(candidate.node.tag)
    return candidate.selector


def answer_index(question: Question, answer: Answer) -> int | None:
    """Map an interviewer answer back to a candidate index.

    Returns None for skipped, timed-out or unrecognised answers.
    """
    if answer.selected_option is not None and answer.selected_option in question.options:
        return question.index_of(answer.selected_option)
    if isinstance(answer.value, str):
        for i, opt in enumerate(question.options):
            if opt.key == answer.value:
                return i
    return None
