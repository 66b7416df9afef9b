"""Node descriptors for the ancestor chain of a tapped location."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Structural tags eligible as styling targets; everything else is an
# inline wrapper.
BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "center", "dd", "div",
        "dl", "dt", "figcaption", "figure", "footer", "h1", "h2", "h3", "h4",
        "h5", "h6", "header", "li", "main", "nav", "ol", "p", "pre",
        "section", "table", "ul",
    }
)

_NODE_RE = re.compile(
    r"""
    ^(?P<tag>[a-zA-Z][a-zA-Z0-9]*)      # tag name
    (?P<classes>(?:\.[_a-zA-Z0-9-]+)*)$ # zero or more .class tokens
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class NodeDescriptor:
    """One element of the ancestor chain.

    ``classes`` holds the tokens of the class attribute in document order;
    an empty tuple means the element has no class attribute.
    """

    tag: str
    classes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_block(self) -> bool:
        return self.tag.lower() in BLOCK_TAGS

    @property
    def class_attribute(self) -> str | None:
        return " ".join(self.classes) if self.classes else None

    @classmethod
    def from_attrs(cls, tag: str, class_attribute: str | None = None) -> NodeDescriptor:
        """Build a descriptor from a tag name and a raw class attribute."""
        tokens = tuple(class_attribute.split()) if class_attribute else ()
        return cls(tag=tag.lower(), classes=tokens)

    def __str__(self) -> str:
        return self.tag + "".join(f".{c}" for c in self.classes)


def parse_node(raw: str) -> NodeDescriptor:
    """Parse ``tag.class1.class2`` into a descriptor."""
    m = _NODE_RE.match(raw.strip())
    if not m:
        raise ValueError(f"Invalid node: {raw!r}")
    classes = tuple(c for c in m.group("classes").split(".") if c)
    return NodeDescriptor(tag=m.group("tag").lower(), classes=classes)


def parse_chain(raw: str) -> list[NodeDescriptor]:
    """Parse a root-to-leaf chain such as ``"div.outer > span > p.inner"``."""
    parts = [p for p in raw.split(">") if p.strip()]
    if not parts:
        raise ValueError("Empty ancestor chain")
    return [parse_node(p) for p in parts]
