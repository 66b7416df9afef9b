"""Selector model: the single class-qualified selector shape tweaks target."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Characters of a class token that must be backslash-escaped in a selector.
_SPECIAL = frozenset("!\"#$%&'()*+,./:;<=>?@[\\]^`{|}~")

# A serialized class name: plain characters or backslash escapes, nothing
# that would start a combinator, pseudo-class or second selector.
_SERIALIZED_RE = re.compile(
    r"""
    ^(?:
        \\[0-9a-fA-F]{1,6}\s?       # hex escape, optional terminating space
      | \\[^\n0-9a-fA-F]            # escaped literal character
      | [^\s\\!"\#$%&'()*+,./:;<=>?@\[\]^`{|}~]
    )+$
    """,
    re.VERBOSE,
)
_ESCAPE_RE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})\s?|(.))")


def escape_class(name: str) -> str:
    """Serialize *name* as a CSS identifier."""
    out: list[str] = []
    for i, ch in enumerate(name):
        if ch.isdigit() and (i == 0 or (i == 1 and name[0] == "-")):
            out.append(f"\\{ord(ch):x} ")
        elif ch in _SPECIAL:
            out.append(f"\\{ch}")
        else:
            out.append(ch)
    return "".join(out)


def unescape_class(text: str) -> str:
    def _sub(m: re.Match[str]) -> str:
        if m.group(1) is not None:
            return chr(int(m.group(1), 16))
        return m.group(2)

    return _ESCAPE_RE.sub(_sub, text)


@dataclass(frozen=True)
class ClassSelector:
    """A ``.classname`` selector.

    ``class_name`` holds the raw token from the class attribute; it may
    contain characters such as ``:`` that are escaped when the selector is
    rendered. Only class selectors are addressable.
    """

    class_name: str
    kind: str = "class"

    def __post_init__(self) -> None:
        if not self.class_name or any(ch.isspace() for ch in self.class_name):
            raise ValueError(f"Invalid class name: {self.class_name!r}")

    @classmethod
    def parse(cls, raw: str) -> ClassSelector:
        """Parse ``.name`` (or a bare ``name``) into a selector.

        Backslash escapes are decoded. Anything else, such as a descendant
        combinator or a pseudo-class, raises ValueError.
        """
        raw = raw.strip()
        if raw.startswith("."):
            raw = raw[1:]
        if not _SERIALIZED_RE.match(raw):
            raise ValueError(f"Not a single class selector: {raw!r}")
        return cls(class_name=unescape_class(raw))

    def __str__(self) -> str:
        return f".{escape_class(self.class_name)}"
