"""Data model: selectors, nodes, styles, bindings, overrides and questions."""

from csstweaks.model.bindings import Bindings, TextAlign
from csstweaks.model.node import BLOCK_TAGS, NodeDescriptor, parse_chain, parse_node
from csstweaks.model.override import OverrideRecord
from csstweaks.model.question import Answer, AnswerValue, Option, Question
from csstweaks.model.selector import ClassSelector
from csstweaks.model.style import DEFAULT_STYLES, StyleCatalog, StyleDefinition

__all__ = [
    "Answer",
    "AnswerValue",
    "BLOCK_TAGS",
    "Bindings",
    "ClassSelector",
    "DEFAULT_STYLES",
    "NodeDescriptor",
    "Option",
    "OverrideRecord",
    "Question",
    "StyleCatalog",
    "StyleDefinition",
    "TextAlign",
    "parse_chain",
    "parse_node",
]
