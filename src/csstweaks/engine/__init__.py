"""Engine: selector resolution and the override ledger.

The session lives in :mod:`csstweaks.engine.session`; it depends on the
stylesheet package, which in turn builds on the ledger.
"""

from csstweaks.engine.ledger import Ledger
from csstweaks.engine.resolver import (
    Candidate,
    ChainOrder,
    ClassTokenPolicy,
    Proposal,
    answer_index,
    propose,
    resolve,
)

__all__ = [
    "Candidate",
    "ChainOrder",
    "ClassTokenPolicy",
    "Ledger",
    "Proposal",
    "answer_index",
    "propose",
    "resolve",
]
