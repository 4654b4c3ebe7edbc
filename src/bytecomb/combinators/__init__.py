"""Parser combinators over byte views.

Module Organization:
- primitives.py: string() literal prefixes and the zero-width empty()
- structure.py: sequence() and choice()
- transform.py: map_()
- lookahead.py: optional(), not_followed_by(), followed_by()
- repetition.py: fold_zero_or_more(), fold_one_or_more(), zero_or_more(), one_or_more()

Every constructor returns an immutable Parser built once and reused for any
number of parse calls.
"""

from .lookahead import NotFollowedBy, followed_by, not_followed_by, optional
from .primitives import Literal, empty, string
from .repetition import (
    Fold,
    fold_one_or_more,
    fold_zero_or_more,
    one_or_more,
    zero_or_more,
)
from .structure import Choice, Sequence, choice, sequence
from .transform import Map, map_

__all__ = [
    "Choice",
    "Fold",
    "Literal",
    "Map",
    "NotFollowedBy",
    "Sequence",
    "choice",
    "empty",
    "fold_one_or_more",
    "fold_zero_or_more",
    "followed_by",
    "map_",
    "not_followed_by",
    "one_or_more",
    "optional",
    "sequence",
    "string",
    "zero_or_more",
]
