"""Persistent association lists with caller-supplied key equality."""

from .datastructures import ABSENT, AssocList, AssocMap, check_unique, diff, disj, find, fold, join, replace
from .errors import AssocListError, DuplicateKeyError, AbsentValueError, PairFileError

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "AssocList",
    "AssocMap",
    "check_unique",
    "diff",
    "disj",
    "find",
    "fold",
    "join",
    "replace",
    "AssocListError",
    "DuplicateKeyError",
    "AbsentValueError",
    "PairFileError",
]
