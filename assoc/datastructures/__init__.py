from .assoc_list import ABSENT, AssocList, check_unique, diff, disj, find, fold, join, replace
from .assoc_map import AssocMap

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
]
