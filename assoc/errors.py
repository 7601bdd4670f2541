"""Exception hierarchy for the association-list engine.

The engine operations themselves never raise under well-formed input; these
classes cover the optional debug checks, the ABSENT marker being offered as
a value, and the CSV data layer.
"""

from __future__ import annotations

from typing import Any, Optional


class AssocListError(Exception):
    """Base class for every error raised by this package."""


class DuplicateKeyError(AssocListError):
    """Raised when an input holds two pairs whose keys compare equal."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"duplicate key in association list: {key!r}")


class AbsentValueError(AssocListError, ValueError):
    """Raised when the ABSENT marker is offered as a value to be stored."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"ABSENT cannot be stored as a value (key={key!r})")


class PairFileError(AssocListError):
    """A pair file could not be parsed."""

    def __init__(self, path: str, line: Optional[int], reason: str) -> None:
        self.path = path
        self.line = line
        self.reason = reason
        where = f"{path}:{line}" if line is not None else path
        super().__init__(f"{where}: {reason}")
