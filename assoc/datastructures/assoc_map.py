from __future__ import annotations

import operator
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from ..errors import AbsentValueError
from .assoc_list import ABSENT, AssocList, KeyEqual, diff, disj, find, fold, join, replace

K = TypeVar("K")
V = TypeVar("V")
X = TypeVar("X")


def _prefer_right(left: Any, right: Any) -> Any:
    return left if right is ABSENT else right


def _keep_left(left: Any, right: Any) -> Any:
    return left


class AssocMap(Generic[K, V]):
    """A persistent, dict-like view over :class:`AssocList`.

    Updates (``set``, ``delete``, merges) return a new map and leave this one
    untouched. Keys are compared with `key_equal` (``==`` by default), so
    unhashable keys or custom notions of equality work as well.
    """

    __slots__ = ("_alist", "_key_equal")

    def __init__(
        self,
        it: Optional[Iterable[Tuple[K, V]]] = None,
        key_equal: KeyEqual = operator.eq,
        **kwargs: V,
    ) -> None:
        self._key_equal = key_equal
        self._alist: AssocList[K, V] = AssocList.empty()
        if it is not None:
            # Accept dict-like or iterable of pairs
            if hasattr(it, "items"):
                it = it.items()  # type: ignore[attr-defined]
            for k, v in it:
                self._alist = self._put(self._alist, k, v)
        for k, v in kwargs.items():
            self._alist = self._put(self._alist, k, v)  # type: ignore[arg-type]

    # ------------------------------- internals -------------------------------

    def _put(self, al: AssocList[K, V], key: K, value: V) -> AssocList[K, V]:
        if value is ABSENT:
            raise AbsentValueError(key)
        return replace(al, key, self._key_equal, value)[0]

    def _derive(self, al: AssocList[K, Any]) -> "AssocMap[K, Any]":
        out = self.__class__.__new__(self.__class__)
        out._key_equal = self._key_equal
        out._alist = al
        return out

    @staticmethod
    def _as_alist(other: Union["AssocMap[K, Any]", AssocList[K, Any]]) -> AssocList[K, Any]:
        return other._alist if isinstance(other, AssocMap) else other

    # --------------------------------- API -----------------------------------

    @property
    def alist(self) -> AssocList[K, V]:
        """The backing association list."""
        return self._alist

    @property
    def key_equal(self) -> KeyEqual:
        return self._key_equal

    def __getitem__(self, key: K) -> V:
        val = find(self._alist, key, self._key_equal)
        if val is ABSENT:
            raise KeyError(key)
        return val

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        val = find(self._alist, key, self._key_equal)
        return default if val is ABSENT else val

    def __contains__(self, key: K) -> bool:
        return find(self._alist, key, self._key_equal) is not ABSENT

    def set(self, key: K, value: V) -> "AssocMap[K, V]":
        """Return a new map with `key` bound to `value`."""
        return self._derive(self._put(self._alist, key, value))

    def delete(self, key: K) -> "AssocMap[K, V]":
        """Return a new map without `key`; KeyError if it is not bound."""
        al, old = replace(self._alist, key, self._key_equal, ABSENT)
        if old is ABSENT:
            raise KeyError(key)
        return self._derive(al)

    def discard(self, key: K) -> "AssocMap[K, V]":
        """Like :meth:`delete` but a missing key is not an error."""
        return self._derive(replace(self._alist, key, self._key_equal, ABSENT)[0])

    def union(
        self,
        other: Union["AssocMap[K, Any]", AssocList[K, Any]],
        combine: Optional[Callable[[Any, Any], X]] = None,
    ) -> "AssocMap[K, Any]":
        """Keys of both maps, valued by `combine(left, right)`.

        A side missing the key is passed as ABSENT. By default the other map's
        value wins on overlap.
        """
        fn = combine if combine is not None else _prefer_right
        return self._derive(disj(self._alist, self._as_alist(other), self._key_equal, fn))

    def intersection(
        self,
        other: Union["AssocMap[K, Any]", AssocList[K, Any]],
        combine: Optional[Callable[[V, Any], X]] = None,
    ) -> "AssocMap[K, Any]":
        """Keys bound in both maps; by default this map's value is kept."""
        fn = combine if combine is not None else _keep_left
        return self._derive(join(self._alist, self._as_alist(other), self._key_equal, fn))

    def difference(self, other: Union["AssocMap[K, Any]", AssocList[K, Any]]) -> "AssocMap[K, V]":
        """Keys of this map that the other does not bind."""
        return self._derive(diff(self._alist, self._as_alist(other), self._key_equal))

    def fold(self, seed: X, combine: Callable[[K, V, X], X]) -> X:
        return fold(self._alist, seed, combine)

    def keys(self) -> List[K]:
        return [k for k, _ in self._alist]

    def values(self) -> List[V]:
        return [v for _, v in self._alist]

    def items(self) -> List[Tuple[K, V]]:
        return self._alist.to_list()

    def __len__(self) -> int:
        return len(self._alist)

    def __iter__(self) -> Iterator[K]:
        # Iterate over keys to match dict-like iteration
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        """Same keys (under this map's equality) bound to equal values, in any order."""
        if not isinstance(other, AssocMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        for k, v in self._alist:
            if find(other._alist, k, self._key_equal) != v:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def to_py(self) -> Dict[K, V]:
        """Convert to a native *dict*; recursively uses ``to_py`` when present.

        Keys must be hashable for this conversion.
        """
        d: Dict[K, V] = {}
        for k, v in self._alist:
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                d[k] = v.to_py()  # type: ignore[assignment]
            else:
                d[k] = v
        return d

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self._alist)
        return f"AssocMap({{{pairs}}})"
