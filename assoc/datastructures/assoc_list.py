from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from .. import config
from ..errors import AbsentValueError, DuplicateKeyError

K = TypeVar("K")
V = TypeVar("V")
W = TypeVar("W")
X = TypeVar("X")

KeyEqual = Callable[[Any, Any], bool]

logger = logging.getLogger(__name__)


class _Absent:
    """Marker for "no value": a key that is unbound, or a delete request.

    There is exactly one instance, :data:`ABSENT`. It is falsy so that
    combinators can write ``left or default``.
    """

    __slots__ = ()
    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


class _Node:
    """An immutable link in an association list.

    Nodes are shared between lists, so they must never change once built.
    """

    __slots__ = ("key", "value", "next")

    def __init__(self, key: Any, value: Any, next: Optional["_Node"] = None) -> None:
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "next", next)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


def _build(pairs: List[Tuple[Any, Any]], tail: Optional[_Node] = None) -> Optional[_Node]:
    """Link `pairs` in order in front of `tail` (which is reused, not copied)."""
    head = tail
    for key, value in reversed(pairs):
        head = _Node(key, value, head)
    return head


def _scan(node: Optional[_Node], key: Any, key_equal: KeyEqual) -> Optional[_Node]:
    """Return the first node from `node` onwards whose key matches `key`."""
    while node is not None:
        if key_equal(key, node.key):
            return node
        node = node.next
    return None


def _storable(key: Any, value: Any) -> Any:
    if value is ABSENT:
        raise AbsentValueError(key)
    return value


class AssocList(Generic[K, V]):
    """A persistent singly-linked list of (key, value) pairs.

    Implementation notes
    --------------------
    • Immutable: every operation returns a new list; nodes are never mutated.
    • Unchanged suffixes are shared between an input and its result.
    • :data:`ABSENT` marks a missing value; any other object, ``None``
      included, can be stored.
    • Keys are only ever compared through a caller-supplied predicate.
    • At most one pair per key is expected; this is not enforced unless
      ``config.CHECK_UNIQUE`` is set. With duplicates the first match wins.
    """

    __slots__ = ("_head",)

    def __init__(self, it: Optional[Iterable[Tuple[K, V]]] = None) -> None:
        pairs: List[Tuple[K, V]] = []
        if it is not None:
            for key, value in it:
                pairs.append((key, _storable(key, value)))
        object.__setattr__(self, "_head", _build(pairs))

    # ------------------------------- internals -------------------------------

    @classmethod
    def _wrap(cls, head: Optional[_Node]) -> "AssocList[Any, Any]":
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_head", head)
        return obj

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --------------------------------- API -----------------------------------

    @classmethod
    def empty(cls) -> "AssocList[K, V]":
        return cls._wrap(None)

    @classmethod
    def from_pairs(cls, it: Iterable[Tuple[K, V]]) -> "AssocList[K, V]":
        """Build a list holding `it`'s pairs in iteration order."""
        return cls(it)

    def prepend(self, key: K, value: V) -> "AssocList[K, V]":
        """Return a new list with (key, value) in front; this list becomes its tail.

        No key check is made, so prepending an existing key shadows it.
        """
        return self._wrap(_Node(key, _storable(key, value), self._head))

    def is_empty(self) -> bool:
        return self._head is None

    def to_list(self) -> List[Tuple[K, V]]:
        """Convert to a plain Python list of (key, value) tuples."""
        return list(self)

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs in link order."""
        node = self._head
        while node is not None:
            yield (node.key, node.value)
            node = node.next

    def __len__(self) -> int:
        """Number of pairs. O(n); the list keeps no size counter."""
        n = 0
        node = self._head
        while node is not None:
            n += 1
            node = node.next
        return n

    def __bool__(self) -> bool:
        return self._head is not None

    def __eq__(self, other: object) -> bool:
        """Pairwise equality in link order (keys compared with ``==``)."""
        if not isinstance(other, AssocList):
            return NotImplemented
        a, b = self._head, other._head
        while a is not None and b is not None:
            if a is b:
                return True  # shared suffix
            if a.key != b.key or a.value != b.value:
                return False
            a, b = a.next, b.next
        return a is None and b is None

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"AssocList({self.to_list()!r})"


# -----------------------------
# Debug-only precondition check
# -----------------------------

def check_unique(al: AssocList[K, V], key_equal: KeyEqual) -> None:
    """Raise :class:`DuplicateKeyError` if two keys of `al` compare equal. O(n²)."""
    node = al._head
    while node is not None:
        if _scan(node.next, node.key, key_equal) is not None:
            logger.debug("duplicate key %r found by check_unique", node.key)
            raise DuplicateKeyError(node.key)
        node = node.next


def _check_inputs(key_equal: KeyEqual, *lists: AssocList[Any, Any]) -> None:
    if not config.CHECK_UNIQUE:
        return
    for al in lists:
        check_unique(al, key_equal)


# -----------------------------
# Operations
# -----------------------------

def find(al: AssocList[K, V], key: K, key_equal: KeyEqual) -> Union[V, _Absent]:
    """Return the value of the first pair whose key matches `key`, else ABSENT."""
    node = _scan(al._head, key, key_equal)
    return ABSENT if node is None else node.value


def replace(
    al: AssocList[K, V],
    key: K,
    key_equal: KeyEqual,
    new_value: Union[V, _Absent],
) -> Tuple[AssocList[K, V], Union[V, _Absent]]:
    """Insert, update or delete `key` in one call.

    Returns ``(new_list, old_value)`` where `old_value` is ABSENT if `key`
    was unbound. The scan stops at the first match:

    • matched, `new_value` given    -> value replaced in place
    • matched, `new_value` ABSENT   -> pair removed
    • unmatched, `new_value` given  -> (key, new_value) appended at the tail
    • unmatched, `new_value` ABSENT -> `al` itself is returned

    Nodes after the match are shared with `al`; only the prefix is rebuilt.
    """
    _check_inputs(key_equal, al)

    prefix: List[Tuple[Any, Any]] = []
    node = al._head
    while node is not None and not key_equal(key, node.key):
        prefix.append((node.key, node.value))
        node = node.next

    if node is None:
        if new_value is ABSENT:
            logger.debug("replace: %r absent, nothing to delete", key)
            return al, ABSENT
        prefix.append((key, new_value))
        logger.debug("replace: appended %r", key)
        return AssocList._wrap(_build(prefix)), ABSENT

    if new_value is ABSENT:
        tail = node.next
    else:
        # The stored key is kept; it may differ from `key` under custom equality.
        tail = _Node(node.key, new_value, node.next)
    logger.debug("replace: %s %r", "removed" if new_value is ABSENT else "updated", key)
    return AssocList._wrap(_build(prefix, tail)), node.value


def diff(al1: AssocList[K, V], al2: AssocList[K, W], key_equal: KeyEqual) -> AssocList[K, V]:
    """Pairs of `al1` whose key is not bound in `al2`, in `al1`'s order.

    `al2`'s values are ignored. The part of `al1` after the last removed pair
    is shared with the result; if nothing is removed `al1` is returned.
    """
    _check_inputs(key_equal, al1, al2)

    kept: List[Tuple[Any, Any]] = []
    pending: List[Tuple[Any, Any]] = []  # kept since the last removal
    shared: Optional[_Node] = al1._head
    removed = False

    node = al1._head
    while node is not None:
        if _scan(al2._head, node.key, key_equal) is None:
            pending.append((node.key, node.value))
        else:
            kept.extend(pending)
            pending = []
            shared = node.next
            removed = True
        node = node.next

    if not removed:
        return al1
    return AssocList._wrap(_build(kept, shared))


def disj(
    al1: AssocList[K, V],
    al2: AssocList[K, W],
    key_equal: KeyEqual,
    combine: Callable[[Union[V, _Absent], Union[W, _Absent]], X],
) -> AssocList[K, X]:
    """Generalized union.

    One pair per key bound in either list, valued ``combine(v1, v2)`` where a
    side the key is missing from is passed as ABSENT. `combine` is never
    called with both sides ABSENT.

    Output holds `al1`'s keys in order, then keys found only in `al2` in
    `al2`'s order.
    """
    _check_inputs(key_equal, al1, al2)

    out: List[Tuple[Any, Any]] = []

    node = al1._head
    while node is not None:
        match = _scan(al2._head, node.key, key_equal)
        merged = combine(node.value, ABSENT if match is None else match.value)
        out.append((node.key, _storable(node.key, merged)))
        node = node.next

    # Keys shared with al1 were emitted above; only right-only keys remain.
    node = al2._head
    while node is not None:
        if _scan(al1._head, node.key, key_equal) is None:
            out.append((node.key, _storable(node.key, combine(ABSENT, node.value))))
        node = node.next

    return AssocList._wrap(_build(out))


def join(
    al1: AssocList[K, V],
    al2: AssocList[K, W],
    key_equal: KeyEqual,
    combine: Callable[[V, W], X],
) -> AssocList[K, X]:
    """Generalized intersection: ``combine(v1, v2)`` for keys bound in both lists.

    Keys bound on one side only are dropped. Output follows `al1`'s order.
    """
    _check_inputs(key_equal, al1, al2)

    out: List[Tuple[Any, Any]] = []
    node = al1._head
    while node is not None:
        match = _scan(al2._head, node.key, key_equal)
        if match is not None:
            out.append((node.key, _storable(node.key, combine(node.value, match.value))))
        node = node.next
    return AssocList._wrap(_build(out))


def fold(al: AssocList[K, V], seed: X, combine: Callable[[K, V, X], X]) -> X:
    """Right fold: ``combine(k1, v1, combine(k2, v2, ... combine(kn, vn, seed)))``."""
    acc = seed
    for key, value in reversed(al.to_list()):
        acc = combine(key, value, acc)
    return acc
