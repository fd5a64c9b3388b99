"""
Hash map with separate chaining and eager doubling.

Used as the node index of AdjacencyListGraph and as the settled set of the
Dijkstra engine. Keys only need ``__hash__`` and ``__eq__``.
"""

from typing import Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar
import logging

from errors import DuplicateKeyError, KeyNotFoundError, NullKeyError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_CAPACITY = 64
DEFAULT_LOAD_FACTOR_THRESHOLD = 0.8

logger = logging.getLogger(__name__)


class _Entry(Generic[K, V]):
    """Single key/value pair living in a bucket chain."""

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value


class ChainedMap(Generic[K, V]):
    """
    Key -> value store resolving collisions with per-bucket chains.

    The table doubles before any insertion that would take the load factor
    to the threshold, so ``size() / capacity()`` stays below it afterwards.
    Iteration runs in bucket order, which changes across resizes.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        load_factor_threshold: float = DEFAULT_LOAD_FACTOR_THRESHOLD,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if not 0.0 < load_factor_threshold <= 1.0:
            raise ValueError("load_factor_threshold must be in (0, 1]")
        self._load_factor_threshold = load_factor_threshold
        self._table: List[List[_Entry[K, V]]] = [[] for _ in range(capacity)]
        self._size = 0

    # --- Map API -------------------------------------------------------------

    def put(self, key: K, value: V) -> None:
        """
        Insert a new key.

        Raises NullKeyError for ``None`` and DuplicateKeyError if an equal key
        is already stored; the stored value is left untouched in that case.
        """
        if key is None:
            raise NullKeyError()
        if self.contains_key(key):
            raise DuplicateKeyError(key)

        # Small tables under a low threshold may need more than one doubling.
        while (self._size + 1) / len(self._table) >= self._load_factor_threshold:
            self._resize()

        self._table[self._index_for(key)].append(_Entry(key, value))
        self._size += 1

    def get(self, key: K) -> V:
        entry = self._find(key)
        if entry is None:
            raise KeyNotFoundError(key)
        return entry.value

    def contains_key(self, key: K) -> bool:
        return self._find(key) is not None

    def remove(self, key: K) -> V:
        """Delete ``key`` and return its value; KeyNotFoundError if absent."""
        if key is not None:
            chain = self._table[self._index_for(key)]
            for i, entry in enumerate(chain):
                if entry.key == key:
                    del chain[i]
                    self._size -= 1
                    return entry.value
        raise KeyNotFoundError(key)

    def clear(self) -> None:
        for chain in self._table:
            chain.clear()
        self._size = 0

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._table)

    def keys(self) -> Iterator[K]:
        for chain in self._table:
            for entry in chain:
                yield entry.key

    def values(self) -> Iterator[V]:
        for chain in self._table:
            for entry in chain:
                yield entry.value

    def items(self) -> Iterator[Tuple[K, V]]:
        for chain in self._table:
            for entry in chain:
                yield entry.key, entry.value

    # --- Python protocols ----------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __repr__(self) -> str:
        return f"ChainedMap(size={self._size}, capacity={len(self._table)})"

    # --- Internals -----------------------------------------------------------

    def _index_for(self, key: K) -> int:
        return abs(hash(key)) % len(self._table)

    def _find(self, key: K) -> Optional[_Entry[K, V]]:
        if key is None:
            return None
        for entry in self._table[self._index_for(key)]:
            if entry.key == key:
                return entry
        return None

    def _resize(self) -> None:
        old_table = self._table
        self._table = [[] for _ in range(len(old_table) * 2)]
        # Recount while rehashing rather than trusting the old counter.
        self._size = 0
        for chain in old_table:
            for entry in chain:
                self._table[self._index_for(entry.key)].append(entry)
                self._size += 1
        logger.debug("resized ChainedMap %d -> %d buckets", len(old_table), len(self._table))
