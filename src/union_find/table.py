"""Union-Find partition table over the integers ``0..n``.

A partition table holds a partition of a contiguous, fixed range of
integers. ``union`` merges two partitions; ``find`` names the partition
holding an element by returning its canonical element.

Two lookup families are offered:

- ``find`` / ``same`` compress the traversed path. They write to the
  table and so need exclusive access to it.
- ``find_only`` / ``same_only`` never write. They are slower on long
  chains but are safe for any holder of a shared reference, such as a
  :class:`PartitionView`.

Example::

    parity = UnionFind(20)
    for i in range(20):
        parity.union(i & 1, i)
    assert all(parity.find(i) == i & 1 for i in range(20))
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _collect_groups(parent: list[int]) -> dict[int, list[int]]:
    result: dict[int, list[int]] = {}
    for i in range(len(parent)):
        root = _walk(parent, i)
        result.setdefault(root, []).append(i)
    return result


def _walk(parent: list[int], i: int) -> int:
    while parent[i] != i:
        i = parent[i]
    return i


class UnionFind:
    """Partition table with unbalanced union and full path compression.

    ``union(i, j)`` points ``j`` at the current parent of ``i``, so the
    canonical element of the merged partition is the one ``i`` already
    had. There is no union-by-rank; ``find`` is the only balancing step.
    """

    __slots__ = ("_parent",)

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"table size must be an int, got {type(n).__name__}")
        if n < 0:
            raise ValueError(f"table size must be >= 0, got {n}")
        self._parent = list(range(n))
        logger.debug("Created partition table with %d elements", n)

    @classmethod
    def new(cls, n: int) -> UnionFind:
        """Create a table of ``n`` singleton partitions. Running time O(n)."""
        return cls(n)

    def __len__(self) -> int:
        return len(self._parent)

    def __repr__(self) -> str:
        return f"UnionFind(n={len(self._parent)}, parent={self._parent!r})"

    @property
    def parent(self) -> tuple[int, ...]:
        """Snapshot of the parent array."""
        return tuple(self._parent)

    def parent_of(self, i: int) -> int:
        """Return the parent pointer of ``i`` without copying the array."""
        self._check(i)
        return self._parent[i]

    def _check(self, i: int) -> None:
        n = len(self._parent)
        if not 0 <= i < n:
            raise IndexError(f"element {i} out of range for table of size {n}")

    def union(self, i: int, j: int) -> None:
        """Merge the partitions containing ``i`` and ``j``.

        The canonical element of the merged partition is the canonical
        element ``i`` had before the call. Only ``j``'s slot is written,
        and it is set to the parent of ``i``, not to the root of ``i``.
        Running time O(1).
        """
        self._check(i)
        self._check(j)
        self._parent[j] = self._parent[i]

    def find(self, i: int) -> int:
        """Return the canonical element of the partition containing ``i``.

        Every element on the path from ``i`` is repointed straight at the
        root, giving amortized O(alpha(n)) running time.
        """
        self._check(i)
        parent = self._parent
        root = _walk(parent, i)
        while i != root:
            parent[i], i = root, parent[i]
        return root

    def find_only(self, i: int) -> int:
        """Return the canonical element of the partition containing ``i``.

        Read-only: no compression is done, so a long chain built by
        repeated ``union`` calls costs O(n) on every call. Prefer
        :meth:`find` wherever the table may be written.
        """
        self._check(i)
        return _walk(self._parent, i)

    def same(self, i: int, j: int) -> bool:
        """Return True iff ``i`` and ``j`` are in the same partition."""
        self._check(i)
        self._check(j)
        return self.find(i) == self.find(j)

    def same_only(self, i: int, j: int) -> bool:
        """Read-only variant of :meth:`same`, built on :meth:`find_only`."""
        self._check(i)
        self._check(j)
        return self.find_only(i) == self.find_only(j)

    def roots(self) -> list[int]:
        """Return the canonical elements in ascending order."""
        return [i for i, p in enumerate(self._parent) if i == p]

    def count(self) -> int:
        """Return the number of partitions."""
        return len(self.roots())

    def groups(self) -> dict[int, list[int]]:
        """Return all partitions as root -> member elements, without compressing."""
        return _collect_groups(self._parent)

    def view(self) -> PartitionView:
        """Return a read-only view of this table."""
        return PartitionView(self)


class PartitionView:
    """Read-only handle on a :class:`UnionFind`.

    Exposes only the lookups that never write, so it can be shared with
    any number of readers. The view is live: it sees later ``union`` and
    ``find`` calls made through the owning table.
    """

    __slots__ = ("_table",)

    def __init__(self, table: UnionFind) -> None:
        self._table = table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"PartitionView({self._table!r})"

    @property
    def parent(self) -> tuple[int, ...]:
        return self._table.parent

    def parent_of(self, i: int) -> int:
        return self._table.parent_of(i)

    def find_only(self, i: int) -> int:
        return self._table.find_only(i)

    def same_only(self, i: int, j: int) -> bool:
        return self._table.same_only(i, j)

    def roots(self) -> list[int]:
        return self._table.roots()

    def count(self) -> int:
        return self._table.count()

    def groups(self) -> dict[int, list[int]]:
        return self._table.groups()
