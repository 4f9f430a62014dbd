"""
Disjoint set (union-find) over the integers 0..size-1.

Uses path compression and union by rank, which together give an amortized
cost of O(log* n) per operation.
"""

from typing import Optional

from .result import OperationCounter


class DisjointSet:
    """
    Union-find with path compression and union by rank.

    Parameters
    ----------
    size : int
        Number of elements; element ids are 0..size-1.
    counter : OperationCounter, optional
        When given, every find, rank comparison and union is tallied on it.
    """

    def __init__(self, size: int, counter: Optional[OperationCounter] = None):
        self.parent = list(range(size))
        self.rank = [0] * size
        self.set_count = size
        self._counter = counter

    def __len__(self):
        return len(self.parent)

    def _tick(self, n=1):
        if self._counter is not None:
            self._counter.tick(n)

    def find(self, x: int) -> int:
        """
        Representative of the set containing x.

        Two passes: walk up to the root, then point every node on the walked
        path straight at it.
        """
        self._tick()
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
            self._tick()
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y.

        Returns False when they were already in the same set. On equal rank,
        y's root is attached under x's root.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        self._tick()
        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1
        self.set_count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)
