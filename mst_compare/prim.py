"""
Prim's algorithm, in a lazy heap variant and a dense O(V^2) array variant
"""

import heapq
import itertools
import logging
import time

import numpy as np

from .graph import WeightedGraph
from .result import MSTResult, OperationCounter

logger = logging.getLogger(__name__)


class PrimEngine:
    """
    Grows a tree from vertex 0 using a min-heap of candidate edges

    Stale candidates (far endpoint already in the tree) are discarded when
    popped instead of being removed from the heap. Heap entries carry a push
    sequence number, so equal weights pop in the order they were pushed.
    Runs in O(E log E).
    """

    name = "prim"
    label = "Prim's Algorithm"

    def find_mst(self, graph: WeightedGraph) -> MSTResult:
        counter = OperationCounter()
        t0 = time.perf_counter()
        edges, total = self._grow(graph, counter)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        result = MSTResult(
            algorithm=self.label,
            edges=edges,
            total_cost=total,
            vertex_count=graph.vertex_count,
            edge_count=graph.edge_count,
            operation_count=counter.count,
            execution_time_ms=elapsed_ms,
        )
        logger.debug(
            "%s: V=%d E=%d mst_edges=%d cost=%s ops=%d time=%.3fms",
            self.name, result.vertex_count, result.edge_count,
            result.mst_edge_count, result.total_cost, result.operation_count, elapsed_ms,
        )
        return result

    def _grow(self, graph, counter):
        n = graph.vertex_count
        if n == 0:
            return [], 0

        counter.tick()  # connectivity check
        if not graph.is_connected():
            return [], 0

        in_tree = [False] * n
        in_tree[0] = True
        counter.tick()

        seq = itertools.count()
        frontier = []
        for edge in graph.adjacent(0):
            heapq.heappush(frontier, (edge.weight, next(seq), edge))
            counter.tick()

        mst_edges = []
        total = 0
        while frontier and len(mst_edges) < n - 1:
            _w, _s, edge = heapq.heappop(frontier)
            counter.tick(2)  # pop + inclusion check
            v = edge.destination
            if in_tree[v]:
                continue

            mst_edges.append(edge)
            total += edge.weight
            in_tree[v] = True
            counter.tick()

            for nxt in graph.adjacent(v):
                counter.tick()
                if not in_tree[nxt.destination]:
                    heapq.heappush(frontier, (nxt.weight, next(seq), nxt))
                    counter.tick()

        return mst_edges, total


class PrimDenseEngine(PrimEngine):
    """
    Array-based Prim: each round scans all vertices for the smallest key

    O(V^2) time and memory, independent of the edge count, which suits dense
    graphs. Parallel edges collapse to the lightest (first inserted on ties);
    self-loops are ignored. Weights and keys live in object arrays so they are
    compared as the original Python values, with no float rounding.
    """

    name = "prim-dense"
    label = "Prim's Algorithm (Array-based)"

    def _grow(self, graph, counter):
        n = graph.vertex_count
        if n == 0:
            return [], 0

        counter.tick()  # connectivity check
        if not graph.is_connected():
            return [], 0

        all_edges = graph.edges()
        weights = np.zeros((n, n), dtype=object)
        present = np.zeros((n, n), dtype=bool)
        # index into all_edges of the lightest edge between each pair
        edge_at = np.full((n, n), -1, dtype=np.int64)
        for idx, edge in enumerate(all_edges):
            u, v = edge.source, edge.destination
            if u == v:
                continue
            if not present[u, v] or edge.weight < weights[u, v]:
                weights[u, v] = weights[v, u] = edge.weight
                present[u, v] = present[v, u] = True
                edge_at[u, v] = edge_at[v, u] = idx

        # key[v] is only meaningful where reached[v]
        key = np.zeros(n, dtype=object)
        reached = np.zeros(n, dtype=bool)
        parent = np.full(n, -1, dtype=np.int64)
        in_tree = np.zeros(n, dtype=bool)
        reached[0] = True

        mst_edges = []
        total = 0
        for _ in range(n):
            candidates = np.flatnonzero(reached & ~in_tree)
            counter.tick(n)  # linear scan for the minimum key
            if candidates.size == 0:
                break
            u = int(candidates[np.argmin(key[candidates])])

            in_tree[u] = True
            counter.tick()
            if parent[u] != -1:
                edge = all_edges[int(edge_at[parent[u], u])]
                if edge.source != parent[u]:
                    edge = edge.reversed()
                mst_edges.append(edge)
                total += edge.weight

            nbrs = np.flatnonzero(present[u] & ~in_tree)
            lighter = np.array(
                [not reached[v] or weights[u, v] < key[v] for v in nbrs], dtype=bool
            )
            improve = nbrs[lighter]
            counter.tick(n + int(improve.size))
            key[improve] = weights[u, improve]
            reached[improve] = True
            parent[improve] = u

        return mst_edges, total
