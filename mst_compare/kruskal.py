"""
Kruskal's algorithm: sorted edge scan over a disjoint set
"""

import logging
import math
import time
from operator import attrgetter

from .disjoint_set import DisjointSet
from .graph import WeightedGraph
from .result import MSTResult, OperationCounter

logger = logging.getLogger(__name__)


class KruskalEngine:
    """
    Accepts edges lightest-first unless they close a cycle

    The sort is stable, so equal weights are considered in insertion order and
    repeated runs on the same graph pick the same edges. On a disconnected graph
    the result is a minimum spanning forest with fewer than V-1 edges.
    Runs in O(E log E).
    """

    name = "kruskal"
    label = "Kruskal's Algorithm"

    def find_mst(self, graph: WeightedGraph) -> MSTResult:
        counter = OperationCounter()
        t0 = time.perf_counter()

        n = graph.vertex_count
        edges = sorted(graph.edges(), key=attrgetter("weight"))
        m = len(edges)
        counter.tick(m * max(1, math.ceil(math.log2(m))) if m else 0)

        dsu = DisjointSet(n, counter=counter)
        mst_edges = []
        total = 0
        for edge in edges:
            if len(mst_edges) >= n - 1:
                break
            counter.tick()
            if not dsu.union(edge.source, edge.destination):
                continue
            mst_edges.append(edge)
            total += edge.weight

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        result = MSTResult(
            algorithm=self.label,
            edges=mst_edges,
            total_cost=total,
            vertex_count=n,
            edge_count=m,
            operation_count=counter.count,
            execution_time_ms=elapsed_ms,
        )
        logger.debug(
            "%s: V=%d E=%d mst_edges=%d cost=%s ops=%d time=%.3fms",
            self.name, n, m, result.mst_edge_count, total, counter.count, elapsed_ms,
        )
        return result
