import logging

from .disjoint_set import DisjointSet
from .graph import WeightedGraph

logger = logging.getLogger(__name__)


class MSTValidator:
    """Checks that a candidate edge set is a spanning tree of a graph"""

    def validate(self, graph: WeightedGraph, edges) -> bool:
        n = graph.vertex_count
        edges = list(edges)
        if len(edges) != max(n - 1, 0):
            logger.debug("invalid: %d edges for %d vertices", len(edges), n)
            return False

        dsu = DisjointSet(n)
        for edge in edges:
            u, v = edge.source, edge.destination
            if not (0 <= u < n and 0 <= v < n):
                logger.debug("invalid: %r has an endpoint outside the graph", edge)
                return False
            if not dsu.union(u, v):
                logger.debug("invalid: %r closes a cycle", edge)
                return False

        # zero sets only for the empty graph
        return dsu.set_count <= 1


def is_spanning_tree(graph: WeightedGraph, edges) -> bool:
    return MSTValidator().validate(graph, edges)
