"""
Weighted undirected graph stored as an adjacency list over integer vertices
"""

from collections import deque

import networkx as nx


class VertexOutOfRange(nx.NodeNotFound):
    """Raised when a vertex id falls outside [0, vertex_count)"""

    def __init__(self, vertex, vertex_count):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex} out of range for graph with {vertex_count} vertices"
        )


class Edge:
    """
    Weighted undirected edge between two integer vertices

    Two edges are equal when their weights match and their endpoint sets match,
    so Edge(0, 1, 5) == Edge(1, 0, 5). Ordering compares weight only; sorting a
    list of edges is stable, so equal weights keep their original order.
    Edges are immutable; the graph hands out the same objects it stores.
    """

    __slots__ = ("source", "destination", "weight")

    def __init__(self, source: int, destination: int, weight):
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "destination", destination)
        object.__setattr__(self, "weight", weight)

    def __setattr__(self, name, value):
        raise AttributeError(f"Edge is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Edge is immutable; cannot delete {name!r}")

    def reversed(self) -> "Edge":
        return Edge(self.destination, self.source, self.weight)

    def other(self, vertex: int) -> int:
        """Endpoint opposite to vertex"""
        if vertex == self.source:
            return self.destination
        if vertex == self.destination:
            return self.source
        raise ValueError(f"Vertex {vertex} is not an endpoint of {self!r}")

    def is_self_loop(self) -> bool:
        return self.source == self.destination

    def endpoints(self) -> frozenset:
        return frozenset((self.source, self.destination))

    def as_dict(self) -> dict:
        return {"from": self.source, "to": self.destination, "cost": self.weight}

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        if self.weight != other.weight:
            return False
        return (self.source == other.source and self.destination == other.destination) or (
            self.source == other.destination and self.destination == other.source
        )

    def __hash__(self):
        lo, hi = sorted((self.source, self.destination))
        return hash((lo, hi, self.weight))

    def __lt__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __iter__(self):
        # allows `u, v, w = edge`
        yield self.source
        yield self.destination
        yield self.weight

    def __repr__(self):
        return f"Edge({self.source}-{self.destination}, weight={self.weight})"


class WeightedGraph:
    """
    Undirected weighted graph on vertices 0..vertex_count-1

    Every added edge is stored once in the edge list and twice in the
    adjacency list (one directed entry per endpoint). Self-loops and parallel
    edges are kept as given.
    """

    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self._n = int(vertex_count)
        self._edges = []
        self._adj = [[] for _ in range(self._n)]

    @classmethod
    def from_edges(cls, vertex_count: int, edges) -> "WeightedGraph":
        """Build a graph from an iterable of (u, v, weight) triples"""
        graph = cls(vertex_count)
        for u, v, w in edges:
            graph.add_edge(u, v, w)
        return graph

    @property
    def vertex_count(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def _check_vertex(self, v):
        if not 0 <= v < self._n:
            raise VertexOutOfRange(v, self._n)

    def add_edge(self, u: int, v: int, weight) -> Edge:
        self._check_vertex(u)
        self._check_vertex(v)
        edge = Edge(u, v, weight)
        self._edges.append(edge)
        self._adj[u].append(edge)
        # a self-loop shows up twice in its vertex's adjacency, like any other edge
        self._adj[v].append(edge.reversed())
        return edge

    def edges(self) -> list:
        """All edges in insertion order"""
        return list(self._edges)

    def adjacent(self, v: int) -> list:
        """Directed adjacency entries with source v"""
        self._check_vertex(v)
        return list(self._adj[v])

    def is_connected(self) -> bool:
        """BFS reachability from vertex 0; the empty graph counts as connected"""
        if self._n == 0:
            return True
        visited = [False] * self._n
        visited[0] = True
        reached = 1
        queue = deque([0])
        while queue:
            u = queue.popleft()
            for edge in self._adj[u]:
                w = edge.destination
                if not visited[w]:
                    visited[w] = True
                    reached += 1
                    queue.append(w)
        return reached == self._n

    def components(self) -> list:
        """
        Connected components as lists of vertices, found by BFS labeling
        Components come out in order of their smallest vertex.
        """
        label = [-1] * self._n
        comps = []
        for start in range(self._n):
            if label[start] != -1:
                continue
            comp_id = len(comps)
            label[start] = comp_id
            members = [start]
            queue = deque([start])
            while queue:
                u = queue.popleft()
                for edge in self._adj[u]:
                    w = edge.destination
                    if label[w] == -1:
                        label[w] = comp_id
                        members.append(w)
                        queue.append(w)
            comps.append(members)
        return comps

    def density(self) -> float:
        """Edge density as a percentage of the V*(V-1)/2 possible edges"""
        if self._n <= 1:
            return 0.0
        return (2.0 * len(self._edges)) / (self._n * (self._n - 1)) * 100.0

    def copy(self) -> "WeightedGraph":
        return WeightedGraph.from_edges(self._n, self._edges)

    def __len__(self):
        return self._n

    def __repr__(self):
        return (
            f"WeightedGraph(vertices={self._n}, edges={len(self._edges)}, "
            f"density={self.density():.2f}%)"
        )
