import logging
import math
import sys
from collections import defaultdict

import networkx as nx

from .compare import ENGINES, get_engine
from .disjoint_set import DisjointSet
from .graph import WeightedGraph
from .info import get_info

logger = logging.getLogger(__name__)


class NxMSTGraph:
    """
    Backend graph wrapper understood by NetworkX dispatch
    Holds a WeightedGraph over 0..n-1 and preserves original Python node labels
    """

    __networkx_backend__ = "mst"

    def __init__(self, graph: WeightedGraph, nodes, directed=False, orig_graph=None, weight="weight"):
        self._G = graph
        self._nodes = list(nodes)
        self._directed = directed
        self._orig_graph = orig_graph
        # edge attribute the weights were read from
        self._weight = weight
        self._index = {n: i for i, n in enumerate(self._nodes)}

    def is_directed(self) -> bool:
        return self._directed

    def is_multigraph(self) -> bool:
        return False

    def _edges_py(self):
        nodes = self._nodes
        return [(nodes[e.source], nodes[e.destination], {self._weight: e.weight}) for e in self._G.edges()]


def _component_sets_from_ids(nodes, component_ids):
    groups = defaultdict(set)
    for idx, comp_id in enumerate(component_ids):
        groups[int(comp_id)].add(nodes[idx])
    sorted_components = sorted(groups.values(), key=len, reverse=True)
    for component in sorted_components:
        yield component


def _weight_key(weight, edge_attrs):
    # networkx dispatch passes edge_attrs as {attr_name: default}
    if isinstance(edge_attrs, dict) and len(edge_attrs) == 1:
        key, default = next(iter(edge_attrs.items()))
        return key, 1 if default is None else default
    if isinstance(edge_attrs, str):
        return edge_attrs, 1
    return weight, 1


def convert_from_nx(G, weight="weight", edge_attrs=None, **kwargs):
    """
    Convert a NetworkX Graph -> NxMSTGraph
    - Nodes are relabeled to 0..n-1
    - Parallel edges collapsed to the lightest (no multigraph support)
    - Edges without the weight attribute get weight 1
    """
    key, default = _weight_key(weight, edge_attrs)
    nodes = list(G.nodes())
    index = {n: i for i, n in enumerate(nodes)}

    if G.is_multigraph():
        edge_dict = {}
        for u, v, data in G.edges(data=True):
            pair = (index[u], index[v])
            if not G.is_directed():
                pair = tuple(sorted(pair))
            w = data.get(key, default)
            if pair not in edge_dict or w < edge_dict[pair]:
                edge_dict[pair] = w
        edges = [(u, v, w) for (u, v), w in edge_dict.items()]
    else:
        edges = [(index[u], index[v], data.get(key, default)) for u, v, data in G.edges(data=True)]

    graph = WeightedGraph.from_edges(len(nodes), edges)
    return NxMSTGraph(graph, nodes, directed=G.is_directed(), orig_graph=G, weight=key)


def convert_to_nx(obj, **kwargs):
    """NxMSTGraph / WeightedGraph -> NetworkX Graph"""
    if isinstance(obj, NxMSTGraph):
        if getattr(obj, "_orig_graph", None) is not None:
            return obj._orig_graph
        H = nx.DiGraph() if obj.is_directed() else nx.Graph()
        H.add_nodes_from(obj._nodes)
        H.add_edges_from(obj._edges_py())
        return H
    if isinstance(obj, WeightedGraph):
        H = nx.Graph()
        H.add_nodes_from(range(obj.vertex_count))
        H.add_weighted_edges_from((e.source, e.destination, e.weight) for e in obj.edges())
        return H
    return obj


def can_run(name, args, kwargs):
    return name in (
        "connected_components",
        "minimum_spanning_tree",
    )


def should_run(name, args, kwargs):
    return True


def _nx_minimum_spanning_tree(G, weight, algorithm, ignore_nan):
    if algorithm.lower().replace("_", "-") == "prim-dense":
        algorithm = "prim"
    return nx.minimum_spanning_tree(
        convert_to_nx(G), weight=weight, algorithm=algorithm, ignore_nan=ignore_nan
    )


def _has_nan_weight(graph):
    return any(isinstance(e.weight, float) and math.isnan(e.weight) for e in graph.edges())


def minimum_spanning_tree(G, weight="weight", algorithm="kruskal", ignore_nan=False):
    """
    Backend implementation for nx.minimum_spanning_tree
    Uses the Kruskal, Prim or dense Prim engine
    If ignore_nan is True or the algorithm is not one of ours (e.g. Boruvka), falls back to Python NetworkX
    NaN weights and Prim on a disconnected graph also fall back; networkx raises for the former
    and returns a spanning forest for the latter
    """
    algo = algorithm.lower().replace("_", "-")
    if ignore_nan or algo not in ENGINES:
        logger.debug("minimum_spanning_tree(algorithm=%r, ignore_nan=%r): using networkx", algorithm, ignore_nan)
        return _nx_minimum_spanning_tree(G, weight, algorithm, ignore_nan)
    try:
        H = G if isinstance(G, NxMSTGraph) else convert_from_nx(G, weight=weight)
        if H.is_directed():
            raise nx.NetworkXNotImplemented("minimum_spanning_tree requires an undirected graph")
        if _has_nan_weight(H._G):
            logger.debug("NaN edge weight: using networkx")
            T = None
        elif algo != "kruskal" and not H._G.is_connected():
            logger.debug("%s on a disconnected graph: using networkx spanning forest", algo)
            T = None
        else:
            result = get_engine(algo).find_mst(H._G)
            T = nx.Graph()
            T.add_nodes_from(H._nodes)
            for edge in result.edges:
                T.add_edge(H._nodes[edge.source], H._nodes[edge.destination], **{weight: edge.weight})
    except Exception:
        logger.debug("minimum_spanning_tree failed; falling back to networkx", exc_info=True)
        T = None
    if T is None:
        return _nx_minimum_spanning_tree(G, weight, algorithm, ignore_nan)
    return T


def connected_components(G, method="union-find", **kwargs):
    """
    Backend implementation for nx.connected_components
    Compute connected components using either a disjoint set (default) or BFS
    Returns components sorted by size in descending order
    """
    method_normalized = method.lower().replace("_", "-")
    if method_normalized not in ("union-find", "bfs"):
        raise ValueError(f"Unknown method for connected_components: {method}")
    try:
        if isinstance(G, NxMSTGraph):
            if G.is_directed():
                raise nx.NetworkXNotImplemented("connected_components is defined for undirected graphs")
            graph = G._G
            if method_normalized == "union-find":
                dsu = DisjointSet(graph.vertex_count)
                for edge in graph.edges():
                    dsu.union(edge.source, edge.destination)
                component_ids = [dsu.find(v) for v in range(graph.vertex_count)]
            else:
                component_ids = [0] * graph.vertex_count
                for comp_id, members in enumerate(graph.components()):
                    for v in members:
                        component_ids[v] = comp_id
            return _component_sets_from_ids(G._nodes, component_ids)
        return connected_components(convert_from_nx(G), method=method, **kwargs)
    except Exception:
        logger.debug("connected_components failed; falling back to networkx", exc_info=True)
        G = convert_to_nx(G)
        return nx.connected_components(G)


def connected_components_union_find(G, **kwargs):
    return connected_components(G, method="union-find", **kwargs)


def connected_components_bfs(G, **kwargs):
    return connected_components(G, method="bfs", **kwargs)


def is_connected(G):
    """BFS connectivity; unlike nx.is_connected, the null graph counts as connected"""
    H = G if isinstance(G, NxMSTGraph) else convert_from_nx(G)
    return H._G.is_connected()


backend = sys.modules[__name__]

