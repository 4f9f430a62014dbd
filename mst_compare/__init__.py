from importlib import import_module

_EXPORTS = {
    "Edge": "graph",
    "WeightedGraph": "graph",
    "VertexOutOfRange": "graph",
    "DisjointSet": "disjoint_set",
    "MSTResult": "result",
    "OperationCounter": "result",
    "PrimEngine": "prim",
    "PrimDenseEngine": "prim",
    "KruskalEngine": "kruskal",
    "MSTValidator": "validator",
    "is_spanning_tree": "validator",
    "ENGINES": "compare",
    "get_engine": "compare",
    "run_comparison": "compare",
    "compare_results": "compare",
    "summarize": "compare",
    "NxMSTGraph": "backend",
    "backend": "backend",
    "convert_from_nx": "backend",
    "convert_to_nx": "backend",
    "get_info": "info",
    "minimum_spanning_tree": "backend",
    "connected_components": "backend",
    "connected_components_union_find": "backend",
    "connected_components_bfs": "backend",
    "is_connected": "backend",
}

__all__ = list(_EXPORTS)


def __getattr__(name):
    """
    lazily expose names from the submodules; networkx loads mst_compare.backend
    through its entry point, so importing it eagerly here would be circular
    """
    if name in _EXPORTS:
        module = import_module(f"mst_compare.{_EXPORTS[name]}")
        return getattr(module, name)
    raise AttributeError(f"module 'mst_compare' has no attribute {name!r}")
