"""
Backend metadata for networkx

networkx loads this through the `networkx.backend_info` entry point while it is
still importing, so this module must not import networkx or the engine modules.
"""


def get_info():
    return {
        "backend_name": "mst",
        "project": "mst-compare",
        "package": "mst-compare",
        "short_summary": "Pure-Python Prim and Kruskal MST engines with operation counting.",
        "default_config": {},
        "functions": {
            "connected_components": {
                "additional_docs": "Connected components via union-find (default) or BFS.",
                "additional_parameters": {
                    "method : str": "Either 'union-find' (default) or 'bfs'.",
                },
            },
            "minimum_spanning_tree": {
                "additional_docs": "Minimum spanning tree using Kruskal or Prim; Prim on disconnected input falls back to NetworkX.",
                "additional_parameters": {
                    "algorithm : str": "'kruskal' (default), 'prim' or 'prim-dense'.",
                    "weight : str": "Edge data key for weight extraction during conversion (default 'weight').",
                    "ignore_nan : bool": "If True, falls back to NetworkX (default False).",
                },
            },
        },
    }
