import random

import networkx as nx

from mst_compare import (
    KruskalEngine,
    MSTValidator,
    PrimDenseEngine,
    PrimEngine,
    WeightedGraph,
    compare_results,
)


def make_weighted_graph(n=1500, extra=6000, seed=7):
    rng = random.Random(seed)
    G = WeightedGraph(n)
    order = list(range(n))
    rng.shuffle(order)
    for a, b in zip(order, order[1:]):
        G.add_edge(a, b, rng.randint(1, 1000))
    for _ in range(extra):
        G.add_edge(rng.randrange(n), rng.randrange(n), rng.randint(1, 1000))
    return G


def networkx_weight(G):
    H = nx.Graph()
    for u, v, w in G.edges():
        if u != v and (not H.has_edge(u, v) or w < H[u][v]["weight"]):
            H.add_edge(u, v, weight=w)
    T = nx.minimum_spanning_tree(H, weight="weight")
    return sum(d["weight"] for _u, _v, d in T.edges(data=True))


def main():
    print("=== Minimum Spanning Tree Demo ===")
    G = make_weighted_graph()
    print(f"Graph has {G.vertex_count} vertices and {G.edge_count} edges ({G.density():.3f}% dense)")
    print(f"Connected: {G.is_connected()}")

    prim = PrimEngine().find_mst(G)
    kruskal = KruskalEngine().find_mst(G)
    dense = PrimDenseEngine().find_mst(G)

    validator = MSTValidator()
    for result in (prim, kruskal, dense):
        print(
            f"{result.algorithm}: cost={result.total_cost} edges={result.mst_edge_count} "
            f"ops={result.operation_count} time={result.execution_time_ms:.3f}ms "
            f"valid={validator.validate(G, result.edges)}"
        )

    cmp = compare_results(prim, kruskal)
    print(f"\nTotal costs match: {cmp.costs_match}")
    print(f"{cmp.faster} was faster by {cmp.time_diff_ms:.3f} ms")
    print(f"{cmp.fewer_operations} performed {cmp.operation_diff} fewer operations")
    print("NetworkX agrees:", networkx_weight(G) == prim.total_cost == dense.total_cost)


if __name__ == "__main__":
    main()
