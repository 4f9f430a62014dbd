import time

import networkx as nx
import mst_compare


def main():
    print("=== Connected Components Demo ===")
    G = nx.Graph()
    G.add_edges_from(
        [
            (0, 1),
            (1, 2),
            (3, 4),
            (4, 5),
            (6, 7),
        ]
    )

    print("Small graph components (NetworkX vs mst-compare union-find)")
    comps_py = [sorted(c) for c in nx.connected_components(G)]
    comps_mst = [sorted(c) for c in mst_compare.connected_components(G)]
    print("NetworkX   :", comps_py)
    print("mst-compare:", comps_mst)

    print("\nSwitching to BFS-based components from mst-compare")
    comps_bfs = [sorted(c) for c in mst_compare.connected_components(G, method="bfs")]
    print("mst-compare (BFS):", comps_bfs)
    print("Connected:", mst_compare.is_connected(G))

    print("\nTiming on a larger random graph")
    large = nx.gnp_random_graph(50_000, 0.0002, seed=2)
    t0 = time.time()
    _ = list(nx.connected_components(large))
    t1 = time.time()
    _ = list(mst_compare.connected_components(large))
    t2 = time.time()
    _ = list(mst_compare.connected_components(large, method="bfs"))
    t3 = time.time()

    print(f"NetworkX (py): {t1 - t0:.3f}s")
    print(f"mst-compare (union-find): {t2 - t1:.3f}s")
    print(f"mst-compare (BFS): {t3 - t2:.3f}s")


if __name__ == "__main__":
    main()
