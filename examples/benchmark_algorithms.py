#!/usr/bin/env python3
"""
Deterministic micro-benchmarks for the MST engines in mst_compare.

- Builds a fixed random connected graph with a provided seed
- Builds the WeightedGraph once so construction cost is excluded
- Times each engine over repeated runs with warmups and reports its operation count

Engines timed:
- Prim (lazy heap)
- Prim (dense array)
- Kruskal (sort + disjoint set)

Example:
  python3 examples/benchmark_algorithms.py --n 2000 --m 8000 --repeats 5 --warmup 2
"""

import argparse
import statistics
import time
from typing import Callable, Dict

import networkx as nx

from mst_compare import ENGINES, WeightedGraph


def deterministic_weight(u: int, v: int) -> int:
    """Deterministic pseudo-weight in [1, 256]."""
    x = (u * 1315423911) ^ (v * 2654435761)
    return 1 + (x & 0xFF)


def make_graph(n: int, m: int, seed: int) -> WeightedGraph:
    G = nx.gnm_random_graph(n, m, seed=seed)
    # chain the components together so every engine sees a connected graph
    comps = [min(c) for c in nx.connected_components(G)]
    for a, b in zip(comps, comps[1:]):
        G.add_edge(a, b)
    return WeightedGraph.from_edges(
        n, ((u, v, deterministic_weight(u, v)) for u, v in G.edges())
    )


def time_fn(fn: Callable[[], object], repeats: int, warmup: int) -> Dict[str, float]:
    for _ in range(warmup):
        fn()
    samples = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        samples.append(t1 - t0)
    return {
        "runs": repeats,
        "min": min(samples),
        "median": statistics.median(samples),
        "mean": statistics.fmean(samples),
        "stdev": statistics.pstdev(samples) if repeats > 1 else 0.0,
    }


def fmt_ms(sec: float) -> str:
    return f"{sec * 1000.0:.3f} ms"


def main() -> None:
    ap = argparse.ArgumentParser(description="mst-compare deterministic engine microbenchmarks")
    ap.add_argument("--n", type=int, default=1000, help="number of vertices")
    ap.add_argument("--m", type=int, default=4000, help="number of edges")
    ap.add_argument("--seed", type=int, default=42, help="random seed for graph generation")
    ap.add_argument("--repeats", type=int, default=5, help="timed runs per engine")
    ap.add_argument("--warmup", type=int, default=2, help="warmup runs per engine (not timed)")
    ap.add_argument("--skip-dense", action="store_true", help="skip the O(V^2) Prim variant")

    args = ap.parse_args()

    print("=== Graph Setup ===")
    G = make_graph(args.n, args.m, seed=args.seed)
    print(f"n={G.vertex_count}, m={G.edge_count}, density={G.density():.3f}%, seed={args.seed}")

    print("\n=== Benchmarking (graph construction excluded) ===")
    costs = {}
    for name, engine_cls in ENGINES.items():
        if args.skip_dense and name == "prim-dense":
            continue
        engine = engine_cls()
        result = engine.find_mst(G)
        costs[name] = result.total_cost
        res = time_fn(lambda: engine.find_mst(G), repeats=args.repeats, warmup=args.warmup)
        print(
            f"- {name:11s} median {fmt_ms(res['median'])} \t(min {fmt_ms(res['min'])}, runs={res['runs']}) "
            f"ops={result.operation_count} cost={result.total_cost}"
        )

    print("\nAll costs match:", len(set(costs.values())) == 1)


if __name__ == "__main__":
    main()
