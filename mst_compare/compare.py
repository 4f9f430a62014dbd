"""
Running the engines side by side and comparing what they report
"""

import logging
from dataclasses import dataclass

from .kruskal import KruskalEngine
from .prim import PrimDenseEngine, PrimEngine
from .result import MSTResult

logger = logging.getLogger(__name__)

ENGINES = {
    PrimEngine.name: PrimEngine,
    PrimDenseEngine.name: PrimDenseEngine,
    KruskalEngine.name: KruskalEngine,
}


def get_engine(name: str):
    """Engine instance for 'prim', 'prim-dense' or 'kruskal' (case and _/- insensitive)"""
    key = name.lower().replace("_", "-")
    try:
        return ENGINES[key]()
    except KeyError:
        raise ValueError(f"Unknown MST algorithm: {name}") from None


@dataclass(frozen=True)
class Comparison:
    costs_match: bool
    faster: str
    time_diff_ms: float
    fewer_operations: str
    operation_diff: int


@dataclass(frozen=True)
class Summary:
    graphs_processed: int
    prim_faster: int
    kruskal_faster: int
    prim_fewer_operations: int
    kruskal_fewer_operations: int


def run_comparison(graph, algorithms=("prim", "kruskal")) -> dict:
    """
    Run each named engine on graph, keyed by name

    A disconnected graph has no spanning tree; it is skipped with a warning and
    an empty dict is returned.
    """
    if not graph.is_connected():
        logger.warning("graph with %d vertices is not connected; skipping", graph.vertex_count)
        return {}
    results = {}
    for name in algorithms:
        results[name] = get_engine(name).find_mst(graph)
    return results


def compare_results(prim: MSTResult, kruskal: MSTResult) -> Comparison:
    costs_match = prim.total_cost == kruskal.total_cost
    if not costs_match:
        logger.warning(
            "MST cost mismatch: prim=%s kruskal=%s", prim.total_cost, kruskal.total_cost
        )
    faster = "prim" if prim.execution_time_ms < kruskal.execution_time_ms else "kruskal"
    fewer = "prim" if prim.operation_count < kruskal.operation_count else "kruskal"
    return Comparison(
        costs_match=costs_match,
        faster=faster,
        time_diff_ms=abs(prim.execution_time_ms - kruskal.execution_time_ms),
        fewer_operations=fewer,
        operation_diff=abs(prim.operation_count - kruskal.operation_count),
    )


def summarize(all_results) -> Summary:
    """Tally time and operation-count wins over per-graph result dicts"""
    prim_faster = kruskal_faster = 0
    prim_fewer = kruskal_fewer = 0
    for results in all_results:
        if "prim" not in results or "kruskal" not in results:
            continue
        cmp = compare_results(results["prim"], results["kruskal"])
        if cmp.faster == "prim":
            prim_faster += 1
        else:
            kruskal_faster += 1
        if cmp.fewer_operations == "prim":
            prim_fewer += 1
        else:
            kruskal_fewer += 1
    return Summary(
        graphs_processed=len(all_results),
        prim_faster=prim_faster,
        kruskal_faster=kruskal_faster,
        prim_fewer_operations=prim_fewer,
        kruskal_fewer_operations=kruskal_fewer,
    )
