"""
Result records produced by the MST engines
"""

from dataclasses import dataclass, field


class OperationCounter:
    """
    Per-run tally of primitive steps (comparisons, heap pushes/pops, finds, unions)

    Purely advisory; nothing reads it to make decisions. Each engine run owns
    its own counter so engines stay reentrant.
    """

    __slots__ = ("count",)

    def __init__(self):
        self.count = 0

    def tick(self, n: int = 1) -> None:
        self.count += n

    def __int__(self):
        return self.count

    def __repr__(self):
        return f"OperationCounter({self.count})"


@dataclass(frozen=True)
class MSTResult:
    algorithm: str
    edges: tuple = field(default_factory=tuple)
    total_cost: int = 0
    vertex_count: int = 0
    edge_count: int = 0
    operation_count: int = 0
    execution_time_ms: float = 0.0

    def __post_init__(self):
        # freeze whatever sequence the engine handed over
        object.__setattr__(self, "edges", tuple(self.edges))

    @property
    def mst_edge_count(self) -> int:
        return len(self.edges)

    @property
    def is_spanning(self) -> bool:
        """True when the result holds a full tree (V-1 edges)"""
        return len(self.edges) == max(self.vertex_count - 1, 0)

    def as_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "total_cost": self.total_cost,
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "mst_edge_count": len(self.edges),
            "operation_count": self.operation_count,
            "execution_time_ms": self.execution_time_ms,
            "edges": [edge.as_dict() for edge in self.edges],
        }
