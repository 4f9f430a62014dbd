import os
import random

import pytest

from mst_compare.graph import WeightedGraph


def pytest_configure(config):
    for marker in ("unit", "graceful_fallback", "performance", "slow"):
        config.addinivalue_line("markers", marker)


def make_random_connected_graph(n, extra_edges, seed, max_weight=100):
    """
    random spanning path over a shuffled vertex order plus extra random edges
    always connected; may contain parallel edges and self-loops
    """
    rng = random.Random(seed)
    order = list(range(n))
    rng.shuffle(order)
    G = WeightedGraph(n)
    for a, b in zip(order, order[1:]):
        G.add_edge(a, b, rng.randint(1, max_weight))
    for _ in range(extra_edges):
        G.add_edge(rng.randrange(n), rng.randrange(n), rng.randint(1, max_weight))
    return G


@pytest.fixture
def simple_graph() -> WeightedGraph:
    return WeightedGraph.from_edges(
        4,
        [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)],
    )


@pytest.fixture
def medium_graph() -> WeightedGraph:
    return WeightedGraph.from_edges(
        6,
        [(0, 1, 4), (0, 2, 3), (1, 2, 1), (1, 3, 2), (2, 3, 4), (3, 4, 2), (4, 5, 6)],
    )


@pytest.fixture
def disconnected_graph() -> WeightedGraph:
    # {0, 1, 2} and {3, 4}
    return WeightedGraph.from_edges(5, [(0, 1, 1), (1, 2, 2), (0, 2, 7), (3, 4, 3)])


@pytest.fixture
def complete_graph_5() -> WeightedGraph:
    G = WeightedGraph(5)
    weight = 1
    for i in range(5):
        for j in range(i + 1, 5):
            G.add_edge(i, j, weight)
            weight += 1
    return G


@pytest.fixture(scope="session")
def rng_seed() -> int:
    """
    session-level random seed
    - if TEST_SEED env var is set, use that to reproduce flaky runs
    - else, generate a random seed each pytest run
    - print the seed so runs can be reproduced
    """
    env_seed = os.getenv("TEST_SEED")
    if env_seed is not None:
        seed = int(env_seed)
        print("")
        print(f"Using TEST_SEED from environment: {seed}")
    else:
        seed = random.SystemRandom().randint(0, 2**32 - 1)
        print("")
        print(f"Random seed for this test run: {seed}")

    return seed
