import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from genericgraph import GenericGraph


@pytest.fixture
def path_graph() -> GenericGraph:
    """The three vertex path a -x- b -y- c."""
    return GenericGraph(["a", "b", "c"], [(0, 1, "x"), (1, 2, "y")])


@pytest.fixture
def molecule() -> GenericGraph:
    """Small multigraph with a loop and a double edge."""
    return GenericGraph(
        ["C1", "C2", "O", "H"],
        [(0, 1, 1), (1, 2, 2), (1, 2, 1), (0, 3, 1), (2, 2, 0)],
    )
