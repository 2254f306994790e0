import logging

import pytest

from graphnexus import WeightedGraph

G1 = """4
a b 2
a d 2
b c 2
d c 5
a c 3
"""

COMPLEX = """5
A B 1
B C 2
C D 3
D E 4
E A 5
A C 6
B D 7
C E 8
"""


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("graphnexus")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_graph(tmp_path):
    def _write(text, name="graph.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def g1_path(write_graph):
    return write_graph(G1, "g1.txt")


@pytest.fixture
def complex_path(write_graph):
    return write_graph(COMPLEX, "complex_graph.txt")


@pytest.fixture
def graph():
    return WeightedGraph()


@pytest.fixture
def triangle():
    g = WeightedGraph()
    g.load_edges(["a", "b", "b", "c", "c", "a"], [1, 2, 3])
    return g


@pytest.fixture
def g1(g1_path):
    g = WeightedGraph()
    g.load(g1_path)
    return g
