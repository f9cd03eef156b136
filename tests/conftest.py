"""
Shared test fixtures for the algorithm tracer tests.

Provides the sample graph, fresh sessions, a virtual-time scheduler and
a Flask test client wired to that scheduler.
"""

import pytest

from engine import ManualScheduler, PlaybackController, TracerSession
from graph import Graph
from main import create_app


def drive(generator):
    """Exhaust a tracer generator; returns (snapshots, returned value)."""
    snapshots = []
    while True:
        try:
            snapshots.append(next(generator))
        except StopIteration as stop:
            return snapshots, stop.value


@pytest.fixture
def run():
    """The drive() helper, as a fixture."""
    return drive


@pytest.fixture
def sample_graph() -> Graph:
    """The 6-node weighted sample graph (MST weight 19)."""
    return Graph.sample()


@pytest.fixture
def disconnected_graph() -> Graph:
    """Nodes 0, 1, 2 with a single edge 0→1; node 2 is isolated."""
    g = Graph()
    for nid in range(3):
        g.add_node(nid)
    g.add_edge(0, 1, 1)
    return g


@pytest.fixture
def session() -> TracerSession:
    """A session holding the seed BST, seed heap and sample graph."""
    return TracerSession()


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Virtual-time scheduler; nothing fires until advance()."""
    return ManualScheduler()


@pytest.fixture
def controller(scheduler) -> PlaybackController:
    """Playback controller at the default 500 ms speed on virtual time."""
    return PlaybackController(scheduler=scheduler)


@pytest.fixture
def app(scheduler):
    """Flask app whose playback ticks run on the virtual-time scheduler."""
    return create_app({"TESTING": True, "PLAYBACK_SCHEDULER": scheduler})


@pytest.fixture
def client(app):
    return app.test_client()
