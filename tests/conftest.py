"""Shared pytest fixtures for the tile solver tests."""

import pytest

from carcassonne.solver.config import config as solver_config
from carcassonne.tile import Terrain, Tile


@pytest.fixture(autouse=True)
def no_log_files(monkeypatch, tmp_path):
    """Keep solver runs from writing log files into the working directory."""
    monkeypatch.setattr(solver_config, "write_log", False)
    monkeypatch.setattr(solver_config, "log_dir", str(tmp_path / "logs"))


@pytest.fixture
def make_tile():
    """Build a Tile from a string like "road pasture city pasture" (N E S W)."""

    def _make(edges: str) -> Tile:
        return Tile(*(Terrain(token) for token in edges.split()))

    return _make


@pytest.fixture
def pasture(make_tile):
    """A tile with pasture on every edge."""
    return make_tile("pasture pasture pasture pasture")


@pytest.fixture
def corner(make_tile):
    """A tile with road on its east and south edges."""
    return make_tile("pasture road road pasture")
