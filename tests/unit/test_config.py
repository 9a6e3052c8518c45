from __future__ import annotations

import pytest

from src.adapters.config import RoutingRuntimeConfig, env_bool
from src.domain.models import SearchAlgorithm

_VARS = (
    "OSM_NETWORK_TYPE",
    "STREET_GRAPH_DIST_M",
    "ROUTING_ALGORITHM",
    "OSM_GRAPH_PATH",
    "OSMNX_CACHE_FOLDER",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.mark.unit
def test_defaults_when_env_is_empty(clean_env) -> None:
    cfg = RoutingRuntimeConfig.from_env()

    assert cfg == RoutingRuntimeConfig()
    assert cfg.network_type == "drive"
    assert cfg.street_graph_dist_m == 2000
    assert cfg.default_algorithm is SearchAlgorithm.ASTAR
    assert cfg.graph_path is None
    assert cfg.cache_folder == "data/osm_cache"


@pytest.mark.unit
def test_values_are_read_and_trimmed(clean_env) -> None:
    clean_env.setenv("OSM_NETWORK_TYPE", " walk ")
    clean_env.setenv("STREET_GRAPH_DIST_M", "1500")
    clean_env.setenv("OSM_GRAPH_PATH", "data/city.graphml")
    clean_env.setenv("OSMNX_CACHE_FOLDER", "/tmp/osm")

    cfg = RoutingRuntimeConfig.from_env()

    assert cfg.network_type == "walk"
    assert cfg.street_graph_dist_m == 1500
    assert cfg.graph_path == "data/city.graphml"
    assert cfg.cache_folder == "/tmp/osm"


@pytest.mark.unit
def test_blank_values_fall_back_to_defaults(clean_env) -> None:
    clean_env.setenv("STREET_GRAPH_DIST_M", "  ")
    clean_env.setenv("OSM_GRAPH_PATH", "")

    cfg = RoutingRuntimeConfig.from_env()

    assert cfg.street_graph_dist_m == 2000
    assert cfg.graph_path is None


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("bfs", SearchAlgorithm.BFS),
        ("Dijkstra", SearchAlgorithm.DIJKSTRA),
        ("ASTAR", SearchAlgorithm.ASTAR),
    ],
)
def test_algorithm_is_case_insensitive(clean_env, raw: str, expected) -> None:
    clean_env.setenv("ROUTING_ALGORITHM", raw)
    assert RoutingRuntimeConfig.from_env().default_algorithm is expected


@pytest.mark.unit
def test_unknown_algorithm_is_rejected(clean_env) -> None:
    clean_env.setenv("ROUTING_ALGORITHM", "greedy")
    with pytest.raises(RuntimeError, match="greedy"):
        RoutingRuntimeConfig.from_env()


@pytest.mark.unit
def test_non_integer_distance_is_rejected(clean_env) -> None:
    clean_env.setenv("STREET_GRAPH_DIST_M", "far")
    with pytest.raises(ValueError):
        RoutingRuntimeConfig.from_env()


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["1", "true", "YES", " y ", "on"])
def test_env_bool_truthy_values(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("ROUTING_REVEAL_ERRORS", raw)
    assert env_bool("ROUTING_REVEAL_ERRORS") is True


@pytest.mark.unit
@pytest.mark.parametrize("raw", ["0", "false", "no", "", "maybe"])
def test_env_bool_falsy_values(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("ROUTING_REVEAL_ERRORS", raw)
    assert env_bool("ROUTING_REVEAL_ERRORS", default=True) is False


@pytest.mark.unit
def test_env_bool_default_when_unset(monkeypatch) -> None:
    monkeypatch.delenv("ROUTING_REVEAL_ERRORS", raising=False)
    assert env_bool("ROUTING_REVEAL_ERRORS") is False
    assert env_bool("ROUTING_REVEAL_ERRORS", default=True) is True
