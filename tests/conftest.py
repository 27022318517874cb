import pytest

from services.record_store import MemoryRecordStore
from utils.tracker_config import TrackerConfig


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep a developer's TS_* environment from leaking into tests."""
    monkeypatch.setenv("TS_IGNORE_ENV", "1")


@pytest.fixture
def config():
    return TrackerConfig()


@pytest.fixture
def store():
    return MemoryRecordStore()


@pytest.fixture
def season(store):
    """Three players over three games, oldest game first."""
    ace = store.add_player("Ace", "1")
    bo = store.add_player("Bo", "2")
    cy = store.add_player("Cy", "3")
    g1 = store.add_game("Hawks", "2024-04-01")
    g2 = store.add_game("Owls", "2024-04-08")
    g3 = store.add_game("Bears", "2024-04-15")
    store.upsert_stat_line(ace.player_id, g1, {"pa": 4, "ab": 4, "h1": 2, "hr": 1})
    store.upsert_stat_line(ace.player_id, g2, {"pa": 4, "ab": 3, "h2": 1, "bb": 1})
    store.upsert_stat_line(ace.player_id, g3, {"pa": 4, "ab": 4, "h1": 1, "so": 1})
    store.upsert_stat_line(bo.player_id, g1, {"pa": 4, "ab": 4, "so": 2})
    store.upsert_stat_line(bo.player_id, g2, {"pa": 4, "ab": 4, "h1": 1, "so": 1})
    store.upsert_stat_line(bo.player_id, g3, {"pa": 3, "ab": 3, "so": 3})
    store.upsert_stat_line(cy.player_id, g3, {"pa": 4, "ab": 2, "h3": 1, "bb": 2})
    return {
        "store": store,
        "players": {"ace": ace, "bo": bo, "cy": cy},
        "games": [g1, g2, g3],
    }
