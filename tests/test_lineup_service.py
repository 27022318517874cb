import pytest

from services.lineup_service import build_lineup, build_roster
from utils.tracker_config import TrackerConfig


def test_roster_keeps_store_order(season):
    store = season["store"]
    players = season["players"]

    roster = build_roster(store, [players["cy"].player_id, players["ace"].player_id])

    assert [entry.player.name for entry in roster] == ["Ace", "Cy"]
    assert roster[0].stats.ab == 11


def test_roster_window_limits_games(season):
    store = season["store"]
    ace = season["players"]["ace"]

    roster = build_roster(store, [ace.player_id], window=1)

    assert roster[0].stats.ab == 4
    assert roster[0].stats.h == 1


def test_unknown_ids_are_ignored(season, caplog):
    store = season["store"]

    with caplog.at_level("WARNING"):
        roster = build_roster(store, ["ghost", season["players"]["bo"].player_id])

    assert [entry.player.name for entry in roster] == ["Bo"]
    assert "ghost" in caplog.text


def test_too_few_players_rejected(season, config):
    ids = [p.player_id for p in season["players"].values()]

    with pytest.raises(ValueError, match="at least 9"):
        build_lineup(season["store"], ids, config=config)


def test_partial_lineup_allowed(season, config):
    ids = [p.player_id for p in season["players"].values()]

    lineup = build_lineup(season["store"], ids, allow_partial=True, config=config)

    assert [slot.role_name for slot in lineup] == ["Leadoff", "2nd Hole", "3rd Hole"]
    # Cy: 1 triple, 2 walks in 4 PA -> OBP .750
    assert lineup[0].player.name == "Cy"
    assert lineup[0].reason_text == "get on base (0.750)"


def test_min_lineup_size_is_configurable(season):
    ids = [p.player_id for p in season["players"].values()]
    config = TrackerConfig({"min_lineup_size": 3})

    assert len(build_lineup(season["store"], ids, config=config)) == 3
