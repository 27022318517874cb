import bcrypt
import pytest

from services.admin_gate import GuardedRecordStore, check_password, hash_password
from services.record_store import MemoryRecordStore
from utils.exceptions import AuthorizationError


@pytest.fixture
def guarded():
    password_hash = bcrypt.hashpw(b"letmein", bcrypt.gensalt()).decode()
    return GuardedRecordStore(MemoryRecordStore(), password_hash)


def test_hash_password_round_trip():
    hashed = hash_password("secret")

    assert bcrypt.checkpw(b"secret", hashed.encode())
    assert check_password("secret", hashed)
    assert not check_password("wrong", hashed)


def test_check_password_handles_missing_values():
    assert not check_password("", hash_password("secret"))
    assert not check_password("secret", "")
    assert not check_password("secret", "not-a-bcrypt-hash")


def test_reads_and_writes_pass_through(guarded):
    ace = guarded.add_player("Ace", "1")
    game_id = guarded.add_game("Hawks", "2024-05-01")
    guarded.upsert_stat_line(ace.player_id, game_id, {"pa": 4})

    assert [p.name for p in guarded.list_players()] == ["Ace"]
    assert len(guarded.stat_lines_for_player(ace.player_id)) == 1
    assert guarded.store.list_games()[0].opponent == "Hawks"


def test_delete_player_requires_password(guarded):
    ace = guarded.add_player("Ace")

    with pytest.raises(AuthorizationError):
        guarded.delete_player(ace.player_id)
    with pytest.raises(AuthorizationError):
        guarded.delete_player(ace.player_id, password="nope")
    assert len(guarded.list_players()) == 1

    guarded.delete_player(ace.player_id, password="letmein")
    assert guarded.list_players() == []


def test_clear_all_requires_password(guarded):
    guarded.add_player("Ace")

    with pytest.raises(AuthorizationError) as excinfo:
        guarded.clear_all(password="nope")
    assert "clear all data" in str(excinfo.value)

    guarded.clear_all(password="letmein")
    assert guarded.list_players() == []


def test_unconfigured_hash_blocks_destructive_actions():
    store = GuardedRecordStore(MemoryRecordStore(), "")
    store.add_player("Ace")

    with pytest.raises(PermissionError):
        store.clear_all(password="anything")


def test_update_player_cannot_change_the_id(guarded):
    ace = guarded.add_player("Ace")

    with pytest.raises(ValueError):
        guarded.update_player(ace.player_id, player_id="other")
    assert guarded.update_player(ace.player_id, name="Ace Jr").name == "Ace Jr"
