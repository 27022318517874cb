from __future__ import annotations

"""Password gate for destructive record-store actions.

Deleting a player or wiping the store requires the admin password.  The
password is checked with :func:`bcrypt.checkpw` against a configured hash;
nothing else about the store changes.
"""

import logging
from typing import Any, List, Mapping, Optional

import bcrypt

from models.game import Game
from models.player import Player
from models.stat_line import StatLine
from services.record_store import RecordStore, open_record_store
from utils.exceptions import AuthorizationError
from utils.tracker_config import TrackerConfig, load_config

_LOGGER = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Return a bcrypt hash suitable for ``TS_ADMIN_PASSWORD_HASH``."""

    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def check_password(password: Optional[str], password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash in config.
        return False


class GuardedRecordStore:
    """Delegate to ``store`` but demand the admin password for destructive calls."""

    def __init__(self, store: RecordStore, password_hash: str) -> None:
        self._store = store
        self._password_hash = password_hash

    @property
    def store(self) -> RecordStore:
        return self._store

    def _authorize(self, action: str, password: Optional[str]) -> None:
        if not check_password(password, self._password_hash):
            _LOGGER.warning("Rejected attempt to %s: bad admin password", action)
            raise AuthorizationError(action)

    # -- Pass-through -----------------------------------------------------

    def list_players(self) -> List[Player]:
        return self._store.list_players()

    def list_games(self) -> List[Game]:
        return self._store.list_games()

    def list_stat_lines(self) -> List[StatLine]:
        return self._store.list_stat_lines()

    def get_player(self, player_id: str) -> Player:
        return self._store.get_player(player_id)

    def get_game(self, game_id: str) -> Game:
        return self._store.get_game(game_id)

    def stat_lines_for_player(self, player_id: str) -> List[StatLine]:
        return self._store.stat_lines_for_player(player_id)

    def stat_lines_for_game(self, game_id: str) -> List[StatLine]:
        return self._store.stat_lines_for_game(game_id)

    def add_player(self, name: str, number: str = "", image_url: Optional[str] = None) -> Player:
        return self._store.add_player(name, number, image_url)

    def update_player(self, player_id: str, /, **changes: Any) -> Player:
        return self._store.update_player(player_id, **changes)

    def add_game(self, opponent: str, date: str) -> str:
        return self._store.add_game(opponent, date)

    def finish_game(self, game_id: str) -> None:
        self._store.finish_game(game_id)

    def upsert_stat_line(self, player_id: str, game_id: str, fields: Mapping[str, Any]) -> StatLine:
        return self._store.upsert_stat_line(player_id, game_id, fields)

    # -- Gated ------------------------------------------------------------

    def delete_player(self, player_id: str, *, password: Optional[str] = None) -> None:
        self._authorize("delete a player", password)
        self._store.delete_player(player_id)

    def clear_all(self, *, password: Optional[str] = None) -> None:
        self._authorize("clear all data", password)
        self._store.clear_all()


def open_guarded_store(config: Optional[TrackerConfig] = None) -> GuardedRecordStore:
    """Return the configured CSV store behind the admin password gate."""

    cfg = config or load_config()
    return GuardedRecordStore(open_record_store(cfg), cfg.admin_password_hash)


__all__ = ["GuardedRecordStore", "check_password", "hash_password", "open_guarded_store"]
