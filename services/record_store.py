from __future__ import annotations

"""Durable storage for players, games and per-game stat lines.

The statistics engine never writes; it consumes what these stores return and
is re-run on demand.  Two implementations share the same table logic:

* :class:`MemoryRecordStore` keeps everything in process memory.
* :class:`CsvRecordStore` keeps ``players.csv``, ``games.csv`` and
  ``stats.csv`` in a data directory and serializes writers with an
  inter-process file lock.
"""

import contextlib
import csv
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from pathlib import Path
from threading import RLock
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from models.game import Game
from models.player import Player
from models.stat_line import COUNTING_FIELDS, StatLine
from utils.exceptions import RecordStoreError, UnknownRecordError
from utils.file_lock import locked_path
from utils.path_utils import resolve_path
from utils.tracker_config import TrackerConfig, load_config

_LOGGER = logging.getLogger(__name__)

PLAYER_COLUMNS = ["player_id", "name", "number", "image_url"]
GAME_COLUMNS = ["game_id", "opponent", "date", "is_finished"]
STAT_COLUMNS = ["player_id", "game_id", *COUNTING_FIELDS]

_EDITABLE_PLAYER_FIELDS = {"name", "number", "image_url"}


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class _Tables:
    players: Dict[str, Player] = field(default_factory=dict)
    games: Dict[str, Game] = field(default_factory=dict)
    stats: Dict[Tuple[str, str], StatLine] = field(default_factory=dict)


class RecordStore(ABC):
    """Table operations shared by every backend.

    Subclasses supply :meth:`_read` and :meth:`_transaction`; everything else
    is expressed against the in-memory :class:`_Tables` those return.
    """

    # -- Backend hooks ----------------------------------------------------

    @abstractmethod
    def _read(self) -> _Tables:
        """Return a snapshot of all tables."""

    @abstractmethod
    def _transaction(self) -> contextlib.AbstractContextManager[_Tables]:
        """Yield mutable tables and persist them when the block exits cleanly."""

    # -- Reads ------------------------------------------------------------

    def list_players(self) -> List[Player]:
        return list(self._read().players.values())

    def list_games(self) -> List[Game]:
        return list(self._read().games.values())

    def list_stat_lines(self) -> List[StatLine]:
        return list(self._read().stats.values())

    def get_player(self, player_id: str) -> Player:
        player = self._read().players.get(player_id)
        if player is None:
            raise UnknownRecordError("player", player_id)
        return player

    def get_game(self, game_id: str) -> Game:
        game = self._read().games.get(game_id)
        if game is None:
            raise UnknownRecordError("game", game_id)
        return game

    def stat_lines_for_player(self, player_id: str) -> List[StatLine]:
        return [s for s in self.list_stat_lines() if s.player_id == player_id]

    def stat_lines_for_game(self, game_id: str) -> List[StatLine]:
        return [s for s in self.list_stat_lines() if s.game_id == game_id]

    # -- Players ----------------------------------------------------------

    def add_player(
        self, name: str, number: str = "", image_url: Optional[str] = None
    ) -> Player:
        name = (name or "").strip()
        if not name:
            raise ValueError("Player name is required")
        player = Player(
            player_id=_new_id(),
            name=name,
            number=str(number or "").strip(),
            image_url=image_url or None,
        )
        with self._transaction() as tables:
            tables.players[player.player_id] = player
        _LOGGER.info("Added player %s (%s)", player.display_name, player.player_id)
        return player

    def update_player(self, player_id: str, /, **changes: Any) -> Player:
        unknown = set(changes) - _EDITABLE_PLAYER_FIELDS
        if unknown:
            raise ValueError(f"Cannot update player fields: {', '.join(sorted(unknown))}")
        with self._transaction() as tables:
            current = tables.players.get(player_id)
            if current is None:
                raise UnknownRecordError("player", player_id)
            if "name" in changes and not str(changes["name"] or "").strip():
                raise ValueError("Player name is required")
            cleaned = {
                key: (str(value).strip() if value is not None else None)
                for key, value in changes.items()
            }
            if "number" in cleaned:
                cleaned["number"] = cleaned["number"] or ""
            if "image_url" in cleaned:
                cleaned["image_url"] = cleaned["image_url"] or None
            updated = replace(current, **cleaned)
            tables.players[player_id] = updated
        return updated

    def delete_player(self, player_id: str) -> None:
        """Remove ``player_id`` along with every stat line recorded for them."""

        with self._transaction() as tables:
            if tables.players.pop(player_id, None) is None:
                raise UnknownRecordError("player", player_id)
            for key in [k for k in tables.stats if k[0] == player_id]:
                del tables.stats[key]
        _LOGGER.info("Deleted player %s", player_id)

    # -- Games ------------------------------------------------------------

    def add_game(self, opponent: str, date: str) -> str:
        opponent = (opponent or "").strip()
        if not opponent:
            raise ValueError("Opponent is required")
        game = Game(game_id=_new_id(), opponent=opponent, date=str(date).strip())
        with self._transaction() as tables:
            tables.games[game.game_id] = game
        _LOGGER.info("Added game vs %s on %s (%s)", game.opponent, game.date, game.game_id)
        return game.game_id

    def finish_game(self, game_id: str) -> None:
        with self._transaction() as tables:
            game = tables.games.get(game_id)
            if game is None:
                raise UnknownRecordError("game", game_id)
            tables.games[game_id] = replace(game, is_finished=True)

    # -- Stat lines -------------------------------------------------------

    def upsert_stat_line(
        self, player_id: str, game_id: str, fields: Mapping[str, Any]
    ) -> StatLine:
        """Update the line for ``(player_id, game_id)`` or insert a new one."""

        with self._transaction() as tables:
            if player_id not in tables.players:
                raise UnknownRecordError("player", player_id)
            if game_id not in tables.games:
                raise UnknownRecordError("game", game_id)
            key = (player_id, game_id)
            base = tables.stats.get(key) or StatLine(player_id=player_id, game_id=game_id)
            line = base.with_counts(fields)
            tables.stats[key] = line
        return line

    # -- Bulk -------------------------------------------------------------

    def clear_all(self) -> None:
        """Delete stats, then games, then players."""

        with self._transaction() as tables:
            tables.stats.clear()
            tables.games.clear()
            tables.players.clear()
        _LOGGER.warning("Cleared all players, games and stats")


class MemoryRecordStore(RecordStore):
    def __init__(self) -> None:
        self._lock = RLock()
        self._tables = _Tables()

    def _read(self) -> _Tables:
        with self._lock:
            return _Tables(
                players=dict(self._tables.players),
                games=dict(self._tables.games),
                stats=dict(self._tables.stats),
            )

    @contextlib.contextmanager
    def _transaction(self) -> Iterator[_Tables]:
        with self._lock:
            working = _Tables(
                players=dict(self._tables.players),
                games=dict(self._tables.games),
                stats=dict(self._tables.stats),
            )
            yield working
            self._tables = working


class CsvRecordStore(RecordStore):
    """CSV tables under ``data_dir``; each mutation is read-modify-rewrite."""

    def __init__(self, data_dir: str | Path = "data") -> None:
        self.data_dir = resolve_path(data_dir)
        self.players_path = self.data_dir / "players.csv"
        self.games_path = self.data_dir / "games.csv"
        self.stats_path = self.data_dir / "stats.csv"
        self.lock_path = self.data_dir / ".record_store.lock"

    # -- File helpers -----------------------------------------------------

    @staticmethod
    def _read_rows(path: Path) -> List[dict[str, str]]:
        if not path.exists():
            return []
        try:
            with path.open("r", encoding="utf-8", newline="") as fh:
                return [dict(row) for row in csv.DictReader(fh)]
        except (OSError, csv.Error, UnicodeDecodeError) as exc:
            _LOGGER.exception("Failed to read %s", path)
            raise RecordStoreError(f"Could not read {path.name}") from exc

    @staticmethod
    def _write_rows(path: Path, columns: List[str], rows: List[Mapping[str, Any]]) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8", newline="") as fh:
                writer = csv.DictWriter(fh, fieldnames=columns)
                writer.writeheader()
                for row in rows:
                    writer.writerow(row)
        except OSError as exc:
            _LOGGER.exception("Failed to write %s", path)
            raise RecordStoreError(f"Could not write {path.name}") from exc

    def _load_tables(self) -> _Tables:
        tables = _Tables()
        for row in self._read_rows(self.players_path):
            player = Player.from_row(row)
            if player.player_id:
                tables.players[player.player_id] = player
        for row in self._read_rows(self.games_path):
            game = Game.from_row(row)
            if game.game_id:
                tables.games[game.game_id] = game
        for row in self._read_rows(self.stats_path):
            line = StatLine.from_row(row)
            if not line.player_id or not line.game_id:
                _LOGGER.warning("Skipping stat row without player/game id: %s", row)
                continue
            # Later rows win so a hand-edited duplicate never double counts.
            tables.stats[line.key] = line
        return tables

    def _save_tables(self, tables: _Tables) -> None:
        self._write_rows(
            self.players_path, PLAYER_COLUMNS, [p.to_row() for p in tables.players.values()]
        )
        self._write_rows(
            self.games_path, GAME_COLUMNS, [g.to_row() for g in tables.games.values()]
        )
        self._write_rows(
            self.stats_path, STAT_COLUMNS, [s.to_row() for s in tables.stats.values()]
        )

    # -- Backend hooks ----------------------------------------------------

    def _read(self) -> _Tables:
        return self._load_tables()

    @contextlib.contextmanager
    def _transaction(self) -> Iterator[_Tables]:
        with contextlib.ExitStack() as stack:
            try:
                stack.enter_context(locked_path(self.lock_path))
            except OSError as exc:
                _LOGGER.exception("Failed to lock %s", self.lock_path)
                raise RecordStoreError("Could not lock the record store") from exc
            tables = self._load_tables()
            yield tables
            self._save_tables(tables)


def open_record_store(config: Optional[TrackerConfig] = None) -> CsvRecordStore:
    """Return the CSV store rooted at the configured data directory."""

    cfg = config or load_config()
    return CsvRecordStore(cfg.data_dir)


__all__ = [
    "CsvRecordStore",
    "GAME_COLUMNS",
    "MemoryRecordStore",
    "PLAYER_COLUMNS",
    "RecordStore",
    "STAT_COLUMNS",
    "open_record_store",
]
