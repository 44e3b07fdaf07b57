import json
import logging
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from . import config
from .exceptions import StorageError
from .models import Player, Tournament

logger = logging.getLogger(__name__)


class PlayerRecord(BaseModel):
    """On-disk form of a :class:`Player`."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(min_length=1)
    match_wins: StrictInt = Field(alias="matchWins", ge=0)
    match_losses: StrictInt = Field(alias="matchLosses", ge=0)


class TournamentRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    players: List[PlayerRecord]

    @field_validator("players")
    @classmethod
    def unique_names(cls, players: List[PlayerRecord]) -> List[PlayerRecord]:
        seen = set()
        for rec in players:
            if rec.name in seen:
                raise ValueError(f"duplicate player name {rec.name!r}")
            seen.add(rec.name)
        return players


def _resolve(path) -> Path:
    # ``config.DATA_FILE`` is looked up at call time so tests can patch it
    return Path(path) if path is not None else config.DATA_FILE


def serialize_tournament(tournament: Tournament) -> Dict:
    """Build a JSON-serializable snapshot of the roster.

    Raises :class:`StorageError` if a player cannot be written in the save
    file schema.
    """
    try:
        record = TournamentRecord(
            players=[
                PlayerRecord(
                    name=p.name,
                    match_wins=p.match_wins,
                    match_losses=p.match_losses,
                )
                for p in tournament.list_players()
            ]
        )
    except ValidationError as e:
        raise StorageError(f"Tournament cannot be saved: {e}") from e
    return record.model_dump(by_alias=True)


def deserialize_tournament(data) -> Tournament:
    """Build a fresh :class:`Tournament` from a decoded snapshot.

    Raises :class:`StorageError` if ``data`` does not match the save file
    schema.
    """
    try:
        record = TournamentRecord.model_validate(data)
    except ValidationError as e:
        raise StorageError(f"Invalid tournament data: {e}") from e
    return Tournament(
        roster=[
            Player(rec.name, match_wins=rec.match_wins, match_losses=rec.match_losses)
            for rec in record.players
        ]
    )


def save_tournament(tournament: Tournament, path=None) -> Path:
    """Write ``tournament`` to ``path`` (default ``config.DATA_FILE``).

    The file is created or truncated. A missing parent directory raises
    ``FileNotFoundError``; nothing is created on the caller's behalf.
    """
    path = _resolve(path)
    data = serialize_tournament(tournament)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logger.info("Saved %d players to %s", len(data["players"]), path)
    return path


def load_tournament(path=None) -> Tournament:
    """Read a tournament from ``path`` (default ``config.DATA_FILE``).

    ``FileNotFoundError`` propagates when the file is missing; unreadable
    or malformed content raises :class:`StorageError`.
    """
    path = _resolve(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors; deeply
        # nested arrays exhaust the decoder's recursion limit
        raise StorageError(f"Could not parse {path}: {e}") from e
    tournament = deserialize_tournament(data)
    logger.info("Loaded %d players from %s", tournament.player_count, path)
    return tournament
