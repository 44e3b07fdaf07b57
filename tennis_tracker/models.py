from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

# A match needs a winner and a distinct loser
MIN_PLAYERS_FOR_MATCH = 2


@dataclass
class Player:
    """A tournament entrant and their cumulative match record.

    ``name`` is fixed once set; only the counters change.
    """

    name: str
    match_wins: int = 0
    match_losses: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Player name must not be empty")
        try:
            self.name.encode("utf-8")
        except UnicodeEncodeError:
            # lone surrogates from undecodable console input
            raise ValueError("Player name is not valid text") from None
        if self.match_wins < 0 or self.match_losses < 0:
            raise ValueError("Match counts must not be negative")

    def __setattr__(self, key, value):
        if key == "name" and "name" in self.__dict__:
            raise AttributeError("Player name cannot be changed")
        super().__setattr__(key, value)

    def increase_match_win(self) -> None:
        self.match_wins += 1

    def increase_match_loss(self) -> None:
        self.match_losses += 1

    @property
    def record(self) -> str:
        """Return the win-loss record as ``"W-L"``."""
        return f"{self.match_wins}-{self.match_losses}"


@dataclass
class Tournament:
    """Ordered roster of players with unique names.

    Names are compared exactly, so ``"alice"`` and ``"Alice"`` are two
    different players. The roster keeps insertion order.
    """

    roster: List[Player] = field(default_factory=list)

    def __post_init__(self) -> None:
        names = [p.name for p in self.roster]
        if len(names) != len(set(names)):
            raise ValueError("Duplicate player names in roster")

    def add_player(self, name: str) -> bool:
        """Append a new player. Returns ``False`` if the name is taken."""
        if self.find_player(name) is not None:
            return False
        self.roster.append(Player(name))
        return True

    def find_player(self, name: str) -> Optional[Player]:
        """Return the registered player called ``name`` or ``None``."""
        for p in self.roster:
            if p.name == name:
                return p
        return None

    def list_players(self) -> List[Player]:
        return self.roster[:]

    @property
    def players(self) -> List[Player]:
        return self.list_players()

    @property
    def player_count(self) -> int:
        return len(self.roster)

    def has_enough_players(self) -> bool:
        return self.player_count >= MIN_PLAYERS_FOR_MATCH
