from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from . import config
from .exceptions import TrackerError
from .models import Tournament
from .storage import load_tournament, save_tournament

logger = logging.getLogger(__name__)


MENU_OPTIONS = [
    ("a", "Add a new tennis player to the tournament"),
    ("v", "View all players in the tournament"),
    ("p", "Specify the winner and loser of a match"),
    ("r", "View players' win-loss records"),
    ("s", "Save Tennis Tournament Tracker to file"),
    ("l", "Load Tennis Tournament Tracker from file"),
    ("q", "Exit the application"),
]


@dataclass
class AppState:
    """Everything a running tracker session owns."""

    tournament: Tournament = field(default_factory=Tournament)
    data_file: Path = field(default_factory=lambda: config.DATA_FILE)
    running: bool = True


def print_divider() -> None:
    print(config.DIVIDER)


def print_player_not_in_tournament() -> None:
    print("Sorry, the player you entered is not in the tournament.")


def print_not_enough_players() -> None:
    print("There are not enough players in the tournament for a match to be played.")


def display_menu() -> None:
    print("Please select from the following options:\n")
    for key, text in MENU_OPTIONS:
        print(f"{key}: {text}")


def add_new_player(state: AppState) -> None:
    """Prompt for a name and register it unless it is already taken."""
    print("Please enter the tennis player's name.")
    name = input()
    try:
        added = state.tournament.add_player(name)
    except ValueError as e:
        logger.debug("Rejected player name %r: %s", name, e)
        print("Sorry, that is not a valid player name.")
        print_divider()
        return
    if added:
        logger.debug("Added player %r", name)
        print(f"{name} has been successfully added to the tournament!")
    else:
        print("The player entered is already in the tournament.")
    print_divider()


def display_players(state: AppState) -> None:
    players = state.tournament.list_players()
    print_divider()
    if not players:
        print("There are no players in the tournament!")
    else:
        print("Here is the list of players in the tournament:")
        for p in players:
            print(p.name)
    print_divider()


def specify_winner(state: AppState) -> str:
    """Ask until a registered winner is named, credit the win and return the name."""
    while True:
        print("Please enter the name of the winning player:")
        winner = input()
        player = state.tournament.find_player(winner)
        if player is not None:
            player.increase_match_win()
            return winner
        print_player_not_in_tournament()
        display_players(state)


def specify_loser(state: AppState, winner: str) -> str:
    """Ask until a registered player other than ``winner`` is named and charge the loss.

    The same-player check runs on the raw text before the roster lookup and
    does not re-print the roster.
    """
    while True:
        print("Please enter the name of the losing player:")
        loser = input()
        if loser == winner:
            print("The winner and loser of the match cannot be the same player.")
            continue
        player = state.tournament.find_player(loser)
        if player is not None:
            player.increase_match_loss()
            return loser
        print_player_not_in_tournament()
        display_players(state)


def specify_match_result(state: AppState) -> None:
    if not state.tournament.has_enough_players():
        print_not_enough_players()
        print_divider()
        return
    display_players(state)
    winner = specify_winner(state)
    loser = specify_loser(state, winner)
    logger.debug("Recorded match %r beat %r", winner, loser)
    print("The winner and loser of the match have been successfully recorded.")
    print_divider()


def display_player_record(state: AppState) -> None:
    if not state.tournament.has_enough_players():
        print_not_enough_players()
        print_divider()
        return
    while True:
        display_players(state)
        print("Please select a player from the list:")
        name = input()
        player = state.tournament.find_player(name)
        if player is not None:
            print(f"{player.name} - W-L: {player.record}")
            print_divider()
            return
        print_player_not_in_tournament()


def save_tracker(state: AppState) -> None:
    try:
        save_tournament(state.tournament, state.data_file)
    except (OSError, TrackerError) as e:
        logger.warning("Save to %s failed: %s", state.data_file, e)
        print(f"Saving Tennis Tournament Tracker to {state.data_file} was UNSUCCESSFUL.")
        return
    print(f"Your Tennis Tournament Tracker has been saved to {state.data_file}!")


def load_tracker(state: AppState) -> None:
    """Replace the current tournament with the saved one.

    On any failure the tournament in memory is left as it was.
    """
    try:
        tournament = load_tournament(state.data_file)
    except (OSError, TrackerError) as e:
        logger.warning("Load from %s failed: %s", state.data_file, e)
        print(f"Loading Tennis Tournament Tracker from {state.data_file} was UNSUCCESSFUL.")
        return
    state.tournament = tournament
    print(f"Your Tennis Tournament Tracker from {state.data_file} has been successfully loaded!")


def quit_tracker(state: AppState) -> None:
    print_divider()
    print("Game, set, match!")
    print("Thank you for using the Tennis Tournament Tracker!")
    state.running = False


COMMANDS = {
    "a": add_new_player,
    "v": display_players,
    "p": specify_match_result,
    "r": display_player_record,
    "s": save_tracker,
    "l": load_tracker,
    "q": quit_tracker,
}


def process_command(state: AppState, command: str) -> None:
    """Dispatch one menu selection. ``command`` must already be lowercased."""
    handler = COMMANDS.get(command)
    if handler is None:
        print("Sorry, please choose a valid option from the menu.")
        print_divider()
        return
    logger.debug("Running command %r", command)
    handler(state)


def run(state: AppState | None = None) -> AppState:
    """Run the menu loop until the user quits or input runs out."""
    if state is None:
        state = AppState()
    print_divider()
    print("Welcome to the Tennis Tournament Tracker!")
    print_divider()
    while state.running:
        display_menu()
        try:
            command = input().lower()
            process_command(state, command)
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, stopping tracker")
            state.running = False
        except UnicodeDecodeError as e:
            # strict stdin decoding; drop the line and show the menu again
            logger.warning("Unreadable input: %s", e)
            print("Sorry, that input could not be read.")
            print_divider()
    return state


def main():
    logging.basicConfig(
        format="%(asctime)s %(levelname)s: %(message)s",
        level=config.get_log_level(),
    )
    run()


if __name__ == '__main__':
    main()
