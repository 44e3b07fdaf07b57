import json
from types import SimpleNamespace
import pytest
import tennis_tracker.storage as storage
from tennis_tracker.exceptions import StorageError
from tennis_tracker.models import Player, Tournament


def _sample():
    return Tournament(
        roster=[
            Player("Alice", match_wins=3, match_losses=1),
            Player("Bob", match_wins=0, match_losses=2),
        ]
    )


def test_tournament_roundtrip(data_file):
    storage.save_tournament(_sample())
    loaded = storage.load_tournament()

    assert [(p.name, p.match_wins, p.match_losses) for p in loaded.players] == [
        ("Alice", 3, 1),
        ("Bob", 0, 2),
    ]


def test_saved_file_layout(data_file):
    storage.save_tournament(_sample())

    data = json.loads(data_file.read_text(encoding="utf-8"))
    assert data == {
        "players": [
            {"name": "Alice", "matchWins": 3, "matchLosses": 1},
            {"name": "Bob", "matchWins": 0, "matchLosses": 2},
        ]
    }


def test_save_truncates_existing_file(data_file):
    storage.save_tournament(_sample())
    storage.save_tournament(Tournament())

    assert json.loads(data_file.read_text(encoding="utf-8")) == {"players": []}


def test_save_explicit_path(tmp_path):
    path = tmp_path / "other.json"
    assert storage.save_tournament(_sample(), path) == path
    assert storage.load_tournament(path).find_player("Alice").match_wins == 3


def test_save_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        storage.save_tournament(_sample(), tmp_path / "missing" / "t.json")


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        storage.load_tournament(tmp_path / "nope.json")


def test_load_returns_new_tournament(data_file):
    original = _sample()
    storage.save_tournament(original)
    loaded = storage.load_tournament()
    assert loaded is not original
    loaded.find_player("Alice").increase_match_win()
    assert original.find_player("Alice").match_wins == 3


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        '{"players": [{"name": "Alice", "matchWins": 1}]}',
        '{"players": [{"name": "Alice", "matchWins": -1, "matchLosses": 0}]}',
        '{"players": [{"name": "", "matchWins": 0, "matchLosses": 0}]}',
        '{"players": [{"name": "Alice", "matchWins": "2", "matchLosses": 0}]}',
        '{"players": [{"name": "A", "matchWins": 0, "matchLosses": 0, "seed": 1}]}',
        '{"players": [{"name": "A", "matchWins": 0, "matchLosses": 0},'
        ' {"name": "A", "matchWins": 1, "matchLosses": 0}]}',
        "[" * 100000 + "]" * 100000,
    ],
)
def test_load_malformed_content(data_file, content):
    data_file.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        storage.load_tournament()


def test_deserialize_empty_roster():
    t = storage.deserialize_tournament({"players": []})
    assert t.list_players() == []


def test_serialize_uses_file_field_names():
    t = Tournament()
    t.add_player("Alice")
    assert storage.serialize_tournament(t) == {
        "players": [{"name": "Alice", "matchWins": 0, "matchLosses": 0}]
    }


def test_load_undecodable_bytes(data_file):
    data_file.write_bytes(b'{"players": [{"name": "Al\xffice"}]}')
    with pytest.raises(StorageError):
        storage.load_tournament()


@pytest.mark.parametrize(
    "entry",
    [
        SimpleNamespace(name="Al\udcffice", match_wins=0, match_losses=0),
        SimpleNamespace(name="Alice", match_wins=-1, match_losses=0),
    ],
)
def test_save_unwritable_roster(data_file, entry):
    t = Tournament()
    t.roster.append(entry)
    with pytest.raises(StorageError):
        storage.save_tournament(t)
    assert not data_file.exists()
