import pytest
import tennis_tracker.config as config


@pytest.fixture(autouse=True)
def data_file(tmp_path, monkeypatch):
    """Point the save file at a temporary directory for every test."""
    path = tmp_path / "data" / "TennisTournamentTracker.json"
    path.parent.mkdir()
    monkeypatch.setattr(config, "DATA_FILE", path)
    return path


@pytest.fixture
def feed_input(monkeypatch):
    """Replace ``input()`` with a script of lines; EOF once they run out.

    An exception instance in the script is raised instead of returned.
    Returns a list that records every line handed out.
    """
    consumed = []

    def _feed(*lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            try:
                line = next(remaining)
            except StopIteration:
                raise EOFError
            if isinstance(line, BaseException):
                raise line
            consumed.append(line)
            return line
        monkeypatch.setattr("builtins.input", fake_input)
        return consumed

    return _feed
