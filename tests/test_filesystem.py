from pathlib import Path

from anoptic.filesystem import USER_SUBDIR, game_path, user_path


def test_game_path_is_absolute_existing_file():
    path = Path(game_path())
    assert path.is_absolute()
    assert path.is_file()


def test_game_path_is_cached():
    first = Path(game_path())
    second = Path(game_path())
    assert second == first
    assert second.is_absolute()
    assert second.is_file()


def test_user_path_under_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert Path(user_path()) == tmp_path / USER_SUBDIR


def test_user_path_ends_with_game_folder():
    parts = Path(user_path()).parts
    assert parts[-3:] == ("Documents", "My Games", "AnoTestGame")