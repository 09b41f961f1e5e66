import os

import pytest

from pypipex.command import (
    find_command_path,
    get_paths,
    parse_command,
    resolve_command,
    split_words,
)
from pypipex.errors import CommandNotFoundError


def _make_file(directory, name, mode):
    path = directory / name
    path.write_text("#!/bin/sh\n")
    os.chmod(path, mode)
    return path


def test_split_words_collapses_separators():
    assert split_words("ls  -l   -a", " ") == ["ls", "-l", "-a"]


def test_split_words_leading_and_trailing_separators():
    assert split_words("::/bin::/usr/bin:", ":") == ["/bin", "/usr/bin"]


@pytest.mark.parametrize("text", ["", "   ", "a", " a b  c "])
def test_split_words_invariants(text):
    words = split_words(text, " ")
    assert all(words)
    assert all(" " not in w for w in words)
    assert "".join(words) == text.replace(" ", "")


def test_get_paths_reads_path():
    assert get_paths({"HOME": "/home/x", "PATH": "/bin:/usr/bin"}) == ["/bin", "/usr/bin"]


def test_get_paths_missing_returns_none():
    assert get_paths({"HOME": "/home/x"}) is None


def test_parse_command():
    assert parse_command("grep -v  foo") == ["grep", "-v", "foo"]
    assert parse_command(None) is None


def test_find_command_path_finds_executable(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_file(first, "tool", 0o644)
    _make_file(second, "tool", 0o755)
    assert find_command_path([str(first), str(second)], "tool") == f"{second}/tool"


def test_find_command_path_first_match_wins(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_file(first, "tool", 0o755)
    _make_file(second, "tool", 0o755)
    assert find_command_path([str(first), str(second)], "tool") == f"{first}/tool"


def test_find_command_path_missing(tmp_path):
    assert find_command_path([str(tmp_path)], "nothing") is None
    assert find_command_path(None, "tool") is None
    assert find_command_path([str(tmp_path)], "") is None


def test_resolve_command_with_slash_is_used_as_is():
    assert resolve_command(None, ["/no/such/prog", "-x"]) == "/no/such/prog"


def test_resolve_command_searches_paths(tmp_path):
    _make_file(tmp_path, "tool", 0o755)
    assert resolve_command([str(tmp_path)], ["tool", "arg"]) == f"{tmp_path}/tool"


def test_resolve_command_not_found(tmp_path):
    with pytest.raises(CommandNotFoundError) as info:
        resolve_command([str(tmp_path)], ["tool"])
    assert info.value.exit_code == 127


@pytest.mark.parametrize("argv", [None, [], [""]])
def test_resolve_command_empty(argv):
    with pytest.raises(CommandNotFoundError, match="Command not found"):
        resolve_command(["/bin"], argv)