import logging

import pytest

import prefixtrie_shell
from prefixtrie.cli import HELP, run_cli, run_command
from prefixtrie import TrieOptions, create_trie


def _run(trie, *lines: str) -> list:
    return [run_command(trie, line) for line in lines]


def test_insert_find_delete_roundtrip():
    trie = create_trie()
    out = _run(trie, "insert cart two wheels", "find cart", "delete cart", "find cart")
    assert out == [
        "  Stored 'cart'",
        "  'cart' found = two wheels",
        "  Deleted 'cart'",
        "  'cart' not found",
    ]


def test_insert_twice_without_append():
    trie = create_trie()
    out = _run(trie, "insert car", "insert car again")
    assert out[1] == "  'car' already stored (append mode off)"
    assert run_command(trie, "find car") == "  'car' found"


def test_insert_twice_with_append():
    trie = create_trie(TrieOptions(is_append=True))
    _run(trie, "insert car a", "insert car b")
    assert run_command(trie, "find car") == "  'car' found = b"


def test_list_and_count():
    trie = create_trie()
    assert run_command(trie, "list") == "  (empty)"
    _run(trie, "insert ant", "insert anthem song")
    assert run_command(trie, "list") == "  ant\n  anthem = song"
    assert run_command(trie, "count") == "  2 keys, 6 nodes"


def test_prefix_and_clear():
    trie = create_trie()
    run_command(trie, "insert anthem")
    assert run_command(trie, "prefix ant") == "  'ant' is a prefix"
    assert run_command(trie, "prefix bee") == "  'bee' is not a prefix"
    assert run_command(trie, "clear") == "  Trie cleared."
    assert len(trie) == 0


@pytest.mark.parametrize("line", ["done", "quit", "EXIT"])
def test_exit_commands(line):
    assert run_command(create_trie(), line) is None


def test_bad_input():
    trie = create_trie()
    assert run_command(trie, "   ") == ""
    assert run_command(trie, "find") == "  Usage: find KEY"
    assert run_command(trie, "frobnicate x") == "  Unknown command 'frobnicate'.  Type 'help'."
    assert run_command(trie, "help") == HELP
    assert run_command(trie, "delete nope") == "  'nope' was not stored"


def test_run_cli_reads_until_done(monkeypatch, capsys):
    lines = iter(["insert bee buzz", "list", "done", "insert never"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    trie = create_trie()
    run_cli(trie)
    out = capsys.readouterr().out
    assert "bee = buzz" in out
    assert "1 keys stored." in out
    assert "never" not in trie


def test_run_cli_stops_on_eof(monkeypatch, capsys):
    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    run_cli(create_trie())
    assert "0 keys stored." in capsys.readouterr().out


@pytest.mark.parametrize("command", ["help", "done", "quit", "exit"])
def test_help_lists_shell_commands(command):
    assert f" {command} " in HELP


def _main_with_argv(monkeypatch, *flags: str):
    seen = []
    monkeypatch.setattr("sys.argv", ["prefixtrie-shell", *flags])
    monkeypatch.setattr(prefixtrie_shell, "run_cli", seen.append)
    root = logging.getLogger()
    old_level = root.level
    try:
        prefixtrie_shell.main()
        level = root.level
    finally:
        root.setLevel(old_level)
    assert len(seen) == 1
    return seen[0], level


def test_main_defaults_to_no_append(monkeypatch):
    trie, level = _main_with_argv(monkeypatch)
    assert trie.is_append is False
    assert len(trie) == 0
    assert level != logging.DEBUG


def test_main_append_flag(monkeypatch):
    trie, _ = _main_with_argv(monkeypatch, "--append")
    assert trie.is_append is True


@pytest.mark.parametrize("flag", ["-v", "--verbose"])
def test_main_verbose_flag_enables_debug(monkeypatch, flag):
    trie, level = _main_with_argv(monkeypatch, flag)
    assert level == logging.DEBUG
    assert trie.is_append is False
