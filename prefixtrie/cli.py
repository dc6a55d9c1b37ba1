"""CLI / terminal shell for poking at a prefix trie."""

from __future__ import annotations

from prefixtrie.trie import Trie

HELP = "\n".join([
    "Commands:",
    "  insert KEY [VALUE]    -- store a key (e.g. insert cart wheels)",
    "  find KEY              -- look up a key",
    "  delete KEY            -- remove a key",
    "  prefix KEY            -- check whether any path spells KEY",
    "  list                  -- print every stored key",
    "  count                 -- number of keys and nodes",
    "  clear                 -- reset the trie",
    "  help                  -- show this list",
    "  done / quit / exit    -- leave the shell",
])

_KEY_COMMANDS = ("insert", "find", "delete", "prefix")


def run_command(trie: Trie, line: str) -> str | None:
    """Apply one shell command to ``trie``.

    Returns the text to print, or None when the shell should exit.
    """
    parts = line.strip().split(maxsplit=2)
    if not parts:
        return ""

    cmd = parts[0].lower()
    if cmd in ("done", "quit", "exit"):
        return None
    if cmd == "help":
        return HELP
    if cmd == "list":
        items = trie.traverse()
        if not items:
            return "  (empty)"
        return "\n".join(
            f"  {item.key}" if item.data is None else f"  {item.key} = {item.data}"
            for item in items
        )
    if cmd == "count":
        return f"  {len(trie)} keys, {trie.node_count()} nodes"
    if cmd == "clear":
        trie.clear()
        return "  Trie cleared."

    if cmd not in _KEY_COMMANDS:
        return f"  Unknown command '{parts[0]}'.  Type 'help'."
    if len(parts) < 2:
        return f"  Usage: {cmd} KEY"

    key = parts[1]
    if cmd == "insert":
        value = parts[2] if len(parts) > 2 else None
        if trie.insert(key, value):
            return f"  Stored '{key}'"
        return f"  '{key}' already stored (append mode off)"
    if cmd == "find":
        found = trie.find(key)
        if not found.exists:
            return f"  '{key}' not found"
        if found.data is None:
            return f"  '{key}' found"
        return f"  '{key}' found = {found.data}"
    if cmd == "delete":
        if trie.delete(key):
            return f"  Deleted '{key}'"
        return f"  '{key}' was not stored"
    return f"  '{key}' is {'a' if trie.is_prefix(key) else 'not a'} prefix"


def run_cli(trie: Trie) -> None:
    """Run the interactive shell until EOF or ``done``."""
    print("\n" + "=" * 60)
    print(f"  PREFIX TRIE SHELL -- append mode {'on' if trie.is_append else 'off'}")
    print("=" * 60)
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  trie> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        out = run_command(trie, inp)
        if out is None:
            break
        if out:
            print(out)

    print(f"\n{len(trie)} keys stored.")
