#!/usr/bin/env python3
"""
Prefix Trie Shell -- interactive insert / find / delete / list over a trie.

Usage:
    python prefixtrie_shell.py              # reject re-inserts of stored keys
    python prefixtrie_shell.py --append     # re-inserts overwrite the value
"""

from __future__ import annotations

import argparse
import logging

from prefixtrie.cli import run_cli
from prefixtrie.options import TrieOptions
from prefixtrie.trie import create_trie

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("prefixtrie")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Prefix Trie Shell -- store and look up keys interactively",
    )
    parser.add_argument("--append", action="store_true",
                        help="Let insert overwrite keys that are already stored")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    trie = create_trie(TrieOptions(is_append=args.append))
    log.debug("Created %r", trie)
    run_cli(trie)


if __name__ == "__main__":
    main()
