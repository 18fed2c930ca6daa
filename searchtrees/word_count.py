"""Word frequency counting with a binary search tree and a sequential table."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

from searchtrees.bst import BST
from searchtrees.sequence_st import SequenceST
from searchtrees.words import read_words


class _SymbolTable(Protocol):
    def search(self, key: Any) -> Any: ...

    def insert(self, key: Any, value: Any) -> None: ...


_Table = TypeVar("_Table", bound=_SymbolTable)


def count_frequencies(words: Iterable[str], table: _Table) -> _Table:
    """Add one to the count of every word in ``words``, stored in ``table``.

    Words not yet present start at 1. The same table is returned.
    """
    for word in words:
        current = table.search(word)
        table.insert(word, 1 if current is None else current + 1)
    return table


def _report(label: str, table: _SymbolTable, words: list[str], filename: str) -> None:
    start = time.process_time()
    count_frequencies(words, table)
    if "god" in table:
        print(f"'god' : {table.search('god')}")
    else:
        print(f"No word 'god' in {filename}")
    elapsed = time.process_time() - start
    print(f"{label}, time: {elapsed} s.")


def main(argv: list[str] | None = None) -> int:
    """Count word frequencies in a text file with both tables and time each."""
    parser = argparse.ArgumentParser(
        description="Compare word counting with a BST and a sequential table."
    )
    parser.add_argument("filename", nargs="?", default="bible.txt",
                        help="text file to read (default: bible.txt)")
    args = parser.parse_args(argv)
    filename = args.filename

    try:
        words = read_words(filename)
    except OSError:
        print(f"Can not open {filename} !!!")
        return 0

    print(f"There are totally {len(words)} words in {filename}")
    print()

    _report("BST", BST(), words, filename)
    print()
    _report("SequenceST", SequenceST(), words, filename)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())