"""Sort the lines of a file alphabetically by way of a list of line indices."""

from __future__ import annotations

import sys
from typing import Sequence

from adtlab.cursor_list import CursorList

MAX_LEN = 300


def sort_indices(lines: Sequence[str]) -> list[int]:
    """Indices of ``lines`` in alphabetical order; equal lines keep input order."""
    order: CursorList[int] = CursorList()
    for i, line in enumerate(lines):
        order.move_front()
        while order.index() >= 0 and not line < lines[order.cursor()]:
            order.move_next()
        if order.index() >= 0:
            order.insert_before(i)
        else:
            order.append(i)
    return list(order)


def alphabetize(lines: Sequence[str]) -> list[str]:
    """The given lines rearranged into alphabetical order."""
    return [lines[i] for i in sort_indices(lines)]


def _records(text: str) -> list[str]:
    """Split text into lines, breaking any line longer than the read limit."""
    limit = MAX_LEN - 1
    records = []
    for line in text.splitlines(keepends=True):
        records.extend(line[start:start + limit] for start in range(0, len(line), limit))
    return records


def main(argv: Sequence[str] | None = None) -> int:
    """Read an input file and write its lines in alphabetical order."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: lex <input file> <output file>")
        return 1
    in_path, out_path = args
    try:
        source = open(in_path, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError:
        print(f"Unable to open file {in_path} for reading")
        return 1
    with source:
        try:
            target = open(out_path, "w", encoding="utf-8", errors="surrogateescape", newline="")
        except OSError:
            print(f"Unable to open file {out_path} for writing")
            return 1
        with target:
            records = _records(source.read())
            target.write("".join(alphabetize(records)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())