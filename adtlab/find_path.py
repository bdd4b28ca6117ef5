"""Read a graph and a list of vertex pairs, and report shortest paths between them."""

from __future__ import annotations

import io
import re
import sys
from typing import Sequence

from adtlab.bfs_graph import INF, Graph

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_SEPARATORS = re.compile(r"[ \n]+")


def _atoi(text: str) -> int:
    """The integer at the start of ``text``, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _pair(line: str) -> tuple[int, int]:
    """The first two numbers on a line of the input."""
    tokens = [token for token in _SEPARATORS.split(line) if token]
    if len(tokens) < 2:
        raise ValueError(f"expected two vertices on line {line!r}")
    return _atoi(tokens[0]), _atoi(tokens[1])


def find_paths(text: str) -> str:
    """Build the graph described by ``text`` and report the requested paths.

    The input holds the number of vertices, then one edge per line up to a
    ``0 0`` line, then one source and destination pair per line up to
    another ``0 0`` line or the end of the input.
    """
    stream = io.StringIO(text, newline="\n")
    first = stream.readline()
    if not first:
        raise ValueError("missing the number of vertices")
    graph = Graph(_atoi(first))

    for line in stream:
        u, v = _pair(line)
        if u == 0 and v == 0:
            break
        graph.add_edge(u, v)

    out = [str(graph)]
    for line in stream:
        out.append("\n")
        source, target = _pair(line)
        if source == 0 and target == 0:
            break
        graph.bfs(source)
        distance = graph.distance(target)
        if distance != INF:
            out.append(f"The distance from {source} to {target} is {distance}\n")
            out.append(f"A shortest {source}-{target} path is: ")
            out.append("".join(f"{vertex} " for vertex in graph.path(target)))
        else:
            out.append(f"The distance from {source} to {target} is infinity\n")
            out.append(f"No {source}-{target} path exists")
        out.append("\n")
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Read an input file and write the graph and its shortest paths."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: find_path <input file> <output file>")
        return 1
    in_path, out_path = args
    try:
        source = open(in_path, encoding="utf-8", newline="")
    except OSError:
        print(f"Unable to open file {in_path} for reading")
        return 1
    with source:
        try:
            target = open(out_path, "w", encoding="utf-8", newline="")
        except OSError:
            print(f"Unable to open file {out_path} for writing")
            return 1
        with target:
            target.write(find_paths(source.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())