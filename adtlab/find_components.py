"""Read a directed graph and report its strongly connected components."""

from __future__ import annotations

import io
import re
import sys
from typing import Sequence

from adtlab.dfs_graph import NIL, Digraph

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_SEPARATORS = re.compile(r"[ \n]+")


def _leading_int(text: str) -> int:
    """The integer at the start of ``text``, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _pair(line: str) -> tuple[int, int]:
    """The first two numbers on a line of the input."""
    tokens = [token for token in _SEPARATORS.split(line) if token]
    if len(tokens) < 2:
        raise ValueError(f"expected two vertices on line {line!r}")
    return _leading_int(tokens[0]), _leading_int(tokens[1])


def strong_components(graph: Digraph) -> list[list[int]]:
    """The strongly connected components of ``graph``.

    Components come in topological order of the component graph; the
    vertices inside each come in the order the second search found them.
    """
    stack = graph.dfs(range(1, graph.order() + 1))
    transposed = graph.transpose()
    components: list[list[int]] = []
    for vertex in transposed.dfs(stack):
        if transposed.parent(vertex) == NIL:
            components.append([vertex])
        else:
            components[-1].append(vertex)
    components.reverse()
    return components


def find_components(text: str) -> str:
    """Build the graph described by ``text`` and report its components.

    The input holds the number of vertices, then one arc per line up to a
    ``0 0`` line or the end of the input.
    """
    stream = io.StringIO(text, newline="\n")
    first = stream.readline()
    if not first:
        raise ValueError("missing the number of vertices")
    graph = Digraph(_leading_int(first))

    for line in stream:
        u, v = _pair(line)
        if u == 0 and v == 0:
            break
        graph.add_arc(u, v)

    components = strong_components(graph)
    out = ["Adjacency list representation of G:\n", str(graph), "\n"]
    out.append(f"G contains {len(components)} strongly connected components:\n")
    for number, component in enumerate(components, start=1):
        members = "".join(f"{vertex} " for vertex in component)
        out.append(f"Component {number}: {members}\n")
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Read an input file and write the graph and its strong components."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: find_components <input file> <output file>")
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
            target.write(find_components(source.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())