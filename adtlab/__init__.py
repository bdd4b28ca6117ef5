"""Cursor lists, BFS and DFS graphs, and command-line tools built on them."""

__version__ = "0.1.0"

__all__ = [
    "cursor_list",
    "lex",
    "bfs_graph",
    "find_path",
    "dfs_graph",
    "find_components",
]