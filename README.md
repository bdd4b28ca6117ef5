# adtlab

This package has three data structures and three command-line tools that use them.

- `adtlab.cursor_list.CursorList` is an ordered sequence with a cursor. The cursor can sit under any element or be undefined, in which case `index()` returns -1.
- `adtlab.bfs_graph.Graph` is a graph on the vertices `1..order`. Its adjacency lists are kept sorted. It has undirected edges (`add_edge`), directed arcs (`add_arc`), breadth-first search, distances and shortest paths.
- `adtlab.dfs_graph.Digraph` is a directed graph. It has depth-first search, discover and finish times, parents, transpose and copy. Adding an arc that already exists leaves the graph unchanged.

An operation whose precondition does not hold raises an error. `CursorList` raises `ListError`. Both graph types raise `GraphError`. Examples are deleting from an empty list, or naming a vertex outside the graph.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### Cursor lists

```python
from adtlab.cursor_list import CursorList

lst = CursorList([1, 2, 3])
lst.move_front()
lst.move_next()           # cursor now under 2, index() == 1
lst.insert_before(9)      # 1 9 2 3, cursor still under 2
lst.delete()              # removes 2, cursor becomes undefined
print(lst)                # "1 9 3 "
```

### Breadth-first search

```python
from adtlab.bfs_graph import Graph

g = Graph(4)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.bfs(1)
g.distance(3)             # 2
g.path(3)                 # [1, 2, 3]
g.distance(4)             # -1 (INF): not reached
```

### Depth-first search

```python
from adtlab.dfs_graph import Digraph
from adtlab.find_components import strong_components

d = Digraph(3)
d.add_arc(1, 2)
d.add_arc(2, 3)
order = d.dfs([1, 2, 3])  # vertices by decreasing finish time
d.discover(1), d.finish(1)
t = d.transpose()
strong_components(d)      # [[1], [2], [3]]
```

### Sorting lines

```python
from adtlab.lex import alphabetize, sort_indices

sort_indices(["b\n", "a\n", "c\n"])   # [1, 0, 2]
alphabetize(["b\n", "a\n", "c\n"])    # ["a\n", "b\n", "c\n"]
```

## Command-line tools

Every tool takes an input file and an output file:

```
adtlab-lex <input file> <output file>
adtlab-findpath <input file> <output file>
adtlab-findcomponents <input file> <output file>
```

- **adtlab-lex** writes the lines of the input file in alphabetical order. Equal lines keep their input order. Lines longer than 299 characters are broken into pieces of that length before sorting.
- **adtlab-findpath** reads the number of vertices. It then reads undirected edges as `u v` pairs up to a `0 0` line. After that it reads source and destination pairs up to a second `0 0` line or the end of the file. It writes the adjacency lists. For each pair it then writes the distance and a shortest path, or says that no path exists.
- **adtlab-findcomponents** reads the number of vertices, then directed arcs as `u v` pairs up to a `0 0` line or the end of the file. It writes the adjacency lists and then the strongly connected components of the graph.

The same functions can be called without files. `adtlab.find_path.find_paths(text)` and `adtlab.find_components.find_components(text)` take the input text and return the output text.

A wrong number of arguments prints a usage line and exits with status 1. An input file that cannot be read, or an output file that cannot be written, has the same result.

## What it does not do

The package has no matrix type and no tool for matrix arithmetic. Its data structures are the cursor list and the two graph types described above.