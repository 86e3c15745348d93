# resgraph

An interactive console for building a weighted directed graph that is kept
free of cycles. If you add an edge that would close a cycle, the edge does not
go into the graph. It is stored as an *error edge*, and the cycle it would
create is printed. If you later delete a node or an edge and that breaks the
cycle, the stored error edge becomes a normal edge again.

The console can also find shortest paths with Dijkstra's algorithm and list
every simple path. Each time you change the graph, it is exported to
`graph_data.json`, and the current Unix time is written to
`update_signal.json`. Both files go in the working directory.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the console

```
resgraph
resgraph --workdir some/dir
```

When the console starts, it writes an empty graph to `graph_data.json` and
`{"timestamp": 0}` to `update_signal.json`. Both files go in the directory
given by `--workdir`, which defaults to the current directory. That directory
is also where the `file` option of `addedge` looks for `data.txt`.

At the `>` prompt, type one of the commands below. Case does not matter. The
console stops on `exit`, on `quit`, or at the end of input.

| Command      | What it does                                                       |
|--------------|--------------------------------------------------------------------|
| `help`       | Show the command list                                              |
| `addnode`    | Add nodes, one name per line. Finish with `done` or `exit`.        |
| `addedge`    | Add edges as `source destination weight`. Finish with `done` or `exit`. Type `file` to read edges from `data.txt`. |
| `shortest`   | Shortest path between two nodes                                    |
| `dijk`       | Shortest paths between every ordered pair of nodes                 |
| `allpaths`   | Every simple path from every node                                  |
| `print`      | Print the nodes and their valid edges                              |
| `dlnode`     | Delete a node and every edge that points to it                     |
| `dledge`     | Delete an edge. Error edges are checked first.                     |
| `printpath`  | Print every path from one node to another                          |
| `printcycle` | Print the cycle that each error edge would close                   |
| `printerr`   | Print the error edges                                              |
| `clear`      | Clear the screen                                                   |
| `clearmap`   | Remove every node and edge                                         |
| `exit`/`quit`| Leave the console                                                  |

`addedge` works as follows:

- A node named in an edge is created if it does not exist yet.
- Typed edges with a negative weight are refused.
- Adding an edge that already exists updates its weight.

Each line of `data.txt` holds one edge, as `source destination weight`. A line
that starts with `/` ends the reading early. Any other malformed line is
reported and skipped.

Every command that changes the graph exports the JSON files again:
`addnode`, `addedge`, `dlnode`, `dledge` and `clearmap`.

## Using the library

```python
from resgraph.network import ResNet, EdgeResult, RemoveResult
from resgraph.dijkstra import Dijkstra
from resgraph.paths import PathSearch

net = ResNet()
net.add_edge("A", "B", 2)
net.add_edge("A", "C", 2)
net.add_edge("C", "B", 1)
net.add_edge("B", "D", 5)
assert net.add_edge("D", "A", 1) is EdgeResult.CYCLE   # kept as an error edge

dijkstra = Dijkstra(net)
dijkstra.shortest_path("A")
print(dijkstra.get_distance("D"), dijkstra.get_path("D"))   # 7.0 ['A', 'B', 'D']

search = PathSearch(net)
search.search_path()
for path, weight in search.paths_from("A"):
    print(" -> ".join(path), weight)

assert net.remove_edge("B", "D") is RemoveResult.REMOVED   # D -> A becomes valid
print(net.export_to_json())
```

### `resgraph.network`

`ResNet(out=None)` holds the graph. Messages are written to `out`, or to
standard output if `out` is `None`. Its members are:

- `nodes` and `err_nodes`: lists of `Node`, one entry per node, in the same order.
- `name_to_index`: maps each node name to its position in those lists.

Methods:

| Method | What it does |
|--------|--------------|
| `add_node(name)` | Add a node. Returns its index. |
| `find_node(name)` | Return the node's index, or `None`. |
| `circle_check(src, dst)` | Check whether `dst` can be reached from `src`. Adds any missing node. |
| `add_edge(src, dst, value)` | Add an edge. Returns an `EdgeResult`: `OK`, `EXISTS`, `CYCLE` or `SELF_LOOP`. |
| `remove_edge(src, dst)` | Remove an edge. Returns a `RemoveResult`: `REMOVED`, `NOT_FOUND` or `ERROR_EDGE_REMOVED`. |
| `remove_node(name)` | Remove a node. Returns a `RemoveResult`. |
| `get_edges(name)` | Return the node's valid outgoing edges as `(target, weight)` pairs. |
| `print_graph()` | Print the nodes and their valid edges. |
| `print_err_nodes()` | Print the error edges. Returns `False` if the graph is empty. |
| `clear()` | Remove every node and edge. |
| `export_to_json()` | Return the graph as JSON text. |

A self-loop is always refused and stored as an error edge.

### `resgraph.dijkstra`

`Dijkstra(graph)` uses only the valid edges:

- `shortest_path(start)` computes distances from `start`.
- `get_distance(name)` returns the distance, or `INF` (`math.inf`) when the node cannot be reached.
- `get_path(name)` returns the list of nodes on the path, or an empty list.

`Heap` is the indexed binary min-heap it uses. It has `insert`,
`extract_min`, `decrease_key`, `is_empty` and `len()`. Calling
`extract_min` on an empty heap raises `IndexError`.

### `resgraph.paths`

`PathSearch(net, out=None)` works as follows:

- `search_path()` finds every simple path that has at least two nodes, from every node.
- `paths_from(name)` returns `(path, weight)` tuples. It raises `KeyError` if the node is unknown.
- `print_all_paths()` and `print_path_to(source, target, weight, kind)` print the results.

### `resgraph.console` and `resgraph.cli`

`Console(graph, stdin=None, stdout=None, workdir=None)` runs the command loop
with `start()`. Give it streams and a directory to drive it from code or tests.

`resgraph.cli.main(argv=None)` is the `resgraph` command.
`resgraph.cli.initialize_json_files(directory=None)` writes the initial
export files.

`resgraph.color.colorize(text, fg_color, style="")` wraps text in ANSI escape
codes. The codes themselves are attributes of `resgraph.color.Color`.

## What it does not do

The package only writes `graph_data.json` and `update_signal.json`. It does
not include a viewer that draws the graph from those files or watches them
for changes. The graph lives in memory and is lost when the console exits.
`data.txt` is the only file the console reads.