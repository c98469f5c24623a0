"""
Text Export for netscope

Serializers that project a Graph or Tree to text:
- graph_to_dot: Graphviz DOT ("graph" or "digraph")
- tree_to_dot: Graphviz DOT with synthetic node ids and labels
- graph_to_text: Human-readable node and edge listing
- graph_to_edge_list: Edge-list text that Graph.from_edge_list reads back

All functions are read-only over their input and enumerate nodes() and
edges() exactly once.
"""

from pathlib import Path

from netscope.graph import Graph
from netscope.tree import Tree, TreeNode

DEFAULT_GRAPH_NAME = "G"
DEFAULT_TREE_NAME = "Tree"
DOT_SUFFIX = ".dot"


def _quote(value: str) -> str:
    """Quote a DOT identifier, escaping backslashes and double quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _connector(graph: Graph) -> str:
    return "->" if graph.directed else "--"


def graph_to_dot(graph: Graph, name: str = DEFAULT_GRAPH_NAME) -> str:
    """
    Render a graph as Graphviz DOT.

    Args:
        graph: The graph to render
        name: Name of the DOT graph block

    Returns:
        DOT source ending with a newline

    Example:
        >>> print(graph_to_dot(Graph.from_edge_list(["A,B"])), end="")
        graph G {
          "A";
          "B";
          "A" -- "B";
        }
    """
    header = "digraph" if graph.directed else "graph"
    conn = _connector(graph)

    lines = [f"{header} {name} {{"]
    for node in graph.nodes():
        lines.append(f"  {_quote(node)};")
    for u, v in graph.edges():
        lines.append(f"  {_quote(u)} {conn} {_quote(v)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def tree_to_dot(tree: Tree, name: str = DEFAULT_TREE_NAME) -> str:
    """
    Render a tree as Graphviz DOT.

    Nodes get ids n1, n2, ... in first-visit order and carry their value
    as a label. A node reached a second time gets its edge but is not
    expanded again.

    Args:
        tree: The tree to render
        name: Name of the DOT digraph block

    Returns:
        DOT source ending with a newline
    """
    lines = [f"digraph {name} {{", "  node [shape=circle];"]
    ids: dict[int, str] = {}
    expanded: set[int] = set()

    def node_id(node: TreeNode) -> str:
        key = id(node)
        if key not in ids:
            ids[key] = f"n{len(ids) + 1}"
        return ids[key]

    def enter(node: TreeNode) -> None:
        expanded.add(id(node))
        lines.append(f"  {node_id(node)} [label={_quote(node.value)}];")

    if tree.root is not None:
        enter(tree.root)
        stack = [(tree.root, iter(tree.root.children))]
        while stack:
            node, children = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                continue
            lines.append(f"  {node_id(node)} -> {node_id(child)};")
            if id(child) not in expanded:
                enter(child)
                stack.append((child, iter(child.children)))
    lines.append("}")
    return "\n".join(lines) + "\n"


def graph_to_text(graph: Graph) -> str:
    """Render a graph as a plain "Nodes:" / "Edges:" listing."""
    conn = _connector(graph)
    lines = ["Nodes:"]
    lines.extend(f" - {node}" for node in graph.nodes())
    lines.append("Edges:")
    lines.extend(f" - {u} {conn} {v}" for u, v in graph.edges())
    return "\n".join(lines) + "\n"


def graph_to_edge_list(graph: Graph) -> str:
    """
    Render a graph in the edge-list format read by Graph.from_edge_list.

    Nodes without any incident edge are written as single-token lines so
    they survive a round trip. Undirected edges are written with an
    endpoint that does not start with '#' first, so the line is not read
    back as a comment.
    """
    lines = []
    touched: set[str] = set()
    for u, v in graph.edges():
        if not graph.directed and u.startswith("#") and not v.startswith("#"):
            u, v = v, u
        lines.append(f"{u},{v}")
        touched.update((u, v))
    lines.extend(node for node in graph.nodes() if node not in touched)
    return "\n".join(lines) + "\n" if lines else ""


def write_text(path: Path | str, text: str) -> Path:
    """
    Write text to a file as UTF-8, creating parent directories.

    Returns:
        The path written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
