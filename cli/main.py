"""
netscope CLI

Command-line interface for the network analysis engine.
Provides commands for analyzing edge-list graphs, listing BFS distances,
rendering parent/child trees, and generating sample datasets.

Commands:
    netscope graph <path>              Print centrality tables and export DOT
    netscope distances <path> <node>   Print BFS hop distances from a node
    netscope tree <path>               Print preorder traversal and export DOT
    netscope samples [dir]             Write sample datasets and export DOT

Usage:
    $ netscope samples ./data
    $ netscope graph ./data/graph1.txt
    $ netscope distances ./data/graph2.txt Quito --directed
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich import box

from netscope import __version__
from netscope.analysis import analyze, bfs
from netscope.export import (
    DEFAULT_GRAPH_NAME,
    DEFAULT_TREE_NAME,
    DOT_SUFFIX,
    graph_to_dot,
    graph_to_text,
    tree_to_dot,
    write_text,
)
from netscope.graph import Graph, load_graph
from netscope.models import UNREACHABLE, CentralityReport, Measure
from netscope.samples import GRAPH1, TREE1, write_samples
from netscope.tree import Tree, load_tree

# Initialize Typer app and Rich console
app = typer.Typer(
    name="netscope",
    help="netscope: centrality analysis and DOT export for small networks",
    add_completion=False,
)
console = Console()

logger = logging.getLogger(__name__)


def _dot_path(path: Path, output: Optional[Path]) -> Path:
    """
    Return the DOT output path.

    Defaults to the input with a .dot suffix, or <stem>.out.dot when the
    input already is a .dot file so the source is never overwritten.
    """
    if output is not None:
        return output
    target = path.with_suffix(DOT_SUFFIX)
    if target == path:
        target = path.with_suffix(f".out{DOT_SUFFIX}")
    return target


@app.command()
def graph(
    path: Path = typer.Argument(
        ...,
        help="Edge-list file (one 'a,b' edge or single node per line)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    directed: bool = typer.Option(
        False,
        "--directed",
        "-D",
        help="Treat each line as a one-way edge",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="DOT output file (default: input path with .dot suffix)",
    ),
    name: str = typer.Option(
        DEFAULT_GRAPH_NAME,
        "--name",
        "-n",
        help="Name of the exported DOT graph",
    ),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-t",
        min=1,
        help="Show only the top N nodes per measure",
    ),
) -> None:
    """
    Analyze a graph and export it to DOT.

    This command:
    1. Loads the edge list
    2. Prints its nodes and edges
    3. Prints degree, closeness and betweenness centrality
    4. Writes the graph as Graphviz DOT
    """
    g = _load_graph_or_exit(path, directed)

    console.print(f"\n[bold blue]📈 Graph:[/bold blue] {path}\n")
    console.print(graph_to_text(g), markup=False, highlight=False)

    with console.status("Computing centrality (may take a while on large graphs)..."):
        report = analyze(g)

    for measure in Measure:
        _print_centrality_table(report, measure, top)

    dot_path = write_text(_dot_path(path, output), graph_to_dot(g, name))
    _print_export_summary(g, dot_path)


@app.command()
def distances(
    path: Path = typer.Argument(
        ...,
        help="Edge-list file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    source: str = typer.Argument(
        ...,
        help="Node to measure distances from",
    ),
    directed: bool = typer.Option(
        False,
        "--directed",
        "-D",
        help="Treat each line as a one-way edge",
    ),
) -> None:
    """
    Show BFS hop distances from a source node.
    """
    g = _load_graph_or_exit(path, directed)

    if source not in g:
        console.print(f"[yellow]Node '{escape(source)}' is not in the graph.[/yellow]")

    console.print(f"\n[bold]Distances from {escape(source)}[/bold]")
    table = Table(box=box.ROUNDED)
    table.add_column("Node", style="cyan")
    table.add_column("Hops", justify="right")

    for node, distance in bfs(g, source).items():
        if distance is UNREACHABLE:
            table.add_row(escape(node), f"[dim]{distance}[/dim]")
        else:
            table.add_row(escape(node), str(distance))

    console.print(table)


@app.command()
def tree(
    path: Path = typer.Argument(
        ...,
        help="Parent/child file (one 'parent,child' pair per line)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="DOT output file (default: input path with .dot suffix)",
    ),
    name: str = typer.Option(
        DEFAULT_TREE_NAME,
        "--name",
        "-n",
        help="Name of the exported DOT digraph",
    ),
) -> None:
    """
    Print a tree in preorder and export it to DOT.
    """
    try:
        t = load_tree(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if t.is_empty:
        console.print("[yellow]Could not build a tree: no root node found.[/yellow]")
        raise typer.Exit(1)

    console.print("\n[bold]Preorder traversal:[/bold]")
    console.print(" ".join(t.preorder()), markup=False, highlight=False)

    dot_path = write_text(_dot_path(path, output), tree_to_dot(t, name))
    console.print(
        f"\n[green]✓ DOT exported to:[/green] {dot_path} "
        f"[dim](render with: dot -Tpng {dot_path} -o tree.png)[/dim]"
    )


@app.command()
def samples(
    directory: Path = typer.Argument(
        Path("."),
        help="Directory to write the sample files into (default: current directory)",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
    ),
) -> None:
    """
    Write sample graphs and trees, then export graph1 and tree1 to DOT.
    """
    written = write_samples(directory)
    console.print(
        f"\n[bold blue]📂 Files created:[/bold blue] "
        f"{', '.join(p.name for p in written)}"
    )

    g = Graph.from_edge_list(GRAPH1)
    console.print(graph_to_text(g), markup=False, highlight=False)
    graph_dot = write_text(directory / f"graph1{DOT_SUFFIX}", graph_to_dot(g, "G1"))

    t = Tree.from_parent_child_lines(TREE1)
    tree_dot = write_text(directory / f"tree1{DOT_SUFFIX}", tree_to_dot(t, "T1"))

    console.print(f"[green]✓ Exported[/green] {graph_dot.name}, {tree_dot.name}")
    console.print("[dim]Use Graphviz to turn .dot files into images.[/dim]")


# Helper functions for loading and output formatting

def _load_graph_or_exit(path: Path, directed: bool) -> Graph:
    """Load a graph, printing the error and exiting with code 1 on failure."""
    try:
        return load_graph(path, directed=directed)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _print_centrality_table(
    report: CentralityReport, measure: Measure, top: Optional[int] = None
) -> None:
    """Print one centrality measure, highest score first."""
    console.print(f"\n[bold]{measure.value.capitalize()} centrality[/bold]")
    table = Table(box=box.ROUNDED)
    table.add_column("Node", style="cyan")
    table.add_column("Score", justify="right")

    ranked = report.ranked(measure)
    display = ranked[:top] if top else ranked

    for node, score in display:
        table.add_row(escape(node), f"{score:.3f}")

    console.print(table)

    if top and len(ranked) > top:
        console.print(f"   [dim]... and {len(ranked) - top} more[/dim]")


def _print_export_summary(g: Graph, dot_path: Path) -> None:
    """Print a summary panel after exporting a graph."""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Kind", "directed" if g.directed else "undirected")
    table.add_row("Nodes", str(g.node_count))
    table.add_row("Edges", str(g.edge_count))
    table.add_row("DOT file", str(dot_path))
    table.add_row("Render", f"dot -Tpng {dot_path} -o graph.png")

    panel = Panel(table, title="[bold green]✓ Export Complete[/bold green]", border_style="green")
    console.print(panel)


# Version and logging options
@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable debug logging",
    ),
) -> None:
    """
    netscope: centrality analysis and DOT export for small networks.
    """
    if version:
        console.print(f"[bold]netscope[/bold] version {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    logger.debug("Verbose logging enabled")


if __name__ == "__main__":
    app()
