"""
Bundled example datasets.

Two small graphs and two trees in the on-disk text formats, used by the
`samples` CLI command and handy for quick experiments.
"""

from pathlib import Path

from netscope.export import write_text

GRAPH1 = [
    "# Graph 1 - small social network",
    "A,B",
    "A,C",
    "B,C",
    "B,D",
    "C,E",
    "D,E",
]

GRAPH2 = [
    "# Graph 2 - flights (cities)",
    "Quito,Guayaquil",
    "Quito,Cuenca",
    "Cuenca,Guayaquil",
    "Quito,Loja",
    "Loja,Cuenca",
]

TREE1 = [
    "# Tree 1",
    "Root,A",
    "Root,B",
    "A,C",
    "A,D",
    "B,E",
]

TREE2 = [
    "# Tree 2 - organization",
    "CEO,CTO",
    "CEO,CFO",
    "CTO,Dev1",
    "CTO,Dev2",
    "CFO,Acct1",
]

SAMPLES: dict[str, list[str]] = {
    "graph1.txt": GRAPH1,
    "graph2.txt": GRAPH2,
    "tree1.txt": TREE1,
    "tree2.txt": TREE2,
}


def write_samples(directory: Path | str) -> list[Path]:
    """
    Write every sample dataset into a directory.

    Args:
        directory: Target directory (created if missing)

    Returns:
        Paths of the written files, in SAMPLES order
    """
    directory = Path(directory)
    return [
        write_text(directory / filename, "\n".join(lines) + "\n")
        for filename, lines in SAMPLES.items()
    ]
