"""
Line tokenizing shared by the edge-list and parent/child readers.

Both text formats use the same rules:
    - Leading and trailing whitespace is trimmed
    - Blank lines and lines starting with '#' are comments
    - Fields are separated by commas and/or whitespace; empty fields vanish
"""

import re
from pathlib import Path
from typing import Iterable, Iterator

_SEPARATORS = re.compile(r"[,\s]+")


def tokenize(line: str) -> list[str]:
    """
    Split a single line into tokens.

    Args:
        line: Raw text line

    Returns:
        Non-empty tokens, or an empty list for comments and blank lines

    Example:
        >>> tokenize("  A, B  C ")
        ['A', 'B', 'C']
        >>> tokenize("# comment")
        []
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return []
    return [token for token in _SEPARATORS.split(stripped) if token]


def iter_records(lines: Iterable[str]) -> Iterator[list[str]]:
    """
    Yield the token list of every non-comment line.

    Args:
        lines: Raw text lines

    Yields:
        Token lists with at least one token
    """
    for line in lines:
        tokens = tokenize(line)
        if tokens:
            yield tokens


def read_lines(path: Path | str) -> list[str]:
    """
    Read a UTF-8 text file into a list of lines.

    Raises:
        FileNotFoundError: If the path does not exist
        ValueError: If the path is a directory
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.is_dir():
        raise ValueError(f"Not a file: {path}")

    return path.read_text(encoding="utf-8").splitlines()
