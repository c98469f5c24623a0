"""
CLI module for netscope.

The command-line interface providing graph, distances, tree and samples commands.
"""

from cli.main import app

__all__ = ["app"]
