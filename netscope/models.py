"""
Core Data Models for netscope

This module defines the shared result types used by the analysis layer:
- UNREACHABLE: Sentinel distance for nodes with no path from the source
- Measure: The centrality measures the analyzer can compute
- CentralityReport: Per-node scores for all measures of one graph

These models are designed to be:
- Plain data with no reference back to the graph they came from
- Safe to reuse downstream (the sentinel never behaves like a number)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Reachability(Enum):
    """
    Marker for distances that do not exist.

    BFS results map each node to an ``int`` hop count or to
    ``Reachability.UNREACHABLE``. Using an enum member instead of a large
    integer means any attempt to add to or compare against an unreachable
    distance fails loudly instead of producing a bogus number.
    """

    UNREACHABLE = "unreachable"

    def __str__(self) -> str:
        return self.value


UNREACHABLE = Reachability.UNREACHABLE

Distance = Union[int, Reachability]


def is_reachable(distance: Distance) -> bool:
    """Return True if the distance is a real hop count."""
    return distance is not UNREACHABLE


class Measure(Enum):
    """Centrality measures computed by the analyzer."""

    DEGREE = "degree"
    CLOSENESS = "closeness"
    BETWEENNESS = "betweenness"


@dataclass
class CentralityReport:
    """
    All centrality scores for a single graph.

    Attributes:
        degree: Normalized degree per node
        closeness: Closeness over reachable nodes per node
        betweenness: Brandes betweenness per node

    Each mapping is independent; there are no cross-measure invariants.
    """

    degree: dict[str, float] = field(default_factory=dict)
    closeness: dict[str, float] = field(default_factory=dict)
    betweenness: dict[str, float] = field(default_factory=dict)

    def scores(self, measure: Measure) -> dict[str, float]:
        """Return the score mapping for a measure."""
        return getattr(self, measure.value)

    def ranked(self, measure: Measure) -> list[tuple[str, float]]:
        """
        Return (node, score) pairs ordered by descending score.

        Ties keep the order in which nodes were added to the graph.
        """
        return sorted(self.scores(measure).items(), key=lambda kv: kv[1], reverse=True)

    @property
    def node_count(self) -> int:
        """Number of nodes covered by the report."""
        return len(self.degree)
