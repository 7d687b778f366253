"""In-memory graph store that the built-in commands load into.

The store is deliberately simple: a set of node IDs and a set of
directed arcs ``(tail, head)``.  Adding an arc also adds both of its
endpoints as nodes.  Listing returns everything sorted so that output
is stable from one run to the next.
"""

from collections.abc import Iterable


class Graph:
    """A set of node IDs and directed arcs between them."""

    def __init__(self) -> None:
        """Create an empty graph."""
        self._nodes: set[int] = set()
        self._arcs: set[tuple[int, int]] = set()

    @property
    def node_count(self) -> int:
        """Return the number of nodes."""
        return len(self._nodes)

    @property
    def arc_count(self) -> int:
        """Return the number of arcs."""
        return len(self._arcs)

    def add_nodes(self, nodes: Iterable[int]) -> int:
        """Add *nodes*, returning how many were new."""
        before = len(self._nodes)
        self._nodes.update(nodes)
        return len(self._nodes) - before

    def add_arcs(self, arcs: Iterable[tuple[int, int]]) -> int:
        """Add *arcs* and their endpoints, returning how many arcs were new."""
        before = len(self._arcs)
        for tail, head in arcs:
            self._arcs.add((tail, head))
            self._nodes.add(tail)
            self._nodes.add(head)
        return len(self._arcs) - before

    def nodes(self) -> list[int]:
        """Return all node IDs in ascending order."""
        return sorted(self._nodes)

    def arcs(self) -> list[tuple[int, int]]:
        """Return all arcs in ascending order."""
        return sorted(self._arcs)

    def clear(self) -> None:
        """Remove every node and arc."""
        self._nodes.clear()
        self._arcs.clear()
