from collections import deque
from typing import Any, Deque, Dict, Iterator, List, Optional

__all__ = ["Digraph"]


class Digraph:
    """Directed graph with string vertices

    The graph keeps adjacency lists in insertion order, so that all traversals and
    therefore all cycles returned by :meth:`get_cycle` are reproducible for the same
    sequence of insertions. Loops and cycles are allowed, parallel edges are not.

    A graph is meant to be short-lived. It can be used as a context manager which
    deletes the graph when the block is left::

        with Digraph() as graph:
            graph.add_edge("a", "b")
            cycle = graph.get_cycle("a")
    """

    __slots__ = ("_out_edges",)

    _out_edges: Optional[Dict[str, Dict[str, None]]]

    def __init__(self) -> None:
        self._out_edges = {}

    def __enter__(self) -> "Digraph":
        return self

    def __exit__(self, *_exc_info: Any) -> None:
        self.delete()

    def __repr__(self) -> str:
        if self._out_edges is None:
            return f"<{self.__class__.__name__} deleted>"
        return (
            f"<{self.__class__.__name__}"
            f" {len(self._out_edges)} vertices, {self.edge_count} edges>"
        )

    def __contains__(self, vertex: str) -> bool:
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    @property
    def _adjacency(self) -> Dict[str, Dict[str, None]]:
        out_edges = self._out_edges
        if out_edges is None:
            raise RuntimeError("The graph has already been deleted.")
        return out_edges

    @property
    def deleted(self) -> bool:
        """Whether the graph has been deleted."""
        return self._out_edges is None

    @property
    def edge_count(self) -> int:
        """The number of edges in the graph."""
        return sum(map(len, self._adjacency.values()))

    def add_vertex(self, vertex: str) -> str:
        """Add the given vertex if it does not exist yet and return it."""
        self._adjacency.setdefault(vertex, {})
        return vertex

    def add_edge(self, from_vertex: str, to_vertex: str) -> None:
        """Add an edge between the given vertices.

        Missing vertices are added to the graph before the edge is created.
        """
        adjacency = self._adjacency
        adjacency.setdefault(to_vertex, {})
        adjacency.setdefault(from_vertex, {})[to_vertex] = None

    def out_neighbours(self, vertex: str) -> List[str]:
        """Get the vertices reachable by one edge from the given vertex."""
        return list(self._adjacency.get(vertex, ()))

    def get_cycle(self, vertex: str) -> Optional[List[str]]:
        """Get the shortest cycle through the given vertex.

        The cycle is returned as the list of its vertices, starting with the given
        vertex, without repeating it at the end. A loop is returned as a list
        containing only the given vertex. If there is no such cycle, or if the vertex
        is not in the graph at all, None is returned.

        The search is breadth-first and follows edges in the order in which they have
        been added, so among several shortest cycles the first one found is returned.
        """
        adjacency = self._adjacency
        if vertex not in adjacency:
            return None
        parents: Dict[str, str] = {vertex: vertex}
        queue: Deque[str] = deque([vertex])
        while queue:
            current = queue.popleft()
            for neighbour in adjacency[current]:
                if neighbour == vertex:
                    cycle = [current]
                    while current != vertex:
                        current = parents[current]
                        cycle.append(current)
                    cycle.reverse()
                    return cycle
                if neighbour not in parents:
                    parents[neighbour] = current
                    queue.append(neighbour)
        return None

    def delete(self) -> None:
        """Delete the graph, releasing all of its vertices and edges."""
        if self._out_edges is not None:
            self._out_edges.clear()
            self._out_edges = None
