"""An unweighted graph stored as adjacency sets, with depth- and breadth-first search."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Mapping
from typing import Generic, Optional, TypeVar

V = TypeVar("V", bound=Hashable)


def path_map_to_path(previous: Mapping[V, V], goal: V) -> list[V]:
    """Follow previous links back from goal to the vertex that maps to itself."""
    path = [goal]
    current = goal
    while (parent := previous[current]) != current:
        path.append(parent)
        current = parent
    path.reverse()
    return path


class Graph(Generic[V]):
    """A graph whose edges may be one-way or two-way."""

    def __init__(self) -> None:
        self._adjacency: dict[V, set[V]] = {}

    def add_vertex(self, vertex: V) -> None:
        """Add vertex if it is not already in the graph."""
        self._adjacency.setdefault(vertex, set())

    def add_edge(self, source: V, target: V, bidirectional: bool = True) -> None:
        """Add an edge, adding either vertex that is missing."""
        self._adjacency.setdefault(source, set()).add(target)
        if bidirectional:
            self._adjacency.setdefault(target, set()).add(source)
        else:
            self.add_vertex(target)

    def neighbors(self, vertex: V) -> frozenset[V]:
        """Return the vertices reachable by one edge; raise KeyError if vertex is absent."""
        if vertex not in self._adjacency:
            raise KeyError(vertex)
        return frozenset(self._adjacency[vertex])

    def edge_exists(self, source: V, target: V) -> bool:
        """Whether there is an edge from source to target."""
        return target in self._adjacency.get(source, ())

    def dfs(self, start: V, goal: V) -> Optional[list[V]]:
        """Depth-first search for a path from start to goal; None if there is none."""
        explored: dict[V, V] = {start: start}
        frontier = [start]
        while frontier:
            current = frontier.pop()
            if current == goal:
                return path_map_to_path(explored, goal)
            for neighbor in self._adjacency.get(current, ()):
                if neighbor not in explored:
                    explored[neighbor] = current
                    frontier.append(neighbor)
        return None

    def bfs(self, start: V, goal: V) -> Optional[list[V]]:
        """Breadth-first search for a shortest path from start to goal; None if none."""
        explored: dict[V, V] = {start: start}
        frontier = deque([start])
        while frontier:
            current = frontier.popleft()
            if current == goal:
                return path_map_to_path(explored, goal)
            for neighbor in self._adjacency.get(current, ()):
                if neighbor not in explored:
                    explored[neighbor] = current
                    frontier.append(neighbor)
        return None

    def dump(self) -> str:
        """Describe every vertex and its neighbors, one line per vertex."""
        return "\n".join(
            f"{vertex}: " + "".join(f"{neighbor}, " for neighbor in neighbors)
            for vertex, neighbors in self._adjacency.items()
        )