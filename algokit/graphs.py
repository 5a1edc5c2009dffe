"""Small directed graphs with depth-first and breadth-first traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


@dataclass(eq=False)
class GraphNode:
    """A graph node holding a value and its outgoing neighbours."""

    value: Any
    neighbors: list[GraphNode] = field(default_factory=list, repr=False)


class SearchAlgorithm(Enum):
    """Traversal order used by :func:`search`."""

    BFS = 0
    DFS = 1


Visitor = Callable[[GraphNode], Any]


def neighbors_of_neighbors(node: GraphNode) -> list[GraphNode]:
    """Return the neighbours of each neighbour of ``node``, in order."""
    return [second for first in node.neighbors for second in first.neighbors]


def create_sample_graph() -> list[GraphNode]:
    """Build a four-node graph and return its nodes in value order."""
    n1, n2, n3, n4 = (GraphNode(value) for value in (1, 2, 3, 4))
    n1.neighbors = [n2, n3, n4]
    n2.neighbors = [n1, n3, n4]
    n4.neighbors = [n3]
    return [n1, n2, n3, n4]


def create_search_graph() -> GraphNode:
    """Build a six-node graph with cycles and return the node with value 1."""
    root, n2, n3, n4, n5, n6 = (GraphNode(value) for value in range(1, 7))
    root.neighbors = [n2, n3]
    n2.neighbors = [n4]
    n3.neighbors = [n5]
    n4.neighbors = [n3, n5]
    n5.neighbors = [n6, root]
    return root


def iter_dfs(node: GraphNode) -> Iterator[GraphNode]:
    """Yield each reachable node once, in depth-first preorder."""
    visited: set[int] = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if id(current) in visited:
            continue
        visited.add(id(current))
        yield current
        stack.extend(reversed(current.neighbors))


def iter_bfs(node: GraphNode) -> Iterator[GraphNode]:
    """Yield each reachable node once, in breadth-first order."""
    visited = {id(node)}
    pending = deque([node])
    while pending:
        current = pending.popleft()
        yield current
        for neighbor in current.neighbors:
            if id(neighbor) not in visited:
                visited.add(id(neighbor))
                pending.append(neighbor)


def _run(nodes: Iterator[GraphNode], visit: Visitor) -> bool:
    return any(visit(node) for node in nodes)


def dfs(node: GraphNode, visit: Visitor) -> bool:
    """Call ``visit`` depth-first; stop and return True once it returns true."""
    return _run(iter_dfs(node), visit)


def bfs(node: GraphNode, visit: Visitor) -> bool:
    """Call ``visit`` breadth-first; stop and return True once it returns true."""
    return _run(iter_bfs(node), visit)


def search(
    root: GraphNode,
    visit: Visitor,
    algorithm: Union[SearchAlgorithm, int] = SearchAlgorithm.DFS,
) -> bool:
    """Traverse with the chosen algorithm; ValueError for an unknown one."""
    chosen = SearchAlgorithm(algorithm)
    if chosen is SearchAlgorithm.BFS:
        return bfs(root, visit)
    return dfs(root, visit)


def find_value(
    root: GraphNode,
    value: Any,
    algorithm: Union[SearchAlgorithm, int] = SearchAlgorithm.DFS,
) -> Optional[GraphNode]:
    """Return the first node holding ``value`` in traversal order, or None."""
    found: list[GraphNode] = []

    def visit(node: GraphNode) -> bool:
        if node.value == value:
            found.append(node)
            return True
        return False

    return found[0] if search(root, visit, algorithm) else None