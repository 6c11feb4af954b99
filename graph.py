# graph.py

from arena import Arena, VertexRef
from vertex import Vertex, VERTEX_RADIUS
from edge import Edge
from utils_geom import in_ellipse, is_finite_point
from collections import deque
from typing import Iterator, List, Optional, Set, Tuple
import logging

logger = logging.getLogger(__name__)

# Canned demo graph (normalized coordinates, edges by vertex position)
SAMPLE_VERTICES = [
    (0.50, 0.15),
    (0.25, 0.40),
    (0.75, 0.40),
    (0.15, 0.75),
    (0.40, 0.75),
    (0.65, 0.75),
    (0.85, 0.85),
]
SAMPLE_EDGES = [
    (0, 1), (0, 2),
    (1, 3), (1, 4),
    (2, 5), (2, 6),
    (4, 5), (5, 6),
]


class Graph:
    """
    Undirected multigraph drawn on a normalized [0,1] x [0,1] canvas.

    Vertices live in an Arena and are addressed by VertexRef handles; edges are
    kept in a flat insertion-ordered list. Every edge's endpoints are current
    vertices: removing a vertex removes its edges too.
    """

    radius = VERTEX_RADIUS

    def __init__(self):
        self._vertices: Arena[Vertex] = Arena()
        self._edges: List[Edge] = []

    @classmethod
    def sampleGraph(cls) -> "Graph":
        g = cls()
        refs = [g.addVertex(x, y) for x, y in SAMPLE_VERTICES]
        for i, j in SAMPLE_EDGES:
            g.addEdge(refs[i], refs[j])
        return g

    # --------------------------
    # Mutation
    # --------------------------
    def addVertex(self, x: float, y: float) -> VertexRef:
        if not is_finite_point(x, y):
            raise ValueError(f"Vertex coordinates must be finite, got ({x}, {y}).")
        ref = self._vertices.insert(Vertex(x, y))
        logger.debug("Added vertex %r at (%.3f, %.3f)", ref, x, y)
        return ref

    def addEdge(self, a: VertexRef, b: VertexRef) -> None:
        # Loops and parallel edges are accepted; unknown endpoints are not
        for v in (a, b):
            if v not in self._vertices:
                raise ValueError(f"addEdge: vertex {v!r} is not in the graph.")
        self._edges.append(Edge(a, b))
        logger.debug("Added edge %r - %r", a, b)

    def remove(self, v: VertexRef) -> None:
        if self._vertices.remove(v) is None:
            logger.debug("remove: %r not in graph, ignoring", v)
            return
        before = len(self._edges)
        self._edges = [e for e in self._edges if not e.touches(v)]
        logger.debug("Removed vertex %r and %d incident edge(s)", v, before - len(self._edges))

    def moveVertex(self, v: VertexRef, x: float, y: float) -> None:
        vertex = self._vertices.get(v)
        if vertex is None:
            return
        vertex.setPosition(x, y)

    def setName(self, v: VertexRef, name: str) -> None:
        self.getVertex(v).setName(name)

    def clearLabels(self) -> None:
        for _, vertex in self._vertices.items():
            vertex.clearLabel()

    def clear(self) -> None:
        self._vertices.clear()
        self._edges.clear()

    # --------------------------
    # Queries
    # --------------------------
    def vertexCount(self) -> int:
        return self._vertices.size()

    def vertexAt(self, index: int) -> VertexRef:
        return self._vertices.refAt(index)

    def edgeCount(self) -> int:
        return len(self._edges)

    def edgeAt(self, index: int) -> Tuple[VertexRef, VertexRef]:
        return self._edges[index].endpoints()

    def contains(self, v: VertexRef) -> bool:
        return v in self._vertices

    def getVertex(self, v: VertexRef) -> Vertex:
        vertex = self._vertices.get(v)
        if vertex is None:
            raise KeyError(v)
        return vertex

    def getLabel(self, v: VertexRef) -> str:
        return self.getVertex(v).label

    def getVertices(self) -> Tuple[VertexRef, ...]:
        return self._vertices.getRefs()

    def getEdges(self) -> List[Tuple[VertexRef, VertexRef]]:
        return [e.endpoints() for e in self._edges]

    def indexOf(self, v: VertexRef) -> int:
        return self._vertices.indexOf(v)

    # --------------------------
    # Spatial lookup
    # --------------------------
    def vertexAtPoint(self, px: float, py: float,
                      aspectX: float, aspectY: float) -> Optional[VertexRef]:
        """
        First vertex (insertion order) whose hit circle contains the normalized
        point. aspectX/aspectY rescale the axes so the region is round on screen.
        """
        for ref, vertex in self._vertices.items():
            if in_ellipse(px, py, vertex.x, vertex.y, aspectX, aspectY, self.radius):
                return ref
        return None

    # --------------------------
    # Traversal
    # --------------------------
    def neighbors(self, v: VertexRef) -> Iterator[VertexRef]:
        for e in self._edges:
            w = e.other(v)
            if w is not None:
                yield w

    def _require(self, start: VertexRef, op: str) -> None:
        if start not in self._vertices:
            raise ValueError(f"{op}: start vertex {start!r} is not in the graph.")

    def bfs(self, start: VertexRef) -> None:
        self._require(start, "bfs")
        visited: Set[VertexRef] = {start}
        queue = deque([start])
        n = 0
        while queue:
            v = queue.popleft()
            n += 1
            self.getVertex(v).setOrder(n)
            for w in self.neighbors(v):
                if w not in visited:
                    visited.add(w)
                    queue.append(w)
        logger.info("BFS from %r visited %d vertex(es)", start, n)

    def dfs(self, start: VertexRef) -> None:
        self._require(start, "dfs")
        # Explicit stack of neighbor iterators: same order as the recursive version
        visited: Set[VertexRef] = {start}
        n = 1
        self.getVertex(start).setOrder(n)
        stack = [self.neighbors(start)]
        while stack:
            for w in stack[-1]:
                if w not in visited:
                    visited.add(w)
                    n += 1
                    self.getVertex(w).setOrder(n)
                    stack.append(self.neighbors(w))
                    break
            else:
                stack.pop()
        logger.info("DFS from %r visited %d vertex(es)", start, n)

    def reachable(self, start: VertexRef) -> Set[VertexRef]:
        self._require(start, "reachable")
        seen = {start}
        todo = [start]
        while todo:
            for w in self.neighbors(todo.pop()):
                if w not in seen:
                    seen.add(w)
                    todo.append(w)
        return seen

    # --------------------------
    # Validation and stats
    # --------------------------
    def get_stats(self):
        labelled = sum(1 for _, v in self._vertices.items() if v.label)
        return {
            "vertices": self.vertexCount(),
            "edges": self.edgeCount(),
            "labelled": labelled,
        }

    def validateInvariants(self, verbose=False) -> bool:
        ok = True
        if not self._vertices.validate():
            ok = False
            if verbose: logger.warning("Vertex arena index map inconsistent.")
        for i, e in enumerate(self._edges):
            for v in e.endpoints():
                if v not in self._vertices:
                    ok = False
                    if verbose: logger.warning("Edge %d references missing vertex %r", i, v)
        return ok

    def __repr__(self):
        return f"Graph(vertices={self.vertexCount()}, edges={self.edgeCount()})"
