# editor.py

from typing import Optional, Tuple
import logging

from arena import VertexRef
from graph import Graph
from vertex import VERTEX_RADIUS
from utils_geom import to_normalized, aspect_factors, inside_open_interval

logger = logging.getLogger(__name__)


class GraphEditor:
    """
    Gesture state for the drawing canvas, independent of any widget toolkit.

    Pointer handlers take pixel coordinates plus the canvas size and return True
    when the canvas needs a repaint.
      double-click empty space  -> new vertex
      double-click vertex       -> mark it; a second vertex adds an edge
      press + drag on vertex    -> move it
      right-click               -> drop the mark, else remove vertex under cursor
      keys s / c / b / d        -> sample graph / clear / BFS / DFS from mark
    """

    def __init__(self, graph: Optional[Graph] = None, radius: float = VERTEX_RADIUS):
        self.radius = radius
        self.graph = graph if graph is not None else Graph()
        self.graph.radius = radius
        self.markedVertex: Optional[VertexRef] = None
        self.movingVertex: Optional[VertexRef] = None
        self.pointer: Tuple[float, float] = (0.0, 0.0)
        self.status = ""

    # --------------------------
    # Helpers
    # --------------------------
    def vertexUnder(self, px, py, width, height) -> Optional[VertexRef]:
        nx, ny = to_normalized(px, py, width, height)
        ax, ay = aspect_factors(width, height)
        return self.graph.vertexAtPoint(nx, ny, ax, ay)

    def _setGraph(self, graph: Graph):
        graph.radius = self.radius
        self.graph = graph
        self.markedVertex = None
        self.movingVertex = None

    # --------------------------
    # Pointer events
    # --------------------------
    def doubleClick(self, px, py, width, height) -> bool:
        v = self.vertexUnder(px, py, width, height)
        if v is None:
            nx, ny = to_normalized(px, py, width, height)
            self.graph.addVertex(nx, ny)
        elif self.markedVertex is None:
            self.pointer = (px, py)
            self.markedVertex = v
        else:
            self.graph.addEdge(self.markedVertex, v)
            self.markedVertex = None
        return True

    def press(self, px, py, width, height) -> bool:
        v = self.vertexUnder(px, py, width, height)
        if v is not None:
            self.movingVertex = v
        return True

    def rightPress(self, px, py, width, height) -> bool:
        if self.markedVertex is not None:
            self.markedVertex = None
        else:
            v = self.vertexUnder(px, py, width, height)
            if v is not None:
                self.graph.remove(v)
        return True

    def move(self, px, py, width, height) -> bool:
        repaint = False
        if self.movingVertex is not None and self.graph.contains(self.movingVertex):
            vertex = self.graph.getVertex(self.movingVertex)
            x, y = vertex.getPosition()
            # Each axis follows the pointer only while it is inside the canvas
            if inside_open_interval(px, width):
                x = 1.0 * px / width
            if inside_open_interval(py, height):
                y = 1.0 * py / height
            self.graph.moveVertex(self.movingVertex, x, y)
            repaint = True
        if self.markedVertex is not None:
            self.pointer = (px, py)
            repaint = True
        return repaint

    def release(self) -> bool:
        self.movingVertex = None
        return False

    # --------------------------
    # Keyboard commands
    # --------------------------
    def newSampleGraph(self) -> bool:
        self._setGraph(Graph.sampleGraph())
        self.status = "Sample graph loaded."
        logger.debug("Replaced graph with sample: %r", self.graph)
        return True

    def newEmptyGraph(self) -> bool:
        self._setGraph(Graph())
        self.status = "Graph cleared."
        return True

    def runTraversal(self, kind: str) -> bool:
        if self.markedVertex is None:
            self.status = "Mark a start vertex first (double-click it)."
            return False
        self.graph.clearLabels()
        if kind == "bfs":
            self.graph.bfs(self.markedVertex)
        elif kind == "dfs":
            self.graph.dfs(self.markedVertex)
        else:
            raise ValueError(f"Unknown traversal {kind!r}")
        stats = self.graph.get_stats()
        self.status = f"{kind.upper()} visited {stats['labelled']} of {stats['vertices']} vertices."
        logger.debug(self.status)
        self.markedVertex = None
        return True

    def keyPressed(self, key: str) -> bool:
        if key == "s":
            return self.newSampleGraph()
        if key == "c":
            return self.newEmptyGraph()
        if key == "b":
            return self.runTraversal("bfs")
        if key == "d":
            return self.runTraversal("dfs")
        return False
