# vertex.py

from typing import Optional, Tuple

# Hit radius as a fraction of the canvas's shorter side; shared by all vertices
VERTEX_RADIUS = 0.025


class Vertex:
    __slots__ = ("_x", "_y", "_label", "_order", "_name")

    def __init__(self, x: float, y: float, name: str = ""):
        self._x = float(x)
        self._y = float(y)
        self._label = ""
        self._order: Optional[int] = None
        self._name = name

    # --- Position ---
    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def getPosition(self) -> Tuple[float, float]:
        return (self._x, self._y)

    def setPosition(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = float(y)

    # --- Traversal output ---
    @property
    def label(self) -> str:
        return self._label

    @property
    def order(self) -> Optional[int]:
        return self._order

    def setOrder(self, n: int) -> None:
        self._order = int(n)
        self._label = str(self._order)

    def clearLabel(self) -> None:
        self._order = None
        self._label = ""

    # --- Display name (not touched by traversal) ---
    def getName(self) -> str:
        return self._name

    def setName(self, name: str) -> None:
        self._name = name or ""

    def displayText(self) -> str:
        return self._label or self._name

    def __repr__(self) -> str:
        return f"V({self._x:.3f}, {self._y:.3f}, label={self._label!r})"
