# edge.py
from __future__ import annotations
from typing import Tuple

from arena import VertexRef


class Edge:
    # Undirected; parallel edges and loops are allowed, each Edge is its own entity
    __slots__ = ("_a", "_b")

    def __init__(self, a: VertexRef, b: VertexRef):
        self._a = a
        self._b = b

    # --- Getters ---
    @property
    def a(self) -> VertexRef:
        return self._a

    @property
    def b(self) -> VertexRef:
        return self._b

    def endpoints(self) -> Tuple[VertexRef, VertexRef]:
        return (self._a, self._b)

    def touches(self, v: VertexRef) -> bool:
        return self._a == v or self._b == v

    def other(self, v: VertexRef):
        """Endpoint opposite v, or None if v is not an endpoint. A loop returns v."""
        if self._a == v:
            return self._b
        if self._b == v:
            return self._a
        return None

    def __repr__(self):
        return f"E({self._a!r} - {self._b!r})"
