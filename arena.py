# arena.py
from typing import Dict, Generic, Iterator, List, NamedTuple, Optional, Tuple, TypeVar

T = TypeVar("T")


class VertexRef(NamedTuple):
    slot: int
    generation: int

    def __repr__(self):
        return f"VertexRef({self.slot}#{self.generation})"


class Arena(Generic[T]):
    """
    Stores items behind generational handles and keeps them in insertion order.
    - _slots / _generations: slot storage; a freed slot gets its generation bumped
      so a stale handle never resolves to the item that later reuses the slot
    - _order: live handles in insertion order (no gaps, compacted on removal)
    - _pos: maps handle -> position in _order for O(1) lookups
    """

    def __init__(self):
        self._slots: List[Optional[T]] = []
        self._generations: List[int] = []
        self._free: List[int] = []
        self._order: List[VertexRef] = []
        self._pos: Dict[VertexRef, int] = {}

    # -------- internal helpers --------
    def _rebuild_index_map(self, start: int = 0):
        for i in range(start, len(self._order)):
            self._pos[self._order[i]] = i

    # -------- basic ops --------
    def insert(self, item: T) -> VertexRef:
        if self._free:
            slot = self._free.pop()
            self._slots[slot] = item
        else:
            slot = len(self._slots)
            self._slots.append(item)
            self._generations.append(0)
        ref = VertexRef(slot, self._generations[slot])
        self._pos[ref] = len(self._order)
        self._order.append(ref)
        return ref

    def remove(self, ref: VertexRef) -> Optional[T]:
        """Remove and return the item behind ref, or None if ref is stale."""
        i = self._pos.pop(ref, -1)
        if i < 0:
            return None
        del self._order[i]
        # Only handles after the removed one shifted
        self._rebuild_index_map(i)
        item = self._slots[ref.slot]
        self._slots[ref.slot] = None
        self._generations[ref.slot] += 1
        self._free.append(ref.slot)
        return item

    def get(self, ref: VertexRef) -> Optional[T]:
        if ref not in self._pos:
            return None
        return self._slots[ref.slot]

    def contains(self, ref: VertexRef) -> bool:
        return ref in self._pos

    def indexOf(self, ref: VertexRef) -> int:
        return self._pos.get(ref, -1)

    def refAt(self, index: int) -> VertexRef:
        return self._order[index]

    def getRefs(self) -> Tuple[VertexRef, ...]:
        # Immutable view so callers cannot desync the index map
        return tuple(self._order)

    def items(self) -> Iterator[Tuple[VertexRef, T]]:
        for ref in self._order:
            yield ref, self._slots[ref.slot]

    def size(self) -> int:
        return len(self._order)

    def clear(self):
        # Slots are retired, not forgotten: handles from before the clear stay stale
        for slot in range(len(self._slots)):
            if self._slots[slot] is not None:
                self._slots[slot] = None
                self._generations[slot] += 1
        self._free = list(range(len(self._slots)))
        self._order.clear()
        self._pos.clear()

    # -------- integrity check --------
    def validate(self) -> bool:
        """
        Basic invariants:
        - All live handles are unique
        - _pos is consistent with _order
        - every live handle points at an occupied slot of the same generation
        """
        if len(set(self._order)) != len(self._order):
            return False
        if len(self._pos) != len(self._order):
            return False
        for i, ref in enumerate(self._order):
            if self._pos.get(ref, None) != i:
                return False
            if self._slots[ref.slot] is None or self._generations[ref.slot] != ref.generation:
                return False
        return True

    def __len__(self):
        return len(self._order)

    def __contains__(self, ref) -> bool:
        return ref in self._pos
