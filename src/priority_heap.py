"""Binary priority heap with min/max ordering and stable tie-breaking.

Entries are ``(priority, value)`` tuples. Every stored node also carries a
sequence number drawn from a counter that only grows, so entries with equal
priority are extracted in the order they were inserted.

Empty and not-found conditions are reported through return values (``None``
or ``False``), never by raising.
"""

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')

Entry = Tuple[Any, T]

MIN = "min"
MAX = "max"


class PriorityHeap(Generic[T]):
    class Node:
        __slots__ = ("priority", "value", "seq")

        def __init__(self, priority: Any, value: T, seq: int) -> None:
            self.priority = priority
            self.value: T = value
            self.seq: int = seq

        def entry(self) -> Entry:
            return (self.priority, self.value)

    def __init__(self, ordering: str = MIN, entries: Optional[Iterable[Entry]] = None) -> None:
        if ordering not in (MIN, MAX):
            raise ValueError(f"ordering must be {MIN!r} or {MAX!r}, got {ordering!r}")
        self._ordering = ordering
        self._is_max = ordering == MAX
        self._data: List[PriorityHeap.Node] = []
        self._seq = 0
        if entries is not None:
            self.from_array(entries)

    @property
    def ordering(self) -> str:
        return self._ordering

    def push(self, priority: Any, value: T) -> None:
        self._data.append(self._new_node(priority, value))
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Optional[Entry]:
        if not self._data:
            return None
        if len(self._data) == 1:
            return self._data.pop().entry()
        top = self._data[0]
        self._data[0] = self._data.pop()
        self._sift_down(0)
        return top.entry()

    def peek(self) -> Optional[Entry]:
        if not self._data:
            return None
        return self._data[0].entry()

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        # The sequence counter keeps running across clears.
        self._data.clear()

    def to_array(self) -> List[Entry]:
        """Return the entries in internal storage order.

        The result is a snapshot of the implicit tree, not a sorted list.
        """
        return [node.entry() for node in self._data]

    def from_array(self, entries: Iterable[Entry]) -> None:
        """Replace the contents with ``entries`` and heapify in O(n).

        Sequence numbers are assigned in input order, so equal priorities
        keep their relative input order on extraction.
        """
        self._data = [self._new_node(priority, value) for priority, value in entries]
        for i in range(len(self._data) // 2 - 1, -1, -1):
            self._sift_down(i)

    def replace(self, priority: Any, value: T) -> Optional[Entry]:
        """Pop the root and push a new entry in a single sift-down pass.

        Returns the previous root, or None if the heap was empty (in which
        case the new entry becomes the only element).
        """
        node = self._new_node(priority, value)
        if not self._data:
            self._data.append(node)
            return None
        top = self._data[0]
        self._data[0] = node
        self._sift_down(0)
        return top.entry()

    def push_pop(self, priority: Any, value: T) -> Entry:
        """Push an entry, then pop and return the root, in one pass."""
        node = self._new_node(priority, value)
        # A fresh node loses every priority tie, so only a strictly better
        # priority can bypass the heap.
        if not self._data or self._cmp(node, self._data[0]) < 0:
            return node.entry()
        top = self._data[0]
        self._data[0] = node
        self._sift_down(0)
        return top.entry()

    def remove_if(self, predicate: Callable[[Entry], bool]) -> bool:
        """Remove the first entry, in storage order, matching ``predicate``."""
        for index, node in enumerate(self._data):
            if predicate(node.entry()):
                break
        else:
            return False
        last = self._data.pop()
        if index < len(self._data):
            self._data[index] = last
            # The moved node may belong above or below this slot.
            self._sift_down(index)
            self._sift_up(index)
        return True

    def find(self, predicate: Callable[[Entry], bool]) -> Optional[Entry]:
        for node in self._data:
            entry = node.entry()
            if predicate(entry):
                return entry
        return None

    def copy(self) -> 'PriorityHeap[T]':
        clone: PriorityHeap[T] = PriorityHeap(self._ordering)
        clone._data = self._data.copy()
        clone._seq = self._seq
        return clone

    def _new_node(self, priority: Any, value: T) -> 'PriorityHeap.Node':
        node = PriorityHeap.Node(priority, value, self._seq)
        self._seq += 1
        return node

    def _cmp(self, a: Node, b: Node) -> int:
        if a.priority < b.priority:
            return 1 if self._is_max else -1
        if a.priority > b.priority:
            return -1 if self._is_max else 1
        return a.seq - b.seq

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._cmp(self._data[index], self._data[parent]) < 0:
                self._data[index], self._data[parent] = self._data[parent], self._data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            best = index
            left = 2 * index + 1
            right = 2 * index + 2
            if left < size and self._cmp(self._data[left], self._data[best]) < 0:
                best = left
            if right < size and self._cmp(self._data[right], self._data[best]) < 0:
                best = right
            if best == index:
                break
            self._data[index], self._data[best] = self._data[best], self._data[index]
            index = best

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"PriorityHeap(ordering={self._ordering!r}, {self.to_array()!r})"

    def __str__(self) -> str:
        return f"PriorityHeap({self._ordering}, size={len(self._data)})"

    def __iter__(self) -> Iterator[Entry]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            entry = heap_copy.pop()
            assert entry is not None
            yield entry
