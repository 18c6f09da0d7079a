from typing import TypeVar, Generic, List, Iterator, Iterable, Optional

T = TypeVar('T')


class EmptyQueueError(IndexError):
    """Raised when popping or peeking a heap with no live elements."""


class RestorableHeap(Generic[T]):
    """Binary min-heap that keeps popped values until they are collected.

    The backing list is split by ``_size``: indices ``[0, _size)`` hold the
    live heap, indices ``[_size, len(_data))`` hold values popped since the
    last collection. ``restore_heap`` reinserts those values, while
    ``collect_garbage`` drops them for good.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._data: List[T] = []
        self._size = 0
        if values is not None:
            for value in values:
                self.insert(value)

    def insert(self, value: T) -> None:
        self._data.append(value)
        last = len(self._data) - 1
        # First graveyard slot becomes live; its old value goes to the tail.
        if last != self._size:
            self._swap(last, self._size)
        self._size += 1
        self._percolate_up(self._size - 1)

    def pop(self) -> T:
        if self._size == 0:
            raise EmptyQueueError("pop from empty heap")
        self._swap(0, self._size - 1)
        self._size -= 1
        self._percolate_down(0)
        return self._data[self._size]

    def peek(self) -> T:
        if self._size == 0:
            raise EmptyQueueError("peek from empty heap")
        return self._data[0]

    def collect_garbage(self) -> None:
        """Discard every popped value. Nothing popped so far can be restored."""
        for _ in range(len(self._data) - self._size):
            self._data.pop()

    def restore_heap(self) -> None:
        """Reinsert every popped value that has not been collected.

        Only the multiset of values is restored; the resulting array layout
        may differ from the layout before the pops.
        """
        while len(self._data) > self._size:
            self.insert(self._data.pop())

    def clear(self) -> None:
        self._data.clear()
        self._size = 0

    def length(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._data)

    def garbage_count(self) -> int:
        return len(self._data) - self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def copy(self) -> 'RestorableHeap[T]':
        clone: RestorableHeap[T] = RestorableHeap()
        clone._data = self._data.copy()
        clone._size = self._size
        return clone

    def to_list(self) -> List[T]:
        return self._data[:self._size]

    def dump(self) -> str:
        """Debug view of the live region, e.g. ``[1,4,2] Length: 3``."""
        live = ",".join(str(v) for v in self._data[:self._size])
        return f"[{live}] Length: {self._size}"

    @staticmethod
    def from_array(arr: Iterable[T]) -> 'RestorableHeap[T]':
        """Build a heap by inserting each value in order.

        Note: No bulk heapify; each value pays the normal insert cost.
        """
        return RestorableHeap(list(arr))

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _min_child(self, index: int) -> int:
        """Index of the smaller child if it is less than ``index``, else -1."""
        left = 2 * index + 1
        right = 2 * index + 2
        if left >= self._size:
            return -1
        if right >= self._size:
            return left if self._data[left] < self._data[index] else -1
        if self._data[left] < self._data[index] or self._data[right] < self._data[index]:
            return left if self._data[left] < self._data[right] else right
        return -1

    def _percolate_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._data[index] < self._data[parent]:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _percolate_down(self, index: int) -> None:
        child = self._min_child(index)
        while child != -1:
            self._swap(index, child)
            index = child
            child = self._min_child(index)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"RestorableHeap({self._data[:self._size]}, garbage={self._data[self._size:]})"

    def __str__(self) -> str:
        return f"RestorableHeap(size={self._size}, capacity={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        heap_copy.collect_garbage()
        while not heap_copy.is_empty():
            yield heap_copy.pop()
