import operator
from typing import Any, Generic, Iterable, Iterator, List, Optional, Protocol, TypeVar

T = TypeVar('T')
T_contra = TypeVar('T_contra', contravariant=True)


class Comparator(Protocol[T_contra]):
    """Anything callable as ``comparator(a, b)`` returning True when ``a``
    should sit closer to the root than ``b``."""

    def __call__(self, a: T_contra, b: T_contra) -> bool: ...


class Heap(Generic[T]):
    """Array-backed binary heap ordered by a comparator fixed at construction.

    ``comparator(a, b)`` must be a strict ordering: ``operator.lt`` gives a
    min-heap, ``operator.gt`` a max-heap. With a non-strict comparator the
    child picked during bubble-down when both children compare equal is
    implementation-defined.

    Iterating a heap consumes it: each step extracts the root. Use
    ``heap.copy()`` to walk the elements in order without draining the heap.

    Not safe for concurrent mutation; callers must serialize access.
    """

    def __init__(self, comparator: Comparator[T]) -> None:
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self._comparator: Comparator[T] = comparator
        self._data: List[T] = []

    @staticmethod
    def new_min() -> 'Heap[Any]':
        return Heap(operator.lt)

    @staticmethod
    def new_max() -> 'Heap[Any]':
        return Heap(operator.gt)

    @staticmethod
    def from_array(arr: Iterable[T], comparator: Comparator[T]) -> 'Heap[T]':
        """Build a heap from an array in O(n).

        Note: Creates a shallow copy of the input array.
        """
        heap: Heap[T] = Heap(comparator)
        heap._data = list(arr)
        for i in range(len(heap._data) // 2 - 1, -1, -1):
            heap._bubble_down(i)
        return heap

    @property
    def comparator(self) -> Comparator[T]:
        return self._comparator

    def add(self, value: T) -> None:
        self._data.append(value)
        self._bubble_up(len(self._data) - 1)

    def extract(self) -> Optional[T]:
        """Remove and return the root, or None if the heap is empty."""
        if not self._data:
            return None
        return self._remove_root()

    def pop(self) -> T:
        if not self._data:
            raise IndexError("pop from empty heap")
        return self._remove_root()

    def peek(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[0]

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'Heap[T]':
        cls = type(self)
        clone: Heap[T] = cls.__new__(cls)
        clone._comparator = self._comparator
        clone._data = self._data.copy()
        return clone

    def _remove_root(self) -> T:
        last = len(self._data) - 1
        self._data[0], self._data[last] = self._data[last], self._data[0]
        result = self._data.pop()
        self._bubble_down(0)
        return result

    def _bubble_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._comparator(self._data[index], self._data[parent]):
                self._data[index], self._data[parent] = self._data[parent], self._data[index]
                index = parent
            else:
                break

    def _winning_child(self, index: int) -> Optional[int]:
        size = len(self._data)
        left = 2 * index + 1
        right = 2 * index + 2
        if left >= size:
            return None
        if right >= size:
            return left
        # equal children under a strict comparator resolve to the right one
        if self._comparator(self._data[left], self._data[right]):
            return left
        return right

    def _bubble_down(self, index: int) -> None:
        while True:
            child = self._winning_child(index)
            if child is None or not self._comparator(self._data[child], self._data[index]):
                break
            self._data[index], self._data[child] = self._data[child], self._data[index]
            index = child

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._data:
            raise StopIteration
        return self._remove_root()


class MinHeap(Heap[T]):
    def __init__(self) -> None:
        super().__init__(operator.lt)


class MaxHeap(Heap[T]):
    def __init__(self) -> None:
        super().__init__(operator.gt)
