"""Named value lists, composed list functions and the hash tables that hold them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Generic, Iterable, Iterator, List, Optional, TypeVar

MAX_NAME = 32
MAX_STEPS = 30
MAX_ITER = 1000
DEFAULT_TABLE_SIZE = 101
BASE_FUNCTION_NAMES = ("Si", "Sd", "Od", "Oi", "Dd", "Di")

_MAX_LOAD = 0.75
_HASH_MASK = 0xFFFFFFFF


class DuplicateNameError(ValueError):
    """Raised when a name is already taken in a table."""

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name


@dataclass(eq=False)
class ValueList:
    """A named sequence of natural numbers."""

    name: str = ""
    values: Deque[int] = field(default_factory=deque)

    def __post_init__(self) -> None:
        self.values = deque(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    @property
    def first(self) -> int:
        if not self.values:
            raise IndexError("the list is empty")
        return self.values[0]

    @property
    def last(self) -> int:
        if not self.values:
            raise IndexError("the list is empty")
        return self.values[-1]

    def append(self, value: int) -> None:
        self.values.append(value)

    def prepend(self, value: int) -> None:
        self.values.appendleft(value)

    def pop_first(self) -> int:
        if not self.values:
            raise IndexError("pop from an empty list")
        return self.values.popleft()

    def pop_last(self) -> int:
        if not self.values:
            raise IndexError("pop from an empty list")
        return self.values.pop()

    def increment_first(self) -> None:
        if not self.values:
            raise IndexError("increment on an empty list")
        self.values[0] += 1

    def increment_last(self) -> None:
        if not self.values:
            raise IndexError("increment on an empty list")
        self.values[-1] += 1

    def copy(self, name: str = "") -> ValueList:
        """Return an independent list holding the same values."""
        return ValueList(name, self.values)

    def same_values(self, other: ValueList) -> bool:
        return self.values == other.values


@dataclass(eq=False)
class Function:
    """A list function: a base function, or a composition of other functions.

    ``repeat[i]`` is 0 for a plain step and otherwise the number of the
    repetition block that step belongs to.
    """

    name: str = ""
    steps: List[Function] = field(default_factory=list)
    repeat: List[int] = field(default_factory=list)

    @property
    def is_base(self) -> bool:
        return self.name in BASE_FUNCTION_NAMES

    def add_step(self, step: Function) -> None:
        if len(self.steps) >= MAX_STEPS:
            raise ValueError(f"a function holds at most {MAX_STEPS} steps")
        self.steps.append(step)
        self.repeat.append(0)

    def copy(self, name: str = "") -> Function:
        """Return a new function with the same steps under another name."""
        return Function(name, list(self.steps), list(self.repeat))


def _hash(key: str) -> int:
    value = 0
    for byte in key.encode():
        signed = byte - 256 if byte > 127 else byte
        value = (signed + 31 * value) & _HASH_MASK
    return value


def _is_prime(n: int) -> bool:
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def _next_prime(n: int) -> int:
    while not _is_prime(n):
        n += 1
    return n


_Item = TypeVar("_Item", ValueList, Function)


class _NameTable(Generic[_Item]):
    """Open-addressing table keyed by name, with double hashing and growth."""

    _duplicate_message = "El nombre ya esta en uso"

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        if size < 2:
            raise ValueError("table size must be at least 2")
        self._slots: List[Optional[_Item]] = [None] * size
        self._count = 0

    @property
    def size(self) -> int:
        return len(self._slots)

    @property
    def load_factor(self) -> float:
        return self._count / len(self._slots)

    def _probe(self, name: str) -> Iterable[int]:
        size = len(self._slots)
        key = _hash(name)
        start = key % size
        stride = 1 + key % (size - 1)
        return ((start + i * stride) % size for i in range(size))

    def _find_slot(self, name: str) -> Optional[int]:
        for index in self._probe(name):
            item = self._slots[index]
            if item is None:
                return None
            if item.name == name:
                return index
        return None

    def _get(self, name: str) -> Optional[_Item]:
        index = self._find_slot(name)
        return None if index is None else self._slots[index]

    def _contains(self, name: object) -> bool:
        return isinstance(name, str) and self._find_slot(name) is not None

    def _items(self) -> Iterator[_Item]:
        return (item for item in list(self._slots) if item is not None)

    def __iter__(self) -> Iterator[_Item]:
        return self._items()

    def _add(self, item: _Item) -> None:
        self._insert(item)
        if self.load_factor > _MAX_LOAD:
            self._grow()

    def _insert(self, item: _Item) -> None:
        for index in self._probe(item.name):
            slot = self._slots[index]
            if slot is None:
                self._slots[index] = item
                self._count += 1
                return
            if slot.name == item.name:
                raise DuplicateNameError(self._duplicate_message, item.name)
        raise OverflowError("no free slot for " + repr(item.name))

    def _grow(self) -> None:
        old_items = [item for item in self._slots if item is not None]
        self._slots = [None] * _next_prime(len(self._slots) * 2)
        self._count = 0
        for item in old_items:
            self._insert(item)


class ListTable(_NameTable[ValueList]):
    """The user's named lists."""

    _duplicate_message = "El nombre de la lista ya esta en uso"

    def add(self, value_list: ValueList) -> None:
        """Insert ``value_list``; raise DuplicateNameError if its name is taken."""
        self._add(value_list)

    def get(self, name: str) -> Optional[ValueList]:
        """Return the list called ``name``, or None."""
        return self._get(name)

    def __contains__(self, name: object) -> bool:
        return self._contains(name)

    def __len__(self) -> int:
        return self._count


class FunctionTable(_NameTable[Function]):
    """Every known function, starting with the six base functions."""

    _duplicate_message = "El nombre de la funcion ya esta en uso"

    def __init__(self, size: int = DEFAULT_TABLE_SIZE) -> None:
        super().__init__(size)
        for name in BASE_FUNCTION_NAMES:
            self.add(Function(name))

    def add(self, function: Function) -> None:
        """Insert ``function``; raise DuplicateNameError if its name is taken."""
        self._add(function)

    def get(self, name: str) -> Optional[Function]:
        """Return the function called ``name``, or None."""
        return self._get(name)

    def __contains__(self, name: object) -> bool:
        return self._contains(name)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Function]:
        return self._items()