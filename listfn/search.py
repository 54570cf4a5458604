"""The ``search`` command: finding a composition that maps inputs to outputs."""

from __future__ import annotations

import re
from collections import deque
from typing import Deque, List, Optional, Sequence, Tuple

from .apply import IterationLimitError, apply_function
from .tables import MAX_NAME, Function, FunctionTable, ListTable, ValueList

MAX_DEPTH = 8
MAX_CANDIDATE_STEPS = 15
CANDIDATE_NAME = "f"

_HEAD = re.compile(r"\s*(?s:.{6})\s*\{\s*", re.ASCII)
_PAIR = re.compile(r"([A-Za-z0-9]+)\s*,\s*([A-Za-z0-9]+)\s*;\s*", re.ASCII)
_TAIL = re.compile(r"\}\s*;", re.ASCII)


def _name_pairs(buffer: str, lists: ListTable) -> List[Tuple[str, str]]:
    """Return the (input, output) name pairs, or an empty list if invalid."""
    head = _HEAD.match(buffer)
    if head is None:
        return []
    pos = head.end()
    pairs: List[Tuple[str, str]] = []
    while pos < len(buffer) and buffer[pos] != "}":
        pair = _PAIR.match(buffer, pos)
        if pair is None:
            return []
        source, target = pair.groups()
        for name in (source, target):
            if len(name) > MAX_NAME - 1 or name not in lists:
                return []
        pairs.append((source, target))
        pos = pair.end()
    if _TAIL.match(buffer, pos) is None:
        return []
    return pairs


def validate_search(buffer: str, lists: ListTable) -> int:
    """Check ``search {L1, L2; L3, L4; ...};`` with every list defined.

    Return the number of pairs, 0 when the line is invalid.
    """
    return len(_name_pairs(buffer, lists))


def _lookup(lists: ListTable, name: str) -> ValueList:
    found = lists.get(name)
    if found is None:
        raise KeyError(name)
    return found


def parse_search(buffer: str, lists: ListTable) -> Tuple[List[ValueList], List[ValueList]]:
    """Return the input lists and the expected output lists of a ``search`` line."""
    pairs = _name_pairs(buffer, lists)
    if not pairs:
        raise ValueError(f"invalid search: {buffer.strip()!r}")
    inputs = [_lookup(lists, source) for source, _ in pairs]
    outputs = [_lookup(lists, target) for _, target in pairs]
    return inputs, outputs


def is_solution(
    function: Function, inputs: Sequence[ValueList], outputs: Sequence[ValueList]
) -> bool:
    """Check every pair after the first one; the search checks the first itself."""
    for source, expected in zip(inputs[1:], outputs[1:]):
        result = source.copy("temp")
        try:
            apply_function(result, function)
        except IterationLimitError:
            return False
        if not result.same_values(expected):
            return False
    return True


def search(
    functions: FunctionTable,
    inputs: Sequence[ValueList],
    outputs: Sequence[ValueList],
) -> Optional[Function]:
    """Breadth-first search over compositions of known functions, up to 8 steps.

    Return the first composition mapping every input to its output, or None.
    Candidates whose repetitions do not end are dropped.
    """
    if not inputs or len(inputs) != len(outputs):
        raise ValueError("inputs and outputs must be non-empty and of equal length")
    known = list(functions)
    current: Deque[Function] = deque(Function(CANDIDATE_NAME, [step], [0]) for step in known)
    for _ in range(MAX_DEPTH):
        following: Deque[Function] = deque()
        while current:
            candidate = current.popleft()
            result = inputs[0].copy()
            try:
                apply_function(result, candidate)
            except IterationLimitError:
                continue
            if result.same_values(outputs[0]) and is_solution(candidate, inputs, outputs):
                return candidate
            if len(candidate.steps) < MAX_CANDIDATE_STEPS:
                for step in known:
                    child = candidate.copy(CANDIDATE_NAME)
                    child.add_step(step)
                    following.append(child)
        current = following
    return None