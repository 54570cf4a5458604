"""Applying list functions and parsing the ``apply`` command."""

from __future__ import annotations

import re
from enum import Enum
from itertools import groupby
from typing import Callable, Dict, Optional

from .definitions import LIST_LITERAL_PATTERN
from .tables import MAX_ITER, MAX_NAME, Function, FunctionTable, ListTable, ValueList


class IterationLimitError(RuntimeError):
    """Raised when a repetition block runs MAX_ITER times without ending."""

    def __init__(self) -> None:
        super().__init__(f"Se alcanzó el número máximo de iteraciones ({MAX_ITER})")


class ApplyTarget(Enum):
    """What an ``apply`` command works on."""

    LITERAL = 1
    NAMED = 2


_ON_NONEMPTY: Dict[str, Callable[[ValueList], object]] = {
    "Si": ValueList.increment_first,
    "Sd": ValueList.increment_last,
    "Di": ValueList.pop_first,
    "Dd": ValueList.pop_last,
}
_ALWAYS: Dict[str, Callable[[ValueList], object]] = {
    "Oi": lambda values: values.prepend(0),
    "Od": lambda values: values.append(0),
}

_APPLY = re.compile(
    r"\s*apply\s*([A-Za-z0-9]+)(?![A-Za-z0-9])\s*(?:("
    + LIST_LITERAL_PATTERN
    + r")|([A-Za-z0-9]+))\s*;",
    re.ASCII,
)
_FUNCTION_NAME = re.compile(r"\s*(?s:.{0,5})\s*([A-Za-z0-9]{0,31})", re.ASCII)
_LIST_NAME = re.compile(r"\s*(?s:.{0,5})\s*[A-Za-z0-9]*\s*([A-Za-z0-9]*)", re.ASCII)
_LEADING_DIGITS = re.compile(r"\s*(\d*)", re.ASCII)


def is_base_function(function: Function) -> bool:
    return function.is_base


def repetition_ends(values: ValueList) -> bool:
    """A repetition stops once the list is non-empty and its ends are equal."""
    return bool(values) and values.first == values.last


def apply_base_function(values: ValueList, function: Function) -> None:
    """Apply one of the six base functions in place.

    Increments and deletions do nothing on an empty list.
    """
    if function.name in _ON_NONEMPTY:
        if values:
            _ON_NONEMPTY[function.name](values)
    elif function.name in _ALWAYS:
        _ALWAYS[function.name](values)
    else:
        raise ValueError(f"{function.name!r} is not a base function")


def apply_function(values: ValueList, function: Function) -> None:
    """Apply ``function`` to ``values`` in place.

    Raises IterationLimitError when a repetition block does not end.
    """
    if function.is_base:
        apply_base_function(values, function)
        return
    for block, members in groupby(zip(function.steps, function.repeat), key=lambda s: s[1]):
        steps = [step for step, _ in members]
        if block == 0:
            for step in steps:
                apply_function(values, step)
            continue
        count = 0
        while not repetition_ends(values) and count < MAX_ITER:
            for step in steps:
                apply_function(values, step)
            count += 1
        if count == MAX_ITER:
            raise IterationLimitError()


def validate_apply(
    buffer: str, functions: FunctionTable, lists: ListTable
) -> Optional[ApplyTarget]:
    """Check ``apply function [n, ...];`` or ``apply function list;``.

    Return what the command applies to, or None when it is invalid.
    """
    match = _APPLY.match(buffer)
    if match is None:
        return None
    function_name, literal, list_name = match.groups()
    if len(function_name) > MAX_NAME - 1 or function_name not in functions:
        return None
    if literal is not None:
        return ApplyTarget.LITERAL
    if len(list_name) > MAX_NAME - 1 or list_name not in lists:
        return None
    return ApplyTarget.NAMED


def extract_list_values(buffer: str) -> ValueList:
    """Read the numbers of the bracketed list in an ``apply`` line."""
    start = buffer.find("[")
    if start == -1:
        return ValueList()
    end = buffer.find("]", start + 1)
    content = buffer[start + 1 :] if end == -1 else buffer[start + 1 : end]
    if not content:
        return ValueList()
    numbers = []
    for part in content.split(","):
        digits = _LEADING_DIGITS.match(part)
        numbers.append(int(digits.group(1)) if digits and digits.group(1) else 0)
    return ValueList("", numbers)


def extract_list_name(buffer: str) -> str:
    """Return the list name that follows the function name in an ``apply`` line."""
    match = _LIST_NAME.match(buffer)
    return match.group(1) if match else ""


def extract_function_name(buffer: str) -> str:
    """Return the function name of an ``apply`` line."""
    match = _FUNCTION_NAME.match(buffer)
    return match.group(1) if match else ""