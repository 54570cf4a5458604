"""Parsing the ``defl`` (define list) and ``deff`` (define function) commands."""

from __future__ import annotations

import re
from typing import List

from .tables import MAX_NAME, MAX_STEPS, Function, FunctionTable, ValueList

TOO_MANY_STEPS_MESSAGE = "Puede componer hasta 30 funciones en una sola declaracion"

LIST_LITERAL_PATTERN = r"\[\s*(?:\d+\s*(?:,\s*\d+\s*)*)?\]"

_LIST_DEFINITION = re.compile(
    r"defl\s*([A-Za-z][A-Za-z0-9]*)\s*=\s*(" + LIST_LITERAL_PATTERN + r")\s*;",
    re.ASCII,
)
_FUNCTION_HEADER = re.compile(r"deff\s*([A-Za-z0-9]+)\s*=\s*", re.ASCII)
_STEP = re.compile(r"(<?)([A-Za-z0-9]*)(>?)\s*", re.ASCII)

_MAX_DEFINED_NAME = MAX_NAME - 2
_MAX_STEP_NAME = MAX_NAME - 1


def _literal_values(literal: str) -> List[int]:
    inner = literal[1:-1]
    if not inner.strip():
        return []
    return [int(part) for part in inner.split(",")]


def validate_list_definition(buffer: str) -> bool:
    """Check ``defl name = [n, n, ...];`` where the name starts with a letter."""
    match = _LIST_DEFINITION.match(buffer)
    return match is not None and len(match.group(1)) <= _MAX_DEFINED_NAME


def parse_list_definition(buffer: str) -> ValueList:
    """Build the named list a valid ``defl`` line describes."""
    match = _LIST_DEFINITION.match(buffer)
    if match is None or len(match.group(1)) > _MAX_DEFINED_NAME:
        raise ValueError(f"invalid list definition: {buffer.strip()!r}")
    return ValueList(match.group(1), _literal_values(match.group(2)))


def _next_char_allowed(buffer: str, pos: int) -> bool:
    following = buffer[pos : pos + 1]
    return bool(following) and (
        (following.isascii() and following.isalnum()) or following in ";<"
    )


def validate_function_definition(buffer: str, functions: FunctionTable) -> bool:
    """Check ``deff name = step step <step ...> ...;`` against the known functions.

    Every step must name a known function, repetition blocks are marked with
    ``<`` and ``>`` and cannot nest, and at most 30 steps may be composed.
    """
    header = _FUNCTION_HEADER.match(buffer)
    if header is None or len(header.group(1)) > _MAX_DEFINED_NAME:
        return False
    pos = header.end()
    steps = 0
    inside = False
    while pos < len(buffer) and buffer[pos] != ";":
        if steps == MAX_STEPS:
            print(TOO_MANY_STEPS_MESSAGE, end="")
            return False
        steps += 1
        step = _STEP.match(buffer, pos)
        assert step is not None  # every part of the pattern is optional
        opens, name, closes = step.groups()
        if opens:
            if inside:
                return False
            inside = True
        if len(name) > _MAX_STEP_NAME:
            return False
        if closes:
            if not inside:
                return False
            inside = False
        if name not in functions:
            return False
        pos = step.end()
        if not _next_char_allowed(buffer, pos):
            return False
    if pos >= len(buffer) or buffer[pos] != ";":
        return False
    return steps > 0 and not inside


def parse_function_definition(buffer: str, functions: FunctionTable) -> Function:
    """Build the function a valid ``deff`` line describes.

    Steps inside the n-th ``< ... >`` block carry repeat number n.
    """
    if not validate_function_definition(buffer, functions):
        raise ValueError(f"invalid function definition: {buffer.strip()!r}")
    header = _FUNCTION_HEADER.match(buffer)
    assert header is not None
    function = Function(header.group(1))
    pos = header.end()
    block = 0
    inside = False
    while buffer[pos] != ";":
        step = _STEP.match(buffer, pos)
        assert step is not None
        opens, name, closes = step.groups()
        if opens:
            inside = True
            block += 1
        known = functions.get(name)
        if known is None:
            raise KeyError(name)
        function.add_step(known)
        if inside:
            function.repeat[-1] = block
        if closes:
            inside = False
        pos = step.end()
    return function