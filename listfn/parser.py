"""Reading command lines and recognising their kind."""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Iterator, TextIO, Tuple

MAX_INPUT = 512
INVALID_INPUT_MESSAGE = "Input inválido. Debe tener hasta 512 caracteres y terminar en ';'"

WHITESPACE = " \t\n\r\f\v"

_LIST_LITERAL = re.compile(r"\[\s*(?:\d+\s*(?:,\s*\d+\s*)*)?\]", re.ASCII)


class Operation(Enum):
    """The kind of a command line."""

    DEFL = "defl"
    DEFF = "deff"
    APPLY = "apply"
    SEARCH = "search"
    FINISH = "finish"


_KEYWORD_OPERATIONS = (Operation.DEFL, Operation.DEFF, Operation.APPLY, Operation.SEARCH)


def interpret_operation(buffer: str) -> Operation:
    """Tell the operation from the first word; anything unknown finishes."""
    text = buffer.lstrip(WHITESPACE)
    for operation in _KEYWORD_OPERATIONS:
        if text.startswith(operation.value):
            return operation
    return Operation.FINISH


def input_is_valid(buffer: str) -> bool:
    """Check a raw line: short enough and ending in ';' right before the newline."""
    if len(buffer.encode()) >= MAX_INPUT - 1:
        return False
    if ";" not in buffer:
        return False
    return len(buffer) >= 2 and buffer[-2] == ";"


def is_list_literal(text: str) -> bool:
    """Check that ``text`` starts with a well-formed ``[n, n, ...]`` literal."""
    return _LIST_LITERAL.match(text) is not None


def read_commands(stream: Iterable[str], err: TextIO) -> Iterator[Tuple[Operation, str]]:
    """Yield ``(operation, line)`` for each valid line; report invalid ones to ``err``."""
    for line in stream:
        if input_is_valid(line):
            yield interpret_operation(line), line
        else:
            err.write(INVALID_INPUT_MESSAGE + "\n")