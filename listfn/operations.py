"""The four commands: defining lists and functions, applying and searching."""

from __future__ import annotations

from typing import Optional

from .apply import (
    ApplyTarget,
    apply_function,
    extract_function_name,
    extract_list_name,
    extract_list_values,
    validate_apply,
)
from .definitions import (
    parse_function_definition,
    parse_list_definition,
    validate_function_definition,
    validate_list_definition,
)
from .search import parse_search, search, validate_search
from .tables import Function, FunctionTable, ListTable, ValueList


def define_list(buffer: str, lists: ListTable) -> ValueList:
    """Define the list a ``defl`` line describes and store it in ``lists``.

    Raises ValueError for a malformed line and DuplicateNameError when the
    name is already taken.
    """
    if not validate_list_definition(buffer):
        raise ValueError(f"invalid list definition: {buffer.strip()!r}")
    new_list = parse_list_definition(buffer)
    lists.add(new_list)
    return new_list


def define_function(buffer: str, functions: FunctionTable) -> Function:
    """Define the function a ``deff`` line describes and store it in ``functions``.

    Raises ValueError for a malformed line and DuplicateNameError when the
    name is already taken.
    """
    if not validate_function_definition(buffer, functions):
        raise ValueError(f"invalid function definition: {buffer.strip()!r}")
    new_function = parse_function_definition(buffer, functions)
    functions.add(new_function)
    return new_function


def apply_command(buffer: str, functions: FunctionTable, lists: ListTable) -> ValueList:
    """Apply a function to a literal or a named list and return the result.

    Named lists are left untouched. Raises ValueError for a malformed line
    and IterationLimitError when a repetition does not end.
    """
    target = validate_apply(buffer, functions, lists)
    if target is None:
        raise ValueError(f"invalid apply command: {buffer.strip()!r}")
    function = functions.get(extract_function_name(buffer))
    if function is None:
        raise KeyError(extract_function_name(buffer))
    if target is ApplyTarget.LITERAL:
        values = extract_list_values(buffer)
    else:
        source = lists.get(extract_list_name(buffer))
        if source is None:
            raise KeyError(extract_list_name(buffer))
        values = source.copy()
    apply_function(values, function)
    return values


def search_command(
    buffer: str, functions: FunctionTable, lists: ListTable
) -> Optional[Function]:
    """Search for a composition satisfying every pair of a ``search`` line.

    Return the composition found, or None. Raises ValueError for a
    malformed line.
    """
    if not validate_search(buffer, lists):
        raise ValueError(f"invalid search command: {buffer.strip()!r}")
    inputs, outputs = parse_search(buffer, lists)
    return search(functions, inputs, outputs)