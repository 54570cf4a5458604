"""Interactive command loop over list definitions, functions and searches."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from .apply import IterationLimitError
from .operations import apply_command, define_function, define_list, search_command
from .parser import Operation, read_commands
from .tables import DuplicateNameError, FunctionTable, ListTable

WELCOME_MESSAGE = "Bienvenido al programa de funciones de lista."
FOUND_MESSAGE = "Funcion encontrada: "
NOT_FOUND_MESSAGE = "No se encontró una función que cumpla con los criterios."


def _format_values(values: Iterable[int]) -> str:
    return "[ " + "".join(f"{value} " for value in values) + "]"


def _execute(
    operation: Operation,
    line: str,
    functions: FunctionTable,
    lists: ListTable,
    out: TextIO,
) -> None:
    try:
        if operation is Operation.DEFL:
            define_list(line, lists)
        elif operation is Operation.DEFF:
            define_function(line, functions)
        elif operation is Operation.APPLY:
            try:
                result = apply_command(line, functions, lists)
            except IterationLimitError as error:
                out.write(f"Error: {error}\n")
            else:
                out.write(_format_values(result) + "\n")
        elif operation is Operation.SEARCH:
            found = search_command(line, functions, lists)
            if found is None:
                out.write(NOT_FOUND_MESSAGE + "\n")
            else:
                out.write(FOUND_MESSAGE + "\n")
                out.write("".join(f"{step.name} " for step in found.steps) + "\n")
    except DuplicateNameError as error:
        out.write(f"{error}\n")
    except ValueError:
        pass
    out.write("\n")


def run(stream: Iterable[str], out: TextIO) -> None:
    """Read commands from ``stream`` until a line that is no command, writing to ``out``."""
    out.write(WELCOME_MESSAGE + "\n")
    lists = ListTable()
    functions = FunctionTable()
    for operation, line in read_commands(stream, out):
        if operation is Operation.FINISH:
            break
        _execute(operation, line, functions, lists, out)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command loop on standard input."""
    parser = argparse.ArgumentParser(
        prog="listfn",
        description="Define lists and list functions, apply them and search for compositions.",
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())