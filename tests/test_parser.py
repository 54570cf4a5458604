import io

import pytest

from listfn.parser import (
    INVALID_INPUT_MESSAGE,
    Operation,
    input_is_valid,
    interpret_operation,
    is_list_literal,
    read_commands,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("defl L1 = ...", Operation.DEFL),
        ("deff suma = ...", Operation.DEFF),
        ("apply suma lista ", Operation.APPLY),
        ("search lista valor", Operation.SEARCH),
        ("otra cosa ", Operation.FINISH),
        ("   apply f L1;", Operation.APPLY),
        ("", Operation.FINISH),
    ],
)
def test_interpret_operation(text, expected):
    assert interpret_operation(text) is expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("defl L1 = [1];\n", True),
        ("x;\n", True),
        ("defl L1 = [1]\n", False),
        ("defl L1 = [1]; x\n", False),
        ("no semicolon\n", False),
        ("a" * 600 + ";\n", False),
    ],
)
def test_input_is_valid(line, expected):
    assert input_is_valid(line) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[1,2,3]", True),
        ("[]", True),
        ("[ ]", True),
        ("[100];", True),
        ("[  1 , 2 , 3  ] ;", True),
        ("[1,]", False),
        ("[1 2]", False),
        ("[-1,2]", False),
        ("[1,,2]", False),
        ("[abc]", False),
        ("1,2,3", False),
        ("[1,2", False),
    ],
)
def test_is_list_literal(text, expected):
    assert is_list_literal(text) is expected


def test_read_commands_yields_valid_lines_and_reports_invalid():
    stream = io.StringIO("defl L1 = [1];\nbad line\napply f L1;\nsalir;\n")
    err = io.StringIO()
    commands = list(read_commands(stream, err))
    assert commands == [
        (Operation.DEFL, "defl L1 = [1];\n"),
        (Operation.APPLY, "apply f L1;\n"),
        (Operation.FINISH, "salir;\n"),
    ]
    assert err.getvalue() == INVALID_INPUT_MESSAGE + "\n"


def test_read_commands_stops_at_end_of_stream():
    err = io.StringIO()
    assert list(read_commands(io.StringIO(""), err)) == []
    assert err.getvalue() == ""