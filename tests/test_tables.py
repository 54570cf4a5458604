import pytest

from listfn.tables import (
    BASE_FUNCTION_NAMES,
    DuplicateNameError,
    Function,
    FunctionTable,
    ListTable,
    ValueList,
)


def test_value_list_create_and_append():
    values = ValueList()
    assert len(values) == 0
    values.append(10)
    values.append(20)
    values.append(30)
    assert list(values) == [10, 20, 30]
    assert values.last == 30


def test_append_keeps_order():
    values = ValueList()
    values.append(42)
    assert values.first == 42
    assert values.last == 42
    values.append(84)
    assert values.last == 84
    assert list(values) == [42, 84]


def test_prepend():
    values = ValueList()
    values.prepend(10)
    assert values.first == 10
    assert values.last == 10
    values.prepend(20)
    assert list(values) == [20, 10]
    assert values.last == 10


def test_pop_first_until_empty():
    values = ValueList()
    values.prepend(1)
    values.prepend(2)
    assert values.pop_first() == 2
    assert list(values) == [1]
    assert values.pop_first() == 1
    assert len(values) == 0


def test_pop_last_until_empty():
    values = ValueList()
    values.append(3)
    values.append(4)
    assert values.pop_last() == 4
    assert list(values) == [3]
    assert values.pop_last() == 3
    assert len(values) == 0


def test_increment_first_and_last():
    values = ValueList()
    values.prepend(7)
    values.append(8)
    values.increment_first()
    values.increment_last()
    assert list(values) == [8, 9]


@pytest.mark.parametrize(
    "operation",
    ["pop_first", "pop_last", "increment_first", "increment_last"],
)
def test_operations_on_empty_list_raise(operation):
    with pytest.raises(IndexError):
        getattr(ValueList(), operation)()


def test_copy_is_independent():
    origin = ValueList("orig", [10, 20, 30])
    copied = origin.copy("dest")
    assert list(copied) == [10, 20, 30]
    assert copied.name == "dest"
    copied.append(40)
    assert list(origin) == [10, 20, 30]


def test_same_values():
    assert ValueList("a", [1, 2]).same_values(ValueList("b", [1, 2]))
    assert not ValueList("a", [1, 2]).same_values(ValueList("b", [1, 2, 3]))
    assert not ValueList("a", [1, 3]).same_values(ValueList("b", [1, 2]))
    assert ValueList().same_values(ValueList())


def test_list_table_add_and_find():
    lists = ListTable(17)
    assert lists.size == 17
    first = ValueList("numeros", [5])
    assert first.first == 5
    lists.add(first)
    assert len(lists) == 1
    assert "numeros" in lists

    with pytest.raises(DuplicateNameError):
        lists.add(ValueList("numeros"))
    assert lists.get("numeros") is first
    assert len(lists) == 1

    other = ValueList("test", [8])
    lists.add(other)
    assert len(lists) == 2
    assert lists.get("test").name == "test"
    assert lists.get("missing") is None
    assert "missing" not in lists


def test_function_table_holds_base_functions():
    functions = FunctionTable(101)
    assert len(functions) == 6
    for name in ("Si", "Di", "Dd", "Sd", "Oi", "Od"):
        assert name in functions
        assert functions.get(name).name == name
    assert {f.name for f in functions} == set(BASE_FUNCTION_NAMES)


def test_new_function_is_empty():
    function = Function("Si")
    assert function.steps == []
    assert function.name == "Si"
    assert function.is_base


def test_function_table_lookup_of_unknown_names():
    functions = FunctionTable(101)
    for name in ("f1", "f2", "f3", "f6"):
        assert name not in functions
        assert functions.get(name) is None


def test_function_table_add_and_duplicate():
    functions = FunctionTable(17)
    assert functions.size == 17
    suma = Function("suma")
    functions.add(suma)
    assert len(functions) == 7
    assert functions.get("suma") is suma
    with pytest.raises(DuplicateNameError):
        functions.add(Function("suma"))
    assert functions.get("suma") is suma
    assert len(functions) == 7


def test_function_add_step():
    function = Function()
    base = Function("Si")
    function.add_step(base)
    assert len(function.steps) == 1
    assert function.steps[0].name == "Si"
    assert function.repeat == [0]
    assert not function.is_base


def test_function_step_limit():
    function = Function("f")
    base = Function("Si")
    for _ in range(30):
        function.add_step(base)
    with pytest.raises(ValueError):
        function.add_step(base)


def test_function_copy():
    base = Function("Si")
    original = Function("f")
    original.add_step(base)
    copied = original.copy("g")
    assert copied.name == "g"
    assert copied.steps[0] is base
    copied.add_step(base)
    assert len(original.steps) == 1
    assert len(copied.steps) == 2


def test_function_table_grows_past_load_limit():
    functions = FunctionTable(17)
    for number in range(6):
        functions.add(Function(f"f{number}"))
    assert len(functions) == 12
    assert functions.size == 17
    functions.add(Function("f6"))
    assert len(functions) == 13
    assert functions.size == 37
    for number in range(7):
        assert f"f{number}" in functions
    for name in BASE_FUNCTION_NAMES:
        assert name in functions


def test_list_table_grows_past_load_limit():
    lists = ListTable(17)
    for number in range(12):
        lists.add(ValueList(f"L{number}", [number]))
    assert lists.size == 17
    lists.add(ValueList("L12", [12]))
    assert lists.size == 37
    assert sorted(lst.first for lst in lists) == list(range(13))


def test_table_size_too_small():
    with pytest.raises(ValueError):
        ListTable(1)