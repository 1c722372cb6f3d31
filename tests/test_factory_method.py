import pytest

from patternbook.factory_method import (
    Notebook,
    PersonalComputer,
    Server,
    create,
    demo,
)


@pytest.mark.parametrize(
    "type_name, cls",
    [("server", Server), ("notebook", Notebook), ("computer", PersonalComputer)],
)
def test_create_returns_matching_kind(type_name, cls):
    computer = create(type_name)
    assert isinstance(computer, cls)
    assert computer.type == type_name


def test_create_unknown_returns_none():
    assert create("monoblock") is None


def test_server_specs():
    server = create("server")
    assert (server.core, server.memory) == (32, 256)


def test_notebook_details():
    assert create("notebook").print_details() == "notebook Core:[6], Mem:[8], Monitor: [true]"


def test_details_start_with_type():
    for type_name in ("server", "notebook", "computer"):
        assert create(type_name).print_details().startswith(type_name + " Core:[")


def test_demo_skips_unknown_kind():
    lines = demo()
    assert [line.split()[0] for line in lines] == ["server", "notebook", "computer"]