import pytest

from patternbook import strategy
from patternbook.cli import PATTERNS, main


def test_runs_strategy_demo(capsys):
    assert main(["strategy"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "== strategy =="
    assert out[1:] == strategy.demo()


def test_reports_unknown_brand(capsys):
    main(["abstract_factory"])
    out = capsys.readouterr().out.splitlines()
    assert "Производитель Dell - не найден!" in out


def test_decorator_prices_on_one_line(capsys):
    main(["decorator"])
    out = capsys.readouterr().out.splitlines()
    assert out[1].split()[0] == "10"


def test_mediator_with_no_pause(capsys):
    main(["mediator", "--pause", "0"])
    out = capsys.readouterr().out.splitlines()
    assert "Грузовик: погрузка..." in out


def test_list_patterns(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == list(PATTERNS)


def test_unknown_pattern_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["nope"])
    assert excinfo.value.code == 2