import io

import pytest

from patternkit.cli import main


def test_command(capsys):
    assert main(["command"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Lihgt ist ON!", "Lihgt ist OFF!"]


def test_sort(capsys):
    assert main(["sort"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out.index("Duck after sort:") > out.index("Duck bevor sort:")
    after = out[out.index("Duck after sort:") + 1 : out.index("Duck after sort:") + 5]
    weights = [int(line.split(": ")[1]) for line in after]
    assert weights == sorted(weights)


def test_decorator(capsys):
    main(["decorator"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Espresso"
    assert "Espresso, Milk" in out


def test_strategy(capsys):
    main(["strategy"])
    out = capsys.readouterr().out
    assert "I can not fly :-(" in out
    assert "I can fly with wings!" in out


def test_observer_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("m"))
    assert main(["observer"]) == 0
    out = capsys.readouterr().out
    assert "CurrentConditionsDisplay::Temperatur: 0" in out


def test_template_method_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("yn"))
    main(["template-method"])
    out = capsys.readouterr().out
    assert "Add lemon to tea!" in out
    assert "Add sugar and milk to coffee!" not in out


def test_mvc_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 120\n"))
    main(["mvc"])
    assert "Current BPM: 120" in capsys.readouterr().out


def test_unknown_pattern():
    with pytest.raises(SystemExit):
        main(["nonsense"])


def test_missing_pattern():
    with pytest.raises(SystemExit):
        main([])