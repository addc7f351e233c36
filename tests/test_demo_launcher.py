import sys

from glsketch import demo


def test_lists_demos(capsys):
    assert demo.list_demos() == ["artview", "snake"]
    assert demo.main(["--list"]) == 0
    assert capsys.readouterr().out.split() == ["artview", "snake"]


def test_missing_demo_name_is_an_error(capsys):
    assert demo.main([]) == 2


def test_unknown_demo(capsys):
    assert demo.main(["tetris"]) == 2
    err = capsys.readouterr().err
    assert "unknown demo: tetris" in err
    assert "snake" in err


def test_runs_demo_as_module(monkeypatch):
    calls = []
    monkeypatch.setattr(demo.subprocess, "call", lambda cmd: calls.append(cmd) or 0)
    assert demo.main(["snake", "--", "--seed", "3"]) == 0
    assert calls == [[sys.executable, "-m", "glsketch.demos.snake", "--seed", "3"]]
