import io

import pytest

from oslabsim.cli import main

BANKERS_SAMPLE = """4 4
1 1 2 4
2 2 6 5
0 2 3 5
2 5 8 6
1 2 5 4
0 4 8 5
3 6 9 5
1 4 8 9
5 7 8 6
"""


def run(monkeypatch, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main(argv)


def test_bankers_sample(monkeypatch, capsys):
    assert run(monkeypatch, ["bankers"], BANKERS_SAMPLE) == 0
    out = capsys.readouterr().out
    assert "Need Matrix:\n0\t1\t3\t0\t\n-2\t2\t2\t0\t\n3\t4\t6\t0\t\n-1\t-1\t0\t3\t\n" in out
    assert "System is in a safe state.\nSafe sequence: P0 P1 P2 P3 \n" in out


def test_bankers_unsafe(monkeypatch, capsys):
    assert run(monkeypatch, ["bankers"], "1 1\n0\n5\n1\n") == 0
    out = capsys.readouterr().out
    assert "System is not in a safe state." in out
    assert "Safe sequence" not in out


def test_bankers_short_input(monkeypatch, capsys):
    assert run(monkeypatch, ["bankers"], "2 2\n1 1\n") == 1
    assert "not enough input" in capsys.readouterr().err


def test_fcfs_sample(monkeypatch, capsys):
    assert run(monkeypatch, ["fcfs"], "4\n8 6 4 2\n") == 0
    assert capsys.readouterr().out == (
        "The average waiting time = 10\nThe average turnaround time = 15\n"
    )


@pytest.mark.parametrize("text", ["0\n", "x y\n", "3\n1 2\n"])
def test_fcfs_bad_input(monkeypatch, capsys, text):
    assert run(monkeypatch, ["fcfs"], text) == 1
    assert capsys.readouterr().err.startswith("error:")


def test_unknown_command_exits(monkeypatch):
    with pytest.raises(SystemExit) as info:
        run(monkeypatch, ["nosuch"], "")
    assert info.value.code == 2