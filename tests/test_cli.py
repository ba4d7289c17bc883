import io

import pytest

from starpatterns.cli import TABLE_CHOICE, main, menu, run_choice
from starpatterns.patterns import pattern_1, pattern_8, pattern_27
from starpatterns.table import multiplication_table


def _answers(*values):
    prompts = []
    queue = list(values)

    def read(prompt):
        prompts.append(prompt)
        return queue.pop(0)

    return read, prompts


def test_menu_lists_every_choice():
    lines = menu().splitlines()
    assert lines[0] == "Choose a number to run:"
    assert lines[1] == "01. Pattern 1"
    assert "27. Pattern 27" in lines
    assert lines[-1] == "28. Table of a number using while loop"
    assert len(lines) == 29


def test_run_pattern_choice_writes_pattern():
    read, prompts = _answers("3")
    written = []
    assert run_choice(1, read, written.append) is True
    assert prompts == ["Enter the number of rows:"]
    assert "".join(written) == pattern_1(3)


def test_run_pattern_uses_its_own_prompt():
    read, prompts = _answers("4")
    written = []
    run_choice(27, read, written.append)
    assert prompts == ["Enter the number of rows: "]
    assert "".join(written) == pattern_27(4)


def test_run_table_choice():
    read, prompts = _answers("9")
    written = []
    assert run_choice(TABLE_CHOICE, read, written.append) is True
    assert prompts == ["Enter the number whose table you want: "]
    assert "".join(written) == multiplication_table(9)


@pytest.mark.parametrize("choice", [0, 29, -1])
def test_invalid_choice_reports_and_asks_nothing(choice):
    read, prompts = _answers()
    written = []
    assert run_choice(choice, read, written.append) is False
    assert written == ["Invalid choice. Try again.\n"]
    assert prompts == []


def test_non_numeric_rows_raise():
    read, _ = _answers("many")
    with pytest.raises(ValueError):
        run_choice(8, read, [].append)


def test_main_runs_selected_pattern(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("8 3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(menu() + "Enter your choice: ")
    assert out.endswith(pattern_8(3))


def test_main_answers_on_separate_lines(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("28\n2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith(multiplication_table(2))


def test_main_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("99\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Invalid choice. Try again.\n")


def test_main_bad_input_fails(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_main_missing_rows_fails(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err