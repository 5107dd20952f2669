import io

import pytest

from hashmesh.text_ui import ask_user_forpermission


def test_yes_is_accepted_and_prompt_shown(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("YES\n"))
    assert ask_user_forpermission("overwrite keys") is True
    assert capsys.readouterr().out == "Do you want : overwrite keys -- (YES/no):"


@pytest.mark.parametrize("answer", ["yes\n", "Y\n", "YES \n", "no\n", "\n", ""])
def test_other_answers_refuse(monkeypatch, answer):
    monkeypatch.setattr("sys.stdin", io.StringIO(answer))
    assert ask_user_forpermission("delete") is False


def test_yes_without_newline(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("YES"))
    assert ask_user_forpermission("x") is True


def test_reads_only_one_line(monkeypatch):
    stream = io.StringIO("no\nYES\n")
    monkeypatch.setattr("sys.stdin", stream)
    assert ask_user_forpermission("a") is False
    assert ask_user_forpermission("b") is True