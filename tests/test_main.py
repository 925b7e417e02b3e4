# tests/test_main.py
import io

import pytest

from drawbridge.__main__ import main


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def test_main_prints_selected_answers(home, monkeypatch, capsys):
    (home / "drawbridge.yaml").write_text(
        "answers:\n"
        "  - {environment: prod, username: root, domain: a.example.com}\n"
        "  - {environment: dev, username: admin, domain: b.example.com}\n",
        encoding="utf-8",
    )
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))

    assert main() == 0

    out = capsys.readouterr().out
    assert "environment: prod\nusername: root\ndomain: a.example.com\n" in out


def test_main_without_answers_does_not_prompt(home, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert main() == 0


def test_main_reports_invalid_config(home):
    (home / "drawbridge.yaml").write_text("answers: 3\n", encoding="utf-8")

    assert main() == 1
