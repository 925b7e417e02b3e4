# tests/conftest.py
import pytest


@pytest.fixture
def env_records() -> list[dict]:
    return [
        {"env": "prod", "user": "a"},
        {"env": "dev", "user": "b"},
        {"env": "prod", "user": "c"},
    ]


@pytest.fixture
def stack_records() -> list[dict]:
    return [
        {"environment": "prod", "username": "root", "domain": "a.example.com", "pem_dir": "~/.ssh"},
        {"environment": "dev", "username": "admin", "domain": "b.example.com", "pem_dir": "~/.ssh"},
        {"environment": "prod", "username": "deploy", "domain": "c.example.com", "pem_dir": "~/.ssh"},
        {"username": "guest", "domain": "d.example.com"},
    ]


def scripted_input(*answers: str):
    """回傳一個依序輸出 answers 的假 input 函式，並記錄收到的提示文字。"""
    remaining = list(answers)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        return remaining.pop(0)

    fake_input.prompts = prompts
    return fake_input
