from __future__ import annotations

import pytest

from graph_storage import utils
from graph_storage.utils import retry


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch) -> list[float]:
    delays: list[float] = []
    monkeypatch.setattr(utils.time, "sleep", delays.append)
    return delays


def test_retry_returns_first_success(no_sleep) -> None:
    calls = []

    def op() -> str:
        calls.append(1)
        if len(calls) < 3:
            raise ConnectionError("flaky")
        return "ok"

    assert retry(op, attempts=4, base_delay=0.1) == "ok"
    assert len(calls) == 3
    assert no_sleep == pytest.approx([0.1, 0.2])


def test_retry_raises_after_last_attempt(no_sleep) -> None:
    def op() -> None:
        raise TimeoutError("down")

    with pytest.raises(TimeoutError):
        retry(op, attempts=3, base_delay=0.5)
    assert no_sleep == pytest.approx([0.5, 1.0])


def test_retry_does_not_catch_other_errors(no_sleep) -> None:
    def op() -> None:
        raise ValueError("bad input")

    with pytest.raises(ValueError):
        retry(op, attempts=5)
    assert no_sleep == []


def test_retry_runs_at_least_once() -> None:
    assert retry(lambda: 42, attempts=0) == 42
