from __future__ import annotations

import pytest
from typer.testing import CliRunner

from fetchtick import main as main_module
from fetchtick.domain.models import Todo
from fetchtick.errors import HttpStatusError

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch) -> None:
    # Keep the runner's temporary streams out of the root logger.
    monkeypatch.setattr(main_module, "configure_logging", lambda **kwargs: None)


def test_info_shows_effective_settings(monkeypatch) -> None:
    monkeypatch.setenv("TODO_URL", "http://localhost:9000/todos/3")
    monkeypatch.setenv("TICK_INTERVAL_MS", "250")

    result = runner.invoke(main_module.app, ["info"])

    assert result.exit_code == 0
    assert "url=http://localhost:9000/todos/3" in result.output
    assert "interval_ms=250" in result.output


def test_fetch_renders_validated_todo(monkeypatch) -> None:
    calls: list[str] = []

    async def fake_fetch_model(url, model, *, client=None):
        calls.append(url)
        return model.model_validate(
            {"userId": 1, "id": 1, "title": "delectus aut autem", "completed": False}
        )

    monkeypatch.setattr(main_module, "fetch_model", fake_fetch_model)

    result = runner.invoke(main_module.app, ["fetch", "http://api.example.test/todos/1"])

    assert result.exit_code == 0
    assert calls == ["http://api.example.test/todos/1"]
    assert "delectus aut autem" in result.output


def test_fetch_without_validation_uses_raw_body(monkeypatch) -> None:
    async def fake_fetch_json(url, shape=None, *, client=None):
        return {"userId": 2, "id": 9, "title": "raw title", "completed": True, "extra": 1}

    monkeypatch.setattr(main_module, "fetch_json", fake_fetch_json)
    monkeypatch.setenv("TODO_URL", "http://api.example.test/todos/9")

    result = runner.invoke(main_module.app, ["fetch", "--no-validate"])

    assert result.exit_code == 0
    assert "raw title" in result.output
    assert "extra" in result.output


def test_fetch_failure_exits_with_code_1(monkeypatch) -> None:
    async def failing_fetch_model(url, model, *, client=None):
        raise HttpStatusError(url, 404, "Not Found")

    monkeypatch.setattr(main_module, "fetch_model", failing_fetch_model)

    result = runner.invoke(main_module.app, ["fetch", "http://api.example.test/todos/0"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, HttpStatusError)


def test_timer_prints_one_line_per_tick() -> None:
    result = runner.invoke(
        main_module.app, ["timer", "--interval-ms", "100", "--duration-ms", "450"]
    )

    assert result.exit_code == 0
    lines = [line for line in result.output.splitlines() if line.startswith("Timer updated")]
    assert len(lines) >= 3
    assert lines == [f"Timer updated: {n} seconds" for n in range(1, len(lines) + 1)]


def test_timer_rejects_non_positive_interval() -> None:
    result = runner.invoke(main_module.app, ["timer", "--interval-ms", "0", "--duration-ms", "10"])

    assert result.exit_code == 2
    assert "Invalid timer configuration" in result.output


def test_validated_todo_model_is_used_by_default(monkeypatch) -> None:
    seen: list[type] = []

    async def fake_fetch_model(url, model, *, client=None):
        seen.append(model)
        return model.model_validate({"userId": 1, "id": 2, "title": "t", "completed": True})

    monkeypatch.setattr(main_module, "fetch_model", fake_fetch_model)

    runner.invoke(main_module.app, ["fetch", "http://api.example.test/todos/2"])

    assert seen == [Todo]


def test_fetch_interrupted_exits_with_code_130(monkeypatch) -> None:
    async def interrupted_fetch_model(url, model, *, client=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module, "fetch_model", interrupted_fetch_model)

    result = runner.invoke(main_module.app, ["fetch", "http://api.example.test/todos/1"])

    assert result.exit_code == main_module.EXIT_INTERRUPTED == 130
    assert "Cancelled by user." in result.output


def test_timer_interrupted_exits_with_code_130(monkeypatch) -> None:
    async def interrupted_run_timer(interval_ms, duration_ms):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module, "run_timer", interrupted_run_timer)

    result = runner.invoke(main_module.app, ["timer", "--interval-ms", "100"])

    assert result.exit_code == 130
    assert "Cancelled by user." in result.output
