"""Tests for the development server runner."""

from food_equivalences import __main__ as runner


def test_main_serves_asgi_app_with_settings(monkeypatch) -> None:
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    calls: list[tuple[str, dict]] = []
    monkeypatch.setattr(
        runner.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs))
    )

    runner.main()

    assert calls == [
        (
            "food_equivalences.api.asgi:app",
            {"host": "0.0.0.0", "port": 8081, "log_level": "debug"},
        )
    ]
