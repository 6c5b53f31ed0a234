"""
Unit tests for application startup wiring.
"""

from notelink import main
from notelink.config import Settings


def test_run_serves_app_factory_on_configured_address(monkeypatch):
    settings = Settings(_env_file=None, host="0.0.0.0", port=9000, read_timeout=2)
    calls = []

    monkeypatch.setattr(main, "get_settings", lambda: settings)
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    main.run()

    assert calls == [
        ("notelink.main:create_app", {"factory": True, "host": "0.0.0.0", "port": 9000})
    ]


def test_request_deadline_uses_both_timeouts(test_settings):
    app = main.create_app(test_settings.model_copy(update={"read_timeout": 2, "write_timeout": 3}))

    deadline = next(m for m in app.user_middleware if m.cls is main.DeadlineMiddleware)
    assert deadline.kwargs == {"timeout": 5.0}
