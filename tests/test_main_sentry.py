"""Tests for Sentry integration in FastAPI app creation and exception handling."""

from __future__ import annotations

import json
from unittest.mock import Mock

import pytest
from starlette.requests import Request

import placeholder_svg.main as main_module
import placeholder_svg.monitoring.sentry as sentry_module
from placeholder_svg.core.config import Settings


def _build_request(path: str = "/boom") -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": [],
        "client": ("127.0.0.1", 1234),
        "server": ("testserver", 80),
        "root_path": "",
    }
    return Request(scope)


@pytest.mark.unit
def test_create_app_initializes_sentry(monkeypatch):
    init_mock = Mock(return_value=True)
    monkeypatch.setattr(main_module, "init_sentry", init_mock)

    app_settings = Settings(SENTRY_DSN="")

    main_module.create_app(app_settings)

    init_mock.assert_called_once_with(
        service_name="placeholder-svg-api",
        enable_fastapi=True,
        app_settings=app_settings,
    )


@pytest.mark.unit
def test_create_app_uses_injected_sentry_settings(monkeypatch):
    monkeypatch.setattr(sentry_module, "_initialized", False)
    mock_init = Mock()
    monkeypatch.setattr(sentry_module.sentry_sdk, "init", mock_init)
    monkeypatch.setattr(sentry_module.sentry_sdk, "set_tag", Mock())

    main_module.create_app(
        Settings(
            SENTRY_DSN="https://public@example.ingest.sentry.io/1",
            SENTRY_ENVIRONMENT="staging",
        )
    )

    mock_init.assert_called_once()
    kwargs = mock_init.call_args.kwargs
    assert kwargs["dsn"] == "https://public@example.ingest.sentry.io/1"
    assert kwargs["environment"] == "staging"


@pytest.mark.unit
def test_create_app_stores_settings(monkeypatch):
    monkeypatch.setattr(main_module, "init_sentry", Mock(return_value=False))
    app_settings = Settings(ENVIRONMENT="DEV", SENTRY_DSN="")

    app = main_module.create_app(app_settings)

    assert app.state.settings is app_settings


@pytest.mark.unit
@pytest.mark.asyncio
async def test_global_exception_handler_captures_to_sentry(monkeypatch):
    monkeypatch.setattr(main_module, "init_sentry", Mock(return_value=True))
    capture_mock = Mock()
    monkeypatch.setattr(main_module, "capture_exception", capture_mock)

    app = main_module.create_app(Settings(SENTRY_DSN=""))
    handler = app.exception_handlers[Exception]
    exc = RuntimeError("boom")

    response = await handler(_build_request(), exc)

    assert response.status_code == 500
    assert json.loads(response.body) == {"detail": "Internal server error"}
    capture_mock.assert_called_once_with(exc, method="GET", path="/boom")


@pytest.mark.unit
def test_configure_logging_falls_back_to_info(monkeypatch):
    basic_config = Mock()
    monkeypatch.setattr(main_module.logging, "basicConfig", basic_config)

    main_module.configure_logging("NOT_A_LEVEL")

    assert basic_config.call_args.kwargs["level"] == main_module.logging.INFO


@pytest.mark.unit
def test_main_runs_uvicorn_on_configured_port(monkeypatch):
    run_mock = Mock()
    monkeypatch.setattr(main_module.uvicorn, "run", run_mock)
    monkeypatch.setattr(main_module, "configure_logging", Mock())
    monkeypatch.setattr(
        main_module, "settings", Settings(PORT=9123, HOST="127.0.0.1", SENTRY_DSN="")
    )

    main_module.main()

    run_mock.assert_called_once()
    kwargs = run_mock.call_args.kwargs
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9123
    assert run_mock.call_args.args[0] is main_module.api
