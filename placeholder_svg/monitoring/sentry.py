"""Shared Sentry initialization and capture helpers."""

from __future__ import annotations

import logging
import os
from typing import Any

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from placeholder_svg.core.config import Settings, settings

logger = logging.getLogger(__name__)

_initialized = False

_SENSITIVE_KEYWORDS = (
    "authorization",
    "cookie",
    "set-cookie",
    "x-api-key",
    "token",
    "secret",
    "password",
    "api_key",
    "apikey",
)


def _is_healthcheck_access_log(logger_name: str | None, message: str | None) -> bool:
    if logger_name != "uvicorn.access" or not message:
        return False
    return "/healthz" in message and '" 200' in message


def _extract_log_context(
    payload: dict[str, Any], hint: dict[str, Any]
) -> tuple[str | None, str | None]:
    logger_name: str | None = None
    message: str | None = None

    log_record = hint.get("log_record")
    if log_record is not None:
        record_name = getattr(log_record, "name", None)
        if isinstance(record_name, str):
            logger_name = record_name
        get_message = getattr(log_record, "getMessage", None)
        if callable(get_message):
            maybe_message = get_message()
            if isinstance(maybe_message, str):
                message = maybe_message

    payload_logger = payload.get("logger")
    if logger_name is None and isinstance(payload_logger, str):
        logger_name = payload_logger

    return logger_name, message


def _is_sensitive_key(key: str) -> bool:
    key_lower = key.lower()
    return any(keyword in key_lower for keyword in _SENSITIVE_KEYWORDS)


def _sanitize_in_place(value: Any, parent_key: str | None = None) -> Any:
    if parent_key and _is_sensitive_key(parent_key):
        return "[Filtered]"

    if isinstance(value, dict):
        for key, nested_value in list(value.items()):
            if _is_sensitive_key(str(key)):
                value[key] = "[Filtered]"
                continue
            value[key] = _sanitize_in_place(nested_value, str(key))
        return value

    if isinstance(value, list):
        for index, item in enumerate(value):
            value[index] = _sanitize_in_place(item, parent_key)
        return value

    return value


def _before_send(
    event: dict[str, Any], hint: dict[str, Any]
) -> dict[str, Any] | None:
    logger_name, message = _extract_log_context(event, hint)
    if _is_healthcheck_access_log(logger_name, message):
        return None
    return _sanitize_in_place(event)


def _before_breadcrumb(
    crumb: dict[str, Any], hint: dict[str, Any]
) -> dict[str, Any] | None:
    del hint
    category = crumb.get("category")
    message = crumb.get("message")
    if isinstance(category, str) and isinstance(message, str):
        if _is_healthcheck_access_log(category, message):
            return None
    return _sanitize_in_place(crumb)


def init_sentry(
    service_name: str,
    enable_fastapi: bool = False,
    app_settings: Settings | None = None,
) -> bool:
    """Initialize Sentry once per process from ``app_settings`` (module settings by default)."""
    global _initialized

    if _initialized:
        return True

    app_settings = app_settings or settings
    dsn = (app_settings.SENTRY_DSN or "").strip()
    if not dsn:
        logger.info("Sentry disabled: SENTRY_DSN is empty")
        return False

    environment = app_settings.SENTRY_ENVIRONMENT or app_settings.ENVIRONMENT
    release = app_settings.SENTRY_RELEASE or os.getenv("GITHUB_SHA")
    log_event_level = logging.ERROR if app_settings.SENTRY_ENABLE_LOG_EVENTS else None

    integrations: list[Any] = [
        LoggingIntegration(level=logging.INFO, event_level=log_event_level)
    ]
    if enable_fastapi:
        integrations.append(FastApiIntegration())

    try:
        sentry_sdk.init(
            dsn=dsn,
            environment=environment,
            release=release,
            traces_sample_rate=app_settings.SENTRY_TRACES_SAMPLE_RATE,
            send_default_pii=app_settings.SENTRY_SEND_DEFAULT_PII,
            integrations=integrations,
            before_send=_before_send,
            before_breadcrumb=_before_breadcrumb,
        )
        sentry_sdk.set_tag("service", service_name)
        sentry_sdk.set_tag("runtime", "python")
        _initialized = True
        logger.info(
            "Sentry initialized: service=%s environment=%s", service_name, environment
        )
        return True
    except Exception:
        logger.exception("Failed to initialize Sentry for service=%s", service_name)
        return False


def capture_exception(exc: BaseException, **context: Any) -> None:
    """Capture an exception with additional context if Sentry is initialized."""
    if not _initialized:
        return

    try:
        with sentry_sdk.new_scope() as scope:
            for key, value in context.items():
                scope.set_extra(str(key), _sanitize_in_place(value, str(key)))
            sentry_sdk.capture_exception(exc)
    except Exception:
        logger.exception("Failed to capture exception in Sentry")
