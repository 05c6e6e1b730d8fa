"""Tests for the structured logging helpers."""

from __future__ import annotations

import json
import logging

import pytest

from sparkapi.core.logging import (
    REDACTED,
    LogConfig,
    LogEvents,
    LogFormat,
    UnifiedLogger,
    emit,
)


def test_event_names_are_dotted() -> None:
    assert LogEvents.HTTP_REQUEST_COMPLETED == "http.request.completed"
    assert LogEvents.HTTP_PAGINATOR_PAGE_FETCHED == "http.paginator.page.fetched"
    assert str(LogEvents.CLIENT_LIST_PARTIAL) == "client.list.partial"


def test_json_output_redacts_credentials(capsys: pytest.CaptureFixture[str]) -> None:
    UnifiedLogger.configure(LogConfig(level="INFO", format=LogFormat.JSON))
    log = UnifiedLogger.get("sparkapi.tests").bind(component="tests")

    emit(log, LogEvents.HTTP_REQUEST_COMPLETED, token="secret", authorization="Bearer secret", status_code=200)

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == "http.request.completed"
    assert record["token"] == REDACTED
    assert record["authorization"] == REDACTED
    assert record["status_code"] == 200
    assert record["component"] == "tests"


def test_level_filter_drops_debug(capsys: pytest.CaptureFixture[str]) -> None:
    UnifiedLogger.configure(LogConfig(level=logging.WARNING))
    log = UnifiedLogger.get("sparkapi.tests")

    log.debug(LogEvents.HTTP_REQUEST_SENT)
    log.warning(LogEvents.HTTP_REQUEST_FAILED, status_code=500)

    err = capsys.readouterr().err
    assert "http.request.sent" not in err
    assert "message='http.request.failed'" in err
    assert "status_code=500" in err


def test_unknown_level_is_rejected() -> None:
    with pytest.raises(ValueError):
        UnifiedLogger.configure(LogConfig(level="LOUD"))


def test_scoped_context_is_restored(capsys: pytest.CaptureFixture[str]) -> None:
    UnifiedLogger.configure(LogConfig(level="INFO", format=LogFormat.JSON))
    log = UnifiedLogger.get("sparkapi.tests")
    UnifiedLogger.bind(command="outer")

    with UnifiedLogger.scoped(command="inner"):
        log.info(LogEvents.CLIENT_LIST_COMPLETED)
    log.info(LogEvents.CLIENT_LIST_COMPLETED)
    UnifiedLogger.reset()

    lines = [json.loads(line) for line in capsys.readouterr().err.strip().splitlines()]
    assert [line["command"] for line in lines[-2:]] == ["inner", "outer"]
