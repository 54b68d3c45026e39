"""Tests for SDK configuration and logging setup."""

import io
import json
import logging

import pydantic
import pytest
import structlog

from resonance_sdk import config


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_defaults():
    sdk_config = config.SDKConfig(api_url="http://api.test")

    assert sdk_config.timeout_ms == 30_000
    assert sdk_config.headers == {}
    assert sdk_config.max_get_attempts == 1
    assert sdk_config.log_level is None
    assert sdk_config.log_format == "logfmt"


def test_api_url_is_required():
    with pytest.raises(pydantic.ValidationError):
        config.SDKConfig()


def test_empty_api_url_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        config.SDKConfig(api_url="")


@pytest.mark.parametrize("timeout_ms", [0, -1])
def test_non_positive_timeout_is_rejected(timeout_ms):
    with pytest.raises(pydantic.ValidationError):
        config.SDKConfig(api_url="http://api.test", timeout_ms=timeout_ms)


def test_zero_get_attempts_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        config.SDKConfig(api_url="http://api.test", max_get_attempts=0)


def test_headers_are_not_shared_between_configs():
    first = config.SDKConfig(api_url="http://api.test")
    second = config.SDKConfig(api_url="http://api.test")
    first.headers["X"] = "1"
    assert second.headers == {}


def test_configure_logging_sets_level(reset_structlog):
    config.configure_logging("debug")

    wrapper_class = structlog.get_config()["wrapper_class"]
    assert wrapper_class is structlog.make_filtering_bound_logger(logging.DEBUG)


def test_configure_logging_unknown_level_falls_back_to_info(reset_structlog):
    config.configure_logging("chatty")

    wrapper_class = structlog.get_config()["wrapper_class"]
    assert wrapper_class is structlog.make_filtering_bound_logger(logging.INFO)


def test_configure_logging_renders_logfmt_to_stderr(reset_structlog, capsys):
    config.configure_logging("info")

    structlog.get_logger("test").info("API request completed", status_code=200)

    captured = capsys.readouterr()
    output = captured.err
    assert captured.out == ""
    assert "level=info" in output
    assert 'msg="API request completed"' in output
    assert "status_code=200" in output


def test_configure_logging_renders_json(reset_structlog):
    stream = io.StringIO()
    config.configure_logging("info", log_format="json", file=stream)

    structlog.get_logger("test").info("Wallet connected", role="validator")

    line = json.loads(stream.getvalue())
    assert line["msg"] == "Wallet connected"
    assert line["level"] == "info"
    assert line["role"] == "validator"


def test_configure_logging_filters_below_level(reset_structlog):
    stream = io.StringIO()
    config.configure_logging("warning", file=stream)

    structlog.get_logger("test").info("API request completed")

    assert stream.getvalue() == ""


def test_unknown_log_format_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        config.SDKConfig(api_url="http://api.test", log_format="xml")
