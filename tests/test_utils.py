import logging

import pytest
from rich.logging import RichHandler

from cliroute.exceptions import BuildError
from cliroute.utils import (
    dasherize,
    get_duplicates,
    remove_duplicates,
    setup_logging,
    validate_unique_values,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("name", "name"),
        ("dryRun", "dry-run"),
        ("dry_run", "dry-run"),
        ("dry run", "dry-run"),
        ("maxRetryCount", "max-retry-count"),
        ("useHTTPS", "use-https"),
        ("_private", "private"),
    ],
)
def test_dasherize(text, expected):
    assert dasherize(text) == expected


def test_get_duplicates_keeps_first_seen_order():
    items = ["b1", "a1", "b2", "c1", "a2"]
    assert get_duplicates(items, lambda item: item[0]) == [["b1", "b2"], ["a1", "a2"]]


def test_get_duplicates_without_duplicates():
    assert get_duplicates([1, 2, 3], lambda item: item) == []


def test_remove_duplicates():
    assert remove_duplicates([1, 2, 1, 3, 2], lambda a, b: a == b) == [1, 2, 3]


def test_validate_unique_values():
    validate_unique_values(["a", "b"], lambda item: item, lambda *_: "unused")
    with pytest.raises(BuildError, match="duplicate a: a1/a2"):
        validate_unique_values(
            ["a1", "b1", "a2"],
            lambda item: item[0],
            lambda value, first, second: f"duplicate {value}: {first}/{second}",
        )


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_cli_mode(restore_root_logger):
    setup_logging(mode="cli", log_filename=None)
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], RichHandler)


def test_setup_logging_json_mode_from_environment(restore_root_logger, monkeypatch):
    monkeypatch.setenv("CLIROUTE_LOG_MODE", "json")
    setup_logging(log_filename=None)
    handler = restore_root_logger.handlers[0]
    assert type(handler) is logging.StreamHandler
    assert type(handler.formatter).__name__ == "JsonFormatter"


def test_setup_logging_defaults_to_console_only(restore_root_logger):
    setup_logging(mode="cli")
    assert not any(
        isinstance(handler, logging.FileHandler)
        for handler in restore_root_logger.handlers
    )


@pytest.mark.parametrize(
    "mode, expected",
    [
        ("cli", "[cliroute] [DEBUG] hello"),
        ("json", '"message": "hello"'),
    ],
)
def test_setup_logging_file_uses_mode_format(
    restore_root_logger, tmp_path, mode, expected
):
    log_file = tmp_path / "cliroute.log"
    setup_logging(mode=mode, log_filename=str(log_file))
    file_handlers = [
        handler
        for handler in restore_root_logger.handlers
        if isinstance(handler, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    logging.getLogger("cliroute").debug("hello")
    file_handlers[0].close()
    assert expected in log_file.read_text()


def test_setup_logging_invalid_mode(restore_root_logger):
    with pytest.raises(ValueError, match="Invalid log mode: xml"):
        setup_logging(mode="xml", log_filename=None)
