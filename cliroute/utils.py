# Cliroute CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import re
from typing import Any, Callable, Iterable, TypeVar

import pythonjsonlogger.json
from rich.logging import RichHandler

from cliroute.exceptions import BuildError

T = TypeVar("T")


def dasherize(text: str) -> str:
    """
    Convert a property name into a dash separated command-line name.

    `dryRun`, `dry_run` and `dry run` all become `dry-run`. Runs of capitals are
    kept together, so `useHTTPS` becomes `use-https`.
    """
    text = re.sub(r"(?<=[a-z0-9])([A-Z])", r"-\1", text)
    text = re.sub(r"[\s_]+", "-", text.lower())
    text = re.sub(r"-{2,}", "-", text)
    return text.lstrip("-")


def get_duplicates(items: Iterable[T], key: Callable[[T], Any]) -> list[list[T]]:
    """
    Group items sharing the same key, keeping only groups with more than one item.

    Groups are returned in the order their key was first seen.
    """
    items = list(items)
    seen: list[Any] = []
    for item in items:
        value = key(item)
        if value not in seen:
            seen.append(value)
    duplicates = []
    for value in seen:
        group = [item for item in items if key(item) == value]
        if len(group) > 1:
            duplicates.append(group)
    return duplicates


def remove_duplicates(
    items: Iterable[T], condition: Callable[[T, T], bool]
) -> list[T]:
    """Return the items in order, dropping any item for which `condition` matches an earlier one."""
    unique: list[T] = []
    for item in items:
        if not any(condition(existing, item) for existing in unique):
            unique.append(item)
    return unique


def validate_unique_values(
    items: Iterable[T],
    key: Callable[[T], Any],
    error_message: Callable[[Any, T, T], str],
) -> None:
    """Raise a `BuildError` built by `error_message` for the first duplicated key."""
    duplicates = get_duplicates(items, key)
    if duplicates:
        first, second = duplicates[0][0], duplicates[0][1]
        raise BuildError(error_message(key(first), first, second))


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure the root logger for a cliroute application.

    `mode` is "cli" for Rich console output or "json" for one JSON object per
    record. When omitted, `CLIROUTE_LOG_MODE` is used, then "json" inside a
    container and "cli" elsewhere. A `log_filename` adds a file handler whose
    records use the same mode.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv("CLIROUTE_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=True,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
        formatter = logging.Formatter(
            "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    elif mode == "json":
        formatter = pythonjsonlogger.json.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s"
        )
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("cliroute").debug("Logging initialized in '%s' mode.", mode)
