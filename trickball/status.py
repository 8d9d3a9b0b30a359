"""Model status values and the logging helpers that report them."""

from __future__ import annotations

import sys
from enum import IntEnum


class Status(IntEnum):
    """Status returned by model operations."""

    OK = 0
    WARNING = 1
    DISCARD = 2
    ERROR = 3
    FATAL = 4
    PENDING = 5


_STATUS_NAMES = {
    Status.OK: "fmi2OK",
    Status.WARNING: "fmi2Warning",
    Status.DISCARD: "fmi2Discard",
    Status.ERROR: "fmi2Error",
    Status.FATAL: "fmi2Fatal",
    Status.PENDING: "fmi2Pending",
}


def status_string(status: Status | int) -> str:
    """Return the conventional name of a status, or ``"Unknown"``."""
    try:
        return _STATUS_NAMES[Status(status)]
    except ValueError:
        return "Unknown"


def format_log_message(
    instance_name: str,
    status: Status | int,
    category_name: str,
    message: str,
    *args: object,
) -> str:
    """Build a log line; ``message`` is %-formatted with ``args`` when given."""
    body = message % args if args else message
    return (
        f"FMU Model: {instance_name} : {status_string(status)} : "
        f"{category_name} : {body}"
    )


def fmi_log(
    instance_name: str,
    status: Status | int,
    category_name: str,
    message: str,
    *args: object,
) -> None:
    """Write a formatted log line to standard output."""
    print(
        format_log_message(instance_name, status, category_name, message, *args),
        file=sys.stdout,
    )