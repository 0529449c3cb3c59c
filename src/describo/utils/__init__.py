"""Utility exports for emptiness checks, message formatting, and concurrency helpers."""

from describo.utils.concurrency import (
    await_callback,
    current_running_loop,
    run_parallel,
    run_parallel_settled,
    run_series,
    spawn,
)
from describo.utils.emptiness import is_empty
from describo.utils.formatting import coerce_message, format_message, has_placeholder

__all__ = [
    "await_callback",
    "coerce_message",
    "current_running_loop",
    "format_message",
    "has_placeholder",
    "is_empty",
    "run_parallel",
    "run_parallel_settled",
    "run_series",
    "spawn",
]
