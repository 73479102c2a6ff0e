"""
fetchtick - a typed JSON fetch wrapper and a cancellable periodic timer.

This package provides two independent building blocks:

- ``fetch_json`` / ``fetch_model``: one HTTP GET, status check, JSON parse,
  and a result typed (or validated) as the caller's requested shape
- ``TickSource``: an asyncio timer that emits 1, 2, 3, ... once per interval
  to a single consumer until it is cancelled

Both log failures where they are detected and raise them to the caller.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from fetchtick.client.fetch import fetch_json, fetch_model
from fetchtick.config import Settings, get_settings
from fetchtick.domain.models import Todo, TodoPayload
from fetchtick.errors import (
    ConfigError,
    FetchError,
    FetchTickError,
    HttpStatusError,
    ParseError,
    TimerStateError,
    TransportError,
    ValidationError,
)
from fetchtick.ticker.timer import TickSource, TimerState, print_tick, run_timer, tick_stream
from fetchtick.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Fetch
    "fetch_json",
    "fetch_model",
    "Todo",
    "TodoPayload",
    # Timer
    "TickSource",
    "TimerState",
    "print_tick",
    "run_timer",
    "tick_stream",
    # Errors
    "FetchTickError",
    "FetchError",
    "TransportError",
    "HttpStatusError",
    "ParseError",
    "ValidationError",
    "ConfigError",
    "TimerStateError",
    # Logging
    "configure_logging",
    "get_logger",
]
