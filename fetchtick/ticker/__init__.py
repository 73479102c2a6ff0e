"""
Ticker package for fetchtick.

Exports the periodic tick source, its async stream form, and the default
console consumer.
"""

from fetchtick.ticker.timer import (
    TickConsumer,
    TickSource,
    TimerState,
    print_tick,
    run_timer,
    tick_stream,
)

__all__ = [
    "TickConsumer",
    "TickSource",
    "TimerState",
    "print_tick",
    "run_timer",
    "tick_stream",
]
