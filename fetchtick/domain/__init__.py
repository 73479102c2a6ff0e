"""
Domain package for fetchtick.

Exports the record shapes returned by the fetch wrapper.
Keep this package focused on data definitions and validation concerns.
"""

from fetchtick.domain.models import Todo, TodoPayload

__all__ = [
    "Todo",
    "TodoPayload",
]
