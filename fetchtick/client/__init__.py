"""
HTTP client package for fetchtick.

Holds the typed fetch wrapper. Keep this layer focused on the request, status
check, and body decoding; rendering and exit codes belong to the CLI.
"""

from fetchtick.client.fetch import fetch_json, fetch_model

__all__ = [
    "fetch_json",
    "fetch_model",
]
