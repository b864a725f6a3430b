"""
Navigation adapter for the HTTP shell.

Records where a handler wants to send the client so the route can turn it
into a redirect response after the handler returns.
"""

from __future__ import annotations


class RecordingNavigator:
    def __init__(self) -> None:
        self.location: str | None = None

    def navigate(self, path: str) -> None:
        self.location = path
