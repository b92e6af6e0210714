"""
Notification Observers

Defines the Observer protocol and the built-in observers. An observer's
name is for display only; two observers may share a name and still
receive broadcasts independently.
"""

from typing import Callable, List, Protocol

import click


class Observer(Protocol):
    """Protocol for notification recipients."""

    name: str

    def receive(self, message: str) -> None:
        """Handle a broadcast message."""


class ConsoleObserver:
    """Prints every message it receives, prefixed with its own name."""

    def __init__(self, name: str, echo: Callable[[str], None] = click.echo):
        self.name = name
        self._echo = echo

    def receive(self, message: str) -> None:
        self._echo(f"{self.name} received notification: {message}")

    def __repr__(self) -> str:
        return f"ConsoleObserver(name={self.name!r})"


class RecordingObserver:
    """Keeps every message it receives, in arrival order."""

    def __init__(self, name: str):
        self.name = name
        self.messages: List[str] = []

    def receive(self, message: str) -> None:
        self.messages.append(message)

    def __repr__(self) -> str:
        return f"RecordingObserver(name={self.name!r}, received={len(self.messages)})"
