"""Notifier protocol — the dispatcher depends on this, not on concrete mechanisms."""

from typing import Protocol


class Notifier(Protocol):
    async def send(self, subject: str, message: str) -> None: ...
