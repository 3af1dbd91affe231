"""Notifications a pane publishes to the event loop."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue


@dataclass(frozen=True)
class PagesChanged:
    """The page containing the cursor changed (or content on it did)."""

    page: int


@dataclass(frozen=True)
class RefreshRequested:
    """The hidden-file filter flipped; ``location`` must be re-read."""

    location: Path


PaneEvent = PagesChanged | RefreshRequested


class PaneEvents:
    """Thread-safe FIFO of pane notifications drained by the UI loop."""

    def __init__(self) -> None:
        self._queue: Queue[PaneEvent] = Queue()

    def emit(self, event: PaneEvent) -> None:
        self._queue.put(event)

    def drain(self) -> list[PaneEvent]:
        """Return and remove every pending notification in arrival order."""
        out: list[PaneEvent] = []
        while True:
            try:
                out.append(self._queue.get_nowait())
            except Empty:
                break
        return out


__all__ = ["PagesChanged", "RefreshRequested", "PaneEvent", "PaneEvents"]
