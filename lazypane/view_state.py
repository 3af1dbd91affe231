"""Cursor, scroll window, page and selection state for one directory pane.

The pane keeps its hovered entry pinned by path while the listing behind it is
re-read or patched by background workers. Every mutator returns whether
observable state changed so the caller can skip redraws and notifications.

Invariants after each public call:
- ``offset <= cursor < max(1, len(files))``
- ``cursor < offset + limit`` while ``limit > 0`` and the pane is non-empty
- ``hovered.path == files[cursor].path`` while the pane is non-empty
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import PaneSettings
from .entry import FileEntry
from .events import PagesChanged, PaneEvents, RefreshRequested
from .files import FileCollection
from .ops import FilesOp, ReadOp, SearchOp, UnexpectedUpdateError
from .viewport import Rect, Viewport

logger = logging.getLogger(__name__)

# Rows kept between the cursor and the window edge while scrolling.
SCROLL_MARGIN = 5


class ViewState:
    """Navigation state over a ``FileCollection`` sized to the viewport."""

    def __init__(
        self,
        location: Path,
        *,
        in_search: bool = False,
        viewport: Viewport | None = None,
        events: PaneEvents | None = None,
        show_hidden: bool = False,
    ) -> None:
        self.location = location
        self.in_search = in_search
        self.files = FileCollection(show_hidden=show_hidden)
        self.viewport = viewport if viewport is not None else Viewport()
        self.events = events if events is not None else PaneEvents()
        self.page = 0
        self.hovered: FileEntry | None = None
        self._offset = 0
        self._cursor = 0

    @classmethod
    def new(cls, location: Path, *, settings: PaneSettings | None = None, **kwargs) -> ViewState:
        """Create an empty listing view, optionally seeded from persisted settings."""
        if settings is not None:
            kwargs.setdefault("show_hidden", settings.show_hidden)
            kwargs.setdefault("viewport", Viewport.from_settings(settings))
        return cls(location, **kwargs)

    @classmethod
    def new_search(cls, location: Path, **kwargs) -> ViewState:
        return cls.new(location, in_search=True, **kwargs)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def show_hidden(self) -> bool:
        return self.files.show_hidden

    def limit(self) -> int:
        return self.viewport.limit()

    def position(self, path: Path) -> int | None:
        return self.files.position(path)

    # Reconciliation

    def update(self, op: FilesOp) -> bool:
        """Apply a directory read or a search batch and re-pin the cursor.

        Raises ``UnexpectedUpdateError`` for any other update variant.
        """
        if isinstance(op, ReadOp):
            changed = self.files.apply_full_read(op.entries)
        elif isinstance(op, SearchOp):
            changed = self.files.apply_search_result(op.entries)
        else:
            raise UnexpectedUpdateError(op)
        if not changed:
            return False

        length = len(self.files)
        self._offset = min(self._offset, length)
        self._cursor = min(self._cursor, max(0, length - 1))
        self.set_page(force=True)

        previous = self.hovered
        self.hovered = self.files.duplicate(self._cursor)
        if previous is not None:
            self.hover(previous.path)
        self.hovered = self.files.duplicate(self._cursor)
        self._clamp_offset()

        logger.debug(
            "%s: reconciled %d entries, cursor=%d offset=%d",
            self.location,
            length,
            self._cursor,
            self._offset,
        )
        return True

    # Windowing

    def set_page(self, force: bool = False) -> bool:
        """Recompute the cursor's page and emit ``PagesChanged`` when it moved."""
        limit = self.limit()
        new = self._cursor // limit if limit else 0
        if not force and new == self.page:
            return False

        self.page = new
        self.events.emit(PagesChanged(new))
        return True

    def sync_viewport(self) -> bool:
        """Re-derive page and scroll offset after the terminal was resized."""
        paged = self.set_page()
        clamped = self._clamp_offset()
        return paged or clamped

    def _clamp_offset(self) -> bool:
        old = self._offset
        limit = self.limit()
        offset = min(self._offset, self._cursor)
        if limit and self._cursor >= offset + limit:
            offset = self._cursor - limit + 1
        self._offset = offset
        return offset != old

    def window(self) -> list[FileEntry]:
        """Entries currently scrolled into view."""
        end = min(self._offset + self.limit(), len(self.files))
        return self.files.get_range(self._offset, end)

    def paginate(self) -> list[FileEntry]:
        """Entries of the page-aligned block holding the cursor.

        Bounds are clamped to the last valid index, so a listing that exactly
        fills its final page never yields a trailing empty page.
        """
        last = max(0, len(self.files) - 1)
        limit = self.limit()

        start = min(self.page * limit, last)
        end = min(start + limit, last)
        return self.files.get_range(start, end)

    def rect_current(self, path: Path) -> Rect | None:
        """Screen row of ``path`` in the current column, if it is in view."""
        pos = self.position(path)
        if pos is None or pos < self._offset:
            return None
        row = pos - self._offset
        if row >= self.limit():
            return None

        x, width = self.viewport.current_column()
        return Rect(x=x, y=row, width=width, height=1)

    # Navigation

    def next(self, step: int) -> bool:
        length = len(self.files)
        if length == 0:
            return False

        old = self._cursor
        self._cursor = min(self._cursor + step, length - 1)
        self.hovered = self.files.duplicate(self._cursor)
        self.set_page()

        limit = self.limit()
        if self._cursor >= max(0, min(self._offset + limit, length) - SCROLL_MARGIN):
            self._offset = min(max(0, length - limit), self._offset + self._cursor - old)
        self._clamp_offset()

        return old != self._cursor

    def prev(self, step: int) -> bool:
        old = self._cursor
        self._cursor = max(0, self._cursor - step)
        self.hovered = self.files.duplicate(self._cursor)
        self.set_page()

        if self._cursor < self._offset + SCROLL_MARGIN:
            self._offset = max(0, self._offset - (old - self._cursor))
        self._clamp_offset()

        return old != self._cursor

    def hover(self, path: Path) -> bool:
        """Move the cursor onto ``path``.

        Unknown paths keep the cursor where it is and only refresh the hovered
        copy and page.
        """
        if self.hovered is not None and self.hovered.path == path:
            return False

        new = self.position(path)
        if new is None:
            new = self._cursor
        if new > self._cursor:
            return self.next(new - self._cursor)
        return self.prev(self._cursor - new)

    def hover_force(self, entry: FileEntry) -> bool:
        """Hover ``entry``, adopting a copy of it while the listing is still empty."""
        if not self.hover(entry.path) and self.files.is_empty():
            self.hovered = entry.duplicate()
            return True
        return False

    # Selection

    @staticmethod
    def _apply_selection(entry: FileEntry, state: bool | None) -> bool:
        if state is None:
            entry.is_selected = not entry.is_selected
            return True
        if entry.is_selected != state:
            entry.is_selected = state
            return True
        return False

    def select(self, idx: int | None, state: bool | None) -> bool:
        """Toggle (``state is None``) or force selection of one entry or all."""
        if idx is not None:
            if 0 <= idx < len(self.files):
                return self._apply_selection(self.files[idx], state)
            return False

        applied = False
        for entry in self.files:
            if self._apply_selection(entry, state):
                applied = True
        return applied

    def has_selected(self) -> bool:
        return any(entry.is_selected for entry in self.files)

    def selected(self) -> list[Path] | None:
        paths = [path for path, entry in self.files.items() if entry.is_selected]
        return paths or None

    def hidden(self, show: bool | None) -> bool:
        """Flip hidden-file visibility and ask for the listing to be re-read.

        Entries are left untouched; the next ``ReadOp`` applies the filter.
        """
        if show is not None and show == self.files.show_hidden:
            return False

        self.files.show_hidden = not self.files.show_hidden
        logger.debug("%s: show_hidden=%s", self.location, self.files.show_hidden)
        self.events.emit(RefreshRequested(self.location))
        return True


__all__ = ["SCROLL_MARGIN", "ViewState"]
