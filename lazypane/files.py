"""Ordered path-keyed collection backing one directory pane.

Keeps listing order (not sorted by path) alongside a path index so both
positional slicing and identity lookups stay cheap. Update helpers return
whether the visible contents changed so callers can skip redundant work.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from .entry import FileEntry


class FileCollection:
    """Ordered mapping from path to ``FileEntry``."""

    def __init__(self, entries: Iterable[FileEntry] = (), *, show_hidden: bool = False) -> None:
        self.show_hidden = show_hidden
        self._entries: list[FileEntry] = []
        self._positions: dict[Path, int] = {}
        self._replace(entries)

    def _replace(self, entries: Iterable[FileEntry]) -> None:
        ordered: dict[Path, FileEntry] = {}
        for entry in entries:
            ordered[entry.path] = entry
        self._entries = list(ordered.values())
        self._positions = {entry.path: idx for idx, entry in enumerate(self._entries)}

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __getitem__(self, idx: int) -> FileEntry:
        return self._entries[idx]

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._positions

    def is_empty(self) -> bool:
        return not self._entries

    def items(self) -> Iterator[tuple[Path, FileEntry]]:
        """Yield ``(path, entry)`` pairs in listing order."""
        for entry in self._entries:
            yield entry.path, entry

    def get(self, path: Path) -> FileEntry | None:
        idx = self._positions.get(path)
        return None if idx is None else self._entries[idx]

    def get_range(self, start: int, end: int) -> list[FileEntry]:
        """Return live entries in ``[start, end)``, clipped to the collection."""
        start = max(0, start)
        end = min(end, len(self._entries))
        if start >= end:
            return []
        return self._entries[start:end]

    def position(self, path: Path) -> int | None:
        return self._positions.get(path)

    def duplicate(self, idx: int) -> FileEntry | None:
        """Return a detached copy of the entry at ``idx`` or ``None``."""
        if not 0 <= idx < len(self._entries):
            return None
        return self._entries[idx].duplicate()

    def apply_full_read(self, entries: Iterable[FileEntry]) -> bool:
        """Replace contents with a fresh directory read.

        Hidden entries are dropped unless ``show_hidden`` is set, and selection
        carries over for paths that were already listed. Incoming entries are
        copied so the caller's objects are never shared or mutated.
        """
        incoming = [entry.duplicate() for entry in entries if self.show_hidden or not entry.is_hidden]
        for entry in incoming:
            previous = self.get(entry.path)
            if previous is not None:
                entry.is_selected = previous.is_selected

        if incoming == self._entries:
            return False
        self._replace(incoming)
        return True

    def apply_search_result(self, entries: Iterable[FileEntry]) -> bool:
        """Merge one batch of search results; an empty batch clears results."""
        incoming = [entry.duplicate() for entry in entries]
        if not incoming:
            if not self._entries:
                return False
            self._replace(())
            return True

        changed = False
        merged = list(self._entries)
        for entry in incoming:
            idx = self._positions.get(entry.path)
            if idx is None:
                merged.append(entry)
                changed = True
                continue
            entry.is_selected = merged[idx].is_selected
            if merged[idx] != entry:
                merged[idx] = entry
                changed = True

        if changed:
            self._replace(merged)
        return changed

    def apply_sizes(self, sizes: Mapping[Path, int]) -> bool:
        """Patch sizes of known paths, typically from directory size calculation."""
        changed = False
        for path, size in sizes.items():
            entry = self.get(path)
            if entry is None or entry.size == size:
                continue
            entry.size = size
            changed = True
        return changed


__all__ = ["FileCollection"]
