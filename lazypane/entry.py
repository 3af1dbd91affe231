"""Directory-entry record shared by the collection and the view state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path


@dataclass
class FileEntry:
    """One listed path plus the metadata observed when it was read.

    Entries are mutable only so selection can be toggled in place.
    """

    path: Path
    is_dir: bool = False
    is_link: bool = False
    size: int | None = None
    mtime_ns: int | None = None
    is_selected: bool = False

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    def duplicate(self) -> FileEntry:
        """Return a detached copy that survives replacement of its collection."""
        return replace(self)


__all__ = ["FileEntry"]
