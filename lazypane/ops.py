"""Collection-update messages delivered to a pane by the listing workers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .entry import FileEntry


@dataclass(frozen=True)
class ReadOp:
    """Complete result of reading ``location``."""

    location: Path
    entries: tuple[FileEntry, ...] = ()


@dataclass(frozen=True)
class SearchOp:
    """One batch of search results rooted at ``location``."""

    location: Path
    entries: tuple[FileEntry, ...] = ()


@dataclass(frozen=True)
class SizeOp:
    """Calculated sizes for paths under ``location``."""

    location: Path
    sizes: Mapping[Path, int] = field(default_factory=dict)


@dataclass(frozen=True)
class IOErrorOp:
    """Reading ``location`` failed."""

    location: Path


FilesOp = ReadOp | SearchOp | SizeOp | IOErrorOp


class UnexpectedUpdateError(TypeError):
    """Raised when a view receives an update variant it cannot reconcile."""

    def __init__(self, op: object) -> None:
        super().__init__(f"view state cannot apply {type(op).__name__}; expected ReadOp or SearchOp")
        self.op = op


__all__ = [
    "ReadOp",
    "SearchOp",
    "SizeOp",
    "IOErrorOp",
    "FilesOp",
    "UnexpectedUpdateError",
]
