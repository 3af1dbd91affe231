"""Viewport geometry for the current-directory column.

The terminal size is never read from global state here: a size provider is
injected (``shutil.get_terminal_size`` in the real app, a fixed size in
tests) and queried each time the pane needs its row budget.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import PaneSettings

DIR_PADDING = 2
DEFAULT_COLUMN_RATIO = (1, 4, 3)
FALLBACK_TERMINAL_SIZE = (80, 24)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


class Viewport:
    """Row budget and column layout derived from the terminal size."""

    def __init__(
        self,
        get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
        *,
        padding: int = DIR_PADDING,
        column_ratio: tuple[int, int, int] = DEFAULT_COLUMN_RATIO,
    ) -> None:
        self._get_terminal_size = get_terminal_size
        self.padding = max(0, padding)
        self.column_ratio = column_ratio

    @classmethod
    def fixed(cls, columns: int, rows: int, **kwargs) -> Viewport:
        """Return a viewport pinned to ``columns`` x ``rows``."""
        size = os.terminal_size((columns, rows))
        return cls(lambda _fallback: size, **kwargs)

    @classmethod
    def from_settings(
        cls,
        settings: PaneSettings,
        get_terminal_size: Callable[[tuple[int, int]], os.terminal_size] = shutil.get_terminal_size,
    ) -> Viewport:
        return cls(
            get_terminal_size,
            padding=settings.dir_padding,
            column_ratio=settings.column_ratio,
        )

    def size(self) -> os.terminal_size:
        return self._get_terminal_size(FALLBACK_TERMINAL_SIZE)

    def limit(self) -> int:
        """Return entry rows available after header/footer chrome, never negative."""
        return max(0, self.size().lines - self.padding)

    def current_column(self) -> tuple[int, int]:
        """Return ``(x, width)`` of the current-directory column."""
        parent, current, preview = self.column_ratio
        total = parent + current + preview
        columns = self.size().columns
        return columns * parent // total, columns * current // total


__all__ = [
    "DIR_PADDING",
    "DEFAULT_COLUMN_RATIO",
    "FALLBACK_TERMINAL_SIZE",
    "Rect",
    "Viewport",
]
