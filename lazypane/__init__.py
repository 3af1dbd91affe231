"""Public package surface for lazypane.

A directory pane's navigation core: ``ViewState`` windows, pages and selects
over a ``FileCollection`` and keeps the hovered entry pinned across listing
updates. Collaborator types live in the submodules re-exported here.
"""

from __future__ import annotations

from .config import PaneSettings, load_pane_settings
from .entry import FileEntry
from .events import PagesChanged, PaneEvent, PaneEvents, RefreshRequested
from .files import FileCollection
from .ops import FilesOp, IOErrorOp, ReadOp, SearchOp, SizeOp, UnexpectedUpdateError
from .view_state import SCROLL_MARGIN, ViewState
from .viewport import DIR_PADDING, Rect, Viewport

__all__ = [
    "DIR_PADDING",
    "SCROLL_MARGIN",
    "FileCollection",
    "FileEntry",
    "FilesOp",
    "IOErrorOp",
    "PagesChanged",
    "PaneEvent",
    "PaneEvents",
    "PaneSettings",
    "ReadOp",
    "Rect",
    "RefreshRequested",
    "SearchOp",
    "SizeOp",
    "UnexpectedUpdateError",
    "ViewState",
    "Viewport",
    "load_pane_settings",
]
