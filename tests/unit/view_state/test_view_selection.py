"""Tests for per-entry selection flags and the hidden-file toggle."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazypane import FileEntry, ReadOp, RefreshRequested, ViewState, Viewport

ROOT = Path("/tmp/pane")


def _view(count: int = 5) -> ViewState:
    view = ViewState.new(ROOT, viewport=Viewport.fixed(80, 12))
    view.update(ReadOp(ROOT, tuple(FileEntry(ROOT / f"s{idx}") for idx in range(count))))
    view.events.drain()
    return view


class SelectTests(unittest.TestCase):
    def test_select_all_reports_change_once(self) -> None:
        view = _view(5)

        self.assertTrue(view.select(None, True))
        self.assertEqual(len(view.selected()), 5)
        self.assertFalse(view.select(None, True))

    def test_toggle_single_entry(self) -> None:
        view = _view()

        self.assertTrue(view.select(3, None))
        self.assertEqual(view.selected(), [ROOT / "s3"])
        self.assertTrue(view.select(3, None))
        self.assertIsNone(view.selected())

    def test_force_state_only_reports_flips(self) -> None:
        view = _view()

        self.assertFalse(view.select(1, False))
        self.assertTrue(view.select(1, True))
        self.assertFalse(view.select(1, True))

    def test_out_of_range_index_is_ignored(self) -> None:
        view = _view(3)

        self.assertFalse(view.select(3, True))
        self.assertFalse(view.select(-1, None))
        self.assertFalse(view.has_selected())

    def test_toggle_all_inverts_each_entry(self) -> None:
        view = _view(4)
        view.select(0, True)
        view.select(2, True)

        self.assertTrue(view.select(None, None))

        self.assertEqual(view.selected(), [ROOT / "s1", ROOT / "s3"])

    def test_selection_is_independent_of_cursor(self) -> None:
        view = _view()
        view.next(2)

        view.select(4, True)

        self.assertEqual(view.cursor, 2)
        self.assertTrue(view.has_selected())

    def test_select_on_empty_view(self) -> None:
        view = ViewState.new(ROOT, viewport=Viewport.fixed(80, 12))

        self.assertFalse(view.select(None, None))
        self.assertFalse(view.select(0, True))
        self.assertIsNone(view.selected())


class HiddenToggleTests(unittest.TestCase):
    def test_toggle_flips_and_requests_refresh(self) -> None:
        view = _view()

        self.assertTrue(view.hidden(None))

        self.assertTrue(view.show_hidden)
        self.assertEqual(view.events.drain(), [RefreshRequested(ROOT)])

    def test_matching_explicit_value_is_noop(self) -> None:
        view = _view()

        self.assertFalse(view.hidden(False))
        self.assertEqual(view.events.drain(), [])

    def test_toggle_leaves_entries_until_next_read(self) -> None:
        view = ViewState.new(ROOT, viewport=Viewport.fixed(80, 12))
        listing = (FileEntry(ROOT / ".cache"), FileEntry(ROOT / "main.py"))
        view.update(ReadOp(ROOT, listing))

        view.hidden(True)
        self.assertEqual(len(view.files), 1)

        view.update(ReadOp(ROOT, listing))
        self.assertEqual([entry.name for entry in view.window()], [".cache", "main.py"])


if __name__ == "__main__":
    unittest.main()
