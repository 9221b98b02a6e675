"""End-to-end picker sessions over real temporary directory trees."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from picker_fakes import RecordingHost

from fuzzypick.file_model import FileEnumerator
from fuzzypick.picker import (
    Ascend,
    Cancel,
    Commit,
    NextDirectory,
    PickerService,
    PickerState,
    QueryChanged,
    SelectionMoved,
    SessionController,
)


class PickerScenarioTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        (self.root / "a.txt").write_text("a\n", encoding="utf-8")
        (self.root / "b").mkdir()
        (self.root / "b" / "c.txt").write_text("c\n", encoding="utf-8")

        self.host = RecordingHost()
        self.service = PickerService()
        self.controller = SessionController(self.host, self.service, enumerator=FileEnumerator())

    def test_commit_into_directory_then_open_file(self) -> None:
        self.assertIs(self.controller.open(self.root, previous_context="buffer-1"), PickerState.BROWSING)
        self.assertEqual(self.host.lines, ["../", "b/", "a.txt"])
        self.assertEqual(self.host.title, self.root)

        self.controller.handle(SelectionMoved(1))
        self.assertIs(self.controller.handle(Commit()), PickerState.BROWSING)
        self.assertEqual(self.host.title, self.root / "b")
        self.assertEqual(self.host.lines, ["../", "c.txt"])
        self.assertEqual(self.host.selected_index, 0)

        self.controller.handle(SelectionMoved(1))
        outcome = self.controller.handle(Commit())

        self.assertIs(outcome, PickerState.COMMITTED)
        self.assertEqual(self.host.opened, [self.root / "b" / "c.txt"])
        self.assertEqual(self.service.last_remembered_directory, self.root / "b")
        self.assertIsNone(self.controller.session)
        self.assertEqual(self.host.restored, [])

    def test_query_without_matches_renders_empty_list(self) -> None:
        self.controller.open(self.root)

        self.assertIs(self.controller.handle(QueryChanged("xyz")), PickerState.BROWSING)

        self.assertEqual(self.host.lines, [])
        self.assertEqual(self.host.selected_index, 0)
        self.assertIs(self.controller.handle(Commit()), PickerState.BROWSING)
        self.assertIs(self.controller.handle(SelectionMoved(1, relative=True)), PickerState.BROWSING)
        self.assertEqual(self.host.opened, [])

    def test_descend_then_ascend_restores_listing(self) -> None:
        self.controller.open(self.root)
        before = list(self.host.lines)

        self.controller.handle(QueryChanged("b"))
        self.controller.handle(Commit())
        self.assertEqual(self.controller.session.origin_directory, self.root / "b")
        self.assertEqual(self.controller.session.query, "")

        self.controller.handle(Ascend())

        self.assertEqual(self.controller.session.origin_directory, self.root)
        self.assertEqual(self.host.lines, before)
        self.assertEqual(self.host.selected_index, 0)

    def test_next_directory_shortcut_takes_first_listed_directory(self) -> None:
        self.controller.open(self.root / "b")
        self.controller.handle(QueryChanged("c"))

        # only c.txt is visible, so there is no directory to jump into
        self.controller.handle(NextDirectory())
        self.assertEqual(self.controller.session.origin_directory, self.root / "b")

        self.controller.handle(QueryChanged(""))
        self.controller.handle(NextDirectory())
        self.assertEqual(self.controller.session.origin_directory, self.root)

    def test_unreadable_directory_keeps_session(self) -> None:
        self.controller.open(self.root)
        self.controller.handle(QueryChanged("b"))
        (self.root / "b" / "c.txt").unlink()
        (self.root / "b").rmdir()

        self.assertIs(self.controller.handle(Commit()), PickerState.BROWSING)

        self.assertEqual(len(self.host.errors), 1)
        self.assertEqual(self.controller.session.origin_directory, self.root)
        self.assertEqual(self.controller.session.query, "b")

    def test_cancel_restores_context_and_allows_reopen(self) -> None:
        self.controller.open(self.root, previous_context={"buffer": 3})

        self.assertIs(self.controller.handle(Cancel()), PickerState.CANCELLED)
        self.assertEqual(self.host.restored, [{"buffer": 3}])
        self.assertIs(self.controller.state, PickerState.IDLE)

        self.assertIs(self.controller.open(), PickerState.BROWSING)
        self.assertEqual(self.host.title, self.root)


if __name__ == "__main__":
    unittest.main()
