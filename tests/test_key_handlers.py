"""Key-token dispatch onto tree state.

Checks quit and confirm outcomes, mouse routing, and that the redraw flag
only rises when visible state changed.
"""

from __future__ import annotations

import unittest

from moontree.input import KeyOutcome, TreeKeyHandler
from moontree.inventory import parse_report
from moontree.tree_model import TaskTree
from moontree.tree_state import TreeState

REPORT = "kickbase\n\t:build | make\n\t:test | make\nother\n\t:lint | ruff\n"


def _handler(**state_kwargs) -> TreeKeyHandler:
    state = TreeState(TaskTree.from_projects(parse_report(REPORT)), **state_kwargs)
    return TreeKeyHandler(state)


class TreeKeyHandlerTests(unittest.TestCase):
    def test_expand_down_confirm_returns_first_task_identifier(self) -> None:
        handler = _handler(opened={"kickbase"})

        self.assertEqual(handler.handle("RIGHT"), KeyOutcome(changed=False))
        self.assertEqual(handler.handle("DOWN"), KeyOutcome(changed=True))
        outcome = handler.handle("ENTER")

        self.assertTrue(outcome.done)
        self.assertEqual(outcome.chosen, "kickbase:build")

    def test_quit_ends_session_without_command_from_any_state(self) -> None:
        handler = _handler()
        for key in ("DOWN", "RIGHT", "RIGHT", "END", "PAGE_DOWN"):
            handler.handle(key)

        self.assertEqual(handler.handle("q"), KeyOutcome(done=True, chosen=None))
        self.assertEqual(handler.handle("CTRL_C"), KeyOutcome(done=True, chosen=None))

    def test_confirm_on_closed_project_opens_it_and_returns_project(self) -> None:
        handler = _handler(selected=["kickbase"])

        outcome = handler.handle("ENTER")

        self.assertEqual(outcome, KeyOutcome(changed=True, done=True, chosen="kickbase"))
        self.assertIn("kickbase", handler.state.opened)

    def test_confirm_on_open_project_without_tasks_returns_project(self) -> None:
        state = TreeState(
            TaskTree.from_projects(parse_report("empty\nkickbase\n\t:build | make\n")),
            opened={"empty"},
            selected=["empty"],
        )

        outcome = TreeKeyHandler(state).handle("ENTER")

        self.assertEqual(outcome, KeyOutcome(changed=False, done=True, chosen="empty"))

    def test_confirm_on_open_project_steps_to_first_task_and_returns_it(self) -> None:
        handler = _handler(opened={"kickbase"}, selected=["kickbase"])

        outcome = handler.handle("ENTER")

        self.assertEqual(outcome, KeyOutcome(changed=True, done=True, chosen="kickbase:build"))

    def test_confirm_on_selected_task_returns_it(self) -> None:
        handler = _handler(opened={"other"}, selected=["other", "other:lint"])

        outcome = handler.handle("ENTER")

        self.assertEqual(outcome, KeyOutcome(changed=False, done=True, chosen="other:lint"))

    def test_confirm_without_selection_does_nothing(self) -> None:
        self.assertEqual(_handler().handle("ENTER"), KeyOutcome())

    def test_vim_keys_match_arrow_keys(self) -> None:
        handler = _handler()

        handler.handle("j")
        handler.handle("l")
        handler.handle("l")
        self.assertEqual(handler.state.selected, ["kickbase", "kickbase:build"])
        handler.handle("k")
        self.assertEqual(handler.state.selected, ["kickbase"])
        handler.handle("h")
        self.assertNotIn("kickbase", handler.state.opened)

    def test_space_and_ctrl_j_toggle_projects(self) -> None:
        handler = _handler(selected=["other"])

        self.assertTrue(handler.handle(" ").changed)
        self.assertIn("other", handler.state.opened)
        self.assertTrue(handler.handle("CTRL_J").changed)
        self.assertNotIn("other", handler.state.opened)

    def test_escape_clears_selection(self) -> None:
        handler = _handler(selected=["other"])

        self.assertTrue(handler.handle("ESC").changed)
        self.assertEqual(handler.state.selected, [])

    def test_home_and_end(self) -> None:
        handler = _handler()

        handler.handle("END")
        self.assertEqual(handler.state.selected, ["other"])
        handler.handle("HOME")
        self.assertEqual(handler.state.selected, ["kickbase"])

    def test_resize_requests_redraw_without_moving_selection(self) -> None:
        handler = _handler(selected=["other"])

        self.assertEqual(handler.handle("RESIZE"), KeyOutcome(changed=True))
        self.assertEqual(handler.state.selected, ["other"])

    def test_unbound_keys_are_ignored(self) -> None:
        self.assertEqual(_handler().handle("x"), KeyOutcome())

    def test_mouse_wheel_scrolls_by_one_row(self) -> None:
        handler = _handler(opened={"kickbase", "other"})
        handler.state.viewport_height = 2

        self.assertTrue(handler.handle("MOUSE_WHEEL_DOWN:3:3").changed)
        self.assertEqual(handler.state.offset, 1)
        self.assertTrue(handler.handle("MOUSE_WHEEL_UP:3:3").changed)
        self.assertEqual(handler.state.offset, 0)

    def test_page_keys_scroll_by_three_rows(self) -> None:
        handler = _handler(opened={"kickbase", "other"})
        handler.state.viewport_height = 1

        handler.handle("PAGE_DOWN")
        self.assertEqual(handler.state.offset, 3)
        handler.handle("PAGE_UP")
        self.assertEqual(handler.state.offset, 0)
        self.assertEqual(handler.state.selected, [])

    def test_mouse_click_selects_rendered_node(self) -> None:
        handler = _handler(opened={"kickbase"})
        handler.state.rendered_top = 2
        handler.state.rendered_rows = ["kickbase", "kickbase:build", "kickbase:test", "other"]

        self.assertTrue(handler.handle("MOUSE_LEFT_DOWN:8:4").changed)
        self.assertEqual(handler.state.selected, ["kickbase", "kickbase:test"])
        self.assertFalse(handler.handle("MOUSE_LEFT_UP:8:4").changed)
        self.assertFalse(handler.handle("MOUSE_LEFT_DOWN:8:40").changed)


if __name__ == "__main__":
    unittest.main()
