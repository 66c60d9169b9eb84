import pytest

from todomvc.models import TodoCounts
from todomvc.rendering import list_controls, templates, toggle_action_for
from todomvc.schemas import TodoListFilter, ToggleAction


@pytest.fixture()
def macros():
    return templates.env.get_template("macros.html").module


def make_todo(todo_id=1, title="Buy milk", completed=False):
    return {"id": todo_id, "title": title, "completed": completed}


class TestListControls:
    def test_empty_list_disables_both_buttons(self):
        controls = list_controls(TodoCounts())
        assert controls.toggle_disabled is True
        assert controls.clear_disabled is True
        assert controls.toggle_action is ToggleAction.CHECK

    def test_no_completed_items_disables_clear_only(self):
        controls = list_controls(TodoCounts(all=2, active=2, completed=0))
        assert controls.toggle_disabled is False
        assert controls.clear_disabled is True

    def test_some_completed_offers_check(self):
        counts = TodoCounts(all=3, active=1, completed=2)
        assert toggle_action_for(counts) is ToggleAction.CHECK
        assert list_controls(counts).clear_disabled is False

    def test_all_completed_offers_uncheck(self):
        counts = TodoCounts(all=2, active=0, completed=2)
        assert toggle_action_for(counts) is ToggleAction.UNCHECK


class TestFilters:
    def test_filter_visibility(self):
        assert TodoListFilter.ALL.shows(True) and TodoListFilter.ALL.shows(False)
        assert TodoListFilter.ACTIVE.shows(False) and not TodoListFilter.ACTIVE.shows(True)
        assert TodoListFilter.COMPLETED.shows(True) and not TodoListFilter.COMPLETED.shows(False)

    def test_labels(self):
        assert TodoListFilter.ACTIVE.label == "Active"
        assert ToggleAction.UNCHECK.label == "Uncheck all"


class TestMacros:
    def test_active_item(self, macros):
        html = str(macros.todo_item(make_todo()))
        assert 'id="todo-1"' in html
        assert 'hx-post="/todos/1/toggle"' in html
        assert 'hx-delete="/todos/1"' in html
        assert " checked" not in html
        assert "<s>" not in html
        assert "Buy milk" in html

    def test_completed_item_is_checked_and_struck(self, macros):
        html = str(macros.todo_item(make_todo(completed=True)))
        assert " checked" in html
        assert "<s>Buy milk</s>" in html

    def test_title_is_escaped(self, macros):
        html = str(macros.todo_item(make_todo(title="<script>alert(1)</script>")))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_edit_form(self, macros):
        html = str(macros.todo_edit(make_todo(todo_id=7, title='say "hi"')))
        assert 'hx-patch="/todos/7"' in html
        assert 'name="title"' in html
        assert "say &#34;hi&#34;" in html

    def test_list_state_marks_everything_out_of_band(self, macros):
        controls = list_controls(TodoCounts(all=3, active=1, completed=2))
        html = str(macros.list_state(controls))

        for name, value in (("all", 3), ("active", 1), ("completed", 2)):
            assert f'id="todo-counter-{name}"' in html
            assert f">{value}</span>" in html
        assert html.count('hx-swap-oob="true"') == 5
        assert 'hx-patch="/todos?action=check"' in html
        assert " disabled" not in html

    def test_disabled_buttons(self, macros):
        html = str(macros.list_state(list_controls(TodoCounts()), oob=False))
        assert "hx-swap-oob" not in html
        assert html.count(" disabled") == 2
