"""Tests for rebuilding the rendered view."""

from __future__ import annotations

from nestodo.cli.tui.collapse import toggle_collapse
from nestodo.cli.tui.renderer import TodoRenderer
from nestodo.cli.tui.view import FieldKind, FocusedField
from nestodo.core.mutations import add_todo, toggle_completed


def _input_count(rendered) -> int:
    # One slot by construction; it must point at a list that exists.
    return sum(1 for lst in rendered.iter_lists() if lst is rendered.input_list())


def test_render_mirrors_tree_in_order(renderer, sample_todos) -> None:
    rendered = renderer.render(sample_todos)

    assert [i.todo_id for i in rendered.root.items] == ["id-groceries", "id-call"]
    groceries = rendered.root.items[0]
    assert groceries.text == "groceries"
    assert groceries.collapse_label == "Collapse"
    assert [i.todo_id for i in groceries.sublist.items] == ["id-milk", "id-bread"]
    assert groceries.sublist.subtree_id == "id-groceries"
    assert groceries.sublist.hidden is False


def test_leaves_get_no_collapse_control_or_sublist(renderer, sample_todos) -> None:
    rendered = renderer.render(sample_todos)

    call = rendered.find_item("id-call")
    assert call.collapse_label is None
    assert call.has_collapse_control is False
    assert call.sublist is None


def test_render_persists_tree(renderer, store, sample_todos) -> None:
    renderer.render(sample_todos)

    assert store.load("todoList") == sample_todos


def test_render_snapshot_is_detached_from_model(renderer, sample_todos) -> None:
    rendered = renderer.render(sample_todos)

    sample_todos[0].text = "changed"

    assert rendered.find_item("id-groceries").text == "groceries"


def test_collapsed_subtree_survives_unrelated_mutation(renderer, sample_todos) -> None:
    first = renderer.render(sample_todos)
    toggle_collapse(first, "id-milk")

    add_todo(sample_todos, "unrelated")
    second = renderer.render(sample_todos, first)

    milk = second.find_item("id-milk")
    assert milk.sublist.hidden is True
    assert milk.collapse_label == "Expand"
    assert second.find_item("id-groceries").sublist.hidden is False


def test_collapsed_subtree_keeps_state_when_its_content_changes(renderer, sample_todos) -> None:
    first = renderer.render(sample_todos)
    toggle_collapse(first, "id-groceries")

    add_todo(sample_todos[0].children, "eggs")
    second = renderer.render(sample_todos, first)

    groceries = second.find_item("id-groceries")
    assert groceries.sublist.hidden is True
    assert [i.text for i in groceries.sublist.items][-1] == "eggs"


def test_pending_input_defaults_to_root(renderer, sample_todos) -> None:
    rendered = renderer.render(sample_todos)

    assert rendered.pending_input.attached_to is None
    assert rendered.input_list() is rendered.root
    assert rendered.focus == FocusedField(FieldKind.INPUT, None)
    assert _input_count(rendered) == 1


def test_pending_input_follows_focused_text_field(renderer, sample_todos) -> None:
    first = renderer.render(sample_todos)
    first.focus = FocusedField(FieldKind.EDIT, "id-groceries", "id-bread")

    second = renderer.render(sample_todos, first)

    assert second.pending_input.attached_to == "id-groceries"
    assert second.input_list() is second.find_list("id-groceries")
    assert _input_count(second) == 1


def test_pending_input_ignores_focused_control(renderer, sample_todos) -> None:
    first = renderer.render(sample_todos)
    first.focus = FocusedField(FieldKind.CONTROL, "id-groceries")

    second = renderer.render(sample_todos, first)

    assert second.pending_input.attached_to is None


def test_pending_input_falls_back_when_list_is_gone(renderer, sample_todos) -> None:
    first = renderer.render(sample_todos)
    first.focus = FocusedField(FieldKind.INPUT, "id-milk")

    sample_todos[0].children[0].children.clear()
    second = renderer.render(sample_todos, first)

    assert second.pending_input.attached_to is None
    assert second.input_list() is second.root


def test_delete_completed_visibility(renderer, sample_todos) -> None:
    assert renderer.render(sample_todos).show_delete_completed is False

    toggle_completed(sample_todos[0].children[0].children, 0)  # 2%, deep
    assert renderer.render(sample_todos).show_delete_completed is True


def test_delete_completed_visible_for_items_in_hidden_sublists(renderer, sample_todos) -> None:
    first = renderer.render(sample_todos)
    toggle_collapse(first, "id-groceries")
    toggle_completed(sample_todos[0].children, 1)  # bread

    second = renderer.render(sample_todos, first)

    assert second.find_list("id-groceries").hidden is True
    assert second.show_delete_completed is True
    assert second.completed_ids() == ["id-bread"]


def test_buy_milk_scenario(tmp_path) -> None:
    from nestodo.core.store import TodoStore

    renderer = TodoRenderer(TodoStore(tmp_path / "s.json"), "todoList")
    root: list = []

    milk = add_todo(root, "buy milk")
    assert (len(root), milk.text, milk.completed, milk.children) == (1, "buy milk", False, [])

    child = add_todo(milk.children, "2%  ".strip())
    assert child.text == "2%"

    toggle_completed(root, 0)
    assert root[0].completed is True

    rendered = renderer.render(root)
    assert rendered.show_delete_completed is True
    assert rendered.find_item(milk.id).completed is True
