"""Unit tests for the presentation tree."""

from unittest.mock import MagicMock

import pytest

from samwizard.presentation import Button, ComboBox, Label, Panel, TextField


class TestComboBox:
    """Test ComboBox selection and listeners."""

    def test_first_item_is_selected(self):
        combo = ComboBox(["a", "b"])

        assert combo.get_selected_item() == "a"

    def test_empty_combo_has_no_selection(self):
        assert ComboBox().get_selected_item() is None

    def test_listener_fires_on_change(self):
        combo = ComboBox(["a", "b"])
        listener = MagicMock()
        combo.add_item_listener(listener)

        combo.set_selected_item("b")

        listener.assert_called_once_with("b")
        assert combo.get_selected_item() == "b"

    def test_listener_not_fired_for_same_item(self):
        combo = ComboBox(["a", "b"])
        listener = MagicMock()
        combo.add_item_listener(listener)

        combo.set_selected_item("a")

        listener.assert_not_called()

    def test_unknown_item(self):
        with pytest.raises(ValueError):
            ComboBox(["a"]).set_selected_item("z")


class TestPanel:
    """Test Panel attach/detach."""

    def test_add_and_remove(self):
        panel = Panel()
        label = Label("x")

        panel.add(label)
        assert panel.children == [label]
        assert label.parent is panel

        panel.remove(label)
        assert panel.children == []
        assert label.parent is None

    def test_remove_missing_child(self):
        with pytest.raises(ValueError):
            Panel().remove(Label("x"))

    def test_component_attached_once(self):
        label = Label("x")
        Panel().add(label)

        with pytest.raises(ValueError):
            Panel().add(label)

    def test_find_nested(self):
        outer, inner = Panel(), Panel()
        field = TextField("value", name="field")
        inner.add(field)
        outer.add(inner)

        assert outer.find("field") is field
        assert outer.find("missing") is None

    def test_to_dict(self):
        panel = Panel(name="root")
        panel.add(Label("Runtime:"))
        panel.add(ComboBox(["java11"], name="runtime"))
        panel.add(Button("Edit"))

        data = panel.to_dict()

        assert data["kind"] == "panel"
        assert data["name"] == "root"
        assert [c["kind"] for c in data["children"]] == ["label", "combo_box", "button"]
        assert data["children"][1]["selected"] == "java11"
        assert data["children"][2]["enabled"] is False


class TestButton:
    def test_click_invokes_action(self):
        action = MagicMock(return_value="done")

        assert Button("Edit", action).click("arg") == "done"
        action.assert_called_once_with("arg")

    def test_click_without_action(self):
        with pytest.raises(RuntimeError):
            Button("Edit").click()


class TestTextField:
    def test_set_text_none_is_empty(self):
        field = TextField("x")
        field.set_text(None)

        assert field.get_text() == ""
