"""Presentation tree for wizard steps.

Steps describe their visual surface as a small tree of components that any
front end (terminal prompt, web form, MCP client) can render. The tree is
plain data; only ComboBox and Button carry callbacks.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class Component:
    """Base class of all presentation nodes."""

    kind = "component"

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.parent: Optional["Panel"] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind}
        if self.name:
            data["name"] = self.name
        return data


class Label(Component):
    kind = "label"

    def __init__(self, text: str, name: Optional[str] = None):
        super().__init__(name)
        self.text = text

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "text": self.text}


class TextField(Component):
    kind = "text_field"

    def __init__(self, text: str = "", name: Optional[str] = None):
        super().__init__(name)
        self.text = text

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: Optional[str]) -> None:
        self.text = text or ""

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "text": self.text}


class Button(Component):
    kind = "button"

    def __init__(
        self,
        text: str,
        action: Optional[Callable[..., Any]] = None,
        name: Optional[str] = None,
    ):
        super().__init__(name)
        self.text = text
        self.action = action

    def click(self, *args: Any) -> Any:
        """Invoke the bound action.

        Raises:
            RuntimeError: If no action is bound
        """
        if self.action is None:
            raise RuntimeError(f"Button '{self.text}' has no action")
        return self.action(*args)

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "text": self.text, "enabled": self.action is not None}


class ComboBox(Component, Generic[T]):
    """Drop-down with a single selected item.

    Item listeners fire synchronously with the newly selected item, only when
    the selection actually changes.
    """

    kind = "combo_box"

    def __init__(self, items: Sequence[T] = (), name: Optional[str] = None):
        super().__init__(name)
        self._items: List[T] = []
        self._selected: Optional[T] = None
        self._listeners: List[Callable[[T], None]] = []
        for item in items:
            self.add_item(item)

    @property
    def items(self) -> List[T]:
        return list(self._items)

    def add_item(self, item: T) -> None:
        self._items.append(item)
        # First item becomes the selection without notifying listeners
        if self._selected is None:
            self._selected = item

    def get_selected_item(self) -> Optional[T]:
        return self._selected

    def set_selected_item(self, item: T) -> None:
        """Select an item, notifying listeners if the selection changed.

        Raises:
            ValueError: If the item is not one of the combo box items
        """
        if item not in self._items:
            raise ValueError(f"{item!r} is not an item of this combo box")
        if item == self._selected:
            return
        self._selected = item
        for listener in list(self._listeners):
            listener(item)

    def add_item_listener(self, listener: Callable[[T], None]) -> None:
        self._listeners.append(listener)

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "items": [str(item) for item in self._items],
            "selected": None if self._selected is None else str(self._selected),
        }


class Panel(Component):
    """Container of child components, in insertion order."""

    kind = "panel"

    def __init__(self, name: Optional[str] = None):
        super().__init__(name)
        self._children: List[Component] = []

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def add(self, component: Component) -> None:
        """Attach a component.

        Raises:
            ValueError: If the component is already attached to a panel
        """
        if component.parent is not None:
            raise ValueError(f"{component.kind} is already attached to a panel")
        component.parent = self
        self._children.append(component)

    def remove(self, component: Component) -> None:
        """Detach a component.

        Raises:
            ValueError: If the component is not a child of this panel
        """
        if component.parent is not self:
            raise ValueError(f"{component.kind} is not a child of this panel")
        self._children.remove(component)
        component.parent = None

    def find(self, name: str) -> Optional[Component]:
        """Depth-first search for a named component."""
        for child in self._children:
            if child.name == name:
                return child
            if isinstance(child, Panel):
                found = child.find(name)
                if found is not None:
                    return found
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            **super().to_dict(),
            "children": [child.to_dict() for child in self._children],
        }
