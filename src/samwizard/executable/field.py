"""Editable SAM CLI executable field."""

from __future__ import annotations

from typing import Optional

from ..presentation import Button, TextField
from .locator import SamExecutableLocator


class SamExecutableField(TextField):
    """Text field holding the SAM CLI executable path.

    ``set_text`` accepts anything the user types; ``edit`` is the checked
    path taken by the "edit" action.
    """

    def __init__(self, locator: SamExecutableLocator, text: str = "", name: str = "sam_executable"):
        super().__init__(text, name=name)
        self.locator = locator

    def edit(self, path: str) -> str:
        """Replace the path after checking it is an executable.

        Raises:
            InvalidExecutableError: If the path is not an executable file
        """
        self.set_text(self.locator.validate_path(path))
        return self.text

    def detect(self) -> str:
        """Replace the path with the auto-detected executable (may be empty)."""
        self.set_text(self.locator.resolve_path())
        return self.text


def setup_sam_selection_elements(
    field: SamExecutableField,
    button: Button,
    locator: Optional[SamExecutableLocator] = None,
) -> None:
    """Pre-fill the executable field and bind the edit button to it."""
    if locator is not None:
        field.locator = locator
    field.detect()
    button.action = field.edit
