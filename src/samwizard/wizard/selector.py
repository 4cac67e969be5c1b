"""Runtime drop-down of the runtime selection step."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from ..presentation import ComboBox
from ..runtime.catalog import RuntimeCatalog
from ..runtime.types import Runtime
from .builder import SamInitProjectBuilder

logger = logging.getLogger(__name__)


class RuntimeSelector:
    """Presents the sorted runtimes and tracks the selected one.

    A change of selection is written into the builder before
    ``on_runtime_changed`` runs, both synchronously.
    """

    def __init__(
        self,
        catalog: RuntimeCatalog,
        builder: SamInitProjectBuilder,
        on_runtime_changed: Optional[Callable[[Runtime], None]] = None,
        default: Optional[Union[Runtime, str]] = None,
    ):
        self.catalog = catalog
        self.builder = builder
        self._on_runtime_changed = on_runtime_changed

        self._combo: ComboBox[Runtime] = ComboBox(catalog.runtimes(), name="runtime")

        initial = builder.runtime or (Runtime(str(default)) if default else None)
        if initial is not None and initial in self._combo.items:
            self._combo.set_selected_item(initial)

        selected = self._combo.get_selected_item()
        if selected is not None and selected != builder.runtime:
            builder.set_runtime(selected)

        self._combo.add_item_listener(self._runtime_selected)

    def get_selected_runtime(self) -> Optional[Runtime]:
        return self._combo.get_selected_item()

    def select(self, runtime: Union[Runtime, str]) -> Runtime:
        """Select a runtime as if the user picked it.

        Raises:
            UnknownRuntimeError: If the runtime is not in the catalog
        """
        runtime = self.catalog.get(runtime)
        self._combo.set_selected_item(runtime)
        return runtime

    def _runtime_selected(self, runtime: Runtime) -> None:
        logger.debug("Runtime changed to %s", runtime)
        self.builder.set_runtime(runtime)
        if self._on_runtime_changed is not None:
            self._on_runtime_changed(runtime)

    def get_component(self) -> ComboBox[Runtime]:
        return self._combo
