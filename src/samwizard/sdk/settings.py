"""SDK settings sub-step: pick an SDK compatible with the selected runtime."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List, Optional

from ..localization import message
from ..presentation import ComboBox, Label, Panel
from .types import Sdk, SdkType

if TYPE_CHECKING:
    from ..wizard.builder import SamInitProjectBuilder
    from ..wizard.context import WizardContext

logger = logging.getLogger(__name__)


class SdkSettingsStep:
    """Offers the registered SDKs whose type satisfies a predicate.

    Instances are cheap and meant to be thrown away: the owning step builds
    a new one every time the runtime changes.
    """

    def __init__(
        self,
        context: WizardContext,
        builder: SamInitProjectBuilder,
        sdk_type_filter: Callable[[SdkType], bool],
        on_sdk_selected: Optional[Callable[[Optional[Sdk]], None]] = None,
    ):
        """Initialize sub-step.

        Args:
            context: Wizard context (provides the SDK table and project SDK)
            builder: Project builder the selection is committed into
            sdk_type_filter: Tells which SDK types are acceptable
            on_sdk_selected: Called with the SDK whenever one is picked
        """
        self.context = context
        self.builder = builder
        self._on_sdk_selected = on_sdk_selected

        self.sdks: List[Sdk] = context.sdk_table.by_type(sdk_type_filter)
        self._combo: ComboBox[Sdk] = ComboBox(self.sdks, name="sdk")

        # Prefer the SDK already chosen for the project when it fits
        project_sdk = context.project_sdk
        if project_sdk is not None and project_sdk in self.sdks:
            self._combo.set_selected_item(project_sdk)

        self._combo.add_item_listener(self._sdk_picked)

        self._component = Panel(name="sdk_settings")
        self._component.add(self._combo)
        if not self.sdks:
            self._component.add(Label(message("sam.init.sdk.none"), name="sdk_missing"))

        logger.debug(
            "Built SDK settings with %d compatible SDK(s)", len(self.sdks)
        )

    def get_selected_sdk(self) -> Optional[Sdk]:
        return self._combo.get_selected_item()

    def select(self, sdk: Sdk) -> None:
        """Pick an SDK.

        Raises:
            ValueError: If the SDK is not offered by this step
        """
        if sdk not in self.sdks:
            raise ValueError(f"SDK '{sdk.name}' is not compatible with the selected runtime")
        self._combo.set_selected_item(sdk)

    def _sdk_picked(self, sdk: Sdk) -> None:
        self.on_sdk_selected(sdk)

    def on_sdk_selected(self, sdk: Optional[Sdk]) -> None:
        """Hook invoked with the picked SDK."""
        if self._on_sdk_selected is not None:
            self._on_sdk_selected(sdk)

    def update_data_model(self) -> None:
        """Commit the selection into the builder and the context."""
        # An empty selection clears any SDK left by an earlier commit
        sdk = self.get_selected_sdk()
        self.builder.set_selected_sdk(sdk)
        self.context.project_sdk = sdk
        self.on_sdk_selected(sdk)

    def get_component(self) -> Panel:
        return self._component
