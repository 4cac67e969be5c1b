"""Runtime selection step of the new SAM application wizard."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Tuple, Union

from ..executable.field import SamExecutableField, setup_sam_selection_elements
from ..executable.locator import SamExecutableLocator
from ..localization import message
from ..presentation import Button, ComboBox, Label, Panel
from ..runtime.catalog import RuntimeCatalog
from ..runtime.types import Runtime
from ..sdk.settings import SdkSettingsStep
from ..sdk.types import Sdk, SdkType
from .builder import SamInitProjectBuilder
from .context import WizardContext
from .errors import ConfigurationError, StepStateError
from .selector import RuntimeSelector

logger = logging.getLogger(__name__)

SAM_NOT_SPECIFIED = "lambda.run_configuration.sam.not_specified"


class StepState(str, Enum):
    EDITING = "editing"
    COMMITTED = "committed"


class SamInitRuntimeSelectionStep:
    """Lets the user pick a runtime, an SDK and the SAM CLI executable.

    The step owns three rows of its presentation:

        Runtime:            [runtime combo]
        SAM CLI executable: [path field] [Edit]
        Project SDK:        [SDK settings sub-tree]

    The SDK sub-tree is rebuilt from scratch whenever the runtime changes,
    since each runtime accepts a different SDK type. The old sub-tree is
    always detached before the new one is attached.

    ``commit_to_configuration`` is only accepted after ``validate``
    succeeded for the current runtime and executable path.
    Changing any selection after a commit puts the step back in EDITING.
    """

    def __init__(
        self,
        builder: SamInitProjectBuilder,
        context: WizardContext,
        catalog: Optional[RuntimeCatalog] = None,
        locator: Optional[SamExecutableLocator] = None,
        default_runtime: Optional[Union[Runtime, str]] = None,
    ):
        self.builder = builder
        self.context = context
        self._committed: Optional[Tuple[Optional[Runtime], str, Optional[Sdk]]] = None
        self._validated: Optional[Tuple[Optional[Runtime], str]] = None
        self._sdk_settings_step: Optional[SdkSettingsStep] = None
        self._main_panel = Panel(name="runtime_selection")

        self.runtime_selector = RuntimeSelector(
            catalog or builder.catalog,
            builder,
            on_runtime_changed=self._runtime_changed,
            default=default_runtime,
        )
        self._main_panel.add(Label(message("sam.init.runtime")))
        self._main_panel.add(self.runtime_selector.get_component())

        self._sam_executable_field = SamExecutableField(locator or SamExecutableLocator())
        self._edit_sam_executable_button = Button(
            message("lambda.sam.executable.edit"), name="edit_sam_executable"
        )
        setup_sam_selection_elements(self._sam_executable_field, self._edit_sam_executable_button)
        self._main_panel.add(Label(message("lambda.sam.executable")))
        self._main_panel.add(self._sam_executable_field)
        self._main_panel.add(self._edit_sam_executable_button)

        self._build_sdk_settings_panel()

    def _runtime_changed(self, runtime: Runtime) -> None:
        self._build_sdk_settings_panel()

    def _build_sdk_settings_panel(self) -> None:
        if self._sdk_settings_step is not None:
            # Detach the stale sub-tree before attaching its replacement
            self._main_panel.remove(self._sdk_settings_step.get_component())
        else:
            self._main_panel.add(Label(message("sam.init.project_sdk"), name="sdk_label"))

        self._sdk_settings_step = SdkSettingsStep(
            self.context,
            self.builder,
            self._is_selected_sdk_type,
            on_sdk_selected=self.builder.set_module_jdk,
        )
        self._main_panel.add(self._sdk_settings_step.get_component())
        logger.debug("Rebuilt SDK settings for runtime %s", self.builder.runtime)

    def _is_selected_sdk_type(self, sdk_type: SdkType) -> bool:
        return self.builder.sdk_type == sdk_type

    @property
    def runtime(self) -> ComboBox[Runtime]:
        return self.runtime_selector.get_component()

    @property
    def sam_executable_field(self) -> SamExecutableField:
        return self._sam_executable_field

    @property
    def edit_sam_executable_button(self) -> Button:
        return self._edit_sam_executable_button

    @property
    def sdk_settings_step(self) -> SdkSettingsStep:
        return self._sdk_settings_step

    @property
    def state(self) -> StepState:
        """COMMITTED while the selections still match the last commit."""
        if self._committed is None:
            return StepState.EDITING
        current = (*self._snapshot(), self._sdk_settings_step.get_selected_sdk())
        if current != self._committed:
            return StepState.EDITING
        return StepState.COMMITTED

    def get_selected_runtime(self) -> Optional[Runtime]:
        return self.runtime_selector.get_selected_runtime()

    def select_runtime(self, runtime: Union[Runtime, str]) -> Runtime:
        """Select a runtime as if the user picked it from the drop-down."""
        return self.runtime_selector.select(runtime)

    def select_sdk(self, sdk: Union[Sdk, str]) -> Sdk:
        """Select an SDK (or SDK name) offered for the current runtime.

        Raises:
            ValueError: If the SDK is unknown or incompatible with the runtime
        """
        if isinstance(sdk, str):
            found = self.context.sdk_table.find(sdk)
            if found is None:
                raise ValueError(f"SDK '{sdk}' is not registered")
            sdk = found
        self._sdk_settings_step.select(sdk)
        return sdk

    def _snapshot(self) -> Tuple[Optional[Runtime], str]:
        return self.get_selected_runtime(), self._sam_executable_field.get_text()

    def validate(self) -> bool:
        """Check the step can be committed.

        Raises:
            ConfigurationError: If the SAM CLI executable is not specified
        """
        if not self._sam_executable_field.get_text():
            self._validated = None
            raise ConfigurationError(SAM_NOT_SPECIFIED)
        self._validated = self._snapshot()
        return True

    def commit_to_configuration(self) -> SamInitProjectBuilder:
        """Store the user's choices in the builder and the wizard context.

        Raises:
            StepStateError: If the step was not validated since the last edit
        """
        if self._validated is None or self._validated != self._snapshot():
            raise StepStateError(message("sam.init.not_validated"))

        runtime = self.get_selected_runtime()
        if runtime is None:
            raise StepStateError("No runtime available to commit")

        self.builder.set_runtime(runtime)
        self.builder.set_sam_executable(self._sam_executable_field.get_text())
        self._sdk_settings_step.update_data_model()
        self.context.set_project_builder(self.builder)

        self._committed = (*self._snapshot(), self.builder.selected_sdk)
        logger.info(
            "Committed runtime %s with SDK %s",
            runtime,
            self.builder.selected_sdk.name if self.builder.selected_sdk else None,
        )
        return self.builder

    def enter(self) -> None:
        """Re-enter the step; previous validation no longer counts."""
        self._committed = None
        self._validated = None

    def get_presentation(self) -> Panel:
        return self._main_panel
