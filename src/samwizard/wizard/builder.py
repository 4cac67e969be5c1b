"""Project builder configuration for new SAM applications."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..runtime.catalog import RuntimeCatalog
from ..runtime.types import Runtime
from ..sdk.types import Sdk, SdkType

logger = logging.getLogger(__name__)

DEFAULT_APP_TEMPLATE = "hello-world"


class SamInitProjectBuilder:
    """Accumulates the choices of every wizard step.

    Mutated as steps commit, read once when the project is created.
    """

    def __init__(self, catalog: Optional[RuntimeCatalog] = None):
        self.catalog = catalog or RuntimeCatalog()
        self.runtime: Optional[Runtime] = None
        self.selected_sdk: Optional[Sdk] = None
        self.module_jdk: Optional[Sdk] = None
        self.sam_executable: Optional[str] = None
        self.app_template: str = DEFAULT_APP_TEMPLATE

    @property
    def sdk_type(self) -> Optional[SdkType]:
        """SDK type matching the current runtime."""
        if self.runtime is None:
            return None
        return self.catalog.sdk_type_for(self.runtime)

    def set_runtime(self, runtime: Union[Runtime, str]) -> None:
        """Set the target runtime.

        Raises:
            UnknownRuntimeError: If the runtime is not in the catalog
        """
        self.runtime = self.catalog.get(runtime)
        logger.debug("Builder runtime set to %s", self.runtime)

    def set_selected_sdk(self, sdk: Optional[Sdk]) -> None:
        self.selected_sdk = sdk

    def set_module_jdk(self, sdk: Optional[Sdk]) -> None:
        self.module_jdk = sdk

    def set_sam_executable(self, path: str) -> None:
        self.sam_executable = path

    def init_command(self, name: str, output_dir: Union[str, Path]) -> List[str]:
        """Build the `sam init` command line for the current choices.

        Raises:
            ValueError: If runtime or SAM executable have not been set
        """
        if self.runtime is None:
            raise ValueError("Runtime has not been selected")
        if not self.sam_executable:
            raise ValueError("SAM CLI executable has not been set")

        group = self.catalog.group_for(self.runtime)
        return [
            self.sam_executable,
            "init",
            "--no-interactive",
            "--name", name,
            "--runtime", self.runtime.identifier,
            "--dependency-manager", group.packaging,
            "--app-template", self.app_template,
            "--output-dir", str(output_dir),
        ]

    def __repr__(self) -> str:
        sdk = self.selected_sdk.name if self.selected_sdk else None
        return f"<SamInitProjectBuilder runtime={self.runtime} sdk={sdk}>"
