"""State shared by all steps of the new-project wizard."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..sdk.table import SdkTable
from ..sdk.types import Sdk

if TYPE_CHECKING:
    from .builder import SamInitProjectBuilder


@dataclass
class WizardContext:
    """Ambient state of one project-creation flow.

    Attributes:
        project_name: Name of the project being created
        project_dir: Directory the project is created in
        sdk_table: SDKs the user can choose from
        project_sdk: SDK chosen for the whole project
        project_builder: Builder that creates the project once all steps commit
    """

    project_name: str = "sam-app"
    project_dir: Path = field(default_factory=Path.cwd)
    sdk_table: SdkTable = field(default_factory=SdkTable)
    project_sdk: Optional[Sdk] = None
    project_builder: Optional[SamInitProjectBuilder] = None

    def set_project_builder(self, builder: SamInitProjectBuilder) -> None:
        self.project_builder = builder
