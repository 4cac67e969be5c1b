"""Configuration file parser for samwizard."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

from ..sdk.table import SdkTable
from ..sdk.types import Sdk, SdkType

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".samwizard.toml"


@dataclass
class ProjectConfig:
    """Project-level configuration."""

    name: Optional[str] = None


@dataclass
class SamConfig:
    """SAM CLI configuration."""

    executable_path: Optional[str] = None


@dataclass
class RuntimesConfig:
    """Runtime catalog configuration."""

    default: Optional[str] = None
    disabled: List[str] = field(default_factory=list)


@dataclass
class SdkEntry:
    """An SDK registered in the config file."""

    name: str
    type: str
    home_path: str
    version: Optional[str] = None


@dataclass
class WizardConfig:
    """Complete samwizard configuration."""

    project: ProjectConfig = field(default_factory=ProjectConfig)
    sam: SamConfig = field(default_factory=SamConfig)
    runtimes: RuntimesConfig = field(default_factory=RuntimesConfig)
    sdks: List[SdkEntry] = field(default_factory=list)

    # Project root for resolving paths
    project_root: Path = field(default_factory=Path.cwd)

    def resolve_path(self, path_template: str) -> str:
        """Resolve template variables in paths.

        Supports:
            ${PROJECT_ROOT} - absolute path to project root
            ${HOME} - the user's home directory
        """
        result = path_template
        result = result.replace("${PROJECT_ROOT}", str(self.project_root))
        result = result.replace("${HOME}", str(Path.home()))
        return os.path.expanduser(result)

    def sdk_table(self) -> SdkTable:
        """Build an SDK table from the configured SDK entries.

        Entries with an unknown type are skipped.
        """
        table = SdkTable()
        for entry in self.sdks:
            try:
                sdk_type = SdkType(entry.type)
            except ValueError:
                logger.warning("Skipping SDK '%s': unknown type '%s'", entry.name, entry.type)
                continue
            table.add(
                Sdk(
                    name=entry.name,
                    sdk_type=sdk_type,
                    home_path=self.resolve_path(entry.home_path),
                    version=entry.version,
                )
            )
        return table


def find_config_file(project_path: Path) -> Optional[Path]:
    """Find .samwizard.toml in project root.

    Args:
        project_path: Root path of the project

    Returns:
        Path to .samwizard.toml if found, None otherwise
    """
    config_file = Path(project_path) / CONFIG_FILE_NAME
    if config_file.exists():
        return config_file
    return None


def load_config(project_path: Path) -> WizardConfig:
    """Load configuration from .samwizard.toml or use defaults.

    A ``.env`` file in the project root is loaded into the environment
    as well, so ``SAM_CLI_EXE`` can be set per project.

    Args:
        project_path: Root path of the project

    Returns:
        WizardConfig with loaded or default configuration
    """
    project_path = Path(project_path)
    load_dotenv(project_path / ".env")

    config = WizardConfig(project_root=project_path)

    config_file = find_config_file(project_path)
    if not config_file:
        return config

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        # If TOML parsing fails, return defaults
        logger.warning("Ignoring unreadable %s: %s", config_file, e)
        return config

    if "project" in data:
        config.project.name = data["project"].get("name")

    if "sam" in data:
        config.sam.executable_path = data["sam"].get("executable_path")

    if "runtimes" in data:
        runtimes_data = data["runtimes"]
        config.runtimes.default = runtimes_data.get("default")
        disabled = runtimes_data.get("disabled", [])
        if isinstance(disabled, list):
            config.runtimes.disabled = disabled
        else:
            logger.warning("Ignoring [runtimes] disabled: expected a list, got %r", disabled)

    # [[sdks]] is an array of tables
    for sdk_data in data.get("sdks", []):
        if not isinstance(sdk_data, dict):
            continue
        if "name" not in sdk_data or "type" not in sdk_data or "home_path" not in sdk_data:
            logger.warning("Skipping incomplete [[sdks]] entry: %s", sdk_data)
            continue
        config.sdks.append(
            SdkEntry(
                name=sdk_data["name"],
                type=sdk_data["type"],
                home_path=sdk_data["home_path"],
                version=sdk_data.get("version"),
            )
        )

    return config
