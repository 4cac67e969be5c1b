"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest

from samwizard.executable import SAM_EXECUTABLE_ENV, SamExecutableLocator
from samwizard.runtime import RuntimeCatalog
from samwizard.sdk import Sdk, SdkTable, SdkType
from samwizard.wizard import SamInitProjectBuilder, SamInitRuntimeSelectionStep, WizardContext

PYTHON_SDK = Sdk("Python 3.9", SdkType.PYTHON, "/usr/bin/python3.9", "3.9.18")
PYTHON_VENV_SDK = Sdk("Python 3.11 (.venv)", SdkType.PYTHON, "/project/.venv/bin/python", "3.11.6")
NODE_SDK = Sdk("Node.js 14", SdkType.NODEJS, "/usr/bin/node", "14.21.3")
JAVA_SDK = Sdk("Corretto 11", SdkType.JAVA, "/usr/lib/jvm/java-11", "11.0.21")


@pytest.fixture(autouse=True)
def no_sam_env(monkeypatch):
    """Keep SAM_CLI_EXE from the developer's environment out of tests."""
    monkeypatch.delenv(SAM_EXECUTABLE_ENV, raising=False)


@pytest.fixture
def sdk_table() -> SdkTable:
    return SdkTable([PYTHON_SDK, PYTHON_VENV_SDK, NODE_SDK, JAVA_SDK])


@pytest.fixture
def catalog() -> RuntimeCatalog:
    """Catalog with the three runtimes used throughout the scenarios."""
    return RuntimeCatalog.from_mapping(
        {
            "python": ["python3.9"],
            "nodejs": ["nodejs14.x"],
            "java": ["java11"],
        }
    )


@pytest.fixture
def context(sdk_table) -> WizardContext:
    return WizardContext(project_name="hello", project_dir=Path("/tmp/projects"), sdk_table=sdk_table)


@pytest.fixture
def builder(catalog) -> SamInitProjectBuilder:
    return SamInitProjectBuilder(catalog)


@pytest.fixture
def locator() -> MagicMock:
    """Locator that finds nothing and accepts any path on edit."""
    mock = MagicMock(spec=SamExecutableLocator)
    mock.resolve_path.return_value = ""
    mock.validate_path.side_effect = lambda path: path
    return mock


@pytest.fixture
def step(builder, context, locator) -> SamInitRuntimeSelectionStep:
    return SamInitRuntimeSelectionStep(builder, context, locator=locator)


@pytest.fixture
def temp_project_dir() -> Generator[Path, None, None]:
    """Create an empty temporary project directory."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)
