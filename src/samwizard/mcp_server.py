"""MCP Server for the SAM application wizard.

Exposes the runtime selection step as MCP tools using FastMCP, so an agent
or editor can drive the wizard: pick a runtime and SDK, point it at the SAM
CLI, validate and commit.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from mcp.server import FastMCP

from .config import load_config
from .executable import InvalidExecutableError, SamExecutableLocator
from .runtime import RuntimeCatalog, UnknownRuntimeError
from .wizard import (
    ConfigurationError,
    ProjectCreationError,
    SamInitProjectBuilder,
    SamInitRunner,
    SamInitRuntimeSelectionStep,
    StepStateError,
    WizardContext,
)

# Global wizard session and project path
_step: Optional[SamInitRuntimeSelectionStep] = None
_project_path: Optional[str] = None

mcp = FastMCP("SAM Application Wizard")


def set_project_path(path: str) -> None:
    """Set the project path and start a fresh wizard session."""
    global _project_path, _step
    _project_path = str(Path(path).resolve())
    _step = None


def get_project_path() -> str:
    """Get the current project path."""
    return _project_path or os.getenv("SAMWIZARD_PROJECT_PATH") or os.getcwd()


def create_step(project_path: str) -> SamInitRuntimeSelectionStep:
    """Build a runtime selection step from the project's configuration."""
    project_root = Path(project_path)
    config = load_config(project_root)

    catalog = RuntimeCatalog(disabled=config.runtimes.disabled)
    context = WizardContext(
        project_name=config.project.name or project_root.name,
        project_dir=project_root,
        sdk_table=config.sdk_table(),
    )
    return SamInitRuntimeSelectionStep(
        SamInitProjectBuilder(catalog),
        context,
        catalog=catalog,
        locator=SamExecutableLocator(config),
        default_runtime=config.runtimes.default,
    )


def get_step() -> SamInitRuntimeSelectionStep:
    """Get or create the wizard step of the current session."""
    global _step
    if _step is None:
        _step = create_step(get_project_path())
    return _step


def _state(step: SamInitRuntimeSelectionStep) -> Dict[str, Any]:
    sdk = step.sdk_settings_step.get_selected_sdk()
    builder = step.context.project_builder
    return {
        "state": step.state.value,
        "runtime": str(step.get_selected_runtime()) if step.get_selected_runtime() else None,
        "sdk": sdk.name if sdk else None,
        "compatible_sdks": [s.name for s in step.sdk_settings_step.sdks],
        "sam_executable": step.sam_executable_field.get_text(),
        "committed": None if builder is None else {
            "runtime": str(builder.runtime) if builder.runtime else None,
            "sdk": builder.selected_sdk.name if builder.selected_sdk else None,
            "sam_executable": builder.sam_executable,
        },
        "presentation": step.get_presentation().to_dict(),
    }


@mcp.tool()
async def list_runtimes() -> Dict[str, Any]:
    """List the runtimes a new SAM application can target.

    Returns:
        - runtimes: All runtimes, version-aware sorted
        - groups: Runtimes per group, with packaging and SDK type
    """
    catalog = get_step().runtime_selector.catalog
    return {
        "runtimes": [str(runtime) for runtime in catalog.runtimes()],
        "groups": {
            group.id: {
                "display_name": group.display_name,
                "packaging": group.packaging,
                "sdk_type": group.sdk_type.value,
                "runtimes": [str(runtime) for runtime in group.runtimes],
            }
            for group in catalog.supported_runtime_groups()
        },
    }


@mcp.tool()
async def get_wizard_state() -> Dict[str, Any]:
    """Show the current selections and the step's presentation tree."""
    return _state(get_step())


@mcp.tool()
async def select_runtime(runtime: str) -> Dict[str, Any]:
    """Select the runtime; the compatible SDK list is rebuilt.

    Args:
        runtime: Runtime identifier, e.g. "python3.9"
    """
    step = get_step()
    try:
        step.select_runtime(runtime)
    except UnknownRuntimeError as e:
        return {"error": str(e)}
    return _state(step)


@mcp.tool()
async def select_sdk(sdk_name: str) -> Dict[str, Any]:
    """Select one of the SDKs compatible with the current runtime.

    Args:
        sdk_name: Name of a registered SDK
    """
    step = get_step()
    try:
        step.select_sdk(sdk_name)
    except ValueError as e:
        return {"error": str(e)}
    return _state(step)


@mcp.tool()
async def set_sam_executable(path: str, check: bool = True) -> Dict[str, Any]:
    """Set the SAM CLI executable path.

    Args:
        path: Path to the `sam` executable
        check: Verify the path is an executable file (the "Edit" action)
    """
    step = get_step()
    field = step.sam_executable_field
    if check:
        try:
            step.edit_sam_executable_button.click(path)
        except InvalidExecutableError as e:
            return {"error": str(e)}
    else:
        field.set_text(path)
    return _state(step)


@mcp.tool()
async def validate_step() -> Dict[str, Any]:
    """Validate the step; returns the localized error when it cannot advance."""
    step = get_step()
    try:
        step.validate()
    except ConfigurationError as e:
        return {"valid": False, "error": e.message, "key": e.key}
    return {"valid": True}


@mcp.tool()
async def commit_step(create_project: bool = False) -> Dict[str, Any]:
    """Validate and commit the selections into the project configuration.

    Args:
        create_project: Also run `sam init` with the committed choices
    """
    step = get_step()
    try:
        step.validate()
        step.commit_to_configuration()
    except ConfigurationError as e:
        return {"committed": False, "error": e.message, "key": e.key}
    except StepStateError as e:
        return {"committed": False, "error": str(e)}

    result = _state(step)
    if create_project:
        try:
            result["project_dir"] = str(SamInitRunner(step.context).run())
        except ProjectCreationError as e:
            result["error"] = str(e)
    return result


@mcp.tool()
async def reset_step() -> Dict[str, Any]:
    """Discard the session and start the step again from configuration."""
    set_project_path(get_project_path())
    return _state(get_step())


def main():
    """Run the MCP server.

    The project path can be set via:
    1. First command line argument
    2. SAMWIZARD_PROJECT_PATH environment variable
    3. Current working directory (default)
    """
    if len(sys.argv) > 1 and not sys.argv[1].startswith("-"):
        set_project_path(sys.argv[1])
        # Remove the argument so FastMCP doesn't see it
        sys.argv = [sys.argv[0]] + sys.argv[2:]

    project_path = get_project_path()

    # stdout is used for MCP protocol
    print("🚀 Starting SAM Application Wizard MCP Server", file=sys.stderr)
    print(f"📂 Path: {project_path}", file=sys.stderr)
    print("", file=sys.stderr)

    mcp.run()


if __name__ == "__main__":
    main()
