"""Declarative runtime group specifications.

This is DATA, not code. To support a new runtime, just add it here.
"""

from typing import Dict, Tuple

from ..sdk.types import SdkType
from .types import Runtime, RuntimeGroup


def _runtimes(*identifiers: str) -> Tuple[Runtime, ...]:
    return tuple(Runtime(identifier) for identifier in identifiers)


# Declarative runtime groups
# Packaging is the dependency manager `sam init` sets up for the group
RUNTIME_GROUPS: Dict[str, RuntimeGroup] = {
    "python": RuntimeGroup(
        id="python",
        display_name="Python",
        packaging="pip",
        sdk_type=SdkType.PYTHON,
        runtimes=_runtimes("python3.8", "python3.9", "python3.10", "python3.11", "python3.12"),
    ),
    "nodejs": RuntimeGroup(
        id="nodejs",
        display_name="Node.js",
        packaging="npm",
        sdk_type=SdkType.NODEJS,
        runtimes=_runtimes("nodejs14.x", "nodejs16.x", "nodejs18.x", "nodejs20.x"),
    ),
    "java": RuntimeGroup(
        id="java",
        display_name="Java",
        packaging="gradle",
        sdk_type=SdkType.JAVA,
        runtimes=_runtimes("java8", "java8.al2", "java11", "java17", "java21"),
    ),
    "dotnet": RuntimeGroup(
        id="dotnet",
        display_name=".NET",
        packaging="cli-package",
        sdk_type=SdkType.DOTNET,
        runtimes=_runtimes("dotnet6", "dotnet8"),
    ),
    "go": RuntimeGroup(
        id="go",
        display_name="Go",
        packaging="mod",
        sdk_type=SdkType.GO,
        runtimes=_runtimes("go1.x"),
    ),
}
