"""Data types for the runtime catalog."""

from dataclasses import dataclass
from typing import Tuple

from ..sdk.types import SdkType


@dataclass(frozen=True)
class Runtime:
    """A Lambda execution environment, e.g. ``python3.9`` or ``java11``."""

    identifier: str

    def __str__(self) -> str:
        return self.identifier

    def __repr__(self) -> str:
        return f"<Runtime {self.identifier}>"


@dataclass(frozen=True)
class RuntimeGroup:
    """Runtimes that share a packaging strategy.

    Attributes:
        id: Group identifier (e.g., "python")
        display_name: Human readable name
        packaging: Dependency manager used to package functions of this group
        sdk_type: SDK type a project of this group is developed with
        runtimes: Runtimes in declaration order
    """

    id: str
    display_name: str
    packaging: str
    sdk_type: SdkType
    runtimes: Tuple[Runtime, ...]

    def __contains__(self, runtime: object) -> bool:
        return runtime in self.runtimes
