"""Data types for SDKs."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SdkType(str, Enum):
    """Kind of toolchain an SDK provides."""

    PYTHON = "python"
    NODEJS = "nodejs"
    JAVA = "java"
    DOTNET = "dotnet"
    GO = "go"


@dataclass(frozen=True)
class Sdk:
    """A registered toolchain installation.

    Attributes:
        name: Unique name shown to the user (e.g., "Python 3.11 (.venv)")
        sdk_type: Toolchain kind
        home_path: Installation directory or interpreter path
        version: Version string (if known)
    """

    name: str
    sdk_type: SdkType
    home_path: str
    version: Optional[str] = None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        version_str = f" v{self.version}" if self.version else ""
        return f"<Sdk {self.name} ({self.sdk_type.value}{version_str}) @ {self.home_path}>"
