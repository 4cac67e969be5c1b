"""SAM CLI executable resolution."""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..config.parser import WizardConfig

logger = logging.getLogger(__name__)

SAM_EXECUTABLE_ENV = "SAM_CLI_EXE"

# Try in order
SYSTEM_COMMANDS: List[str] = ["sam", "sam.cmd"]

VERSION_ARGS: List[str] = ["--version"]
VERSION_PATTERN = r"SAM CLI, version (\d+\.\d+\.\d+)"


@dataclass
class ExecutableInfo:
    """Information about a resolved SAM CLI executable.

    Attributes:
        path: Path to the executable
        source: How it was resolved ("explicit_config", "environment", "system")
        version: Version string (if available)
    """

    path: str
    source: str
    version: Optional[str] = None

    def __repr__(self) -> str:
        version_str = f" v{self.version}" if self.version else ""
        return f"<ExecutableInfo sam{version_str} @ {self.path} ({self.source})>"


class InvalidExecutableError(Exception):
    """Raised when a path does not point to an executable file."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid SAM CLI executable '{path}': {reason}")


class SamExecutableLocator:
    """Resolves the SAM CLI executable.

    Priority:
    1. Explicit config from .samwizard.toml
    2. SAM_CLI_EXE environment variable
    3. System PATH
    """

    def __init__(self, config: Optional[WizardConfig] = None):
        self.config = config

    def resolve(self, probe_version: bool = True) -> Optional[ExecutableInfo]:
        """Resolve the executable, or None if it cannot be found.

        Args:
            probe_version: Run `sam --version` on the resolved executable
        """
        info = (
            self._check_explicit_config()
            or self._check_environment()
            or self._system_fallback()
        )
        if info and probe_version:
            info.version = self.get_version(info.path)
        return info

    def resolve_path(self) -> str:
        """Resolved executable path, or an empty string."""
        info = self.resolve(probe_version=False)
        return info.path if info else ""

    def validate_path(self, path: str) -> str:
        """Check that a path points to an executable file.

        Returns:
            The path, with ``~`` expanded

        Raises:
            InvalidExecutableError: If the path is not an executable file
        """
        if not path:
            raise InvalidExecutableError(path, "path is empty")
        expanded = os.path.expanduser(path)
        if not Path(expanded).is_file():
            raise InvalidExecutableError(path, "file does not exist")
        if not os.access(expanded, os.X_OK):
            raise InvalidExecutableError(path, "file is not executable")
        return expanded

    def _check_explicit_config(self) -> Optional[ExecutableInfo]:
        if not self.config or not self.config.sam.executable_path:
            return None

        resolved_path = self.config.resolve_path(self.config.sam.executable_path)
        if not Path(resolved_path).exists():
            logger.warning("Configured SAM CLI executable does not exist: %s", resolved_path)
            return None

        return ExecutableInfo(
            path=resolved_path,
            source="explicit_config",
        )

    def _check_environment(self) -> Optional[ExecutableInfo]:
        env_path = os.getenv(SAM_EXECUTABLE_ENV)
        if not env_path:
            return None

        env_path = os.path.expanduser(env_path)
        if not Path(env_path).exists():
            logger.warning("%s points to a missing file: %s", SAM_EXECUTABLE_ENV, env_path)
            return None

        return ExecutableInfo(
            path=env_path,
            source="environment",
        )

    def _system_fallback(self) -> Optional[ExecutableInfo]:
        for cmd in SYSTEM_COMMANDS:
            path = shutil.which(cmd)
            if path:
                return ExecutableInfo(
                    path=path,
                    source="system",
                )

        logger.info("SAM CLI executable not found on PATH")
        return None

    def get_version(self, executable: str) -> Optional[str]:
        """Get version of a SAM CLI executable."""
        try:
            result = subprocess.run(
                [executable] + VERSION_ARGS,
                capture_output=True,
                text=True,
                timeout=5,
            )
        except (OSError, subprocess.SubprocessError):
            return None

        output = result.stdout + result.stderr
        match = re.search(VERSION_PATTERN, output)
        if match:
            return match.group(1)
        return None
