"""Runs `sam init` once the wizard has committed its choices."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from ..localization import message
from .context import WizardContext
from .errors import ProjectCreationError, StepStateError

logger = logging.getLogger(__name__)


class SamInitRunner:
    """Creates the project described by a committed wizard context."""

    def __init__(self, context: WizardContext, timeout: Optional[float] = 300):
        self.context = context
        self.timeout = timeout

    def run(self) -> Path:
        """Run `sam init` and return the created project directory.

        Raises:
            StepStateError: If no builder has been committed to the context
            ProjectCreationError: If `sam init` cannot run or fails
        """
        builder = self.context.project_builder
        if builder is None:
            raise StepStateError("No project builder committed to the wizard context")

        output_dir = Path(self.context.project_dir)
        command = builder.init_command(self.context.project_name, output_dir)
        logger.info("Running %s", " ".join(command))

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ProjectCreationError(command, -1, message("sam.init.execution_error", e)) from e

        if result.returncode != 0:
            raise ProjectCreationError(command, result.returncode, result.stdout + result.stderr)

        return output_dir / self.context.project_name
