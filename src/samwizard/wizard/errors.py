"""Errors raised by wizard steps."""

from ..localization import message


class ConfigurationError(Exception):
    """A required field is missing; the wizard cannot advance.

    Attributes:
        key: Message key of the localized text
        message: Localized, user-facing text
    """

    def __init__(self, key: str, *args: object):
        self.key = key
        self.message = message(key, *args)
        super().__init__(self.message)


class StepStateError(RuntimeError):
    """A step operation was called in the wrong state."""


class ProjectCreationError(Exception):
    """Raised when `sam init` fails."""

    def __init__(self, command: list, returncode: int, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        details = f"\n\n{output.strip()}" if output.strip() else ""
        super().__init__(
            f"`{' '.join(command)}` exited with code {returncode}{details}"
        )
