"""Wizard steps for creating a new SAM application."""

from .builder import SamInitProjectBuilder
from .context import WizardContext
from .errors import ConfigurationError, ProjectCreationError, StepStateError
from .runner import SamInitRunner
from .selector import RuntimeSelector
from .step import SAM_NOT_SPECIFIED, SamInitRuntimeSelectionStep, StepState

__all__ = [
    "SamInitProjectBuilder",
    "WizardContext",
    "ConfigurationError",
    "ProjectCreationError",
    "StepStateError",
    "SamInitRunner",
    "RuntimeSelector",
    "SAM_NOT_SPECIFIED",
    "SamInitRuntimeSelectionStep",
    "StepState",
]
