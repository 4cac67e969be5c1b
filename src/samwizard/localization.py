"""Localized user-facing messages."""

from typing import Dict

MESSAGES: Dict[str, str] = {
    "lambda.run_configuration.sam.not_specified": "SAM CLI executable not specified",
    "lambda.sam.executable": "SAM CLI executable:",
    "lambda.sam.executable.edit": "Edit",
    "sam.init.runtime": "Runtime:",
    "sam.init.project_sdk": "Project SDK:",
    "sam.init.sdk.none": "No compatible SDK registered",
    "sam.init.not_validated": "Step must be validated before committing",
    "sam.init.execution_error": "Could not execute `sam init`: {0}",
}


def message(key: str, *args: object) -> str:
    """Look up a localized message; unknown keys return the key itself."""
    text = MESSAGES.get(key, key)
    if args:
        text = text.format(*args)
    return text
