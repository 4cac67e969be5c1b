"""Configuration management for samwizard."""

from .parser import (
    CONFIG_FILE_NAME,
    RuntimesConfig,
    SamConfig,
    SdkEntry,
    WizardConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "RuntimesConfig",
    "SamConfig",
    "SdkEntry",
    "WizardConfig",
    "find_config_file",
    "load_config",
]
