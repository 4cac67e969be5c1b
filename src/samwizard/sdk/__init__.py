"""SDK registry and the SDK settings sub-step."""

from .settings import SdkSettingsStep
from .table import SdkTable
from .types import Sdk, SdkType

__all__ = [
    "SdkSettingsStep",
    "SdkTable",
    "Sdk",
    "SdkType",
]
