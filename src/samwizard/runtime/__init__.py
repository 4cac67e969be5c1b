"""Lambda runtime catalog (Python, Node.js, Java, etc.)."""

from .catalog import RuntimeCatalog, UnknownRuntimeError, runtime_sort_key
from .specs import RUNTIME_GROUPS
from .types import Runtime, RuntimeGroup

__all__ = [
    "RuntimeCatalog",
    "UnknownRuntimeError",
    "runtime_sort_key",
    "Runtime",
    "RuntimeGroup",
    "RUNTIME_GROUPS",
]
