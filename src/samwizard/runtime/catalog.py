"""Runtime catalog: the runtimes a new SAM project can target."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..sdk.types import SdkType
from .specs import RUNTIME_GROUPS
from .types import Runtime, RuntimeGroup

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"(\d+)")


class UnknownRuntimeError(ValueError):
    """Raised when a runtime is not part of the catalog."""

    def __init__(self, identifier: str, supported: Iterable[str]):
        self.identifier = identifier
        super().__init__(
            f"Runtime '{identifier}' not supported. "
            f"Supported runtimes: {', '.join(supported)}"
        )


def runtime_sort_key(runtime: Union[Runtime, str]) -> Tuple[Union[str, int], ...]:
    """Version-aware sort key for runtime identifiers.

    Digit runs compare numerically, so ``python3.9`` sorts before
    ``python3.10``. Everything else compares lexicographically.

    Examples:
        >>> sorted(["python3.10", "python3.9", "java11"], key=runtime_sort_key)
        ['java11', 'python3.9', 'python3.10']
    """
    identifier = str(runtime)
    # re.split with a capture group alternates text, digits, text, ...
    parts = _DIGITS.split(identifier)
    return tuple(int(part) if index % 2 else part for index, part in enumerate(parts))


class RuntimeCatalog:
    """Supplies the supported runtimes, grouped by packaging strategy."""

    def __init__(
        self,
        groups: Optional[Sequence[RuntimeGroup]] = None,
        disabled: Iterable[str] = (),
    ):
        """Initialize catalog.

        Args:
            groups: Runtime groups to offer (defaults to RUNTIME_GROUPS)
            disabled: Runtime identifiers to hide from the catalog
        """
        self._groups: List[RuntimeGroup] = list(
            groups if groups is not None else RUNTIME_GROUPS.values()
        )
        self._disabled = frozenset(disabled)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Sequence[str]],
        sdk_types: Optional[Mapping[str, SdkType]] = None,
    ) -> "RuntimeCatalog":
        """Build a catalog from ``group -> runtime identifiers``.

        Groups that match a known group id inherit its display name,
        packaging and SDK type; ``sdk_types`` overrides the SDK type.
        """
        sdk_types = sdk_types or {}
        groups = []
        for group_id, identifiers in mapping.items():
            known = RUNTIME_GROUPS.get(group_id)
            sdk_type = sdk_types.get(group_id) or (known.sdk_type if known else None)
            if sdk_type is None:
                raise ValueError(f"No SDK type known for runtime group '{group_id}'")
            groups.append(
                RuntimeGroup(
                    id=group_id,
                    display_name=known.display_name if known else group_id,
                    packaging=known.packaging if known else "unknown",
                    sdk_type=sdk_type,
                    runtimes=tuple(Runtime(identifier) for identifier in identifiers),
                )
            )
        return cls(groups)

    def supported_runtime_groups(self) -> List[RuntimeGroup]:
        """Get runtime groups with disabled runtimes removed.

        Groups left without any runtime are dropped.
        """
        groups = []
        for group in self._groups:
            runtimes = tuple(r for r in group.runtimes if r.identifier not in self._disabled)
            if not runtimes:
                continue
            if runtimes != group.runtimes:
                group = RuntimeGroup(
                    id=group.id,
                    display_name=group.display_name,
                    packaging=group.packaging,
                    sdk_type=group.sdk_type,
                    runtimes=runtimes,
                )
            groups.append(group)
        return groups

    def runtimes(self) -> List[Runtime]:
        """All supported runtimes flattened into one sorted list."""
        flattened = {
            runtime
            for group in self.supported_runtime_groups()
            for runtime in group.runtimes
        }
        return sorted(flattened, key=runtime_sort_key)

    def get(self, identifier: Union[Runtime, str]) -> Runtime:
        """Parse an identifier into a supported runtime.

        Raises:
            UnknownRuntimeError: If the runtime is not supported
        """
        runtime = identifier if isinstance(identifier, Runtime) else Runtime(identifier)
        self.group_for(runtime)
        return runtime

    def group_for(self, runtime: Union[Runtime, str]) -> RuntimeGroup:
        """Get the group a runtime belongs to.

        Raises:
            UnknownRuntimeError: If the runtime is not supported
        """
        runtime = runtime if isinstance(runtime, Runtime) else Runtime(runtime)
        for group in self.supported_runtime_groups():
            if runtime in group:
                return group
        raise UnknownRuntimeError(
            runtime.identifier, [r.identifier for r in self.runtimes()]
        )

    def sdk_type_for(self, runtime: Union[Runtime, str]) -> SdkType:
        """SDK type compatible with a runtime."""
        return self.group_for(runtime).sdk_type
