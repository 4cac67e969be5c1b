"""Registry of known SDKs."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from .types import Sdk, SdkType


class SdkTable:
    """Registered SDKs, in registration order.

    SDKs are registered explicitly (or from ``.samwizard.toml``);
    nothing is discovered on disk.
    """

    def __init__(self, sdks: Iterable[Sdk] = ()):
        self._sdks: Dict[str, Sdk] = {}
        for sdk in sdks:
            self.add(sdk)

    def add(self, sdk: Sdk) -> None:
        """Register an SDK.

        Raises:
            ValueError: If an SDK with the same name is already registered
        """
        if sdk.name in self._sdks:
            raise ValueError(f"SDK '{sdk.name}' is already registered")
        self._sdks[sdk.name] = sdk

    def remove(self, name: str) -> None:
        self._sdks.pop(name, None)

    def find(self, name: str) -> Optional[Sdk]:
        return self._sdks.get(name)

    def all(self) -> List[Sdk]:
        return list(self._sdks.values())

    def by_type(self, predicate: Callable[[SdkType], bool]) -> List[Sdk]:
        """SDKs whose type satisfies the predicate."""
        return [sdk for sdk in self._sdks.values() if predicate(sdk.sdk_type)]

    def __len__(self) -> int:
        return len(self._sdks)

    def __contains__(self, name: object) -> bool:
        return name in self._sdks
