"""Read-through cache for meal and workout packages."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class PackageCache(Protocol):
    """Cache of catalog packages keyed by package kind and id."""

    def lookup(self, kind: str, package_id: str) -> object | None:
        """Return the cached package, or None when absent or stale."""

    def store(self, kind: str, package_id: str, package: object) -> None:
        """Remember a package fetched from storage."""


@dataclass
class TTLPackageCache(PackageCache):
    """Process-local cache where every package lives for ``ttl_seconds``.

    Packages are seeded reference data, so a stale hit is at most
    ``ttl_seconds`` old. A non-positive TTL turns caching off.
    """

    ttl_seconds: int = 300
    clock: Callable[[], float] = time.monotonic
    _packages: dict[tuple[str, str], tuple[float, object]] = field(
        default_factory=dict, init=False, repr=False
    )

    def lookup(self, kind: str, package_id: str) -> object | None:
        cached = self._packages.get((kind, package_id))
        if cached is None:
            return None
        expires_at, package = cached
        if self.clock() >= expires_at:
            self._packages.pop((kind, package_id), None)
            return None
        return package

    def store(self, kind: str, package_id: str, package: object) -> None:
        if self.ttl_seconds <= 0:
            return
        self._packages[(kind, package_id)] = (self.clock() + self.ttl_seconds, package)

    def __len__(self) -> int:
        return len(self._packages)
