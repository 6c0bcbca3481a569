"""Asset and asset-counter repositories."""

from equipment_registry.domain.models import Asset, RegistryCounter
from equipment_registry.repositories.base import BaseRepository


class AssetRepository(BaseRepository[Asset]):
    """Data access for Asset records."""

    def __init__(self):
        super().__init__(Asset)


class CounterRepository(BaseRepository[RegistryCounter]):
    """Data access for named monotonic counters."""

    def __init__(self):
        super().__init__(RegistryCounter)

    def current(self, name: str) -> int:
        """Return the counter value, 0 if it was never advanced."""
        counter = self.get(name)
        return counter.value if counter else 0

    def advance(self, name: str) -> int:
        """Increment the counter and return its new value."""
        return self.put(name, name=name, value=self.current(name) + 1).value
