"""Process-wide provider availability state.

The state is one immutable mapping replaced by assignment on every
transition, so readers always see a consistent snapshot. Concurrent requests
may both observe a provider as available and both downgrade it; the
transition is idempotent, so the worst case is one extra call to a failing
provider.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType


class AvailabilityTracker:
    """Available / unavailable flag per configured provider."""

    def __init__(self, providers: Iterable[str]) -> None:
        self._configured: tuple[str, ...] = tuple(providers)
        self._state: Mapping[str, bool] = self._all_available()

    def _all_available(self) -> Mapping[str, bool]:
        return MappingProxyType({name: True for name in self._configured})

    @property
    def configured(self) -> tuple[str, ...]:
        """Provider names in orchestration order."""
        return self._configured

    def is_available(self, provider: str) -> bool:
        """Unconfigured providers are never available."""
        return self._state.get(provider, False)

    def mark_unavailable(self, provider: str) -> bool:
        """Downgrade a provider until the next reset.

        Returns:
            True if this call changed the state
        """
        if not self._state.get(provider, False):
            return False
        self._state = MappingProxyType({**self._state, provider: False})
        return True

    def reset(self) -> None:
        """Mark every configured provider available again (idempotent)."""
        self._state = self._all_available()

    def snapshot(self) -> dict[str, bool]:
        """Copy of the current state."""
        return dict(self._state)
