"""Cache protocol for the repository and service layers."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends (in-memory or Redis)."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def connect(self) -> None:
        """Prepare the backend. Called on app startup."""
        ...

    async def disconnect(self) -> None:
        """Release the backend. Called on app shutdown."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL in seconds."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove key. False only if the backend could not be reached; a missing key counts as removed."""
        ...
