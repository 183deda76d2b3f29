"""Process-wide registry of override storage roots.

Roots added here are searched before every engine's own bundled data
directory. The most recently added root has the highest priority, so an
application can layer customized or updated data over what packages ship.

All mutators are advisory: invalid input is ignored rather than raised,
because the list is shared state that many packages may touch.

Python 3.13+.
"""

from __future__ import annotations

import logging
from threading import RLock

from localedata.types import RootPath

__all__ = ["RootRegistry", "default_root_registry"]

logger = logging.getLogger(__name__)


class RootRegistry:
    """Ordered list of global storage roots, most recently added first.

    Thread-safe. get() returns a snapshot, so a caller iterating it is never
    affected by concurrent add/remove calls.

    Example:
        >>> registry = RootRegistry()
        >>> registry.add("/usr/share/localedata")
        >>> registry.add("./overrides")
        >>> registry.get()
        ('./overrides', '/usr/share/localedata')
    """

    __slots__ = ("_lock", "_roots")

    def __init__(self) -> None:
        """Initialize an empty root list."""
        self._roots: list[RootPath] = []
        self._lock = RLock()

    @staticmethod
    def _is_valid(root: object) -> bool:
        return isinstance(root, str) and bool(root)

    def add(self, root: RootPath) -> None:
        """Prepend a root so it overrides every root added before it.

        Non-string or empty input is ignored.
        """
        if not self._is_valid(root):
            logger.debug("Ignoring invalid global root: %r", root)
            return
        with self._lock:
            self._roots.insert(0, root)

    def remove(self, root: RootPath) -> None:
        """Remove the first entry equal to root.

        No-op if the root is absent or the input is invalid.
        """
        if not self._is_valid(root):
            logger.debug("Ignoring invalid global root: %r", root)
            return
        with self._lock:
            try:
                self._roots.remove(root)
            except ValueError:
                logger.debug("Global root not registered: %s", root)

    def clear(self) -> None:
        """Remove every global root."""
        with self._lock:
            self._roots.clear()

    def get(self) -> tuple[RootPath, ...]:
        """Snapshot of the roots, highest priority first."""
        with self._lock:
            return tuple(self._roots)

    def __len__(self) -> int:
        """Number of global roots."""
        with self._lock:
            return len(self._roots)

    def __contains__(self, root: object) -> bool:
        """Check if root is registered."""
        with self._lock:
            return root in self._roots


default_root_registry = RootRegistry()
"""Process-wide root registry used unless an engine is given its own."""
