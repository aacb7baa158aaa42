"""Named extension points for filters and actions."""

import logging
from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Dict, List

from ogmeta.constants import DEFAULT_PRIORITY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registration:
    """A callback registered at an extension point."""

    callback: Callable[..., Any]
    priority: int
    sequence: int


class FilterRegistry:
    """Ordered callback registrations at named extension points.

    Filters receive the in-progress value plus context arguments and return
    the value to pass on. Actions receive the arguments and return nothing.
    Callbacks run by ascending priority, then registration order. Errors
    raised by a callback propagate to the caller.
    """

    def __init__(self):
        self._filters: Dict[str, List[Registration]] = {}
        self._actions: Dict[str, List[Registration]] = {}
        self._sequence = count()

    def add_filter(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register a filter callback under ``name``."""
        self._register(self._filters, name, callback, priority)

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        """Remove every registration of ``callback`` under ``name``.

        Returns:
            True if anything was removed
        """
        return self._unregister(self._filters, name, callback)

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Thread ``value`` through the callbacks registered under ``name``.

        Args:
            name: Extension point name
            value: Value to filter
            *args: Extra context passed to every callback

        Returns:
            The value returned by the last callback, or ``value`` untouched
            when nothing is registered
        """
        for registration in self._sorted(self._filters, name):
            value = registration.callback(value, *args)
        return value

    def add_action(
        self,
        name: str,
        callback: Callable[..., None],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register an action callback under ``name``."""
        self._register(self._actions, name, callback, priority)

    def remove_action(self, name: str, callback: Callable[..., None]) -> bool:
        return self._unregister(self._actions, name, callback)

    def do_action(self, name: str, *args: Any) -> None:
        """Run every action registered under ``name``."""
        for registration in self._sorted(self._actions, name):
            registration.callback(*args)

    def _register(self, table, name, callback, priority) -> None:
        if not callable(callback):
            raise TypeError(f"callback for '{name}' must be callable, got {type(callback)}")

        table.setdefault(name, []).append(
            Registration(callback, int(priority), next(self._sequence))
        )
        logger.debug(f"Registered {getattr(callback, '__name__', callback)!r} on '{name}'")

    @staticmethod
    def _unregister(table, name, callback) -> bool:
        registrations = table.get(name, [])
        kept = [r for r in registrations if r.callback != callback]
        removed = len(kept) != len(registrations)
        if kept:
            table[name] = kept
        else:
            table.pop(name, None)
        return removed

    @staticmethod
    def _sorted(table, name) -> List[Registration]:
        return sorted(table.get(name, []), key=lambda r: (r.priority, r.sequence))
