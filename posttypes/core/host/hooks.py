from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

_log = logging.getLogger("posttypes.hooks")

DEFAULT_PRIORITY = 10


@dataclass(frozen=True)
class HookEntry:
    event: str
    callback: Callable[..., Any]
    priority: int = DEFAULT_PRIORITY
    accepted_args: int = 1
    is_filter: bool = False


class HookRegistry:
    """
    Ordered registration table of lifecycle callbacks.

    Entities write rows into it from ``register()``; the host (or a test)
    dispatches them with ``do_action`` / ``apply_filters``. Rows for an event
    run by ascending priority, then registration order.
    """

    def __init__(self):
        self._entries: Dict[str, List[HookEntry]] = {}

    def add_action(self, event: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY, accepted_args: int = 1) -> None:
        self._add(HookEntry(event, callback, priority, accepted_args, is_filter=False))

    def add_filter(self, event: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY, accepted_args: int = 1) -> None:
        self._add(HookEntry(event, callback, priority, accepted_args, is_filter=True))

    def _add(self, entry: HookEntry) -> None:
        self._entries.setdefault(entry.event, []).append(entry)
        _log.debug("hooks.add event=%s filter=%s priority=%s", entry.event, entry.is_filter, entry.priority)

    def entries(self, event: str) -> List[HookEntry]:
        # sorted() is stable, so registration order breaks priority ties
        return sorted(self._entries.get(event, []), key=lambda e: e.priority)

    def events(self) -> List[str]:
        return list(self._entries.keys())

    def has(self, event: str) -> bool:
        return bool(self._entries.get(event))

    def do_action(self, event: str, *args: Any) -> None:
        for entry in self.entries(event):
            entry.callback(*args[: entry.accepted_args])

    def apply_filters(self, event: str, value: Any, *args: Any) -> Any:
        for entry in self.entries(event):
            params = (value,) + args
            value = entry.callback(*params[: entry.accepted_args])
        return value
