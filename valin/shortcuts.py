"""Keyboard shortcut dispatch."""

from __future__ import annotations

from typing import Any, Callable

ShortcutHandler = Callable[[Any, Any, Any], bool]


class KeyboardShortcuts:
    """Handlers tried in registration order until one claims the key."""

    def __init__(self) -> None:
        self._handlers: list[ShortcutHandler] = []

    def register(self, handler: ShortcutHandler) -> ShortcutHandler:
        self._handlers.append(handler)
        return handler

    def run(self, data: Any, editor_commands: Any, app_state: Any) -> bool:
        """Offer the key to each handler; return whether one handled it."""
        return any(
            handler(data, editor_commands, app_state) for handler in self._handlers
        )