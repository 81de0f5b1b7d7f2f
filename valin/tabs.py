"""Tabs and the panels that hold them."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

_tab_ids = itertools.count()
_focus_ids = itertools.count(1)


@dataclass(frozen=True, order=True)
class TabId:
    """Identifier of an open tab."""

    value: int

    def __str__(self) -> str:
        return str(self.value)


def new_tab_id() -> TabId:
    """Return a tab identifier that has not been handed out before."""
    return TabId(next(_tab_ids))


def _new_focus_id() -> int:
    return next(_focus_ids)


@dataclass(frozen=True)
class PanelTabData:
    """What a panel needs to know to show a tab."""

    edited: bool
    title: str
    content_id: str
    id: TabId
    focus_id: int


class PanelTab(ABC):
    """A tab that can be placed in a panel."""

    _closed: bool = False
    _settings: Any = None

    def on_close(self, app_state: Any) -> None:
        """Called when the tab is removed from the application state."""
        self._closed = True

    def on_settings_changed(self, settings: Any) -> None:
        """Called when the application settings change."""
        self._settings = settings

    @abstractmethod
    def get_data(self) -> PanelTabData:
        """Describe the tab."""


@dataclass
class Panel:
    """A column of tabs with at most one active tab."""

    active_tab: TabId | None = None
    tabs: list[TabId] = field(default_factory=list)

    def set_active_tab(self, tab_id: TabId) -> None:
        self.active_tab = tab_id