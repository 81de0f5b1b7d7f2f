"""Editor commands and the selection logic of the commander."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class CommandRunContext:
    """Options a command may change while it runs."""

    # Only used by the commander.
    focus_previous_view: bool = True


class EditorCommand(ABC):
    """A named action that can be run from the commander."""

    def is_visible(self) -> bool:
        return True

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against the command text."""
        return query.lower() in self.text().lower()

    @abstractmethod
    def id(self) -> str:
        """Unique identifier of the command."""

    @abstractmethod
    def text(self) -> str:
        """Human-readable name of the command."""

    @abstractmethod
    def run(self, ctx: CommandRunContext) -> None:
        """Execute the command."""


class EditorCommands:
    """Registry of commands by identifier."""

    def __init__(self) -> None:
        self._commands: dict[str, EditorCommand] = {}

    def register(self, command: EditorCommand) -> None:
        self._commands[command.id()] = command

    def trigger(self, command_id: str) -> None:
        """Run the command with the given id, if it is registered."""
        command = self._commands.get(command_id)
        if command is not None:
            command.run(CommandRunContext())

    def filter(self, query: str) -> list[str]:
        """Ids of the visible commands that match the query."""
        return [
            command_id
            for command_id, command in self._commands.items()
            if command.is_visible() and (not query or command.matches(query))
        ]

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._commands

    def __getitem__(self, command_id: str) -> EditorCommand:
        return self._commands[command_id]

    def __iter__(self):
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)


def next_selection(selected: int, count: int) -> int:
    """Move the selection down, wrapping to the top."""
    if count <= 0:
        return selected
    return selected + 1 if selected < count - 1 else 0


def previous_selection(selected: int, count: int) -> int:
    """Move the selection up, wrapping to the bottom."""
    if selected > 0 and count > 0:
        return selected - 1
    return max(count - 1, 0)


def options_height(count: int) -> int:
    """Height of the commander's option list for a number of options."""
    return max(max(count, 1) * 30, 175)