"""The file explorer tree and its keyboard-driven state."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

from valin.tabs import _new_focus_id


@dataclass
class ExplorerItem:
    """A file or folder in the explorer tree.

    A folder whose ``children`` is ``None`` is closed; a list means it is
    opened and shows those entries.
    """

    path: Path
    is_file: bool = False
    children: list[ExplorerItem] | None = None

    @property
    def is_opened(self) -> bool:
        return not self.is_file and self.children is not None

    def set_folder_state(
        self, folder_path: Path, children: list[ExplorerItem] | None
    ) -> None:
        """Open (with ``children``) or close (``None``) the folder at ``folder_path``."""
        if self.is_file:
            return
        folder_path = Path(folder_path)
        if self.path == folder_path:
            self.children = None if children is None else list(children)
        elif folder_path.is_relative_to(self.path) and self.children is not None:
            for item in self.children:
                item.set_folder_state(folder_path, children)

    def flat(self, depth: int, root_path: Path) -> list[FlatItem]:
        """This item and every visible descendant, in display order."""
        items = [
            FlatItem(
                path=self.path,
                is_opened=self.is_opened,
                is_file=self.is_file,
                depth=depth,
                root_path=Path(root_path),
            )
        ]
        if self.is_opened:
            for child in self.children:
                items.extend(child.flat(depth + 1, root_path))
        return items


class TreeTaskKind(Enum):
    OPEN_FOLDER = auto()
    CLOSE_FOLDER = auto()
    OPEN_FILE = auto()


@dataclass(frozen=True)
class TreeTask:
    """Something to do with an entry of the explorer tree."""

    kind: TreeTaskKind
    path: Path
    root_path: Path
    index: int | None = None


@dataclass(frozen=True)
class FlatItem:
    """One visible row of the explorer."""

    path: Path
    is_opened: bool
    is_file: bool
    depth: int
    root_path: Path

    def task(self) -> TreeTask:
        """The task that activating this row performs."""
        if self.is_file:
            kind = TreeTaskKind.OPEN_FILE
        elif self.is_opened:
            kind = TreeTaskKind.CLOSE_FOLDER
        else:
            kind = TreeTaskKind.OPEN_FOLDER
        return TreeTask(kind, self.path, self.root_path)


def read_folder_as_items(directory: str | os.PathLike[str]) -> list[ExplorerItem]:
    """List a directory: folders first, then files, each in listing order."""
    folders: list[ExplorerItem] = []
    files: list[ExplorerItem] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            path = Path(entry.path)
            if entry.is_file(follow_symlinks=False):
                files.append(ExplorerItem(path, is_file=True))
            else:
                folders.append(ExplorerItem(path))
    return folders + files


@dataclass
class FileExplorerState:
    """The open root folders and the focused row of the explorer."""

    folders: list[ExplorerItem] = field(default_factory=list)
    focus_id: int = field(default_factory=_new_focus_id)
    focused_index: int = 0

    def open_folder(self, item: ExplorerItem) -> None:
        self.folders.append(item)

    def flat_items(self) -> list[FlatItem]:
        return [
            flat_item
            for tree in self.folders
            for flat_item in tree.flat(0, tree.path)
        ]

    def folder(self, root_path: Path) -> ExplorerItem:
        """The open root folder at ``root_path``."""
        root_path = Path(root_path)
        for tree in self.folders:
            if tree.path == root_path:
                return tree
        raise KeyError(root_path)

    def apply(self, task: TreeTask) -> Path | None:
        """Carry out a task; return the path of a file to open, if any."""
        to_open: Path | None = None
        if task.kind is TreeTaskKind.OPEN_FOLDER:
            try:
                items = read_folder_as_items(task.path)
            except OSError:
                items = None
            if items is not None:
                self.folder(task.root_path).set_folder_state(task.path, items)
        elif task.kind is TreeTaskKind.CLOSE_FOLDER:
            self.folder(task.root_path).set_folder_state(task.path, None)
        else:
            to_open = task.path
        if task.index is not None:
            self.focused_index = task.index
        return to_open

    def move_down(self) -> None:
        if self.focused_index < len(self.flat_items()) - 1:
            self.focused_index += 1

    def move_up(self) -> None:
        if self.focused_index > 0:
            self.focused_index -= 1

    def focused_item(self) -> FlatItem | None:
        items = self.flat_items()
        if 0 <= self.focused_index < len(items):
            return items[self.focused_index]
        return None