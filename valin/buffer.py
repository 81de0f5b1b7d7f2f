"""The text buffer behind an editor tab, with undo history and UTF-16 indexing."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

_LINE_BREAK = re.compile(r"\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def _utf16_to_char(text: str, utf16_idx: int) -> int:
    """Char index of the character holding the given UTF-16 code unit."""
    if utf16_idx < 0:
        raise IndexError(f"UTF-16 index {utf16_idx} is negative")
    if text.isascii() or _utf16_len(text) == len(text):
        if utf16_idx > len(text):
            raise IndexError(f"UTF-16 index {utf16_idx} is out of bounds")
        return utf16_idx
    units = 0
    for char_idx, char in enumerate(text):
        width = 2 if ord(char) > 0xFFFF else 1
        if units + width > utf16_idx:
            return char_idx
        units += width
    if units == utf16_idx:
        return len(text)
    raise IndexError(f"UTF-16 index {utf16_idx} is out of bounds")


def _char_to_utf16(text: str, char_idx: int) -> int:
    if not 0 <= char_idx <= len(text):
        raise IndexError(f"char index {char_idx} is out of bounds")
    return _utf16_len(text[:char_idx])


def _insert(text: str, utf16_idx: int, inserted: str) -> str:
    at = _utf16_to_char(text, utf16_idx)
    return text[:at] + inserted + text[at:]


def _remove(text: str, utf16_start: int, utf16_end: int) -> str:
    start = _utf16_to_char(text, utf16_start)
    end = _utf16_to_char(text, utf16_end)
    return text[:start] + text[end:]


@dataclass(frozen=True)
class EditorType:
    """Where the edited text lives: in memory under a title, or in a file."""

    path: Path | None = None
    root_path: Path | None = None
    memory_title: str | None = None

    def __post_init__(self) -> None:
        is_fs = self.path is not None
        if is_fs == (self.memory_title is not None):
            raise ValueError("an editor is either backed by a file or held in memory")
        if is_fs:
            if self.root_path is None:
                raise ValueError("a file editor needs a root path")
            object.__setattr__(self, "path", Path(self.path))
            object.__setattr__(self, "root_path", Path(self.root_path))

    @classmethod
    def memory(cls, title: str) -> EditorType:
        return cls(memory_title=title)

    @classmethod
    def fs(cls, path: str | Path, root_path: str | Path) -> EditorType:
        return cls(path=Path(path), root_path=Path(root_path))

    def _file_name(self) -> str:
        name = self.path.name
        if not name:
            raise ValueError(f"path {self.path} has no file name")
        return name

    def content_id(self) -> str | None:
        """Identifier of the content shown, shared by tabs showing the same file."""
        if self.path is None:
            return None
        return self._file_name()

    def title(self) -> str:
        if self.path is None:
            return self.memory_title
        return self._file_name()

    def paths(self) -> tuple[Path, Path] | None:
        """The file path and the root folder it was opened from."""
        if self.path is None:
            return None
        return self.path, self.root_path


@dataclass(frozen=True)
class HistoryChange:
    """One edit: text inserted at, or removed from, a UTF-16 position."""

    idx: int
    text: str
    length: int
    is_removal: bool = False


@dataclass
class EditorHistory:
    """Linear undo/redo history of edits."""

    changes: list[HistoryChange] = field(default_factory=list)
    current_change: int = 0

    def push_change(self, change: HistoryChange) -> None:
        if self.can_redo():
            del self.changes[self.current_change :]
        self.changes.append(change)
        self.current_change = len(self.changes)

    def can_undo(self) -> bool:
        return self.current_change > 0

    def can_redo(self) -> bool:
        return self.current_change < len(self.changes)

    def undo(self, text: str) -> tuple[str, int] | None:
        """Revert the last change; return the new text and cursor position."""
        if not self.can_undo():
            return None
        change = self.changes[self.current_change - 1]
        self.current_change -= 1
        if change.is_removal:
            return _insert(text, change.idx, change.text), change.idx + change.length
        return _remove(text, change.idx, change.idx + change.length), change.idx

    def redo(self, text: str) -> tuple[str, int] | None:
        """Reapply the next change; return the new text and cursor position."""
        if not self.can_redo():
            return None
        change = self.changes[self.current_change]
        self.current_change += 1
        if change.is_removal:
            return _remove(text, change.idx, change.idx + change.length), change.idx
        return _insert(text, change.idx, change.text), change.idx + change.length


@dataclass
class EditorData:
    """Text, cursor, selection and history of one editor.

    Positions given to and returned by the editing methods are UTF-16 code
    units unless a name says ``char``.
    """

    editor_type: EditorType
    text: str = ""
    cursor: int = 0
    selected: tuple[int, int] | None = None
    history: EditorHistory = field(default_factory=EditorHistory)
    last_saved_history_change: int = 0
    transport: Any = None
    diagnostics: Any = None
    text_id: uuid.UUID = field(default_factory=uuid.uuid4)

    def content(self) -> str:
        return self.text

    def is_edited(self) -> bool:
        return self.history.current_change != self.last_saved_history_change

    def mark_as_saved(self) -> None:
        self.last_saved_history_change = self.history.current_change

    def path(self) -> Path | None:
        paths = self.editor_type.paths()
        return paths[0] if paths else None

    def insert_char(self, ch: str, idx: int) -> int:
        if len(ch) != 1:
            raise ValueError("insert_char takes a single character")
        inserted = self._insert(ch, idx)
        self.history.push_change(HistoryChange(idx, ch, inserted))
        return inserted

    def insert(self, text: str, idx: int) -> int:
        inserted = self._insert(text, idx)
        self.history.push_change(HistoryChange(idx, text, inserted))
        return inserted

    def _insert(self, text: str, idx: int) -> int:
        before = self.len_utf16_cu()
        self.text = _insert(self.text, idx, text)
        return self.len_utf16_cu() - before

    def remove(self, start: int, end: int) -> int:
        """Remove the UTF-16 range ``start..end``; return how many units went."""
        char_start = self.utf16_cu_to_char(start)
        char_end = self.utf16_cu_to_char(end)
        removed_text = self.text[char_start:char_end]
        before = self.len_utf16_cu()
        self.text = self.text[:char_start] + self.text[char_end:]
        removed = before - self.len_utf16_cu()
        self.history.push_change(
            HistoryChange(end - removed, removed_text, removed, is_removal=True)
        )
        return removed

    def _line_starts(self) -> list[int]:
        return [0, *(match.end() for match in _LINE_BREAK.finditer(self.text))]

    def char_to_line(self, char_idx: int) -> int:
        if not 0 <= char_idx <= len(self.text):
            raise IndexError(f"char index {char_idx} is out of bounds")
        return sum(1 for start in self._line_starts()[1:] if start <= char_idx)

    def line_to_char(self, line_idx: int) -> int:
        starts = self._line_starts()
        if line_idx == len(starts):
            return len(self.text)
        if not 0 <= line_idx < len(starts):
            raise IndexError(f"line index {line_idx} is out of bounds")
        return starts[line_idx]

    def utf16_cu_to_char(self, utf16_idx: int) -> int:
        return _utf16_to_char(self.text, utf16_idx)

    def char_to_utf16_cu(self, char_idx: int) -> int:
        return _char_to_utf16(self.text, char_idx)

    def line(self, line_idx: int) -> str | None:
        """The text of a line, with its line break, or None past the end."""
        starts = self._line_starts()
        if not 0 <= line_idx < len(starts):
            return None
        end = starts[line_idx + 1] if line_idx + 1 < len(starts) else len(self.text)
        return self.text[starts[line_idx] : end]

    def _line_utf16_len(self, line_idx: int) -> int:
        line = self.line(line_idx)
        if line is None:
            raise IndexError(f"line index {line_idx} is out of bounds")
        return _utf16_len(line)

    def len_lines(self) -> int:
        return len(self._line_starts())

    def len_chars(self) -> int:
        return len(self.text)

    def len_utf16_cu(self) -> int:
        return _utf16_len(self.text)

    def expand_selection_to_cursor(self) -> None:
        if self.selected is not None:
            self.selected = (self.selected[0], self.cursor)
        else:
            self.selected = (self.cursor, self.cursor)

    def has_any_selection(self) -> bool:
        return self.selected is not None

    def get_visible_selection(self, editor_id: int) -> tuple[int, int] | None:
        """The highlighted UTF-16 column range of line ``editor_id``, if any."""
        if self.selected is None:
            return None
        selected_from, selected_to = self.selected
        from_row = self.char_to_line(self.utf16_cu_to_char(selected_from))
        to_row = self.char_to_line(self.utf16_cu_to_char(selected_to))

        editor_row_idx = self.char_to_utf16_cu(self.line_to_char(editor_id))
        from_row_idx = self.char_to_utf16_cu(self.line_to_char(from_row))
        to_row_idx = self.char_to_utf16_cu(self.line_to_char(to_row))

        from_col = selected_from - from_row_idx
        to_col = selected_to - to_row_idx

        # Between the starting and the ending line
        if from_row < editor_id < to_row or to_row < editor_id < from_row:
            return 0, self._line_utf16_len(editor_id)

        if from_row > to_row:
            # Selected from bottom to top
            if from_row == editor_id:
                return 0, from_col
            if to_row == editor_id:
                return to_col, self._line_utf16_len(to_row)
            return None
        if from_row < to_row:
            # Selected from top to bottom
            if from_row == editor_id:
                return from_col, self._line_utf16_len(from_row)
            if to_row == editor_id:
                return 0, to_col
            return None
        if from_row == editor_id:
            return selected_from - editor_row_idx, selected_to - editor_row_idx
        return None

    def set(self, text: str) -> None:
        """Replace the whole text without recording history."""
        self.text = text

    def clear_selection(self) -> None:
        self.selected = None

    def set_selection(self, selected: tuple[int, int]) -> None:
        self.selected = selected

    def measure_new_selection(
        self, start: int, end: int, editor_id: int
    ) -> tuple[int, int]:
        """Selection after dragging from column ``start`` to ``end`` of a line."""
        row_idx = self.char_to_utf16_cu(self.line_to_char(editor_id))
        if self.selected is not None:
            return self.selected[0], row_idx + end
        return row_idx + start, row_idx + end

    def measure_new_cursor(self, to: int, editor_id: int) -> int:
        """Cursor position for column ``to`` of line ``editor_id``."""
        return self.char_to_utf16_cu(self.line_to_char(editor_id)) + to

    def get_selected_text(self) -> str | None:
        selection = self.get_selection_range()
        if selection is None:
            return None
        start, end = selection
        if end > len(self.text):
            return None
        return self.text[start:end]

    def get_selection_range(self) -> tuple[int, int] | None:
        """The selection ordered left to right."""
        if self.selected is None:
            return None
        start, end = self.selected
        return (start, end) if start < end else (end, start)

    def undo(self) -> int | None:
        result = self.history.undo(self.text)
        if result is None:
            return None
        self.text, cursor = result
        return cursor

    def redo(self) -> int | None:
        result = self.history.redo(self.text)
        if result is None:
            return None
        self.text, cursor = result
        return cursor

    def __str__(self) -> str:
        return self.text