# valin

Building blocks for the state of a keyboard-driven code editor, with no user
interface attached: tabs and the panels that hold them, a text buffer with undo
and redo that counts positions in UTF-16 code units, a registry of named
commands, a chain of keyboard shortcut handlers, settings stored as TOML, and a
folder tree for browsing files.

## Modules

- `valin.tabs`: `TabId`, `new_tab_id()`, `Panel`, `PanelTab` and
  `PanelTabData`. `new_tab_id()` hands out identifiers in increasing order. A
  `Panel` keeps a list of tab ids and an optional active tab. `PanelTab` is an
  abstract base class: subclasses implement `get_data()`, and may override
  `on_close(app_state)` and `on_settings_changed(settings)`.
- `valin.buffer`: `EditorType`, `EditorData`, `EditorHistory` and
  `HistoryChange`. These hold the text, the cursor, the selection and the edit
  history of one editor.
- `valin.commands`: `EditorCommand`, `EditorCommands` and `CommandRunContext`,
  plus `next_selection`, `previous_selection` and `options_height`. These are
  the helpers a command palette needs.
- `valin.shortcuts`: `KeyboardShortcuts`, handlers tried in registration order
  until one of them returns true.
- `valin.settings`: `AppSettings`, `EditorSettings`, `human_number` and
  `SettingsError`.
- `valin.explorer`: `ExplorerItem`, `FlatItem`, `TreeTask`, `TreeTaskKind`,
  `FileExplorerState` and `read_folder_as_items`.
- `valin.hover`: `hover_box_height(content)`, the height of a hover box. It is
  65, 100, 135 or 170 depending on how many lines the trimmed text has.

## Settings

```python
from valin.settings import AppSettings

settings = AppSettings()
text = settings.to_toml()
assert AppSettings.from_toml(text) == settings
```

The defaults are a font size of 17 and a line height of 1.6. When settings are
written, each number is treated as a single-precision float and cut (not
rounded) to two decimals. `from_toml` raises `SettingsError`, a `ValueError`,
in three cases: the text is not valid TOML, the `[editor]` table is missing, or
`font_size` or `line_height` is missing or is not a number.

## Editing text

```python
from valin.buffer import EditorData, EditorType

editor = EditorData(EditorType.fs("project/notes.txt", "project"))
editor.insert("hello", 0)   # returns 5
editor.undo()               # returns the cursor position, 0
editor.redo()               # returns 5
print(editor.content(), editor.is_edited())   # hello True
editor.mark_as_saved()
```

An `EditorType` is either backed by a file (`EditorType.fs(path, root_path)`)
or held in memory (`EditorType.memory(title)`). For a file, `title()` and
`content_id()` give the file name. `content_id()` is `None` for an in-memory
editor.

Positions passed to `insert`, `insert_char`, `remove` and the selection methods
count UTF-16 code units, so a character outside the Basic Multilingual Plane
takes up two positions. Use `utf16_cu_to_char` and `char_to_utf16_cu` to
convert, and `char_to_line`, `line_to_char`, `line` and `len_lines` to work by
line. Every edit is recorded in the history. Making a new edit after an undo
drops the changes that could have been redone. `set(text)` replaces the whole
text and records nothing. `get_visible_selection(line)` gives the highlighted
column range of one line.

## Commands

```python
from valin.commands import CommandRunContext, EditorCommand, EditorCommands


class Greet(EditorCommand):
    def id(self) -> str:
        return "greet"

    def text(self) -> str:
        return "Say Hello"

    def run(self, ctx: CommandRunContext) -> None:
        print("hello")


commands = EditorCommands()
commands.register(Greet())
commands.filter("hello")   # ["greet"]
commands.trigger("greet")  # prints hello
commands.trigger("nope")   # unknown ids do nothing
```

By default a command matches a query when its text contains the query, ignoring
case. An empty query matches every visible command. `next_selection` and
`previous_selection` move through a list of matches and wrap around at either
end.

## Shortcuts

```python
from valin.shortcuts import KeyboardShortcuts

shortcuts = KeyboardShortcuts()
shortcuts.register(lambda data, commands, state: data == "ctrl+s")
shortcuts.run("ctrl+s", None, None)   # True
```

Each handler receives the key data, the command registry and the application
state, whatever objects the caller passes. Handlers after the first one that
returns true are not called.

## File explorer

```python
from pathlib import Path
from valin.explorer import ExplorerItem, FileExplorerState, read_folder_as_items

root = Path("project")
explorer = FileExplorerState()
explorer.open_folder(ExplorerItem(root, children=read_folder_as_items(root)))

explorer.move_down()
row = explorer.focused_item()
file_to_open = explorer.apply(row.task())
```

`read_folder_as_items` lists folders first, then files. A folder whose
`children` is `None` is closed. `flat_items()` gives the visible rows in display
order. Activating a row opens a closed folder and closes an open one. For a file,
`apply` returns the file's path.

## What this package does not do

There is no application object that ties these pieces together, and no editor
window. The package does not decide which panel or tab has focus, does not turn
key presses into buffer edits, and has no built-in font size or save commands.
It does not talk to language servers. It does not read or write files for an
editor buffer, and it does not load settings from disk: it only converts them to
and from TOML text. There is no command to run.

## Tests

The test suite uses pytest, which the `test` extra installs.