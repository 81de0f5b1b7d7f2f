import pytest

from valin.commands import (
    CommandRunContext,
    EditorCommand,
    EditorCommands,
    next_selection,
    options_height,
    previous_selection,
)


class _Recorder(EditorCommand):
    def __init__(self, command_id, label, visible=True):
        self._id = command_id
        self._label = label
        self._visible = visible
        self.contexts = []

    def is_visible(self):
        return self._visible

    def id(self):
        return self._id

    def text(self):
        return self._label

    def run(self, ctx):
        self.contexts.append(ctx)


@pytest.fixture
def commands():
    registry = EditorCommands()
    registry.register(_Recorder("increase-editor-font-size", "Increase Font Size"))
    registry.register(_Recorder("decrease-editor-font-size", "Decrease Font Size"))
    registry.register(_Recorder("save-file", "Save File"))
    registry.register(_Recorder("hidden", "Hidden Font Thing", visible=False))
    return registry


def test_context_default_focuses_previous_view():
    assert CommandRunContext().focus_previous_view is True


def test_trigger_runs_registered_command(commands):
    commands.trigger("save-file")
    contexts = commands["save-file"].contexts
    assert len(contexts) == 1
    assert contexts[0].focus_previous_view is True


def test_trigger_unknown_runs_nothing(commands):
    commands.trigger("missing")
    assert all(not commands[cid].contexts for cid in commands)


def test_register_replaces_same_id(commands):
    replacement = _Recorder("save-file", "Save Everything")
    commands.register(replacement)
    assert commands["save-file"] is replacement
    assert len(commands) == 4


def test_contains_and_getitem(commands):
    assert "save-file" in commands
    assert "missing" not in commands
    with pytest.raises(KeyError):
        commands["missing"]


def test_filter_empty_query_lists_visible(commands):
    assert commands.filter("") == [
        "increase-editor-font-size",
        "decrease-editor-font-size",
        "save-file",
    ]


def test_filter_is_case_insensitive(commands):
    assert commands.filter("FONT") == [
        "increase-editor-font-size",
        "decrease-editor-font-size",
    ]


def test_filter_without_match(commands):
    assert commands.filter("zzz") == []


def test_matches_default():
    command = _Recorder("save-file", "Save File")
    assert EditorCommand.matches(command, "SAVE") is True
    assert EditorCommand.matches(command, "open") is False


@pytest.mark.parametrize("count", [1, 2, 5])
def test_next_selection_cycles(count):
    selected = 0
    seen = []
    for _ in range(count):
        selected = next_selection(selected, count)
        seen.append(selected)
    assert selected == 0
    assert sorted(seen) == list(range(count))


@pytest.mark.parametrize("count", [2, 5])
def test_previous_undoes_next(count):
    for start in range(count):
        assert previous_selection(next_selection(start, count), count) == start


def test_previous_wraps_to_last():
    assert previous_selection(0, 7) == 6


def test_next_with_no_options_keeps_selection():
    assert next_selection(0, 0) == 0


def test_options_height_minimum():
    assert options_height(0) == 175
    assert options_height(1) == 175


def test_options_height_grows():
    assert options_height(10) == 300
    assert options_height(11) - options_height(10) == 30