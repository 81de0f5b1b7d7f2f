from valin.shortcuts import KeyboardShortcuts


def _handler(name, calls, result):
    def handle(data, commands, app_state):
        calls.append((name, data, commands, app_state))
        return result

    return handle


def test_stops_at_first_handler_that_claims():
    calls = []
    shortcuts = KeyboardShortcuts()
    shortcuts.register(_handler("a", calls, False))
    shortcuts.register(_handler("b", calls, True))
    shortcuts.register(_handler("c", calls, True))
    handled = shortcuts.run("key", "cmds", "state")
    assert handled is True
    assert [name for name, *_ in calls] == ["a", "b"]


def test_arguments_are_passed_through():
    calls = []
    shortcuts = KeyboardShortcuts()
    shortcuts.register(_handler("a", calls, True))
    shortcuts.run("key", "cmds", "state")
    assert calls == [("a", "key", "cmds", "state")]


def test_unhandled_runs_every_handler():
    calls = []
    shortcuts = KeyboardShortcuts()
    shortcuts.register(_handler("a", calls, False))
    shortcuts.register(_handler("b", calls, False))
    assert shortcuts.run("key", None, None) is False
    assert len(calls) == 2


def test_empty_registry_handles_nothing():
    assert KeyboardShortcuts().run("key", None, None) is False


def test_register_returns_handler():
    shortcuts = KeyboardShortcuts()
    handler = _handler("a", [], True)
    assert shortcuts.register(handler) is handler