import pytest

from valin.tabs import Panel, PanelTab, PanelTabData, TabId, new_tab_id


class _StaticTab(PanelTab):
    def __init__(self):
        self.tab_id = new_tab_id()

    def get_data(self):
        return PanelTabData(
            edited=False,
            title="welcome",
            content_id="welcome",
            id=self.tab_id,
            focus_id=1,
        )


def test_new_tab_ids_are_unique_and_increasing():
    ids = [new_tab_id() for _ in range(5)]
    assert len(set(ids)) == 5
    assert ids == sorted(ids)


def test_tab_id_display():
    assert str(TabId(42)) == "42"


def test_tab_id_equality_and_hash():
    assert TabId(3) == TabId(3)
    assert {TabId(3): "x"}[TabId(3)] == "x"


def test_panel_defaults():
    panel = Panel()
    assert panel.active_tab is None
    assert panel.tabs == []


def test_panel_defaults_are_not_shared():
    first, second = Panel(), Panel()
    first.tabs.append(TabId(1))
    assert second.tabs == []


def test_set_active_tab():
    panel = Panel()
    tab_id = new_tab_id()
    panel.set_active_tab(tab_id)
    assert panel.active_tab == tab_id


def test_panel_tab_requires_get_data():
    with pytest.raises(TypeError):
        PanelTab()


def test_panel_tab_data_equality():
    tab_id = TabId(7)
    first = PanelTabData(
        edited=False, title="t", content_id="c", id=tab_id, focus_id=1
    )
    same = PanelTabData(
        edited=False, title="t", content_id="c", id=TabId(7), focus_id=1
    )
    edited = PanelTabData(
        edited=True, title="t", content_id="c", id=tab_id, focus_id=1
    )
    assert first == same
    assert (first == edited) is False


def test_default_hooks_leave_tab_unchanged():
    tab = _StaticTab()
    before = tab.get_data()
    PanelTab.on_close(tab, object())
    PanelTab.on_settings_changed(tab, object())
    assert tab.get_data() == before