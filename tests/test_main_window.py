import pytest

from palette_logic import BASE_SWATCH_INDEX
from settings import DEFAULT_SETTINGS
from swatches import TEXT_ON_LIGHT


@pytest.fixture
def window(qapp):
    from main import PaletteWindow
    win = PaletteWindow(dict(DEFAULT_SETTINGS))
    yield win
    win.close()
    win.deleteLater()


def test_initial_grid(window):
    cards = window.cards()
    assert len(cards) == 15
    assert window.swatches[BASE_SWATCH_INDEX].hex == "#3366cc"

    base_card = cards[BASE_SWATCH_INDEX]
    assert base_card.objectName() == "BaseSwatch"
    assert base_card.label_texts() == ["#3366cc", "rgb(51, 102, 204)", "hsl(220, 60%, 50%)"]
    assert [c.objectName() for c in cards].count("BaseSwatch") == 1


def test_color_edit_regenerates(window):
    window.color_input.setText("#ff0000")

    assert window.base_hex == "#ff0000"
    assert window.swatches[BASE_SWATCH_INDEX].hex == "#ff0000"
    assert window.cards()[BASE_SWATCH_INDEX].label_texts()[0] == "#ff0000"
    assert window.error_label.isHidden()


def test_malformed_input_keeps_previous_palette(window):
    before = list(window.palette)
    window.color_input.setText("#33zz")

    assert not window.error_label.isHidden()
    assert window.error_label.text()
    assert window.palette == before
    assert window.base_hex == "#3366cc"

    window.color_input.setText("#3366cc")
    assert window.error_label.isHidden()


def test_warmth_slider_changes_hue_shift(window):
    neutral = list(window.palette)
    window.warmth_slider.setValue(100)

    assert window.warmth == 100
    assert window.warmth_value.text() == "100%"
    assert window.palette[0].h == pytest.approx(neutral[0].h + 0.1)
    assert window.palette[BASE_SWATCH_INDEX] == neutral[BASE_SWATCH_INDEX]


def test_hidden_systems_drop_labels(qapp):
    from main import PaletteWindow
    settings = dict(DEFAULT_SETTINGS, show_rgb=False, show_hsl=False, base_color="#ffffff")
    win = PaletteWindow(settings)
    try:
        base_card = win.cards()[BASE_SWATCH_INDEX]
        assert base_card.label_texts() == ["#ffffff"]
        assert win.swatches[BASE_SWATCH_INDEX].text_color == TEXT_ON_LIGHT
    finally:
        win.close()


def test_app_icon_is_drawn(qapp):
    from icon_gen import create_app_icon
    assert not create_app_icon().isNull()


def test_pending_resize_dropped_with_window(qapp):
    import shiboken6
    from PySide6.QtTest import QTest
    from main import PaletteWindow

    win = PaletteWindow(dict(DEFAULT_SETTINGS))
    # update_grid has queued an adjustSize; deleting the window must cancel it
    shiboken6.delete(win)
    QTest.qWait(50)
    assert not shiboken6.isValid(win)


def test_run_configures_logging_before_reading_settings(monkeypatch):
    import main

    calls = []
    monkeypatch.setattr(main, "configure_logging", lambda level=None: calls.append(("log", level)))

    def fake_load_settings():
        calls.append(("load", None))
        return dict(DEFAULT_SETTINGS)

    monkeypatch.setattr(main, "load_settings", fake_load_settings)

    class StopRun(Exception):
        pass

    def stop(*args, **kwargs):
        raise StopRun()

    monkeypatch.setattr(main, "QApplication", stop)
    with pytest.raises(StopRun):
        main.run([])

    assert calls == [("log", None), ("load", None), ("log", "INFO")]
