from colorgrab import main as main_module
from colorgrab.color import Color, ScreenPoint
from colorgrab.exceptions import DisplayConnectionError
from colorgrab.utils import config

from conftest import FakeBackend


def test_exits_with_1_when_display_unavailable(monkeypatch, capsys):
    def no_display():
        raise DisplayConnectionError("can't open display :0")

    monkeypatch.setattr(main_module, "create_backend", no_display)

    assert main_module.main() == 1

    captured = capsys.readouterr()
    assert captured.err.strip() == "Cannot open display: can't open display :0"
    assert "Color Grabbed" not in captured.out
    assert captured.out.splitlines() == list(config.BANNER_LINES)


def test_pick_then_display_loss(monkeypatch, capsys):
    backend = FakeBackend(
        cursor=(100, 200),
        screen={ScreenPoint(100, 200): Color(16, 32, 48)},
        hotkey=lambda: True,
        fail_after=1,
    )
    monkeypatch.setattr(main_module, "create_backend", lambda: backend)

    assert main_module.main() == 1

    captured = capsys.readouterr()
    assert captured.out.count("Color Grabbed") == 1
    assert "HEX: #102030" in captured.out
    assert captured.err.strip() == "Cannot open display: no display"
    assert backend.clipboard == ["#102030"]
    assert backend.started and backend.stopped


class BrokenCursorBackend(FakeBackend):
    def cursor_position(self):
        raise RuntimeError("cursor query failed")


def test_unexpected_worker_error_exits_nonzero(monkeypatch, capsys):
    backend = BrokenCursorBackend(hotkey=lambda: True)
    monkeypatch.setattr(main_module, "create_backend", lambda: backend)

    assert main_module.main() == 1

    captured = capsys.readouterr()
    assert "Color Grabbed" not in captured.out
    assert "Unexpected error: cursor query failed" in captured.err
    assert backend.clipboard == []
    assert backend.stopped
