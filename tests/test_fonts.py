import logging

import pytest

from contributions_status.services import fonts
from contributions_status.services.fonts import load_graph_font


def test_missing_fonts_fall_back_to_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        result = load_graph_font(["/nonexistent/NotoSans-Regular.ttf"], size=12)

    assert result.available is False
    assert result.path is None
    assert result.font is not None
    assert "/nonexistent/NotoSans-Regular.ttf" in caplog.text


def test_first_loadable_candidate_wins(tmp_path, monkeypatch) -> None:
    broken = tmp_path / "broken.ttf"
    broken.write_bytes(b"not a font")
    good = tmp_path / "good.ttf"
    good.write_bytes(b"placeholder")
    sentinel = object()

    def fake_truetype(path: str, size: int):
        if path == str(broken):
            raise OSError("unknown file format")
        return sentinel

    monkeypatch.setattr(fonts.ImageFont, "truetype", fake_truetype)

    result = load_graph_font([str(broken), str(good)], size=12)

    assert result.available is True
    assert result.path == str(good)
    assert result.font is sentinel


def test_fallback_font_without_freetype_uses_bitmap_font(monkeypatch) -> None:
    bitmap = object()

    def fake_load_default(size=None):
        if size is not None:
            raise ImportError("The _imagingft C module is not installed")
        return bitmap

    monkeypatch.setattr(fonts.ImageFont, "load_default", fake_load_default)

    assert fonts.fallback_font(12) is bitmap
