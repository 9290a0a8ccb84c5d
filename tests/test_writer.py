from __future__ import annotations

from pathlib import Path

import pytest

from iconsmith.core.config import resolve_options
from iconsmith.core.context import BuildContext
from iconsmith.core.diagnostics import NullEmitter
from iconsmith.core.exceptions import TemplateError
from iconsmith.core.writer import INFO_FILENAME, ArtifactWriter, write_file


ICON = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16"><path d="M0 0h16v16H0z"/></svg>'


def _context(tmp_path: Path, **overrides) -> BuildContext:
    raw = {"dest": tmp_path / "out", "files": [{"name": "box", "contents": ICON}]}
    raw.update(overrides)
    context = BuildContext(resolve_options(raw, emitter=NullEmitter()), emitter=NullEmitter())
    context.allocate()
    context.describe()
    return context


def test_write_file_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "file.txt"

    write_file("héllo", target)
    write_file(b"\x00\x01", tmp_path / "raw.bin")

    assert target.read_text(encoding="utf-8") == "héllo"
    assert (tmp_path / "raw.bin").read_bytes() == b"\x00\x01"


def test_fonts_are_named_after_font_name(tmp_path: Path) -> None:
    context = _context(tmp_path, fontName="glyphs", css=False, outputInfo=False)

    written = ArtifactWriter(context).write({"ttf": b"ttf", "woff": b"woff"})

    assert [path.name for path in written] == ["glyphs.ttf", "glyphs.woff"]


def test_css_is_written_to_css_dest(tmp_path: Path) -> None:
    css_dest = tmp_path / "styles" / "icons.css"
    context = _context(tmp_path, cssDest=css_dest, outputInfo=False, types=["ttf"])

    ArtifactWriter(context).write({"ttf": b"ttf"})

    assert ".icon-box:before" in css_dest.read_text(encoding="utf-8")


def test_symbol_script_is_not_prettified(tmp_path: Path) -> None:
    context = _context(tmp_path, css=False, outputInfo=False)
    sprite = '<svg>\n  <symbol id="icon-box"/>\n</svg>'

    svg_path, script_path = ArtifactWriter(context).write_symbol(sprite)

    assert svg_path.read_text(encoding="utf-8") == sprite
    script = script_path.read_text(encoding="utf-8")
    assert 'var svgSprite = "<svg>\\n  <symbol id=\\"icon-box\\"/>\\n</svg>";' in script


def test_info_file_is_written_under_dest(tmp_path: Path) -> None:
    context = _context(tmp_path)

    path = ArtifactWriter(context).write_info()

    assert path == tmp_path / "out" / INFO_FILENAME
    text = path.read_text(encoding="utf-8")
    assert '"className": "icon icon-box"' in text
    assert "<% ICON_INFO %>" not in text


def test_written_paths_are_recorded_on_the_context(tmp_path: Path) -> None:
    context = _context(tmp_path, types=["ttf"])

    written = ArtifactWriter(context).write({"ttf": b"ttf"})

    assert written == context.written
    assert [path.name for path in written] == ["iconfont.ttf", "iconfont.css", INFO_FILENAME]


def test_render_keeps_outputs_in_memory(tmp_path: Path) -> None:
    context = _context(tmp_path, types=["ttf"])

    outputs = ArtifactWriter(context).render({"ttf": b"ttf"})

    assert [path.name for path, _ in outputs] == ["iconfont.ttf", "iconfont.css", INFO_FILENAME]
    assert not (tmp_path / "out").exists()
    assert context.written == []


def test_failing_template_writes_nothing(tmp_path: Path) -> None:
    context = _context(tmp_path, html=True, htmlTemplate=tmp_path / "missing.html.jinja")

    with pytest.raises(TemplateError):
        ArtifactWriter(context).write({"ttf": b"ttf", "woff": b"woff"})

    assert not (tmp_path / "out").exists()
    assert context.written == []
