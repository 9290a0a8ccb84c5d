from __future__ import annotations

import hashlib
import json
from pathlib import Path

import pytest

from iconsmith.core.config import BuildOptions
from iconsmith.core.context import BuildContext
from iconsmith.core.diagnostics import NullEmitter
from iconsmith.core.exceptions import TemplateError
from iconsmith.core.templates import (
    ICON_INFO_PLACEHOLDER,
    TEMPLATES,
    make_urls,
    prettify_script,
    relative_fonts_url,
    render_css,
    render_html,
    substitute_placeholder,
)


ADD_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M11 5h2v14h-2z"/></svg>'
CLOSE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M5 5h14v2H5z"/></svg>'


def _prepare(**overrides) -> BuildContext:
    raw = {
        "dest": "dist",
        "files": [
            {"name": "add", "contents": ADD_SVG},
            {"name": "close", "contents": CLOSE_SVG},
        ],
    }
    raw.update(overrides)
    context = BuildContext(BuildOptions.model_validate(raw), emitter=NullEmitter())
    context.allocate()
    context.describe()
    return context


def _digest() -> str:
    return hashlib.md5((ADD_SVG + CLOSE_SVG).encode("utf-8")).hexdigest()


def test_css_contains_font_face_and_icon_rules() -> None:
    css = render_css(_prepare().options)

    assert 'font-family: "iconfont";' in css
    assert ".icon:before {" in css
    assert '.icon-add:before {\n\tcontent: "\\f101";\n}' in css
    assert '.icon-close:before {\n\tcontent: "\\f102";\n}' in css


def test_css_src_follows_order_and_requested_types() -> None:
    digest = _digest()

    css = render_css(_prepare().options)

    expected = ",\n\t\t".join(
        [
            f'url("iconfont.eot?{digest}?#iefix") format("embedded-opentype")',
            f'url("iconfont.woff2?{digest}") format("woff2")',
            f'url("iconfont.woff?{digest}") format("woff")',
        ]
    )
    assert f"src: {expected};" in css
    assert "truetype" not in css
    assert "symbol" not in css


def test_css_svg_source_carries_font_fragment() -> None:
    css = render_css(_prepare(types=["svg"], fontName="glyphs").options)

    assert f'url("glyphs.svg?{_digest()}#glyphs") format("svg")' in css


def test_css_fonts_url_prefixes_font_files() -> None:
    urls = make_urls(_prepare(cssFontsUrl="/static/fonts/").options)

    assert urls["woff2"] == f"/static/fonts/iconfont.woff2?{_digest()}"


def test_url_overrides_are_merged_with_defaults() -> None:
    css = render_css(_prepare().options, {"woff2": "https://cdn.example.com/i.woff2"})

    assert 'url("https://cdn.example.com/i.woff2") format("woff2")' in css
    assert f'url("iconfont.woff?{_digest()}") format("woff")' in css


def test_css_lists_only_built_icons() -> None:
    css = render_css(_prepare(codepoints={"ghost": 0xE000}).options)

    assert "ghost" not in css


def test_template_options_drive_selectors() -> None:
    css = render_css(
        _prepare(templateOptions={"baseSelector": ".glyph", "classPrefix": "g-"}).options
    )

    assert ".glyph:before {" in css
    assert ".g-add:before {" in css


def test_custom_template_and_context_hook(tmp_path: Path) -> None:
    template = tmp_path / "custom.css.jinja"
    template.write_text("{{ font_name }}|{{ accent }}|{{ extra }}", encoding="utf-8")

    def hook(context, options, environment) -> None:
        context["extra"] = environment.filters["upper"](options.font_name)

    css = render_css(
        _prepare(
            cssTemplate=template, cssContext=hook, templateOptions={"accent": "red"}
        ).options
    )

    assert css == "iconfont|red|ICONFONT"


def test_scss_template_renders_codepoint_map() -> None:
    scss = render_css(_prepare(cssTemplate=TEMPLATES["scss"]).options)

    assert '$icon-font-family: "iconfont";' in scss
    assert '"add": "\\f101",' in scss
    assert ".icon-#{$name}:before" in scss


def test_missing_template_raises(tmp_path: Path) -> None:
    options = _prepare(cssTemplate=tmp_path / "missing.css.jinja").options

    with pytest.raises(TemplateError):
        render_css(options)


def test_html_preview_lists_icons() -> None:
    context = _prepare()

    html = render_html(context.options, infos=context.infos)

    assert "<title>iconfont</title>" in html
    assert '<i class="icon icon-add"></i>' in html
    assert "U+F102" in html
    assert f'url("iconfont.woff2?{_digest()}") format("woff2")' in html


def test_html_preview_shows_icon_records() -> None:
    context = _prepare(templateOptions={"classPrefix": "glyph-"})

    html = render_html(context.options, infos=context.infos)

    assert '<i class="icon glyph-close"></i>' in html
    assert "#glyph-close" in html
    assert "U+F102 &amp;#xf102;" in html


def test_html_preview_without_records_lists_names() -> None:
    html = render_html(_prepare().options)

    assert '<i class="icon icon-add"></i>' in html
    assert "#icon-add" not in html


def test_html_fonts_are_relative_to_the_page(tmp_path: Path) -> None:
    context = _prepare(dest=tmp_path / "fonts", htmlDest=tmp_path / "preview" / "index.html")

    assert relative_fonts_url(context.options) == "../fonts"
    assert f'url("../fonts/iconfont.woff?{_digest()}") format("woff")' in render_html(
        context.options
    )


def test_html_ignores_css_fonts_url() -> None:
    html = render_html(_prepare(cssFontsUrl="https://cdn.example.com").options)

    assert "cdn.example.com" not in html


def test_html_context_hook() -> None:
    def hook(context, options, environment) -> None:
        context["font_name"] = "Preview of " + options.font_name

    html = render_html(_prepare(htmlContext=hook).options)

    assert "<title>Preview of iconfont</title>" in html


def test_substitute_placeholder_inserts_json(tmp_path: Path) -> None:
    template = tmp_path / "info.js"
    template.write_text(f"var a = {ICON_INFO_PLACEHOLDER};\nvar b = {ICON_INFO_PLACEHOLDER};\n")

    result = substitute_placeholder(template, ICON_INFO_PLACEHOLDER, {"name": "é"})

    assert result.startswith('var a = {\n  "name": "é"\n};')
    assert result.endswith(f"var b = {ICON_INFO_PLACEHOLDER};\n")


def test_substitute_placeholder_requires_placeholder(tmp_path: Path) -> None:
    template = tmp_path / "plain.js"
    template.write_text("module.exports = {};\n")

    with pytest.raises(TemplateError, match="placeholder"):
        substitute_placeholder(template, ICON_INFO_PLACEHOLDER, [])


def test_info_template_output_is_parseable() -> None:
    payload = [{"name": "add", "unicode": "&#xf101;"}]

    script = prettify_script(substitute_placeholder(TEMPLATES["info"], ICON_INFO_PLACEHOLDER, payload))

    body = script.split("module.exports = ", 1)[1].rstrip().removesuffix(";")
    assert json.loads(body) == payload
    assert '\n    "name": "add",' in script


def test_prettify_script_reindents_code() -> None:
    source = "var a = {\n  b: 1\n};"

    assert prettify_script(source) == "var a = {\n    b: 1\n};\n"
