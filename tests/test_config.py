from __future__ import annotations

from pathlib import Path

import pytest

from iconsmith.core.config import (
    DEFAULT_ORDER,
    DEFAULT_TYPES,
    BuildOptions,
    load_config_file,
    resolve_options,
)
from iconsmith.core.diagnostics import NullEmitter
from iconsmith.core.exceptions import ConfigurationError
from iconsmith.core.sources import IconSource
from iconsmith.core.strategies import (
    BasenameRename,
    CallableContextHook,
    CallableRename,
    NullContextHook,
)
from iconsmith.core.templates import TEMPLATES


def _resolve(raw: dict) -> BuildOptions:
    return resolve_options(raw, emitter=NullEmitter())


def test_defaults_are_applied() -> None:
    options = _resolve({"dest": "out", "files": ["icons/add.svg"]})

    assert options.dest == Path("out")
    assert options.font_name == "iconfont"
    assert options.types == list(DEFAULT_TYPES)
    assert options.order == list(DEFAULT_ORDER)
    assert options.css is True
    assert options.html is False
    assert options.output_info is True
    assert options.write_files is True
    assert options.start_codepoint == 0xF101
    assert options.codepoints == {}
    assert options.css_template == TEMPLATES["css"]
    assert options.template_options.base_selector == ".icon"
    assert options.template_options.class_prefix == "icon-"
    assert isinstance(options.rename, BasenameRename)
    assert isinstance(options.css_context, NullContextHook)


def test_output_paths_are_derived_from_dest_and_font_name() -> None:
    options = _resolve({"dest": "out", "files": ["add.svg"], "fontName": "glyphs"})

    assert options.css_dest == Path("out") / "glyphs.css"
    assert options.html_dest == Path("out") / "glyphs.html"


def test_explicit_output_paths_are_kept() -> None:
    options = _resolve(
        {"dest": "out", "files": ["add.svg"], "css_dest": "styles/icons.css"}
    )

    assert options.css_dest == Path("styles/icons.css")


def test_camel_case_and_python_names_are_accepted() -> None:
    camel = _resolve({"dest": "out", "files": ["a.svg"], "startCodepoint": 0xE000})
    snake = _resolve({"dest": "out", "files": ["a.svg"], "start_codepoint": 0xE000})

    assert camel.start_codepoint == snake.start_codepoint == 0xE000


def test_names_follow_the_rename_strategy() -> None:
    options = _resolve(
        {
            "dest": "out",
            "files": ["icons/arrow-left.svg", {"name": "memory", "contents": "<svg/>"}],
        }
    )

    assert options.names == ["arrow-left", "memory"]


def test_callable_rename_is_wrapped() -> None:
    options = _resolve(
        {
            "dest": "out",
            "files": ["icons/Add.svg"],
            "rename": lambda source: source.path.stem.lower(),
        }
    )

    assert isinstance(options.rename, CallableRename)
    assert options.names == ["add"]


def test_callable_context_hook_is_wrapped() -> None:
    options = _resolve({"dest": "out", "files": ["a.svg"], "cssContext": lambda *_: None})

    assert isinstance(options.css_context, CallableContextHook)


def test_comma_separated_types_are_split() -> None:
    options = _resolve({"dest": "out", "files": ["a.svg"], "types": "ttf, woff"})

    assert options.types == ["ttf", "woff"]


def test_null_mappings_become_empty() -> None:
    options = _resolve(
        {"dest": "out", "files": ["a.svg"], "codepoints": None, "templateOptions": None}
    )

    assert options.codepoints == {}
    assert options.template_options.base_selector == ".icon"


def test_extra_template_options_are_forwarded() -> None:
    options = _resolve(
        {"dest": "out", "files": ["a.svg"], "templateOptions": {"accent": "#ff0000"}}
    )

    assert options.template_options.context()["accent"] == "#ff0000"


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({"files": ["a.svg"]}, '"dest" is undefined.'),
        ({"dest": None, "files": ["a.svg"]}, '"dest" is undefined.'),
        ({"dest": "out"}, '"files" is undefined.'),
        ({"dest": "out", "files": []}, '"files" is empty.'),
        ({}, '"dest" is undefined.'),
    ],
)
def test_required_fields(raw: dict, message: str) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        _resolve(raw)

    assert str(excinfo.value) == message


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="fontname"):
        _resolve({"dest": "out", "files": ["a.svg"], "fontname": "typo"})


def test_negative_codepoint_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        _resolve({"dest": "out", "files": ["a.svg"], "codepoints": {"a": -1}})

    assert excinfo.value.field == "codepoints.a"


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"codepoints": {"add": 0x110000}}, "codepoints.add"),
        ({"startCodepoint": 0x110000}, "startCodepoint"),
        ({"endCodepoint": 0x110000}, "endCodepoint"),
    ],
)
def test_codepoints_beyond_unicode_are_rejected(overrides: dict, field: str) -> None:
    with pytest.raises(ConfigurationError, match="less than or equal to 1114111") as excinfo:
        _resolve({"dest": "out", "files": ["add.svg"], **overrides})

    assert excinfo.value.field == field


def test_last_unicode_scalar_is_accepted() -> None:
    options = _resolve(
        {"dest": "out", "files": ["add.svg"], "codepoints": {"add": 0x10FFFF}}
    )

    assert options.codepoints == {"add": 0x10FFFF}


def test_unnamed_in_memory_source_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="needs a name") as excinfo:
        _resolve({"dest": "out", "files": [{"contents": "<svg/>"}]})

    assert excinfo.value.field == "files"


def test_duplicate_override_values_are_rejected() -> None:
    with pytest.raises(ConfigurationError, match="assigned to both 'a' and 'b'"):
        _resolve(
            {"dest": "out", "files": ["a.svg"], "codepoints": {"a": 0xF101, "b": 0xF101}}
        )


def test_start_above_end_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="above end_codepoint"):
        _resolve(
            {
                "dest": "out",
                "files": ["a.svg"],
                "startCodepoint": 0xF200,
                "endCodepoint": 0xF100,
            }
        )


def test_resolved_codepoints_do_not_alias_caller_data() -> None:
    overrides = {"a": 0xF200}
    options = _resolve({"dest": "out", "files": ["a.svg", "b.svg"], "codepoints": overrides})
    options.codepoints["b"] = 0xF201

    assert overrides == {"a": 0xF200}


def test_existing_options_are_copied() -> None:
    options = _resolve({"dest": "out", "files": ["a.svg"]})
    again = resolve_options(options)
    again.codepoints["a"] = 1

    assert again is not options
    assert options.codepoints == {}


def test_file_entries_are_coerced() -> None:
    class Vinyl:
        def __init__(self) -> None:
            self.path = "icons/raw.svg"
            self.metadata = type("Metadata", (), {"name": "named"})()

    options = _resolve({"dest": "out", "files": [Path("x.svg"), Vinyl()]})

    assert all(isinstance(source, IconSource) for source in options.files)
    assert options.names == ["x", "named"]


def test_load_yaml_configuration(tmp_path: Path) -> None:
    path = tmp_path / "iconsmith.yml"
    path.write_text("dest: build\nfontName: glyphs\ntypes: [ttf, woff]\n", encoding="utf-8")

    assert load_config_file(path) == {"dest": "build", "fontName": "glyphs", "types": ["ttf", "woff"]}


def test_load_json_configuration(tmp_path: Path) -> None:
    path = tmp_path / "iconsmith.json"
    path.write_text('{"dest": "build", "html": true}', encoding="utf-8")

    assert load_config_file(path) == {"dest": "build", "html": True}


def test_load_configuration_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "iconsmith.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        load_config_file(path)


def test_load_configuration_reports_syntax_errors(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid configuration file"):
        load_config_file(path)
