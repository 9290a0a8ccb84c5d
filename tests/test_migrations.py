from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from iconsmith.core.config import resolve_options
from iconsmith.core.migrations import migrate_options


class _RecordingEmitter:
    debug_enabled = False

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


def test_css_fonts_path_is_renamed() -> None:
    emitter = _RecordingEmitter()

    migrated = migrate_options({"cssFontsPath": "/static/fonts"}, emitter)

    assert migrated == {"cssFontsUrl": "/static/fonts"}
    assert emitter.warnings == ['Option "cssFontsPath" is deprecated. Use "cssFontsUrl" instead.']


def test_empty_css_fonts_path_is_dropped_silently() -> None:
    emitter = _RecordingEmitter()

    migrated = migrate_options({"cssFontsPath": ""}, emitter)

    assert migrated == {}
    assert emitter.warnings == []


def test_base_class_becomes_base_selector() -> None:
    emitter = _RecordingEmitter()

    migrated = migrate_options({"templateOptions": {"baseClass": "glyph"}}, emitter)

    assert migrated["templateOptions"] == {"base_selector": ".glyph"}
    assert len(emitter.warnings) == 1
    assert "baseClass" in emitter.warnings[0]


def test_base_class_wins_over_base_selector() -> None:
    migrated = migrate_options(
        {"templateOptions": {"baseClass": "glyph", "baseSelector": ".other"}},
        _RecordingEmitter(),
    )

    assert migrated["templateOptions"] == {"base_selector": ".glyph"}


def test_migration_does_not_mutate_input() -> None:
    raw = {"cssFontsPath": "/fonts", "templateOptions": {"baseClass": "glyph"}}

    migrate_options(raw, _RecordingEmitter())

    assert raw == {"cssFontsPath": "/fonts", "templateOptions": {"baseClass": "glyph"}}


def test_current_options_are_untouched() -> None:
    emitter = _RecordingEmitter()
    raw = {"cssFontsUrl": "/fonts", "templateOptions": {"baseSelector": ".i"}}

    assert migrate_options(raw, emitter) == raw
    assert emitter.warnings == []


def test_migrated_options_resolve() -> None:
    emitter = _RecordingEmitter()

    options = resolve_options(
        {
            "dest": "out",
            "files": ["a.svg"],
            "cssFontsPath": "/fonts",
            "templateOptions": {"baseClass": "glyph"},
        },
        emitter=emitter,
    )

    assert options.css_fonts_url == "/fonts"
    assert options.template_options.base_selector == ".glyph"
    assert options.template_options.base_class == "glyph"
    assert len(emitter.warnings) == 2
