"""Tests for wally.scaffold.synth - inline component synthesis."""

from __future__ import annotations

import itertools

import pytest

from wally.models.config import ProjectConfig
from wally.scaffold.synth import synthesize

ALL_CONFIGS = [
    ProjectConfig(use_standalone=s, use_tailwind=t, use_signals=g)
    for s, t, g in itertools.product([False, True], repeat=3)
]


def _files(name: str, **flags: bool) -> dict[str, str]:
    return {f.name: f.content for f in synthesize(name, ProjectConfig(**flags))}


class TestTotality:
    """synthesize returns three non-empty files for every input."""

    @pytest.mark.parametrize("config", ALL_CONFIGS)
    def test_three_non_empty_files(self, config: ProjectConfig) -> None:
        files = synthesize("button", config)
        assert [f.name for f in files] == [
            "button.component.ts",
            "button.component.html",
            "button.component.css",
        ]
        for f in files:
            assert f.content.strip()
            assert f.description
            assert "undefined" not in f.content
            assert "None" not in f.content

    @pytest.mark.parametrize("name", ["", "x", "date-picker", "Ünïcode name", "{odd}"])
    def test_any_name_is_accepted(self, name: str) -> None:
        for config in ALL_CONFIGS:
            assert len(synthesize(name, config)) == 3

    def test_deterministic(self) -> None:
        config = ProjectConfig(use_signals=True, use_tailwind=True)
        assert synthesize("card", config) == synthesize("card", config)


class TestBehaviorFile:
    """The .component.ts file."""

    def test_identifiers(self) -> None:
        ts = _files("date-picker")["date-picker.component.ts"]
        assert "export class DatePickerComponent {" in ts
        assert "selector: 'app-date-picker'" in ts
        assert "templateUrl: './date-picker.component.html'" in ts
        assert "styleUrls: ['./date-picker.component.css']" in ts
        assert "title = 'DatePicker Component';" in ts

    def test_signals(self) -> None:
        ts = _files("button", use_signals=True)["button.component.ts"]
        assert "import { Component, signal } from '@angular/core';" in ts
        assert "clickCount = signal(0);" in ts
        assert "this.clickCount.update(count => count + 1);" in ts
        assert "${this.title()}" in ts

    def test_plain_fields(self) -> None:
        ts = _files("button")["button.component.ts"]
        assert "import { Component } from '@angular/core';" in ts
        assert "signal" not in ts
        assert "clickCount = 0;" in ts
        assert "this.clickCount++;" in ts

    def test_standalone(self) -> None:
        ts = _files("button", use_standalone=True)["button.component.ts"]
        assert "import { CommonModule } from '@angular/common';" in ts
        assert "standalone: true," in ts
        assert "imports: [CommonModule]," in ts

    def test_not_standalone(self) -> None:
        ts = _files("button")["button.component.ts"]
        assert "CommonModule" not in ts
        assert "standalone" not in ts


class TestMarkupFile:
    """The .component.html file."""

    def test_signal_bindings_are_calls(self) -> None:
        html = _files("button", use_signals=True)["button.component.html"]
        assert "{{ title() }}" in html
        assert "{{ clickCount() }}" in html

    def test_plain_bindings(self) -> None:
        html = _files("button")["button.component.html"]
        assert "{{ title }}" in html
        assert "{{ clickCount }}" in html
        assert "()" not in html.replace('(click)="onClick()"', "")

    def test_semantic_classes(self) -> None:
        html = _files("card")["card.component.html"]
        for cls in ("card-container", "card-title", "card-button", "card-counter"):
            assert f'class="{cls}"' in html

    def test_tailwind_utilities(self) -> None:
        html = _files("card", use_tailwind=True)["card.component.html"]
        assert "bg-blue-600 hover:bg-blue-700" in html
        assert "card-container" not in html
        assert '(click)="onClick()"' in html


class TestStyleFile:
    """The .component.css file."""

    def test_full_rule_set(self) -> None:
        css = _files("card")["card.component.css"]
        for selector in (
            ".card-container {",
            ".card-title {",
            ".card-button {",
            ".card-button:hover {",
            ".card-counter {",
        ):
            assert selector in css

    def test_tailwind_stub(self) -> None:
        css = _files("card", use_tailwind=True)["card.component.css"]
        assert "@media (max-width: 640px)" in css
        assert ".card-title" not in css
        assert len(css) < len(_files("card")["card.component.css"])
