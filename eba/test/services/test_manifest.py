"""Tests for eba.services.manifest module."""

from __future__ import annotations

import json
from pathlib import Path

from eba.core.result import Err, Ok
from eba.services.manifest import load_manifest, require_manifest


def _write(root: Path, data: object) -> None:
    (root / "package.json").write_text(json.dumps(data), encoding="utf-8")


def test_require_manifest_missing(tmp_path: Path) -> None:
    result = require_manifest(tmp_path)

    assert isinstance(result, Err)
    assert result.error.kind == "manifest_missing"
    assert str(tmp_path / "package.json") in result.error.message


def test_require_manifest_present(tmp_path: Path) -> None:
    _write(tmp_path, {})

    result = require_manifest(tmp_path)

    assert isinstance(result, Ok)
    assert result.value == tmp_path / "package.json"


def test_load_scripts(tmp_path: Path) -> None:
    _write(tmp_path, {"name": "app", "scripts": {"build": "vite build", "lint": "eslint ."}})

    result = load_manifest(tmp_path)

    assert isinstance(result, Ok)
    assert result.value.has_script("build")
    assert result.value.has_script("lint")
    assert not result.value.has_script("test")


def test_load_without_scripts(tmp_path: Path) -> None:
    _write(tmp_path, {"name": "app"})

    result = load_manifest(tmp_path)

    assert isinstance(result, Ok)
    assert result.value.scripts == frozenset()


def test_empty_script_is_absent(tmp_path: Path) -> None:
    _write(tmp_path, {"scripts": {"build": ""}})

    result = load_manifest(tmp_path)

    assert isinstance(result, Ok)
    assert not result.value.has_script("build")


def test_invalid_json(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")

    result = load_manifest(tmp_path)

    assert isinstance(result, Err)
    assert result.error.kind == "manifest_invalid"


def test_not_an_object(tmp_path: Path) -> None:
    _write(tmp_path, ["build"])

    result = load_manifest(tmp_path)

    assert isinstance(result, Err)
    assert result.error.kind == "manifest_invalid"
    assert result.error.is_config_error
