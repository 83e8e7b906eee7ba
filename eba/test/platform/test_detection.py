"""Tests for eba.platform.detection module."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from eba.platform.detection import Platform, detect_platform, platform_from_identifier


class TestPlatformEnum:
    def test_str(self) -> None:
        assert str(Platform.MAC) == "mac"
        assert str(Platform.WINDOWS) == "windows"
        assert str(Platform.LINUX) == "linux"

    def test_builder_flag(self) -> None:
        assert Platform.MAC.builder_flag == "--mac"
        assert Platform.WINDOWS.builder_flag == "--windows"
        assert Platform.LINUX.builder_flag == "--linux"


class TestPlatformFromIdentifier:
    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("darwin", Platform.MAC),
            ("win32", Platform.WINDOWS),
            ("cygwin", Platform.WINDOWS),
            ("msys", Platform.WINDOWS),
            ("linux", Platform.LINUX),
            ("freebsd13", Platform.LINUX),
            ("aix", Platform.LINUX),
            ("", Platform.LINUX),
        ],
    )
    def test_mapping(self, identifier: str, expected: Platform) -> None:
        assert platform_from_identifier(identifier) == expected


class TestDetectPlatform:
    def setup_method(self) -> None:
        detect_platform.cache_clear()

    def teardown_method(self) -> None:
        detect_platform.cache_clear()

    def test_uses_sys_platform(self) -> None:
        with patch("eba.platform.detection._sys.platform", "darwin"):
            assert detect_platform() == Platform.MAC

    def test_cached(self) -> None:
        with patch("eba.platform.detection._sys.platform", "win32"):
            first = detect_platform()
        with patch("eba.platform.detection._sys.platform", "linux"):
            assert detect_platform() is first
