"""Tests for eba.core.inputs module."""

from __future__ import annotations

from pathlib import Path

import pytest

from eba.core.inputs import ActionInputs, env_name, get_input, load_inputs
from eba.core.result import Err, Ok


def _env(**overrides: str) -> dict[str, str]:
    env = {
        "INPUT_RELEASE": "false",
        "INPUT_PACKAGE_ROOT": "app",
        "INPUT_BUILD_SCRIPT_NAME": "build",
        "INPUT_GITHUB_TOKEN": "token",
    }
    env.update({env_name(k): v for k, v in overrides.items()})
    return env


class TestGetInput:
    def test_env_name_is_upper_case(self) -> None:
        assert env_name("build_script_name") == "INPUT_BUILD_SCRIPT_NAME"

    def test_missing_is_none(self) -> None:
        assert get_input({}, "args") is None

    def test_empty_is_none(self) -> None:
        assert get_input({"INPUT_ARGS": ""}, "args") is None

    def test_value_returned_verbatim(self) -> None:
        assert get_input({"INPUT_ARGS": " --x64 "}, "args") == " --x64 "


class TestLoadInputs:
    def test_defaults(self) -> None:
        result = load_inputs(_env())

        assert isinstance(result, Ok)
        inputs = result.value
        assert inputs.release is False
        assert inputs.package_root == Path("app")
        assert inputs.build_script_name == "build"
        assert inputs.github_token == "token"
        assert inputs.skip_build is False
        assert inputs.skip_install is False
        assert inputs.use_vue_cli is False
        assert inputs.args == ""
        assert inputs.max_attempts == 1
        assert inputs.app_root is None
        assert inputs.mac_certs is None

    @pytest.mark.parametrize(
        "name", ["release", "package_root", "build_script_name", "github_token"]
    )
    def test_required_input_missing(self, name: str) -> None:
        env = _env()
        del env[env_name(name)]

        result = load_inputs(env)

        assert isinstance(result, Err)
        assert result.error.kind == "missing"
        assert result.error.name == name
        assert f'"{name}"' in result.error.message

    def test_required_input_empty_counts_as_missing(self) -> None:
        result = load_inputs(_env(github_token=""))

        assert isinstance(result, Err)
        assert result.error.name == "github_token"

    def test_flags(self) -> None:
        result = load_inputs(
            _env(release="true", skip_build="TRUE", skip_install="true", use_vue_cli="yes")
        )

        assert isinstance(result, Ok)
        assert result.value.release is True
        assert result.value.skip_build is True
        assert result.value.skip_install is True
        assert result.value.use_vue_cli is False

    def test_max_attempts_parsed(self) -> None:
        result = load_inputs(_env(max_attempts="3"))

        assert isinstance(result, Ok)
        assert result.value.max_attempts == 3

    @pytest.mark.parametrize("raw", ["0", "-2"])
    def test_max_attempts_at_least_one(self, raw: str) -> None:
        result = load_inputs(_env(max_attempts=raw))

        assert isinstance(result, Ok)
        assert result.value.max_attempts == 1

    def test_max_attempts_not_a_number(self) -> None:
        result = load_inputs(_env(max_attempts="many"))

        assert isinstance(result, Err)
        assert result.error.kind == "invalid"
        assert result.error.name == "max_attempts"

    def test_credentials(self) -> None:
        result = load_inputs(
            _env(
                mac_certs="mac-cert",
                mac_certs_password="mac-pass",
                windows_certs="win-cert",
                windows_certs_password="win-pass",
            )
        )

        assert isinstance(result, Ok)
        assert result.value.mac_certs == "mac-cert"
        assert result.value.mac_certs_password == "mac-pass"
        assert result.value.windows_certs == "win-cert"
        assert result.value.windows_certs_password == "win-pass"


class TestPackagingRoot:
    def test_defaults_to_package_root(self) -> None:
        inputs = ActionInputs(
            release=False, package_root=Path("pkg"), build_script_name="build", github_token="t"
        )
        assert inputs.packaging_root == Path("pkg")
        assert inputs.app_root_overridden is False

    def test_app_root_overrides(self) -> None:
        result = load_inputs(_env(app_root="other"))

        assert isinstance(result, Ok)
        assert result.value.packaging_root == Path("other")
        assert result.value.app_root_overridden is True
