# SPDX-License-Identifier: MIT
"""Child process environments.

The runner never writes to os.environ. Each step gets an explicit copy of
the base environment plus the variables it needs:

- every step: ADBLOCK=true (silences install-time advertisements)
- packaging only: GH_TOKEN and, on mac/windows, CSC_LINK/CSC_KEY_PASSWORD,
  which electron-builder reads for publishing and code signing
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from eba.core.inputs import ActionInputs
from eba.platform.detection import Platform

__all__ = [
    "SigningCredentials",
    "packaging_environment",
    "signing_credentials",
    "step_environment",
]

TOKEN_VAR = "GH_TOKEN"
CERT_LINK_VAR = "CSC_LINK"
CERT_PASSWORD_VAR = "CSC_KEY_PASSWORD"
ADBLOCK_VAR = "ADBLOCK"


@dataclass(frozen=True, slots=True)
class SigningCredentials:
    link: str | None
    password: str | None

    def as_env(self) -> dict[str, str]:
        env: dict[str, str] = {}
        if self.link:
            env[CERT_LINK_VAR] = self.link
        if self.password:
            env[CERT_PASSWORD_VAR] = self.password
        return env


def signing_credentials(inputs: ActionInputs, platform: Platform) -> SigningCredentials | None:
    """Code signing inputs that apply to platform (None on Linux)."""
    match platform:
        case Platform.MAC:
            return SigningCredentials(inputs.mac_certs, inputs.mac_certs_password)
        case Platform.WINDOWS:
            return SigningCredentials(inputs.windows_certs, inputs.windows_certs_password)
        case Platform.LINUX:
            return None


def step_environment(base: Mapping[str, str]) -> dict[str, str]:
    """Environment for install and build steps."""
    env = dict(base)
    env[ADBLOCK_VAR] = "true"
    return env


def packaging_environment(
    base: Mapping[str, str],
    inputs: ActionInputs,
    platform: Platform,
) -> dict[str, str]:
    """Environment for the packaging step, including credentials."""
    env = step_environment(base)
    env[TOKEN_VAR] = inputs.github_token
    credentials = signing_credentials(inputs, platform)
    if credentials is not None:
        env.update(credentials.as_env())
    return env
