# SPDX-License-Identifier: MIT
"""Install, build and package an Electron app.

The runner works in two phases:

1. plan(): validate inputs against the filesystem (package.json, lock file,
   build script) and produce an ActionPlan. Nothing is spawned, so every
   configuration error is reported before any command runs.
2. execute(): run the planned steps in order. Install and build fail fast;
   packaging is retried up to its attempt budget.
"""

from __future__ import annotations

import shlex
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from eba.core.inputs import ActionInputs
from eba.core.result import Err, Ok, Result
from eba.output.console import ConsoleProtocol, Style
from eba.platform.detection import Platform
from eba.platform.process import CommandRunner, DefaultCommandRunner, ProcessError
from eba.services.environment import packaging_environment, step_environment
from eba.services.errors import ActionError
from eba.services.manifest import load_manifest, require_manifest
from eba.services.package_manager import (
    DEFAULT_FALLBACK,
    PackageManager,
    detect_package_manager,
)
from eba.services.packaging import packaging_command

__all__ = ["ActionPlan", "ActionRunner", "Step", "StepName"]

type StepName = Literal["install", "build", "package"]

_FAILURE_KINDS: dict[StepName, Literal["install_failed", "build_failed", "package_failed"]] = {
    "install": "install_failed",
    "build": "build_failed",
    "package": "package_failed",
}


@dataclass(frozen=True, slots=True)
class Step:
    name: StepName
    command: list[str]
    cwd: Path
    env: Mapping[str, str]
    attempts: int = 1

    @property
    def display(self) -> str:
        return shlex.join(self.command)


def _empty_notes() -> list[str]:
    return []


@dataclass(frozen=True, slots=True)
class ActionPlan:
    """Resolved steps for one action run.

    Attributes:
        platform: Host platform the bundle is built for.
        manager: Package manager running every command.
        package_root: Directory install and build run in.
        release: Whether the packaging step publishes.
        steps: Steps to execute, in order.
        skipped: Notices for steps disabled by inputs.
        warnings: Non-fatal configuration warnings.
    """

    platform: Platform
    manager: PackageManager
    package_root: Path
    release: bool
    steps: list[Step]
    skipped: list[str] = field(default_factory=_empty_notes)
    warnings: list[str] = field(default_factory=_empty_notes)

    def step(self, name: StepName) -> Step | None:
        return next((s for s in self.steps if s.name == name), None)


class ActionRunner:
    def __init__(
        self,
        *,
        platform: Platform,
        console: ConsoleProtocol,
        environ: Mapping[str, str],
        runner: CommandRunner | None = None,
        fallback: PackageManager | None = DEFAULT_FALLBACK,
    ) -> None:
        self._platform = platform
        self._console = console
        self._environ = environ
        self._runner = runner or DefaultCommandRunner()
        self._fallback = fallback

    def plan(self, inputs: ActionInputs) -> Result[ActionPlan, ActionError]:
        """Resolve inputs into steps without running anything."""
        pkg_root = inputs.package_root

        found = require_manifest(pkg_root)
        if isinstance(found, Err):
            return found

        manager = detect_package_manager(pkg_root, self._fallback)
        if manager is None:
            return Err(
                ActionError(
                    kind="no_package_manager",
                    message=(
                        "No lock file found and no fallback package manager specified. "
                        "Please first install your dependencies (i.e. `npm install`)"
                    ),
                    hint="Commit a package-lock.json, yarn.lock or pnpm-lock.yaml",
                )
            )

        base_env = step_environment(self._environ)
        steps: list[Step] = []
        skipped: list[str] = []
        warnings: list[str] = []

        if inputs.app_root_overridden:
            warnings.append(
                "The `app_root` option is deprecated: electron-builder needs package.json "
                "next to the app, so set `package_root` to that directory instead"
            )

        if inputs.skip_install:
            skipped.append("Skipping install script because `skip_install` option is set")
        else:
            steps.append(
                Step(name="install", command=manager.install_command(), cwd=pkg_root, env=base_env)
            )

        if inputs.skip_build:
            skipped.append("Skipping build script because `skip_build` option is set")
        else:
            build = self._build_step(manager, inputs, base_env)
            if isinstance(build, Err):
                return build
            if build.value is not None:
                steps.append(build.value)

        try:
            cmd = packaging_command(
                manager,
                self._platform,
                release=inputs.release,
                use_vue_cli=inputs.use_vue_cli,
                args=inputs.args,
            )
        except ValueError as e:
            return Err(
                ActionError(
                    kind="invalid_input",
                    message=f'Cannot parse "args" input: {e}',
                    hint="Check the quoting of the args input",
                )
            )

        steps.append(
            Step(
                name="package",
                command=cmd,
                cwd=inputs.packaging_root,
                env=packaging_environment(self._environ, inputs, self._platform),
                attempts=max(inputs.max_attempts, 1),
            )
        )

        return Ok(
            ActionPlan(
                platform=self._platform,
                manager=manager,
                package_root=pkg_root,
                release=inputs.release,
                steps=steps,
                skipped=skipped,
                warnings=warnings,
            )
        )

    def _build_step(
        self,
        manager: PackageManager,
        inputs: ActionInputs,
        env: Mapping[str, str],
    ) -> Result[Step | None, ActionError]:
        script = inputs.build_script_name
        if not manager.supports_if_present:
            manifest = load_manifest(inputs.package_root)
            if isinstance(manifest, Err):
                return manifest
            if not manifest.value.has_script(script):
                return Ok(None)
        return Ok(
            Step(
                name="build",
                command=manager.run_script_command(script),
                cwd=inputs.package_root,
                env=env,
            )
        )

    def show(self, plan: ActionPlan) -> None:
        """Print the plan without executing it. Environments are not shown."""
        self._console.header("Plan")
        self._console.print(f"platform: {plan.platform}", Style.DIM)
        self._console.print(f"package manager: {plan.manager}", Style.DIM)
        for warning in plan.warnings:
            self._console.warning(warning)
        for note in plan.skipped:
            self._console.info(note)
        for step in plan.steps:
            attempts = f" (up to {step.attempts} attempts)" if step.attempts > 1 else ""
            self._console.print(f"  {step.name}: {step.display}{attempts}")
            self._console.print(f"    in {step.cwd}", Style.DIM)
        self._console.newline()
        self._console.print("Dry-run: not executing commands", Style.DIM)

    def execute(self, plan: ActionPlan) -> Result[None, ActionError]:
        """Run the planned steps in order, stopping at the first failure."""
        for warning in plan.warnings:
            self._console.warning(warning)

        self._console.info(f'Will run {plan.manager} commands in directory "{plan.package_root}"')
        for note in plan.skipped:
            self._console.info(note)

        for step in plan.steps:
            self._console.header(self._step_title(step, plan))
            self._console.print(f"$ {step.display}", Style.DIM)
            result = self._run_step(step)
            if isinstance(result, Err):
                return Err(self._step_error(step, result.error))

        self._console.success("Electron app built" + (" and released" if plan.release else ""))
        return Ok(None)

    def run(self, inputs: ActionInputs, *, dry_run: bool = False) -> Result[None, ActionError]:
        """Plan, then execute (or only print the plan when dry_run)."""
        planned = self.plan(inputs)
        if isinstance(planned, Err):
            return planned
        if dry_run:
            self.show(planned.value)
            return Ok(None)
        return self.execute(planned.value)

    def _run_step(self, step: Step) -> Result[None, ProcessError]:
        attempts = max(step.attempts, 1)
        result = self._runner.run(step.command, cwd=step.cwd, env=step.env)
        attempt = 1
        while isinstance(result, Err) and attempt < attempts:
            self._console.warning(f"Attempt {attempt} failed: {result.error}")
            attempt += 1
            self._console.print(f"Retrying ({attempt}/{attempts})", Style.DIM)
            result = self._runner.run(step.command, cwd=step.cwd, env=step.env)
        return result

    def _step_title(self, step: Step, plan: ActionPlan) -> str:
        match step.name:
            case "install":
                return f"Installing dependencies using {plan.manager}…"
            case "build":
                return "Running the build script…"
            case "package":
                action = " and releasing" if plan.release else ""
                return f"Building{action} the Electron app…"

    def _step_error(self, step: Step, error: ProcessError) -> ActionError:
        attempts = f" after {step.attempts} attempts" if step.attempts > 1 else ""
        return ActionError(
            kind=_FAILURE_KINDS[step.name],
            message=f"{step.name} step failed{attempts}: {error}",
            hint=f"Command: {error.display}",
        )
