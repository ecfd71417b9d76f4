"""Derive the release metadata of the project in the current repository."""

from __future__ import annotations

import os
from pathlib import Path

from brewship.core.config import ReleaseConfig
from brewship.core.result import Err, Ok, Result
from brewship.output.console import ConsoleProtocol, Style
from brewship.platform.process import run_combined
from brewship.services.release.config import DEFAULT_TAP_NAME, GITHUB_BASE_URL
from brewship.services.release.errors import ReleaseError
from brewship.services.release.license import detect_license
from brewship.services.release.model import ReleaseMetadata
from brewship.services.release.naming import to_pascal_case, validate_kebab_case
from brewship.services.release.ports import BinaryRunner, ReleaseHost, VersionControl
from brewship.services.release.semver import extract_version_tag


def find_repo_root(vcs: VersionControl) -> Result[Path, ReleaseError]:
    result = vcs.toplevel()
    if isinstance(result, Err):
        return Err(
            ReleaseError(
                kind="not_a_repo",
                message=f"not inside a git repository: {vcs.path}",
                hint=result.error.message,
            )
        )
    return Ok(result.value)


def derive_repo_name(vcs: VersionControl) -> Result[str, ReleaseError]:
    """Name of the working tree root directory."""
    return find_repo_root(vcs).map(lambda root: root.name)


def ensure_binary_executable(binary_path: Path) -> Result[None, ReleaseError]:
    if not binary_path.is_file():
        return Err(
            ReleaseError(
                kind="binary_missing",
                message=f"binary not found: {binary_path}",
                hint="Build the project first, or set 'binary' in brewship.toml.",
            )
        )
    if not os.access(binary_path, os.X_OK):
        return Err(
            ReleaseError(
                kind="binary_missing",
                message=f"binary is not executable: {binary_path}",
                hint=f"Run: chmod +x {binary_path.name}",
            )
        )
    return Ok(None)


def ensure_clean_tree(vcs: VersionControl) -> Result[None, ReleaseError]:
    """Reject unstaged (tree vs index) and staged (index vs HEAD) changes."""
    for label, query in (
        ("unstaged", vcs.has_unstaged_changes),
        ("staged", vcs.has_staged_changes),
    ):
        result = query()
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="command_failed",
                    message=f"failed to check for {label} changes",
                    hint=result.error.message,
                )
            )
        if result.value:
            return Err(
                ReleaseError(
                    kind="dirty_tree",
                    message=f"working tree has {label} changes",
                    hint="Commit or stash changes, then retry.",
                )
            )
    return Ok(None)


def detect_version(
    binary_path: Path,
    *,
    test_flag: str,
    runner: BinaryRunner = run_combined,
) -> Result[str, ReleaseError]:
    """Run ``<binary> <test_flag>`` and extract the version tag from its output.

    The exit status is not consulted; a binary that prints its version and
    exits non-zero still yields a tag.
    """
    outcome = runner([str(binary_path), test_flag], binary_path.parent)
    if isinstance(outcome, Err):
        return Err(
            ReleaseError(
                kind="version_not_found",
                message=f"failed to execute {binary_path.name}",
                hint=outcome.error.detail(),
            )
        )
    return extract_version_tag(outcome.value.output)


def _resolve_owner(host: ReleaseHost, config: ReleaseConfig) -> Result[str | None, ReleaseError]:
    if config.tap is not None and config.homepage_base is not None:
        return Ok(None)
    owner = host.repo_owner()
    if isinstance(owner, Err):
        return owner
    return Ok(owner.value)


def _resolve_description(
    host: ReleaseHost, config: ReleaseConfig, console: ConsoleProtocol
) -> str | None:
    if config.description is not None:
        return config.description
    result = host.repo_description()
    if isinstance(result, Err):
        console.warning(f"could not read repository description: {result.error.message}")
        return None
    return result.value


def resolve_metadata(
    *,
    repo_root: Path,
    vcs: VersionControl,
    host: ReleaseHost,
    config: ReleaseConfig,
    console: ConsoleProtocol,
    runner: BinaryRunner = run_combined,
) -> Result[ReleaseMetadata, ReleaseError]:
    name = validate_kebab_case(repo_root.name)
    if isinstance(name, Err):
        return name
    repo_name = name.value
    console.info(f"project: {repo_name}")

    binary_name = config.binary or repo_name
    binary_path = repo_root / binary_name
    ok = ensure_binary_executable(binary_path)
    if isinstance(ok, Err):
        return ok

    ok = ensure_clean_tree(vcs)
    if isinstance(ok, Err):
        return ok

    console.print(f"{binary_name} {config.test_flag}", Style.DIM)
    tag = detect_version(binary_path, test_flag=config.test_flag, runner=runner)
    if isinstance(tag, Err):
        return tag
    console.info(f"version: {tag.value}")

    owner = _resolve_owner(host, config)
    if isinstance(owner, Err):
        return owner
    homepage_base = config.homepage_base or f"{GITHUB_BASE_URL}/{owner.value}"
    tap = config.tap or f"{owner.value}/{DEFAULT_TAP_NAME}"

    license_type = detect_license(repo_root)
    if license_type.is_known:
        console.info(f"license: {license_type}")
    else:
        console.warning("license not detected; formula will omit it")

    return Ok(
        ReleaseMetadata(
            repo_name=repo_name,
            repo_root=repo_root,
            binary_name=binary_name,
            binary_path=binary_path,
            formula_class=to_pascal_case(binary_name),
            version_tag=tag.value,
            homepage=f"{homepage_base}/{repo_name}",
            test_flag=config.test_flag,
            tap=tap,
            license=license_type,
            description=_resolve_description(host, config, console),
        )
    )
