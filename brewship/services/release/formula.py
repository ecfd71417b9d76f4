"""Homebrew formula rendering and the tap repository update."""

from __future__ import annotations

from pathlib import Path

from brewship.core.result import Err, Ok, Result
from brewship.output.console import ConsoleProtocol, Style
from brewship.platform.process import run_combined
from brewship.services.release.config import FORMULA_DIR, TAP_CHECKOUT_DIR
from brewship.services.release.errors import ReleaseError
from brewship.services.release.model import PackagedArtifact, ReleaseMetadata
from brewship.services.release.ports import (
    BinaryRunner,
    Confirm,
    OpenRepository,
    ReleaseHost,
)


def ruby_string(value: str) -> str:
    """Double-quoted Ruby literal; blocks ``#{}`` interpolation."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("#{", "\\#{")
    return f'"{escaped}"'


def render_formula(metadata: ReleaseMetadata, artifact: PackagedArtifact) -> str:
    lines = [f"class {metadata.formula_class} < Formula"]
    if metadata.description:
        lines.append(f"  desc {ruby_string(metadata.description)}")
    lines.append(f"  homepage {ruby_string(metadata.homepage)}")
    lines.append(f"  url {ruby_string(metadata.download_url)}")
    lines.append(f'  sha256 "{artifact.sha256}"')
    if metadata.license.is_known:
        lines.append(f'  license "{metadata.license}"')
    lines += [
        "  def install",
        f"    bin.install {ruby_string(metadata.binary_name)}",
        "  end",
        "  test do",
        f'    system "#{{bin}}/{metadata.binary_name}", {ruby_string(metadata.test_flag)}',
        "  end",
        "end",
    ]
    return "\n".join(lines) + "\n"


def formula_relpath(metadata: ReleaseMetadata) -> str:
    return f"{FORMULA_DIR}/{metadata.formula_filename}"


def _sanity_check(
    *,
    metadata: ReleaseMetadata,
    runner: BinaryRunner,
    confirm: Confirm,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    result = runner([str(metadata.binary_path), metadata.test_flag], metadata.binary_path.parent)
    if isinstance(result, Ok) and result.value.succeeded:
        return Ok(None)

    if isinstance(result, Err):
        console.warning(f"{metadata.binary_name} {metadata.test_flag} failed: {result.error}")
    else:
        console.warning(
            f"{metadata.binary_name} {metadata.test_flag} exited {result.value.returncode}; "
            "the formula test block will fail"
        )

    if not confirm("Continue writing the formula anyway?"):
        return Err(
            ReleaseError(
                kind="sanity_declined",
                message="formula update aborted after failed binary test",
            )
        )
    return Ok(None)


def update_formula(
    *,
    metadata: ReleaseMetadata,
    artifact: PackagedArtifact,
    work_dir: Path,
    host: ReleaseHost,
    open_repository: OpenRepository,
    confirm: Confirm,
    console: ConsoleProtocol,
    runner: BinaryRunner = run_combined,
) -> Result[str, ReleaseError]:
    """Write ``Formula/<binary>.rb`` into the tap, commit and push.

    Returns the formula path relative to the tap root.
    """
    tap_root = work_dir / TAP_CHECKOUT_DIR
    console.print(f"gh repo clone {metadata.tap} {tap_root}", Style.DIM)
    cloned = host.clone_repo(slug=metadata.tap, dest=tap_root)
    if isinstance(cloned, Err):
        return cloned

    rel = formula_relpath(metadata)
    formula_path = tap_root / rel
    if formula_path.exists():
        console.warning(f"{rel} already exists in {metadata.tap}")
        if not confirm(f"Overwrite {rel}?"):
            return Err(
                ReleaseError(
                    kind="formula_declined",
                    message=f"refusing to overwrite {rel}",
                    hint=f"The release {metadata.version_tag} is published; update the tap by hand.",
                )
            )

    ok = _sanity_check(metadata=metadata, runner=runner, confirm=confirm, console=console)
    if isinstance(ok, Err):
        return ok

    try:
        formula_path.parent.mkdir(parents=True, exist_ok=True)
        formula_path.write_text(render_formula(metadata, artifact), encoding="utf-8")
    except OSError as e:
        return Err(
            ReleaseError(kind="command_failed", message=f"failed to write {rel}", hint=str(e))
        )
    console.info(f"wrote {rel}")

    repo = open_repository(tap_root)
    message = f"{metadata.binary_name} {metadata.version_tag}"
    console.print(f"git add {rel}", Style.DIM)
    console.print(f"git commit -m {message!r}", Style.DIM)
    added = repo.add([rel])
    if isinstance(added, Err):
        return Err(
            ReleaseError(kind="commit_failed", message="git add failed", hint=added.error.message)
        )

    committed = repo.commit(message)
    if isinstance(committed, Err):
        return Err(
            ReleaseError(
                kind="commit_failed",
                message=f"failed to commit {rel}",
                hint=committed.error.message or "Configure git user.name/user.email, then retry.",
            )
        )

    console.print("git push", Style.DIM)
    pushed = repo.push()
    if isinstance(pushed, Err):
        return Err(
            ReleaseError(
                kind="push_failed",
                message=f"failed to push {rel} to {metadata.tap}",
                hint=pushed.error.message,
            )
        )

    console.success(f"{metadata.tap}: {rel} updated to {metadata.version_tag}")
    return Ok(rel)
