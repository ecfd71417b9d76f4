"""Reconcile the version tag with what already exists remotely.

States: NO_CONFLICT (proceed), CONFLICT_DETECTED (remote tag or hosted
release exists), OVERWRITE_CONFIRMED (operator accepted; local tag, remote
tag and hosted release are all deleted) and ABORTED (operator declined,
nothing deleted). On an already-clean state the whole thing is a no-op.
"""

from __future__ import annotations

from brewship.core.result import Err, Ok, Result
from brewship.output.console import ConsoleProtocol, Style
from brewship.services.release.errors import ReleaseError
from brewship.services.release.model import ConflictState, RemoteReleaseState
from brewship.services.release.ports import Confirm, ReleaseHost, VersionControl


def query_remote_state(
    *, tag: str, vcs: VersionControl, host: ReleaseHost
) -> Result[RemoteReleaseState, ReleaseError]:
    tag_exists = vcs.remote_tag_exists(tag)
    if isinstance(tag_exists, Err):
        return Err(
            ReleaseError(
                kind="command_failed",
                message=f"failed to list remote tags for {tag}",
                hint=tag_exists.error.message,
            )
        )

    release_exists = host.release_exists(tag)
    if isinstance(release_exists, Err):
        return release_exists

    return Ok(
        RemoteReleaseState(
            tag_exists_remote=tag_exists.value,
            release_exists_on_host=release_exists.value,
        )
    )


def delete_existing_release(
    *, tag: str, vcs: VersionControl, host: ReleaseHost, console: ConsoleProtocol
) -> None:
    """Delete local tag, remote tag and hosted release.

    Each deletion is attempted regardless of the others; failures (usually
    "already absent") are reported as warnings only.
    """
    console.print(f"git tag -d {tag}", Style.DIM)
    local = vcs.delete_local_tag(tag)
    if isinstance(local, Err):
        console.warning(f"local tag not deleted: {local.error.message}")

    console.print(f"git push origin :refs/tags/{tag}", Style.DIM)
    remote = vcs.delete_remote_tag(tag)
    if isinstance(remote, Err):
        console.warning(f"remote tag not deleted: {remote.error.message}")

    console.print(f"gh release delete {tag} --yes", Style.DIM)
    release = host.delete_release(tag)
    if isinstance(release, Err):
        console.warning(f"release not deleted: {release.error.hint or release.error.message}")


def decide_conflict(
    *,
    tag: str,
    remote: RemoteReleaseState,
    confirm: Confirm,
    console: ConsoleProtocol,
) -> ConflictState:
    """Advance from the observed state to NO_CONFLICT, OVERWRITE_CONFIRMED or ABORTED."""
    if remote.state is ConflictState.NO_CONFLICT:
        console.info(f"no existing tag or release for {tag}")
        return ConflictState.NO_CONFLICT

    if remote.tag_exists_remote:
        console.warning(f"tag {tag} already exists on origin")
    if remote.release_exists_on_host:
        console.warning(f"release {tag} already exists")

    if not confirm(f"Delete the existing {tag} tag and release and publish again?"):
        return ConflictState.ABORTED
    return ConflictState.OVERWRITE_CONFIRMED


def reconcile_release_state(
    *,
    tag: str,
    vcs: VersionControl,
    host: ReleaseHost,
    confirm: Confirm,
    console: ConsoleProtocol,
) -> Result[ConflictState, ReleaseError]:
    remote = query_remote_state(tag=tag, vcs=vcs, host=host)
    if isinstance(remote, Err):
        return remote

    state = decide_conflict(tag=tag, remote=remote.value, confirm=confirm, console=console)
    if state is ConflictState.ABORTED:
        return Err(
            ReleaseError(
                kind="conflict_declined",
                message=f"release {tag} already exists; aborted",
                hint="Bump the version in the binary, or accept the overwrite.",
            )
        )

    if state is ConflictState.OVERWRITE_CONFIRMED:
        delete_existing_release(tag=tag, vcs=vcs, host=host, console=console)
    return Ok(state)
