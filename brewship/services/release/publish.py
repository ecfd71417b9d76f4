from __future__ import annotations

from brewship.core.result import Err, Ok, Result
from brewship.output.console import ConsoleProtocol, Style
from brewship.services.release.errors import ReleaseError
from brewship.services.release.model import PackagedArtifact, ReleaseMetadata
from brewship.services.release.ports import ReleaseHost, VersionControl


def default_release_notes(tag: str) -> str:
    return f"Release {tag}"


def tag_and_push(
    *, metadata: ReleaseMetadata, vcs: VersionControl, console: ConsoleProtocol
) -> Result[None, ReleaseError]:
    tag = metadata.version_tag

    console.print(f"git tag {tag}", Style.DIM)
    created = vcs.create_tag(tag)
    if isinstance(created, Err):
        return Err(
            ReleaseError(
                kind="command_failed",
                message=f"failed to create tag {tag}",
                hint=created.error.message,
            )
        )

    console.print(f"git push origin {tag}", Style.DIM)
    pushed = vcs.push_tag(tag)
    if isinstance(pushed, Err):
        return Err(
            ReleaseError(
                kind="command_failed",
                message=f"failed to push tag {tag}",
                hint=pushed.error.message,
            )
        )

    console.success(f"tag {tag} pushed")
    return Ok(None)


def publish_release(
    *,
    metadata: ReleaseMetadata,
    artifact: PackagedArtifact,
    host: ReleaseHost,
    notes: str | None,
    console: ConsoleProtocol,
) -> Result[None, ReleaseError]:
    """Create the hosted release with the tarball as its only asset."""
    tag = metadata.version_tag
    console.print(f"gh release create {tag} {artifact.tarball_name} --title {tag}", Style.DIM)
    created = host.create_release(
        tag=tag,
        title=tag,
        notes=notes or default_release_notes(tag),
        asset=artifact.tarball_path,
    )
    if isinstance(created, Err):
        return created

    console.success(f"release {tag} published")
    return Ok(None)
