"""Subprocess execution with Result-based error handling.

Every external tool brewship drives (git, gh, the project binary) goes
through this module, so failures come back as ``ProcessError`` values with
the tool's stderr preserved for display.

Usage:
    result = run(["git", "tag", "v1.2.3"], cwd=repo_root)
    match result:
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from brewship.core.result import Err, Ok, Result

__all__ = ["ProcessError", "ProbeOutput", "run", "run_combined"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (-1 if it never started).
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"

    def detail(self) -> str:
        """Best human-readable detail: stderr, else stdout, else the summary."""
        return self.stderr.strip() or self.stdout.strip() or str(self)


@dataclass(frozen=True, slots=True)
class ProbeOutput:
    """Exit status and interleaved stdout+stderr of a completed process."""

    returncode: int
    output: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Execute a command and return stdout or error.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.
        env: Environment variables (uses current env if None).
        timeout: Maximum seconds to wait (None for no limit).

    Returns:
        Ok(stdout) on success, Err(ProcessError) on non-zero exit or when
        the command cannot be started.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                stdout="",
                stderr=f"Command timed out after {timeout}s",
            )
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_combined(cmd: list[str], cwd: Path) -> Result[ProbeOutput, ProcessError]:
    """Execute a command capturing stdout and stderr as one stream.

    Unlike ``run``, a non-zero exit is not an error here: callers inspect
    ``ProbeOutput.returncode`` themselves. Only a command that cannot be
    started at all yields ``Err``.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as e:
        return Err(ProcessError(command=tuple(cmd), returncode=-1, stdout="", stderr=str(e)))

    return Ok(ProbeOutput(returncode=proc.returncode, output=proc.stdout or ""))
