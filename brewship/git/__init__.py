"""Git operations.

Usage:
    from brewship.git import Repository

    repo = Repository(Path.cwd())
    root = repo.toplevel()
"""

from brewship.git.repository import GitError, Repository

__all__ = ["GitError", "Repository"]
