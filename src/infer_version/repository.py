"""Resolve the HEAD commit of the git repository in a working directory."""

import logging
import os
import re
import subprocess
from pathlib import Path

from .exceptions import RepositoryError

logger = logging.getLogger(__name__)

# SHA-1 and SHA-256 object ids
_COMMIT_ID = re.compile(r"[0-9a-f]{40}|[0-9a-f]{64}")


def _git_env() -> dict[str, str]:
    # GIT_DIR and friends (set inside git hooks) would point rev-parse elsewhere
    return {k: v for k, v in os.environ.items() if not k.startswith("GIT_")}


def resolve_head(workdir: Path | None = None) -> str:
    """Get the full commit id HEAD points at.

    The repository must be rooted at workdir itself; parent directories are
    not searched. Uncommitted changes are not detected.

    Args:
        workdir: Repository root (defaults to the current directory)

    Returns:
        Full lowercase hex commit id

    Raises:
        RepositoryError: If there is no repository at workdir, git is not
            installed, or HEAD does not resolve to a commit
    """
    repo_path = workdir or Path.cwd()

    if not (repo_path / ".git").exists():
        logger.error(f"No git repository at {repo_path}")
        raise RepositoryError(f"No git repository found at {repo_path}", path=repo_path)

    try:
        result = subprocess.run(
            ["git", "rev-parse", "--verify", "--quiet", "HEAD^{commit}"],
            cwd=repo_path,
            env=_git_env(),
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise RepositoryError(
            "'git' command not found. Please install git first.", path=repo_path
        ) from e
    except subprocess.CalledProcessError as e:
        error_msg = (
            f"Cannot resolve HEAD in {repo_path} "
            "(a repository needs at least one commit)"
        )
        logger.error(f"{error_msg}: {e.stderr}")
        raise RepositoryError(error_msg, path=repo_path, stderr=e.stderr) from e

    logger.debug(f"Git rev-parse output: {result.stdout}")
    commit = result.stdout.strip()
    if not _COMMIT_ID.fullmatch(commit):
        raise RepositoryError(
            f"Unexpected commit id '{commit}' for HEAD in {repo_path}",
            path=repo_path,
            stderr=result.stderr,
        )

    logger.info(f"Resolved HEAD in {repo_path} to {commit}")
    return commit
