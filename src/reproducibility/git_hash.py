"""Git hash capture with dirty-tree detection for result provenance.

Stored in result.json so a metrics run can be traced back to the exact
generator code that produced it.
"""

import subprocess


def _git(*args: str) -> str:
    return subprocess.check_output(
        ["git", *args], stderr=subprocess.DEVNULL
    ).decode().strip()


def get_git_hash() -> str:
    """Short SHA of HEAD, suffixed with '-dirty' for uncommitted changes.

    Returns:
        "a3f9c1d", "a3f9c1d-dirty", or "unknown" when git is unavailable
        or the working directory is not a repository.
    """
    try:
        sha = _git("rev-parse", "--short", "HEAD")
        status = _git("status", "--porcelain", "--untracked-files=no")
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"
    return f"{sha}-dirty" if status else sha
