"""Checkout of the changelog details branch."""

from pathlib import Path
import shutil

import git

from ..logging import get_logger

logger = get_logger(__name__)


def ensure_details_checkout(details_dir: Path, git_url: str, branch: str, force_clean: bool = False) -> Path:
    """
    Make sure the changelog details branch is checked out in ``details_dir``.

    Args:
        details_dir: Target directory of the checkout
        git_url: Clone URL of the repository
        branch: Branch holding the changelog details
        force_clean: Delete an existing checkout and clone again

    Returns:
        The checkout directory
    """
    if details_dir.exists() and force_clean:
        logger.info(f"Removing existing changelog details checkout: {details_dir}")
        shutil.rmtree(details_dir)

    if not details_dir.exists():
        logger.info(f"Cloning {git_url} ({branch}) into {details_dir}")
        details_dir.parent.mkdir(parents=True, exist_ok=True)
        git.Repo.clone_from(git_url, str(details_dir), branch=branch)

    return details_dir
