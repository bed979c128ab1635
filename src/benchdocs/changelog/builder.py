"""
Changelog details download.

For a release ``vX`` the details page lists what the ``vX`` milestone resolved
on GitHub and the commits between the previous release tag and ``vX`` (or an
explicit last commit such as ``HEAD`` for the version still in progress).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .github import GitHubClient
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChangelogRange:
    """One changelog download: a version, the ref it starts from and the last commit."""
    version: str
    base: str                           # previous release tag or first commit
    last_commit: str = ""

    @property
    def milestone(self) -> str:
        return f"v{self.version}"

    @property
    def head(self) -> str:
        return self.last_commit or self.milestone


@dataclass
class ReleaseData:
    """Everything GitHub reports for one release."""
    changelog_range: ChangelogRange
    issues: List[Dict[str, Any]] = field(default_factory=list)
    pull_requests: List[Dict[str, Any]] = field(default_factory=list)
    commits: List[Dict[str, Any]] = field(default_factory=list)

    def contributors(self) -> List[Tuple[str, Optional[str]]]:
        """Distinct commit authors as (name, login) sorted by name."""
        seen: Dict[str, Tuple[str, Optional[str]]] = {}
        for commit in self.commits:
            name, login = _commit_author(commit)
            key = (login or name).lower()
            if key not in seen:
                seen[key] = (name, login)
        return sorted(seen.values(), key=lambda author: author[0].lower())


def _commit_author(commit: Dict[str, Any]) -> Tuple[str, Optional[str]]:
    git_author = (commit.get("commit") or {}).get("author") or {}
    account = commit.get("author") or {}
    login = account.get("login")
    name = git_author.get("name") or login or "unknown"
    return name, login


def _user_link(login: Optional[str]) -> str:
    return f"[@{login}](https://github.com/{login})" if login else "unknown"


def _is_merged_pull_request(item: Dict[str, Any]) -> bool:
    pull_request = item.get("pull_request")
    return bool(pull_request) and bool(pull_request.get("merged_at"))


async def collect_release(client: GitHubClient, changelog_range: ChangelogRange) -> ReleaseData:
    """Query GitHub for the milestone items and commits of one release."""
    data = ReleaseData(changelog_range)

    milestone = await client.find_milestone(changelog_range.milestone)
    if milestone is None:
        logger.warning(f"Milestone {changelog_range.milestone} not found, issue list will be empty")
    else:
        items = await client.milestone_issues(milestone["number"])
        data.issues = sorted(
            (item for item in items if "pull_request" not in item),
            key=lambda item: item["number"],
        )
        data.pull_requests = sorted(
            (item for item in items if _is_merged_pull_request(item)),
            key=lambda item: item["number"],
        )

    data.commits = await client.compare_commits(changelog_range.base, changelog_range.head)
    logger.info(
        f"{changelog_range.milestone}: {len(data.issues)} issues, "
        f"{len(data.pull_requests)} pull requests, {len(data.commits)} commits"
    )
    return data


def render_release_notes(data: ReleaseData, repo_url: str) -> str:
    """
    Render the details page of one release.

    Args:
        data: Release data collected from GitHub
        repo_url: Web URL of the repository, used for milestone links

    Returns:
        Markdown text of the details fragment
    """
    milestone = data.changelog_range.milestone
    contributors = data.contributors()

    lines = [
        "## Milestone details",
        "",
        f"In the [{milestone}]({repo_url}/issues?q=milestone:{milestone}) scope,",
        f"{len(data.issues)} issues were resolved and {len(data.pull_requests)} pull requests were merged.",
        f"This release includes {len(data.commits)} commits by {len(contributors)} contributors.",
        "",
        f"## Resolved issues ({len(data.issues)})",
        "",
    ]
    for issue in data.issues:
        assignee = (issue.get("assignee") or {}).get("login")
        suffix = f" (assignee: {_user_link(assignee)})" if assignee else ""
        lines.append(f"* [#{issue['number']}]({issue['html_url']}) {issue['title'].strip()}{suffix}")

    lines += ["", f"## Merged pull requests ({len(data.pull_requests)})", ""]
    for pull_request in data.pull_requests:
        author = (pull_request.get("user") or {}).get("login")
        lines.append(
            f"* [#{pull_request['number']}]({pull_request['html_url']}) "
            f"{pull_request['title'].strip()} (by {_user_link(author)})"
        )

    lines += ["", f"## Commits ({len(data.commits)})", ""]
    for commit in data.commits:
        sha = commit["sha"]
        message = (commit.get("commit") or {}).get("message", "").strip().split("\n", 1)[0]
        name, login = _commit_author(commit)
        author = _user_link(login) if login else name
        lines.append(f"* [{sha[:8]}]({commit['html_url']}) {message} (by {author})")

    lines += ["", f"## Contributors ({len(contributors)})", ""]
    for name, login in contributors:
        lines.append(f"* {name} ({_user_link(login)})" if login else f"* {name}")

    lines += ["", "Thank you very much!"]
    return "\n".join(lines) + "\n"


async def download_changelog(
    client: GitHubClient,
    details_dir: Path,
    changelog_range: ChangelogRange,
    repo_url: str,
) -> Path:
    """Collect one release from GitHub and write ``details/v{version}.md``."""
    data = await collect_release(client, changelog_range)
    details_dir.mkdir(parents=True, exist_ok=True)
    details_path = details_dir / f"{changelog_range.milestone}.md"
    details_path.write_text(render_release_notes(data, repo_url), encoding='utf-8')
    logger.info(f"Wrote changelog details to {details_path}")
    return details_path
