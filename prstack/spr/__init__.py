"""Build the PR stack text embedded in commit and PR descriptions."""

import logging
from typing import List, Sequence

from ..config.models import PrstackConfig
from ..typing import GitInterface
from ..util import ensure

# Get module logger
logger = logging.getLogger(__name__)

CURRENT_PR_MARKER = "<-- (current PR)"


def pr_url(owner: str, repo: str, number: int, host: str = "github.com") -> str:
    """URL of a pull request."""
    return f"https://{host}/{owner}/{repo}/pull/{number}"


def build_pr_stack_message(numbers: Sequence[int], owner: str, repo: str,
                           host: str = "github.com") -> str:
    """Render a PR stack, one URL per line, current PR first.

    The first line is marked as the current PR. Only the leading URL of each
    line is read back by parse_pr_stack_list, so the marker is free text.
    """
    lines: List[str] = []
    for i, number in enumerate(numbers):
        url = pr_url(owner, repo, number, host)
        lines.append(f"{url} {CURRENT_PR_MARKER}" if i == 0 else url)
    return "\n".join(lines)


def get_pr_stack(git: GitInterface, config: PrstackConfig, pr_number: int, parent_commit: str,
                 is_cherry_pick: bool, is_based_on_default_branch: bool) -> str:
    """Get the rendered PR stack for a pull request.

    Cherry-picks and changes sitting directly on the default branch are a
    stack of one and git is not consulted. Otherwise the stack recorded on
    the parent commit is extended with pr_number on top.

    Args:
        git: Git accessor used to read the parent commit's stack
        config: Supplies repository owner, name and host
        pr_number: The pull request being rendered
        parent_commit: Commit the change is based on
        is_cherry_pick: Change is submitted on its own
        is_based_on_default_branch: Parent commit is on the default branch

    Returns:
        The stack text, one PR URL per line

    Raises:
        PRStackError, GitError: From the parent commit lookup
    """
    if is_cherry_pick or is_based_on_default_branch:
        logger.debug(f"PR #{pr_number} is standalone (cherry_pick={is_cherry_pick}, "
                     f"based_on_default_branch={is_based_on_default_branch})")
        stack = [pr_number]
    else:
        stack = [pr_number] + git.parse_pr_stack_from_commit(parent_commit)
        logger.debug(f"PR #{pr_number} stacked on {parent_commit[:8]}: {stack}")

    owner = ensure(config.repo.github_repo_owner)
    repo = ensure(config.repo.github_repo_name)
    return build_pr_stack_message(stack, owner, repo, config.repo.github_host)
