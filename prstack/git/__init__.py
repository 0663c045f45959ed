"""Git interfaces and implementation."""

import os
import shlex
import logging
from typing import List, Optional
import git
from git.exc import BadName, BadObject, GitCommandError, InvalidGitRepositoryError, NoSuchPathError
from ..typing import GitError, GitInterface, PRStackError
from ..config.models import PrstackConfig
from ..message import MessageSection, parse_message
from ..util import parse_pr_stack_list, slugify

# Get module logger
logger = logging.getLogger(__name__)

__all__ = ['GitInterface', 'RealGit', 'branch_name_from_title', 'parse_pr_stack_from_message']

def branch_name_from_title(config: PrstackConfig, title: str) -> str:
    """Get branch name for a commit title."""
    remote_branch = config.repo.github_branch
    return f"spr/{remote_branch}/{slugify(title)}"

def parse_pr_stack_from_message(commit_id: str, message: str) -> List[int]:
    """Decode the Stack section of a commit message.

    Raises:
        PRStackError: If the section is missing or holds no PR URLs
    """
    sections = parse_message(message)
    stack_text = sections.get(MessageSection.STACK)
    if not stack_text:
        raise PRStackError(commit_id, "message has no Stack section")
    stack = parse_pr_stack_list(stack_text)
    if not stack:
        raise PRStackError(commit_id, f"could not parse Stack section: {stack_text!r}")
    logger.debug(f"Commit {commit_id[:8]} has PR stack {stack}")
    return stack

class RealGit:
    """Real Git implementation."""
    def __init__(self, config: PrstackConfig, path: Optional[str] = None):
        """Initialize with config and optional repository path (default: cwd)."""
        self.config: PrstackConfig = config
        self.path = path

    def _repo(self) -> git.Repo:
        try:
            return git.Repo(self.path or os.getcwd(), search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise GitError("Not in a git repository")

    def run_cmd(self, command: str) -> str:
        """Run git command."""
        cmd_str = command.strip()
        if not cmd_str:
            raise GitError("Empty git command")

        if self.config.user.log_git_commands:
            logger.info(f"> git {cmd_str}")
        else:
            logger.debug(f"> git {cmd_str}")

        git_cmd = self._repo().git
        # Convert command to method call
        try:
            cmd_parts = shlex.split(cmd_str)
        except ValueError as e:
            raise GitError(f"Malformed git command {cmd_str!r}: {e}") from e
        git_command = cmd_parts[0]
        git_args = cmd_parts[1:]
        method = getattr(git_cmd, git_command.replace('-', '_'))
        try:
            result = method(*git_args)
        except GitCommandError as e:
            raise GitError(f"Git command failed: {e}") from e
        return result if isinstance(result, str) else str(result)

    def must_git(self, command: str) -> str:
        """Run git command, failing on error."""
        return self.run_cmd(command)

    def get_commit_message(self, commit_id: str) -> str:
        """Get the full message of a commit."""
        repo = self._repo()
        try:
            message = repo.commit(commit_id).message
        except (BadName, BadObject, ValueError) as e:
            raise GitError(f"Unknown commit {commit_id}: {e}") from e
        return message if isinstance(message, str) else message.decode('utf-8', 'replace')

    def parse_pr_stack_from_commit(self, commit_id: str) -> List[int]:
        """Get the PR stack recorded in a commit's message, head PR first."""
        return parse_pr_stack_from_message(commit_id, self.get_commit_message(commit_id))

    def is_based_on_default_branch(self, commit_id: str) -> bool:
        """Check whether a commit is already part of the default branch."""
        ref = f"{self.config.repo.github_remote}/{self.config.repo.github_branch}"
        repo = self._repo()
        try:
            return repo.is_ancestor(commit_id, ref)
        except GitCommandError as e:
            raise GitError(f"Failed to compare {commit_id} with {ref}: {e}") from e
