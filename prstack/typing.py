"""Common types used across the codebase."""

from typing import List, Protocol


class SprError(Exception):
    """Base class for errors raised by prstack."""


class GitError(SprError):
    """Raised when the repository cannot be read or a git command fails."""


class PRStackError(SprError):
    """Raised when a commit carries no usable PR stack text."""

    def __init__(self, commit_id: str, reason: str):
        self.commit_id = commit_id
        self.reason = reason
        super().__init__(f"No PR stack in commit {commit_id[:8]}: {reason}")


class CommandFailedError(SprError):
    """Raised when an external command exits with a non-zero status.

    The captured standard error has already been echoed to the diagnostic
    stream by the time this is raised; it is kept here for callers that
    want to inspect it.
    """

    def __init__(self, command: List[str], returncode: int, stderr: bytes = b""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__("command failed")


class GitInterface(Protocol):
    """Protocol for what the stack builder expects from git."""

    def run_cmd(self, command: str) -> str:
        ...

    def must_git(self, command: str) -> str:
        ...

    def get_commit_message(self, commit_id: str) -> str:
        ...

    def parse_pr_stack_from_commit(self, commit_id: str) -> List[int]:
        ...
