"""Pydantic models for config types."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class RepoConfig(BaseModel):
    """Repository configuration."""
    model_config = ConfigDict(extra="allow")

    github_remote: str = "origin"
    github_branch: str = "main"
    github_host: str = "github.com"
    github_repo_owner: Optional[str] = None
    github_repo_name: Optional[str] = None

class UserConfig(BaseModel):
    """User configuration."""
    model_config = ConfigDict(extra="allow")

    log_git_commands: bool = False

class PrstackConfig(BaseModel):
    """Full prstack configuration."""
    model_config = ConfigDict(extra="allow")

    repo: RepoConfig = Field(default_factory=RepoConfig)
    user: UserConfig = Field(default_factory=UserConfig)
