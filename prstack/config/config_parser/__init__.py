"""Config parser logic."""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union, Any
import logging
import re
import yaml

from ...typing import GitInterface

# Get module logger
logger = logging.getLogger(__name__)

RepoConfig = Dict[str, Any]  # Use Any since yaml can return various types
Config = Dict[str, RepoConfig]

# git@github.com:owner/repo.git, ssh://git@github.com/owner/repo, https://github.com/owner/repo.git
_REMOTE_RE = re.compile(
    r'^(?:(?:ssh|https?|git)://)?(?:[^@/]+@)?(?P<host>[^:/]+)(?::\d+)?[:/](?P<owner>[^/]+)/(?P<name>[^/]+?)(?:\.git)?/?$'
)

def parse_remote_url(remote_url: str) -> Optional[Tuple[str, str, str]]:
    """Split a git remote URL into (host, owner, name)."""
    match = _REMOTE_RE.match(remote_url.strip())
    if not match:
        return None
    return match.group('host'), match.group('owner'), match.group('name')

def parse_config(git_cmd: GitInterface, path: Union[str, Path] = '.spr.yaml') -> Config:
    """Parse config from the repository config file and git remote."""
    config: Config = {
        'repo': {
            'github_remote': 'origin',
            'github_branch': 'main',
            'github_host': 'github.com',
        },
        'user': {},
    }

    host_configured = False

    # Try to load .spr.yaml from repository root
    try:
        with open(path, 'r') as f:
            logger.info(f"Found {path}, loading...")
            repo_config = yaml.safe_load(f)
            logger.debug(f"Config from {path}: {repo_config}")
            if repo_config:
                if 'repo' in repo_config and isinstance(repo_config['repo'], dict):
                    config['repo'].update(repo_config['repo'])
                    host_configured = 'github_host' in repo_config['repo']
                if 'user' in repo_config and isinstance(repo_config['user'], dict):
                    config['user'].update(repo_config['user'])
    except FileNotFoundError:
        logger.info(f"No {path} found, using defaults")

    # Try to extract repo owner/name from git remote if not in config
    if not config['repo'].get('github_repo_owner') or not config['repo'].get('github_repo_name'):
        remote = config['repo']['github_remote']
        try:
            remote_url = git_cmd.run_cmd(f"remote get-url {remote}")
        except Exception as e:
            logger.error(f"Failed to read git remote {remote}: {e}")
            return config

        parsed = parse_remote_url(remote_url)
        if parsed is None:
            logger.error(f"Failed to parse git remote: {remote_url}")
            return config

        host, owner, name = parsed
        if not config['repo'].get('github_repo_owner'):
            config['repo']['github_repo_owner'] = owner
        if not config['repo'].get('github_repo_name'):
            config['repo']['github_repo_name'] = name
        if not host_configured:
            config['repo']['github_host'] = host

    return config
