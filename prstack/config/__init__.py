"""Config module."""

from typing import Dict, Any
from .models import RepoConfig, UserConfig, PrstackConfig

class Config(PrstackConfig):
    """Config object holding repository and user config.

    Built from the raw dict produced by parse_config.
    """
    def __init__(self, config: Dict[str, Dict[str, Any]]):
        """Initialize with parsed config dict."""
        super().__init__(
            repo=RepoConfig.model_validate(config.get('repo', {})),
            user=UserConfig.model_validate(config.get('user', {})),
        )

def default_config() -> Config:
    """Get default config without parsing git."""
    return Config({
        'repo': {
            'github_remote': 'origin',
            'github_branch': 'main',
            'github_host': 'github.com',
        },
        'user': {},
    })
