"""Action configuration loading."""

from gpt_translate.config.action_config import (
    ActionConfig,
    ActionConfigError,
    ActionEnvironment,
    GitHubSettings,
    load_action_config,
)

__all__ = [
    "ActionConfig",
    "ActionConfigError",
    "ActionEnvironment",
    "GitHubSettings",
    "load_action_config",
]
