import os
from pathlib import Path
from typing import Optional

import yaml

from reviewgate_core.errors import ConfigError
from reviewgate_core.models import ThresholdConfig

DEFAULT_CONFIG: dict = {
    "label_prefix": "reviewers-required/",
    "default_required_reviewers": 1,
}

# GitHub Actions exposes `with:` inputs as INPUT_<NAME> with the name upper-cased.
ACTION_INPUTS: dict = {
    "label_prefix": "INPUT_REVIEW-LABEL-PREFIX",
    "default_required_reviewers": "INPUT_DEFAULT-REQUIRED-REVIEWERS",
}


def load_config(config_path: str = ".reviewgate.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .reviewgate.yml in the current directory
      3. GitHub Actions inputs from the environment
      4. CLI argument overrides
    """
    config = dict(DEFAULT_CONFIG)

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            file_config = yaml.safe_load(f) or {}
        config.update(file_config)

    for key, env_name in ACTION_INPUTS.items():
        value = os.environ.get(env_name)
        # Actions passes unset optional inputs as empty strings.
        if value:
            config[key] = value

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    config["github_token"] = os.environ.get("INPUT_TOKEN") or os.environ.get("GITHUB_TOKEN")

    return config


def threshold_config(config: dict) -> ThresholdConfig:
    """
    Validate the gate settings in ``config``.

    Raises ConfigError for an empty label prefix or a default reviewer count
    that is not a non-negative integer. Callers should do this before talking
    to GitHub at all.
    """
    prefix = config.get("label_prefix")
    if not isinstance(prefix, str) or not prefix:
        raise ConfigError("Review label prefix must be a non-empty string")

    raw_default = config.get("default_required_reviewers")
    if isinstance(raw_default, bool):
        raise ConfigError(f"Default review count must be an integer, got {raw_default!r}")
    try:
        default = int(str(raw_default).strip())
    except ValueError:
        raise ConfigError(f"Default review count must be an integer, got {raw_default!r}") from None
    if default < 0:
        raise ConfigError("Default review count must be at least `0`")

    return ThresholdConfig(label_prefix=prefix, default_threshold=default)
