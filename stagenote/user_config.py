"""Repository configuration for stagenote.

Reads and writes ``.stagenote/config.yaml`` at the repository root:
- ignore: glob patterns for staged files left out of the annotated diff
- max_diff_chars: length at which the staged diff is truncated
- num_suggestions: how many message variations the prompt asks for
"""

import copy
import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".stagenote"
CONFIG_FILE_NAME = "config.yaml"

DEFAULT_CONFIG = {
    "ignore": [
        # Lock files (auto-generated dependency files)
        "poetry.lock",
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "Cargo.lock",
        "Gemfile.lock",
        "composer.lock",
        "go.sum",
        # Build artifacts
        "*.min.js",
        "*.min.css",
        "*.map",
    ],
    "max_diff_chars": 50000,
    "num_suggestions": 1,
}


def _defaults() -> dict:
    return copy.deepcopy(DEFAULT_CONFIG)


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .stagenote/config.yaml.
    """
    return repo_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(repo_root: Path) -> dict:
    """Load the stagenote configuration from config.yaml.

    If the file doesn't exist, creates it with default values. Keys missing
    from the file are filled in from the defaults, and an unreadable file
    yields the defaults.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        save_config(repo_root, DEFAULT_CONFIG)
        return _defaults()

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_file, e)
        return _defaults()

    if not isinstance(config, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", config_file)
        return _defaults()

    for key, value in _defaults().items():
        config.setdefault(key, value)
    return config


def save_config(repo_root: Path, config: dict) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration dictionary to save.
    """
    config_file = get_config_file(repo_root)
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w") as f:
        yaml.dump(
            config,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def _positive_int(config: dict, key: str) -> int:
    value = config.get(key)
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    logger.warning("Invalid %s in config: %r, using %r", key, value, DEFAULT_CONFIG[key])
    return DEFAULT_CONFIG[key]


def get_ignore_patterns(repo_root: Path) -> list[str]:
    """Get the list of ignore patterns from config.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        List of file patterns to ignore in diffs.
    """
    config = load_config(repo_root)
    return config.get("ignore") or []


def get_max_diff_chars(repo_root: Path) -> int:
    """Get the diff truncation length from config."""
    return _positive_int(load_config(repo_root), "max_diff_chars")


def get_num_suggestions(repo_root: Path) -> int:
    """Get the number of message variations to request from config."""
    return _positive_int(load_config(repo_root), "num_suggestions")


def add_ignore_pattern(repo_root: Path, pattern: str) -> None:
    """Add a pattern to the ignore list.

    Args:
        repo_root: The root directory of the git repository.
        pattern: File pattern to add (e.g., "*.log", "build/*").
    """
    config = load_config(repo_root)
    patterns = config.get("ignore") or []
    if pattern not in patterns:
        patterns.append(pattern)
        config["ignore"] = patterns
        save_config(repo_root, config)


def remove_ignore_pattern(repo_root: Path, pattern: str) -> bool:
    """Remove a pattern from the ignore list.

    Args:
        repo_root: The root directory of the git repository.
        pattern: File pattern to remove.

    Returns:
        True if pattern was found and removed, False otherwise.
    """
    config = load_config(repo_root)
    patterns = config.get("ignore") or []
    if pattern not in patterns:
        return False
    patterns.remove(pattern)
    config["ignore"] = patterns
    save_config(repo_root, config)
    return True
