"""Load pathkit settings from YAML."""

from pathlib import Path

import yaml
from loguru import logger

from pathkit.config.models import Config


def load_config(config_path: Path | str | None) -> Config:
    """
    Build a Config from a YAML file.

    Values from the file are layered over ``PATHKIT_*`` environment
    variables and the built-in defaults.

    Args:
        config_path: YAML file to read, or None to use defaults only.

    Returns:
        Validated Config.

    Raises:
        FileNotFoundError: If config_path does not exist.
        ValueError: If the file is not valid YAML or its root is not a mapping.
    """
    if config_path is None:
        return Config()

    config_path = Path(config_path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        data = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    data = {} if data is None else data
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

    logger.debug("Loaded config from {} (sections: {})", config_path, sorted(data))
    return Config(**data)
