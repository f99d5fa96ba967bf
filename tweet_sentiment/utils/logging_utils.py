import logging
import logging.config
from pathlib import Path
from typing import Optional

import yaml


def setup_logging(config_path: Path, log_level: Optional[str] = None) -> None:
    """
    Set up logging configuration from a YAML file.

    Args:
        config_path (Path): Path to the logging configuration YAML file.
        log_level (str, optional): Overrides the root logger level from the file.
    """
    level = log_level.upper() if log_level else logging.INFO
    config_path = Path(config_path)
    if config_path.exists():
        try:
            with open(config_path, "rt", encoding="utf-8") as f:
                log_config = yaml.safe_load(f.read())
            logging.config.dictConfig(log_config)
            logging.info(f"Logging configured successfully from {config_path}")
        except Exception as e:
            logging.basicConfig(level=level)
            logging.error(f"Error loading logging configuration from {config_path}: {e}. Using basicConfig.")
    else:
        logging.basicConfig(level=level)
        logging.warning(f"Logging configuration file not found at {config_path}. Using basicConfig.")

    if log_level:
        logging.getLogger().setLevel(level)
