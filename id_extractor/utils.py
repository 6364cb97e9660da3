"""Configuration and logging helpers."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def load_config(config_path: Union[str, Path] = "config.yaml") -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    return config or {}


def setup_logging(config: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """Setup logging configuration.

    Args:
        config: Logging configuration dictionary

    Returns:
        Configured ``id_extractor`` logger
    """
    if config is None:
        config = {'level': 'INFO', 'format': DEFAULT_LOG_FORMAT}

    logger = logging.getLogger('id_extractor')
    logger.setLevel(getattr(logging, str(config.get('level', 'INFO')).upper(), logging.INFO))

    # Repeated calls reconfigure instead of stacking handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_format = config.get('format', DEFAULT_LOG_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console_handler)

    # File handler with rotation
    if config.get('file'):
        file_handler = logging.handlers.RotatingFileHandler(
            config['file'],
            maxBytes=config.get('max_bytes', 10485760),
            backupCount=config.get('backup_count', 5)
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(file_handler)

    return logger
