"""Tests for configuration and logging helpers."""

import logging
import pytest
import yaml
from pathlib import Path
from id_extractor.utils import load_config, setup_logging


def test_load_config(tmp_path):
    """Test YAML loading."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("dates:\n  minimum_age: 21\n")

    assert load_config(config_file) == {'dates': {'minimum_age': 21}}


def test_load_empty_config(tmp_path):
    """Test an empty file gives an empty configuration."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")

    assert load_config(config_file) == {}


def test_load_missing_config(tmp_path):
    """Test missing files raise."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_invalid_config(tmp_path):
    """Test malformed YAML raises."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("dates: [unclosed\n")

    with pytest.raises(yaml.YAMLError):
        load_config(config_file)


def test_shipped_config_loads():
    """Test the repository config.yaml parses."""
    config = load_config(Path(__file__).parent.parent / "config.yaml")
    assert config['spatial']['line_tolerance'] == 10
    assert config['dates']['minimum_age'] == 18


def test_setup_logging_does_not_stack_handlers(tmp_path):
    """Test repeated setup replaces handlers."""
    config = {'level': 'DEBUG', 'file': str(tmp_path / 'extractor.log')}

    setup_logging(config)
    logger = setup_logging(config)

    assert logger.name == 'id_extractor'
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    setup_logging({'level': 'INFO'})
