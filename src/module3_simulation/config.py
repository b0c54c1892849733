"""
Configuration loading for the simulator.

Defaults ship as default_config.yaml next to this file; a user file is
deep-merged over them.
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")

_VALID_MODES = ("single", "double", "triple")


def _get_builtin_defaults() -> Dict[str, Any]:
    """
    Hardcoded defaults, used when the packaged YAML is unavailable.
    """
    return {
        "hamming": {
            "min_data_bits": 1,
            "max_data_bits": 12,
        },
        "simulation": {
            "default_mode": "single",
            "random_seed": None,
        },
        "examples": {
            "basic": "1011",
            "intermediate": "1101001",
            "advanced": "11010011",
        },
        "logging": {
            "level": "INFO",
            "format": "%(asctime)s [%(levelname)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Top level of {path} must be a mapping, got {type(data).__name__}"
        )
    return data


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``base`` with ``override`` merged in recursively."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def validate_config(config: Dict[str, Any]) -> None:
    """
    Check types and ranges of the keys the simulator reads.

    Raises:
        ConfigurationError: On the first invalid value
    """
    try:
        hamming = config["hamming"]
        min_bits = hamming["min_data_bits"]
        max_bits = hamming["max_data_bits"]
        mode = config["simulation"]["default_mode"]
        seed = config["simulation"]["random_seed"]
        examples = config["examples"]
    except (KeyError, TypeError) as e:
        raise ConfigurationError(f"Missing required config key: {e}") from e

    for name, value in (("min_data_bits", min_bits), ("max_data_bits", max_bits)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigurationError(f"hamming.{name} must be a positive integer, got {value!r}")
    if min_bits > max_bits:
        raise ConfigurationError(
            f"hamming.min_data_bits ({min_bits}) exceeds max_data_bits ({max_bits})"
        )

    if str(mode).lower() not in _VALID_MODES:
        raise ConfigurationError(
            f"simulation.default_mode must be one of {', '.join(_VALID_MODES)}, got {mode!r}"
        )

    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigurationError(f"simulation.random_seed must be an integer or null, got {seed!r}")

    if not isinstance(examples, dict):
        raise ConfigurationError("examples must be a mapping of name -> bit string")
    for name, bits in examples.items():
        if not isinstance(bits, str) or not bits or set(bits) - {"0", "1"}:
            raise ConfigurationError(f"examples.{name} must be a binary string, got {bits!r}")


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration, merging a user file over the packaged defaults.

    Args:
        config_path: Path to a YAML file, or None for defaults only

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigurationError: If an explicit file is missing or invalid
    """
    if os.path.exists(DEFAULT_CONFIG_PATH):
        defaults = deep_merge(_get_builtin_defaults(), _read_yaml(DEFAULT_CONFIG_PATH))
    else:
        logger.warning("Packaged default config not found, using built-in defaults")
        defaults = _get_builtin_defaults()

    if config_path is None:
        config = defaults
    else:
        if not os.path.exists(config_path):
            raise ConfigurationError(f"Config file not found: {config_path}")
        config = deep_merge(defaults, _read_yaml(config_path))
        logger.info(f"Loaded configuration from {config_path}")

    validate_config(config)
    return config


def setup_logging(config: Optional[Dict[str, Any]] = None, verbose: bool = False) -> None:
    """Configure root logging from the ``logging`` section."""
    log_cfg = (config or _get_builtin_defaults()).get("logging", {})
    level = logging.DEBUG if verbose else getattr(
        logging, str(log_cfg.get("level", "INFO")).upper(), logging.INFO
    )
    logging.basicConfig(
        level=level,
        format=log_cfg.get("format", "%(asctime)s [%(levelname)s] %(message)s"),
        datefmt=log_cfg.get("datefmt", "%Y-%m-%d %H:%M:%S"),
    )
