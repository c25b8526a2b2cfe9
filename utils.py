# utils.py
"""
Utility functions for the simulation framework.

This module provides the logging setup, configuration loading and the seeded
random generator shared by both demos. None of it belongs to a specific
simulation.
"""
import copy
import logging
import logging.handlers
import json
import os
import numpy as np
from typing import Dict, Any, Optional

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> logging.Handler:
#   - Inputs:
#     - config: A dictionary containing a "logging" key with "level",
#       "format", "log_file", "max_bytes" and "backup_count" sub-keys;
#       missing keys fall back to DEFAULT_CONFIG.
#   - Outputs: The rotating file handler.
#   - Side Effects: Configures the root Python logger with a console handler
#     and a rotating file handler. Creates the log directory if needed.
#
# merge_config(overrides: Dict[str, Any]) -> Dict[str, Any]:
#   - Outputs: A new dictionary, DEFAULT_CONFIG deep-merged with `overrides`.
#   - Invariants: Neither input is mutated.

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(levelname)s - %(message)s",
        "log_file": "logs/sandbox.log",
        "max_bytes": 1048576,
        "backup_count": 5,
    },
    "run_control": {
        "demo": "carrom",
        "max_steps": 0,
        "log_throttle_steps": 300,
        "profile": False,
    },
    "visualization": {
        "fullscreen": False,
        "window_width": 1440,
        "window_height": 700,
        "fps": 60,
    },
    "carrom": {
        "seed": None,
        "body_count": 20,
        "radius_min": 30.0,
        "radius_max": 40.0,
        "mass": 1.0,
        "friction": 0.6,
        "energy_loss": 0.6,
        "impulse_divisor": 15.0,
        "initial_speed": 0.0,
        "placement": "canvas",
    },
    "life": {
        "resolution": 20,
        "generations_per_second": 4,
    },
}


def setup_logging(config: Dict[str, Any]) -> logging.Handler:
    """
    Points the root logger at the console and at the sandbox's rotating
    log file, using the "logging" section of the config.

    Returns:
        logging.Handler: The rotating file handler.
    """
    log_config = {**DEFAULT_CONFIG['logging'], **config.get('logging', {})}
    log_level = log_config['level'].upper()
    log_file_path = log_config['log_file']

    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(log_level)
    # Re-running replaces the handlers instead of stacking them.
    root.handlers.clear()

    formatter = logging.Formatter(log_config['format'])
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=log_config['max_bytes'],
        backupCount=log_config['backup_count'],
    )
    for handler in (logging.StreamHandler(), file_handler):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.info(
        f"Sandbox logging at {log_level} to console and {log_file_path} "
        f"(rotating at {log_config['max_bytes']} bytes, {log_config['backup_count']} backups)."
    )
    return file_handler


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file and fills in defaults."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise
    logging.info("Configuration loaded successfully.")
    return merge_config(config)


def merge_config(overrides: Dict[str, Any], base: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Deep-merges `overrides` on top of `base` (DEFAULT_CONFIG by default).

    Nested dictionaries are merged key by key; any other value in
    `overrides` replaces the base value outright.
    """
    merged = copy.deepcopy(DEFAULT_CONFIG if base is None else base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(value, merged[key])
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Creates the single random generator a simulation draws from."""
    if seed is None:
        logging.debug("No seed configured; using OS entropy.")
    return np.random.default_rng(seed)
