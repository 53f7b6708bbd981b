"""
Config Loader
Deployment settings: built-in defaults, config file, then .env overrides
"""

import os
import copy
import json
from typing import Dict
from loguru import logger
from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()


DEFAULT_CONFIG_PATH = "config/deploy_config.json"

DEFAULT_CONFIG = {
    'rpc_url': 'https://rpc-testnet.qanplatform.com',
    'private_key_path': 'privkey.txt',
    'contract': {
        'path': 'sample.sol',
        'name': 'SampleToken'
    },
    'compiler': {
        'binary': 'solc',
        'evm_version': 'paris'
    },
    # _name, _sym, _dec, _ts
    'constructor_args': ['The Quantum Cat', 'QCAT', 18, 2000000000],
    'transactions': {
        'gas_limit_multiplier': 1.2,
        'receipt_timeout': 120
    }
}

# env var -> (section, key); section None means top level
ENV_OVERRIDES = {
    'DEPLOY_RPC_URL': (None, 'rpc_url'),
    'DEPLOY_PRIVATE_KEY_PATH': (None, 'private_key_path'),
    'DEPLOY_SOLC_BINARY': ('compiler', 'binary'),
}


def _merge(base: Dict, override: Dict) -> Dict:
    """Recursively overlay override onto base"""
    merged = copy.deepcopy(base)

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value

    return merged


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict:
    """
    Load deployment configuration

    Args:
        config_path: JSON file overlaid on the defaults (optional)

    Returns:
        Configuration dict
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(f"{config_path} must contain a JSON object")

        config = _merge(config, file_config)
        logger.debug(f"Loaded config from {config_path}")
    else:
        logger.debug(f"{config_path} not found, using built-in defaults")

    for env_var, (section, key) in ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if not value:
            continue

        if section is None:
            config[key] = value
        else:
            config[section][key] = value
        logger.debug(f"{env_var} overrides {key}")

    return config
