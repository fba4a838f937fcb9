"""
Configuration reader for SNS settings.
"""

import json
from pathlib import Path
from typing import Dict

from sns_sdk import SNSConfig
from sns_sdk.config import DEFAULT_REGION

REQUIRED_FIELDS = ['access_key', 'secret_key']


def _read_config_file(config_file: str) -> Dict:
    config_path = Path(config_file)

    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_file}\n"
            f"Please create a configuration file with the following structure:\n"
            f'{{\n'
            f'    "access_key": "YOUR_ACCESS_KEY",\n'
            f'    "secret_key": "YOUR_SECRET_KEY",\n'
            f'    "region": "us-east-1"\n'
            f'}}'
        )

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in configuration file: {e}")

    if not isinstance(config_data, dict):
        raise ValueError("Configuration file must contain a JSON object")

    missing_fields = [field for field in REQUIRED_FIELDS if not config_data.get(field)]
    if missing_fields:
        raise ValueError(
            f"Missing required fields in configuration file: {', '.join(missing_fields)}\n"
            f"Required fields: {', '.join(REQUIRED_FIELDS)}"
        )

    return config_data


def load_sns_config(config_file: str = 'sns_config.json') -> SNSConfig:
    """
    Load SNS configuration from JSON file.

    Args:
        config_file: Path to configuration JSON file (default: 'sns_config.json')

    Returns:
        SNSConfig instance

    Raises:
        FileNotFoundError: If configuration file doesn't exist
        ValueError: If configuration file is invalid or missing required fields
        SNSConfigError: If region or protocol is not recognised

    Example:
        config = load_sns_config('sns_config.json')
        sdk = SNSSDK(config)
    """
    config_data = _read_config_file(config_file)
    return SNSConfig(
        access_key=config_data['access_key'],
        secret_key=config_data['secret_key'],
        region=config_data.get('region', DEFAULT_REGION),
        protocol=config_data.get('protocol', 'https')
    )


def get_sns_config_dict(config_file: str = 'sns_config.json') -> Dict[str, str]:
    """
    Load SNS configuration as dictionary from JSON file.

    Raises:
        FileNotFoundError: If configuration file doesn't exist
        ValueError: If configuration file is invalid or missing required fields
    """
    config_data = _read_config_file(config_file)
    return {
        'access_key': config_data['access_key'],
        'secret_key': config_data['secret_key'],
        'region': config_data.get('region', DEFAULT_REGION),
        'protocol': config_data.get('protocol', 'https')
    }
