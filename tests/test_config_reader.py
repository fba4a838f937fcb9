import json

import pytest

from config_reader import get_sns_config_dict, load_sns_config
from sns_sdk import SNSConfigError


def write_config(tmp_path, data):
    path = tmp_path / 'sns_config.json'
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding='utf-8')
    return str(path)


def test_load_config(tmp_path):
    path = write_config(tmp_path, {
        'access_key': 'AKIDEXAMPLE',
        'secret_key': 'secret',
        'region': 'eu-west-1',
    })
    config = load_sns_config(path)

    assert config.access_key == 'AKIDEXAMPLE'
    assert config.endpoint == 'sns.eu-west-1.amazonaws.com'
    assert config.protocol == 'https'


def test_region_defaults_to_us_east_1(tmp_path):
    path = write_config(tmp_path, {'access_key': 'a', 'secret_key': 's'})
    assert load_sns_config(path).region == 'us-east-1'


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sns_config(str(tmp_path / 'missing.json'))


def test_invalid_json(tmp_path):
    with pytest.raises(ValueError, match='Invalid JSON'):
        load_sns_config(write_config(tmp_path, '{not json'))


def test_missing_fields(tmp_path):
    with pytest.raises(ValueError, match='secret_key'):
        load_sns_config(write_config(tmp_path, {'access_key': 'a'}))


def test_unknown_region(tmp_path):
    path = write_config(tmp_path, {'access_key': 'a', 'secret_key': 's', 'region': 'moon-1'})
    with pytest.raises(SNSConfigError):
        load_sns_config(path)


def test_config_dict(tmp_path):
    path = write_config(tmp_path, {'access_key': 'a', 'secret_key': 's', 'protocol': 'http'})
    assert get_sns_config_dict(path) == {
        'access_key': 'a',
        'secret_key': 's',
        'region': 'us-east-1',
        'protocol': 'http',
    }
