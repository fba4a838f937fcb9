from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ProfileNotFound

from sns_sdk import REGION_ENDPOINTS, SNSConfig, SNSConfigError, SNSValidationError


class TestRegions:

    @pytest.mark.parametrize('region', sorted(REGION_ENDPOINTS))
    def test_known_region_selects_hostname(self, region):
        config = SNSConfig('key', 'secret', region)
        assert config.endpoint == f"sns.{region}.amazonaws.com"
        assert config.endpoint == REGION_ENDPOINTS[region]

    @pytest.mark.parametrize('region', ['', 'us-east-9', 'US-EAST-1', 'mars-north-1'])
    def test_unknown_region_fails(self, region):
        with pytest.raises(SNSConfigError, match='Region unrecognised'):
            SNSConfig('key', 'secret', region)

    def test_default_region(self):
        assert SNSConfig('key', 'secret').endpoint == 'sns.us-east-1.amazonaws.com'


class TestCredentials:

    @pytest.mark.parametrize('access_key, secret_key', [
        ('', 'secret'),
        ('key', ''),
        (None, 'secret'),
        ('key', None),
    ])
    def test_empty_credentials_fail(self, access_key, secret_key):
        with pytest.raises(SNSConfigError):
            SNSConfig(access_key, secret_key)

    def test_config_error_is_validation_error(self):
        with pytest.raises(SNSValidationError):
            SNSConfig('', '')

    def test_repr_hides_secrets(self):
        text = repr(SNSConfig('AKIDEXAMPLE', 'topsecret', 'eu-west-1'))
        assert 'topsecret' not in text
        assert 'AKIDEXAMPLE' not in text
        assert 'eu-west-1' in text

    def test_config_is_immutable(self):
        config = SNSConfig('key', 'secret')
        with pytest.raises(AttributeError):
            config.secret_key = 'other'
        with pytest.raises(AttributeError):
            config._region = 'eu-west-1'


class TestProtocol:

    def test_https_by_default(self):
        assert SNSConfig('key', 'secret').base_url == 'https://sns.us-east-1.amazonaws.com/'

    def test_http_allowed(self):
        config = SNSConfig('key', 'secret', 'sa-east-1', protocol='http')
        assert config.base_url == 'http://sns.sa-east-1.amazonaws.com/'

    def test_unknown_protocol_fails(self):
        with pytest.raises(SNSConfigError):
            SNSConfig('key', 'secret', protocol='ftp')


class TestFromEnvironment:

    def _session(self, access_key='AKIDENV', secret_key='envsecret', region_name=None):
        frozen = Mock(access_key=access_key, secret_key=secret_key)
        credentials = Mock()
        credentials.get_frozen_credentials.return_value = frozen
        session = Mock(region_name=region_name)
        session.get_credentials.return_value = credentials
        return session

    def test_resolves_credentials_and_session_region(self):
        with patch('sns_sdk.config.boto3.Session', return_value=self._session(region_name='eu-west-1')):
            config = SNSConfig.from_environment()
        assert config.access_key == 'AKIDENV'
        assert config.secret_key == 'envsecret'
        assert config.endpoint == 'sns.eu-west-1.amazonaws.com'

    def test_region_argument_wins(self):
        with patch('sns_sdk.config.boto3.Session', return_value=self._session(region_name='eu-west-1')):
            config = SNSConfig.from_environment(region='ap-southeast-2')
        assert config.region == 'ap-southeast-2'

    def test_falls_back_to_default_region(self):
        with patch('sns_sdk.config.boto3.Session', return_value=self._session()):
            assert SNSConfig.from_environment().region == 'us-east-1'

    def test_profile_is_passed_to_session(self):
        with patch('sns_sdk.config.boto3.Session', return_value=self._session()) as session_cls:
            SNSConfig.from_environment(profile_name='alerts')
        session_cls.assert_called_once_with(profile_name='alerts')

    def test_missing_credentials(self):
        session = self._session()
        session.get_credentials.return_value = None
        with patch('sns_sdk.config.boto3.Session', return_value=session):
            with pytest.raises(SNSConfigError, match='No AWS credentials'):
                SNSConfig.from_environment()

    def test_unknown_profile(self):
        with patch('sns_sdk.config.boto3.Session', side_effect=ProfileNotFound(profile='nope')):
            with pytest.raises(SNSConfigError, match='profile not found'):
                SNSConfig.from_environment(profile_name='nope')
