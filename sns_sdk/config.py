"""
SNS configuration class for storing AWS credentials and endpoint settings.
"""

from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ProfileNotFound

from .exceptions import SNSConfigError

# Region -> SNS query API hostname
REGION_ENDPOINTS = {
    'us-east-1': 'sns.us-east-1.amazonaws.com',
    'us-east-2': 'sns.us-east-2.amazonaws.com',
    'us-west-1': 'sns.us-west-1.amazonaws.com',
    'us-west-2': 'sns.us-west-2.amazonaws.com',
    'eu-west-1': 'sns.eu-west-1.amazonaws.com',
    'eu-central-1': 'sns.eu-central-1.amazonaws.com',
    'ap-southeast-1': 'sns.ap-southeast-1.amazonaws.com',
    'ap-southeast-2': 'sns.ap-southeast-2.amazonaws.com',
    'ap-northeast-1': 'sns.ap-northeast-1.amazonaws.com',
    'sa-east-1': 'sns.sa-east-1.amazonaws.com',
}

DEFAULT_REGION = 'us-east-1'

PROTOCOLS = ('https', 'http')


class SNSConfig:
    """
    Configuration class for SNS SDK.
    Stores AWS credentials (Access Key, Secret Key), region and protocol scheme.

    The endpoint hostname is resolved once from the region; a config is bound
    to that region for its whole lifetime.
    """

    __slots__ = ('_access_key', '_secret_key', '_region', '_protocol', '_endpoint')

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        region: str = DEFAULT_REGION,
        protocol: str = 'https'
    ):
        """
        Initialize SNS configuration.

        Args:
            access_key: AWS Access Key ID
            secret_key: AWS Secret Access Key
            region: AWS region (default: 'us-east-1')
            protocol: 'https' (default) or 'http'

        Raises:
            SNSConfigError: If credentials are empty, or region/protocol is unknown
        """
        self._access_key = access_key
        self._secret_key = secret_key
        self._region = region
        self._protocol = protocol
        self.validate()
        self._endpoint = REGION_ENDPOINTS[region]

    @property
    def access_key(self) -> str:
        return self._access_key

    @property
    def secret_key(self) -> str:
        return self._secret_key

    @property
    def region(self) -> str:
        return self._region

    @property
    def protocol(self) -> str:
        return self._protocol

    @property
    def endpoint(self) -> str:
        """Hostname of the SNS endpoint for the configured region."""
        return self._endpoint

    @property
    def base_url(self) -> str:
        return f"{self._protocol}://{self._endpoint}/"

    def validate(self) -> bool:
        """
        Validate configuration parameters.

        Returns:
            True if the configuration is usable

        Raises:
            SNSConfigError: Naming the first invalid field
        """
        if not self._access_key or not self._secret_key:
            raise SNSConfigError("Must define Amazon access key and secret key")
        if self._region not in REGION_ENDPOINTS:
            raise SNSConfigError(
                f"Region unrecognised: {self._region!r}. "
                f"Known regions: {', '.join(sorted(REGION_ENDPOINTS))}"
            )
        if self._protocol not in PROTOCOLS:
            raise SNSConfigError(f"Protocol must be one of {PROTOCOLS}, got {self._protocol!r}")
        return True

    @classmethod
    def from_environment(
        cls,
        region: Optional[str] = None,
        profile_name: Optional[str] = None,
        protocol: str = 'https'
    ) -> 'SNSConfig':
        """
        Build a configuration from the standard AWS credential chain.

        Credentials are resolved by a boto3 session (environment variables,
        shared credentials file, named profile). The region falls back to the
        session's region and then to 'us-east-1'.

        Args:
            region: AWS region override
            profile_name: Named profile from the shared credentials file
            protocol: 'https' (default) or 'http'

        Returns:
            SNSConfig instance

        Raises:
            SNSConfigError: If the profile does not exist or no credentials are found
        """
        try:
            session = boto3.Session(profile_name=profile_name)
            credentials = session.get_credentials()
        except ProfileNotFound as e:
            raise SNSConfigError(f"AWS profile not found: {profile_name}") from e
        except BotoCoreError as e:
            raise SNSConfigError(f"Failed to resolve AWS credentials: {str(e)}") from e

        if credentials is None:
            raise SNSConfigError("No AWS credentials found in the environment")

        frozen = credentials.get_frozen_credentials()
        return cls(
            access_key=frozen.access_key,
            secret_key=frozen.secret_key,
            region=region or session.region_name or DEFAULT_REGION,
            protocol=protocol
        )

    def __setattr__(self, name, value):
        if hasattr(self, '_endpoint'):
            raise AttributeError("SNSConfig is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        """String representation of configuration (hides sensitive data)."""
        return f"SNSConfig(region='{self._region}', endpoint='{self._endpoint}', protocol='{self._protocol}')"
