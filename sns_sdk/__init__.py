"""
SNS SDK - A Python SDK for the AWS Simple Notification Service query API.
"""

from .config import SNSConfig, REGION_ENDPOINTS
from .sns_client import SNSClient
from .sns_sdk import SNSSDK
from .result import SNSResult, capture
from .exceptions import (
    SNSSDKError,
    SNSValidationError,
    SNSConfigError,
    SNSAPIError,
    SNSTransportError,
    SNSConnectionError
)

__all__ = [
    'SNSConfig',
    'REGION_ENDPOINTS',
    'SNSClient',
    'SNSSDK',
    'SNSResult',
    'capture',
    'SNSSDKError',
    'SNSValidationError',
    'SNSConfigError',
    'SNSAPIError',
    'SNSTransportError',
    'SNSConnectionError',
]

__version__ = '1.0.0'
