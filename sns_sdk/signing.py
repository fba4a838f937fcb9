"""
AWS Signature Version 2 request signing for the SNS query API.

The canonical query string is built from the request parameters sorted in
natural order (digit runs compare numerically), with each value encoded per
RFC 3986. The string to sign is::

    GET\\n<host>\\n/\\n<canonical query string>

and the signature is the base64 encoded HMAC-SHA256 digest of that string,
keyed with the secret access key.
"""

import base64
import hashlib
import hmac
import re
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from .exceptions import SNSValidationError

SIGNATURE_VERSION = '2'
SIGNATURE_METHOD = 'HmacSHA256'
TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

MANDATORY_PARAMS = (
    'Action',
    'AWSAccessKeyId',
    'Timestamp',
    'SignatureVersion',
    'SignatureMethod',
)

_DIGITS = re.compile(r'(\d+)')


def natural_key(key: str) -> Tuple:
    """
    Sort key comparing digit runs by numeric value and other text by code point.

    'ActionName.member.2' sorts before 'ActionName.member.10'.
    """
    chunks = _DIGITS.split(key)
    # split() alternates text and digit runs, text first and last
    texts = chunks[0::2]
    numbers = [int(chunk) for chunk in chunks[1::2]] + [-1]
    return tuple(zip(texts, numbers))


def encode_value(value: str) -> str:
    """Percent-encode a value per RFC 3986 (space becomes %20, '~' is kept)."""
    return quote(value, safe='-_.~')


def to_param_value(value: Union[str, bool, int]) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def format_timestamp(when: Optional[datetime] = None) -> str:
    """Format a UTC timestamp the way SNS expects it (e.g. 2026-10-19T08:30:00Z)."""
    if when is None:
        when = datetime.now(timezone.utc)
    elif when.tzinfo is not None:
        when = when.astimezone(timezone.utc)
    return when.strftime(TIMESTAMP_FORMAT)


def build_params(
    action: str,
    access_key: str,
    params: Optional[Mapping[str, Union[str, bool, int]]] = None,
    timestamp: Optional[str] = None
) -> Dict[str, str]:
    """
    Merge the mandatory request fields with the operation parameters.

    Args:
        action: SNS action name (e.g. 'CreateTopic')
        access_key: AWS Access Key ID
        params: Operation specific parameters
        timestamp: Pre-formatted timestamp (defaults to now, UTC)

    Returns:
        Parameter dict sorted in natural key order

    Raises:
        SNSValidationError: If an operation parameter collides with a mandatory field
    """
    params = params or {}
    collisions = [key for key in params if key in MANDATORY_PARAMS or key == 'Signature']
    if collisions:
        raise SNSValidationError(f"Reserved request parameters supplied: {', '.join(collisions)}")

    merged = {
        'Action': action,
        'AWSAccessKeyId': access_key,
        'Timestamp': timestamp or format_timestamp(),
        'SignatureVersion': SIGNATURE_VERSION,
        'SignatureMethod': SIGNATURE_METHOD,
    }
    for key, value in params.items():
        merged[key] = to_param_value(value)

    return {key: merged[key] for key in sorted(merged, key=natural_key)}


def canonical_query_string(params: Mapping[str, str]) -> str:
    """Join naturally sorted 'key=value' pairs with '&', values RFC 3986 encoded."""
    return '&'.join(
        f"{key}={encode_value(params[key])}" for key in sorted(params, key=natural_key)
    )


def string_to_sign(host: str, params: Mapping[str, str]) -> str:
    return f"GET\n{host}\n/\n{canonical_query_string(params)}"


def sign(message: str, secret_key: str) -> str:
    """
    Compute the base64 encoded HMAC-SHA256 of a message.

    Args:
        message: The canonical string to sign
        secret_key: AWS Secret Access Key

    Returns:
        Base64 encoded signature
    """
    digest = hmac.new(
        secret_key.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha256
    ).digest()
    return base64.b64encode(digest).decode('ascii')


def sign_params(
    host: str,
    action: str,
    access_key: str,
    secret_key: str,
    params: Optional[Mapping[str, Union[str, bool, int]]] = None,
    timestamp: Optional[str] = None
) -> List[Tuple[str, str]]:
    """
    Build the full, signed parameter list for one request.

    The signature is computed over exactly the parameters returned and is
    appended as the last pair.

    Returns:
        List of (name, value) pairs in natural key order, 'Signature' last
    """
    request_params = build_params(action, access_key, params, timestamp)
    signature = sign(string_to_sign(host, request_params), secret_key)
    signed = list(request_params.items())
    signed.append(('Signature', signature))
    return signed
