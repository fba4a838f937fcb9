import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

# Add project root to path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from sns_sdk import SNSConfig, SNSSDK

NS = 'http://sns.amazonaws.com/doc/2010-03-31/'


def sns_xml(action: str, result: str = '') -> bytes:
    """Wrap a result fragment the way SNS does for a successful response."""
    return (
        f'<{action}Response xmlns="{NS}">'
        f'<{action}Result>{result}</{action}Result>'
        f'<ResponseMetadata><RequestId>req-1</RequestId></ResponseMetadata>'
        f'</{action}Response>'
    ).encode('utf-8')


def fake_response(status: int = 200, body: bytes = b'') -> Mock:
    response = Mock()
    response.status_code = status
    response.content = body
    return response


@pytest.fixture
def config():
    return SNSConfig('AKIDEXAMPLE', 'wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY', 'us-east-1')


@pytest.fixture
def session():
    """A requests.Session stand-in; tests set session.get.return_value."""
    mock = Mock(spec=requests.Session)
    mock.get.return_value = fake_response(200, sns_xml('Dummy'))
    return mock


@pytest.fixture
def sdk(config, session):
    return SNSSDK(config, session=session)


def sent_params(session) -> dict:
    """The query parameters of the last GET issued through the fake session."""
    return dict(session.get.call_args.kwargs['params'])
