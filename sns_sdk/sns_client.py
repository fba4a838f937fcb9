"""
Low-level SNS client: signs, sends and interprets query API requests.
"""

import logging
from typing import Mapping, Optional, Union
from xml.etree import ElementTree as ET

import requests

from .config import SNSConfig
from .exceptions import SNSAPIError, SNSConfigError, SNSConnectionError, SNSTransportError
from .responses import find_error, find_text, parse_xml
from .signing import sign_params

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'There was a problem executing this request'


class SNSClient:
    """
    Low-level SNS client wrapper.
    Handles request signing, HTTP transport and response classification.
    """

    def __init__(
        self,
        config: SNSConfig,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize SNS client with configuration.

        Args:
            config: SNSConfig instance containing AWS credentials and settings
            session: requests.Session shared by every request (a short-lived
                session is opened and closed per request if None)
            timeout: Timeout in seconds passed to requests (None keeps requests' default)

        Raises:
            SNSConfigError: If configuration is invalid
        """
        if not isinstance(config, SNSConfig):
            raise SNSConfigError("config must be an SNSConfig instance")
        config.validate()

        self.config = config
        self.timeout = timeout
        self.session = session

    def request(
        self,
        action: str,
        params: Optional[Mapping[str, Union[str, bool, int]]] = None
    ) -> ET.Element:
        """
        Perform one signed SNS request and return the parsed response.

        Args:
            action: SNS action name (e.g. 'Publish')
            params: Action specific parameters

        Returns:
            Root element of the XML response, namespaces stripped

        Raises:
            SNSValidationError: If params collide with the mandatory fields
            SNSConnectionError: If the request could not be sent
            SNSAPIError: If SNS returned a structured error
            SNSTransportError: If the response was not successful or not XML
        """
        signed = sign_params(
            self.config.endpoint,
            action,
            self.config.access_key,
            self.config.secret_key,
            params
        )
        status, body = self.send(signed)
        logger.debug("SNS %s -> HTTP %s", action, status)
        return self.interpret(status, body)

    def send(self, signed_params) -> tuple:
        """
        Issue the GET request for an already signed parameter list.

        Returns:
            (status_code, body_bytes)

        Raises:
            SNSConnectionError: On DNS, connection, TLS or timeout failures
        """
        url = self.config.base_url
        logger.debug("GET %s (%d params)", url, len(signed_params))
        try:
            if self.session is not None:
                response = self.session.get(url, params=signed_params, timeout=self.timeout)
            else:
                with requests.Session() as session:
                    response = session.get(url, params=signed_params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SNSConnectionError(f"Failed to reach {self.config.endpoint}: {str(e)}") from e
        return response.status_code, response.content

    def interpret(self, status: int, body: bytes) -> ET.Element:
        """
        Classify a response by status and parse its XML body.

        Raises:
            SNSAPIError: Non-2xx status with an <Error> element carrying Code and Message
            SNSTransportError: Any other failure
        """
        root = None
        parse_error = None
        try:
            root = parse_xml(body) if body else None
        except ET.ParseError as e:
            parse_error = e

        if is_success(status):
            if root is None:
                raise SNSTransportError(status, "Response body is not valid XML") from parse_error
            return root

        logger.warning("SNS request failed with HTTP %s", status)
        error = find_error(root) if root is not None else None
        if error is None:
            raise SNSTransportError(status, GENERIC_ERROR_MESSAGE) from parse_error

        raise SNSAPIError(
            code=find_text(error, 'Code'),
            message=find_text(error, 'Message'),
            status=status,
            error_type=find_text(error, 'Type') or None,
            request_id=find_text(root, 'RequestId') or None
        )


def is_success(status: int) -> bool:
    """True for any status in the 200 range."""
    return 200 <= status <= 299
