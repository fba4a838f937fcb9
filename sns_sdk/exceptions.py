"""
Custom exceptions for SNS SDK.
"""

from typing import Optional


class SNSSDKError(Exception):
    """Base exception for SNS SDK errors."""
    pass


class SNSValidationError(SNSSDKError):
    """Raised before any request is sent when arguments are missing or inconsistent."""
    pass


class SNSConfigError(SNSValidationError):
    """Raised when configuration is invalid."""
    pass


class SNSAPIError(SNSSDKError):
    """
    Raised when SNS answers with a non-2xx status and a structured <Error> body.

    Attributes:
        code: Error code reported by SNS (e.g. 'AuthorizationError')
        message: Error message reported by SNS
        status: HTTP status code of the response
        error_type: 'Sender' or 'Receiver' when SNS reports it
        request_id: SNS request id when present in the response
    """

    def __init__(
        self,
        code: str,
        message: str,
        status: int,
        error_type: Optional[str] = None,
        request_id: Optional[str] = None
    ):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        self.status = status
        self.error_type = error_type
        self.request_id = request_id


class SNSTransportError(SNSSDKError):
    """
    Raised when a request fails without a structured SNS error.

    Attributes:
        status: HTTP status code, or None when no response was received
        detail: Human readable description of the failure
    """

    def __init__(self, status: Optional[int], detail: str):
        super().__init__(detail if status is None else f"HTTP {status}: {detail}")
        self.status = status
        self.detail = detail
        self.code = None


class SNSConnectionError(SNSTransportError):
    """Raised on network-level failures (DNS, refused connection, TLS, timeout)."""

    def __init__(self, detail: str):
        super().__init__(None, detail)
