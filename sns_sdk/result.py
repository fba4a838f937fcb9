"""
Result-type view over SNS SDK calls.

The SDK signals failure by raising. ``capture`` runs a call and folds the
outcome into an ``SNSResult`` for callers that prefer to branch on a value.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .exceptions import SNSAPIError, SNSSDKError, SNSTransportError, SNSValidationError

SUCCESS = 'success'
VALIDATION_ERROR = 'validation_error'
API_ERROR = 'api_error'
TRANSPORT_ERROR = 'transport_error'


@dataclass(frozen=True)
class SNSResult:
    """Outcome of one SDK call: a payload on success, otherwise the error."""

    kind: str
    payload: Any = None
    error: Optional[SNSSDKError] = None

    @property
    def ok(self) -> bool:
        return self.kind == SUCCESS

    def unwrap(self) -> Any:
        """Return the payload, or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.payload


def capture(func: Callable[..., Any], *args, **kwargs) -> SNSResult:
    """
    Call func and wrap its return value or SDK error in an SNSResult.

    Errors that are not SNSSDKError propagate unchanged.

    Example:
        result = capture(sdk.publish, arn, 'hello')
        if result.kind == API_ERROR:
            print(result.error.code)
    """
    try:
        return SNSResult(SUCCESS, payload=func(*args, **kwargs))
    except SNSValidationError as e:
        return SNSResult(VALIDATION_ERROR, error=e)
    except SNSAPIError as e:
        return SNSResult(API_ERROR, error=e)
    except SNSTransportError as e:
        return SNSResult(TRANSPORT_ERROR, error=e)
