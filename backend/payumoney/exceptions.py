"""
PayUMoney Exception Hierarchy

Error codes use the payu: prefix so API clients can branch on them.
"""
from typing import Optional, Dict, Any


class GatewayError(Exception):
    """
    Base exception for all gateway errors.

    Subclasses set error_code and status_code; the API layer turns
    them into JSON error responses via to_dict().
    """

    status_code: int = 400

    def __init__(
        self,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API error response format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ParametersMissingError(GatewayError):
    """
    Outbound request is missing required fields or has invalid ones.

    Examples:
    - firstname or phone not supplied
    - surl is not an http(s) URL
    - amount is not numeric

    The request must not be signed or sent.
    """

    status_code = 422

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("payu:request:parameters_missing", message, details)


class SignatureMismatchError(GatewayError):
    """
    Response hash does not match the recomputed hash.

    Terminal for the transaction attempt: the response parameters
    may have been altered in transit and must not be trusted.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("payu:response:hash_mismatch", message, details)


class TransactionIdMissingError(GatewayError):
    """Status query attempted without a transaction id."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("payu:verify:txnid_missing", message, details)


class VerificationRequestError(GatewayError):
    """
    Status query to the processor failed.

    Examples:
    - Connection refused or timed out
    - Non-2xx HTTP status
    - Body is not valid JSON

    Retrying is up to the caller.
    """

    status_code = 502

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("payu:verify:request_failed", message, details)
