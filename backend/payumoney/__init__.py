"""
PayUMoney gateway.

Request signing, response verification and status queries for the
PayUMoney redirect payment flow.
"""
from .config import Settings, get_settings
from .exceptions import (
    GatewayError,
    ParametersMissingError,
    SignatureMismatchError,
    TransactionIdMissingError,
    VerificationRequestError,
)
from .services import (
    PayUMoneyGateway,
    VerificationClient,
    compute_response_hash,
    generate_transaction_id,
    sign_request,
    verify_response_hash,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "get_settings",
    "GatewayError",
    "ParametersMissingError",
    "SignatureMismatchError",
    "TransactionIdMissingError",
    "VerificationRequestError",
    "PayUMoneyGateway",
    "VerificationClient",
    "compute_response_hash",
    "generate_transaction_id",
    "sign_request",
    "verify_response_hash",
]
