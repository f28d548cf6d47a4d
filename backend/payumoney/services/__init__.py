"""
Services package for the PayUMoney gateway.
"""
from .gateway import PayUMoneyGateway
from .hashing import (
    REQUEST_HASH_SEQUENCE,
    RESPONSE_HASH_SEQUENCE,
    compute_response_hash,
    generate_transaction_id,
    sign_request,
    verify_response_hash,
)
from .verification_client import VerificationClient

__all__ = [
    "PayUMoneyGateway",
    "VerificationClient",
    "REQUEST_HASH_SEQUENCE",
    "RESPONSE_HASH_SEQUENCE",
    "compute_response_hash",
    "generate_transaction_id",
    "sign_request",
    "verify_response_hash",
]
