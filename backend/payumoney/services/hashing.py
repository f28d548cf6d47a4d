"""
Hashing Service for PayUMoney Requests and Responses

Implements the SHA-512 request hash, the reverse response hash and
transaction id generation.

PayU Notes:
- Field order is fixed by the processor; absent fields hash as ""
- Request hash appends the salt, response hash prepends it
- Response comparison is constant-time
"""
import hashlib
import hmac
import secrets
import time
from typing import Any, Mapping, Optional


REQUEST_HASH_SEQUENCE = (
    "key", "txnid", "amount", "productinfo", "firstname", "email",
    "udf1", "udf2", "udf3", "udf4", "udf5",
    "udf6", "udf7", "udf8", "udf9", "udf10",
)

# The five "" slots are processor-internal fields that never appear in a
# response. Their count and position are part of the wire format.
RESPONSE_HASH_SEQUENCE = (
    "status", "", "", "", "", "",
    "udf5", "udf4", "udf3", "udf2", "udf1",
    "email", "firstname", "productinfo", "amount", "txnid", "key",
)

TRANSACTION_ID_LENGTH = 20


def _field_value(parameters: Mapping[str, Any], name: str) -> str:
    """Value of a field as it enters the hash string ("" when absent)."""
    if not name:
        return ""
    value = parameters.get(name)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _sha512_hex(hash_string: str) -> str:
    return hashlib.sha512(hash_string.encode("utf-8")).hexdigest().lower()


def generate_transaction_id() -> str:
    """
    Generate a unique transaction id.

    Mixes a random number with a nanosecond clock reading, hashes it with
    SHA-256 and keeps the first 20 hex characters.

    Returns:
        20-character lowercase hex string, safe to embed in URLs
    """
    seed = f"{secrets.randbits(64)}{time.time_ns()}"
    return hashlib.sha256(seed.encode("utf-8")).hexdigest()[:TRANSACTION_ID_LENGTH]


def sign_request(parameters: Mapping[str, Any], salt: str) -> str:
    """
    Compute the request hash sent to PayU along with the payment form.

    Hash string layout:
        key|txnid|amount|productinfo|firstname|email|udf1|...|udf10|<salt>

    Args:
        parameters: Outbound payment parameters
        salt: Merchant salt

    Returns:
        128-character lowercase hex SHA-512 digest
    """
    hash_string = "".join(
        f"{_field_value(parameters, name)}|" for name in REQUEST_HASH_SEQUENCE
    )
    hash_string += salt
    return _sha512_hex(hash_string)


def compute_response_hash(response: Mapping[str, Any], salt: str) -> str:
    """
    Recompute the hash PayU should have attached to a response.

    Hash string layout:
        <salt>|status||||||udf5|...|udf1|email|firstname|productinfo|amount|txnid|key

    One leading and one trailing "|" are stripped before hashing. Field
    values are used exactly as received.

    Args:
        response: Parameters posted back by PayU
        salt: Merchant salt

    Returns:
        128-character lowercase hex SHA-512 digest
    """
    hash_string = f"{salt}|"
    hash_string += "".join(
        f"{_field_value(response, name)}|" for name in RESPONSE_HASH_SEQUENCE
    )

    if hash_string.startswith("|"):
        hash_string = hash_string[1:]
    if hash_string.endswith("|"):
        hash_string = hash_string[:-1]

    return _sha512_hex(hash_string)


def verify_response_hash(
    response: Mapping[str, Any],
    salt: str,
    supplied_hash: Optional[str] = None
) -> bool:
    """
    Check a response hash using constant-time comparison.

    Args:
        response: Parameters posted back by PayU
        salt: Merchant salt
        supplied_hash: Hash to check; defaults to response["hash"]

    Returns:
        True if the supplied hash matches, False otherwise (including
        when no hash was supplied at all)
    """
    if supplied_hash is None:
        supplied_hash = response.get("hash")
    if not supplied_hash or not isinstance(supplied_hash, str):
        return False

    expected_hash = compute_response_hash(response, salt)

    return hmac.compare_digest(
        expected_hash.encode("utf-8"),
        supplied_hash.encode("utf-8")
    )
